# SPDX-License-Identifier: Apache-2.0
"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar

from gengo_client.errors import ConfigurationError

API_URL = "http://api.gengo.com/v2/"
SANDBOX_URL = "http://api.sandbox.mygengo.com/v2/"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass
class GengoConfig:
    """Credentials and endpoint selection for GengoClient.

    Attributes:
        public_key: Gengo public (API) key, sent as ``api_key``.
        private_key: Gengo private key, used only to sign requests.
        sandbox: Use the sandbox environment instead of production.
        api_url: Explicit base URL. Overrides ``sandbox`` when set.
        timeout: Total request timeout in seconds.
    """

    public_key: str = ""
    private_key: str = ""
    sandbox: bool = False
    api_url: str | None = None
    timeout: float = 30.0

    # Environment variable names
    ENV_PUBLIC_KEY: ClassVar[str] = "GENGO_PUBKEY"
    ENV_PRIVATE_KEY: ClassVar[str] = "GENGO_PRIVKEY"
    ENV_SANDBOX: ClassVar[str] = "GENGO_SANDBOX"
    ENV_API_URL: ClassVar[str] = "GENGO_API_URL"

    @property
    def base_url(self) -> str:
        """Base URL all endpoints are appended to (always ends with '/')."""
        if self.api_url:
            url = self.api_url
        else:
            url = SANDBOX_URL if self.sandbox else API_URL
        if not url.endswith("/"):
            url += "/"
        return url

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> GengoConfig:
        """Build a config from environment variables.

        Args:
            environ: Mapping to read instead of os.environ.

        Returns:
            GengoConfig (not validated).
        """
        env = os.environ if environ is None else environ
        return cls(
            public_key=env.get(cls.ENV_PUBLIC_KEY, ""),
            private_key=env.get(cls.ENV_PRIVATE_KEY, ""),
            sandbox=env.get(cls.ENV_SANDBOX, "").strip().lower() in _TRUTHY,
            api_url=env.get(cls.ENV_API_URL) or None,
        )

    def validate(self) -> None:
        """Check that both keys are present.

        Raises:
            ConfigurationError: If a key is missing or the timeout is not positive.
        """
        if not self.public_key:
            raise ConfigurationError("Gengo public key is required")
        if not self.private_key:
            raise ConfigurationError("Gengo private key is required")
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")
