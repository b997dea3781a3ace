# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for the Gengo client."""

from __future__ import annotations


class GengoError(Exception):
    """Base exception for the gengo_client package."""

    pass


class ConfigurationError(GengoError):
    """Configuration error (missing keys, invalid base URL, etc.).

    This error type is NOT retryable - fix the configuration first.
    """

    pass


class TransportError(GengoError):
    """HTTP-level failure (connection refused, timeout, unexpected status).

    Attributes:
        status: HTTP status code, or None if no response was received.
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ResponseFormatError(GengoError):
    """Response body is not a well-formed Gengo envelope."""

    pass


class GengoAPIError(GengoError):
    """The API answered with ``opstat: "error"``.

    Attributes:
        code: Gengo error code. Kept as the raw string when the service
            sends a non-numeric code.
        msg: Error message reported by the service.
    """

    def __init__(self, code: int | str, msg: str) -> None:
        super().__init__(code, msg)
        self.code = code
        self.msg = msg

    def __str__(self) -> str:
        return f"Failed response. Code: {self.code}, Message: {self.msg}"
