# SPDX-License-Identifier: Apache-2.0
"""Request signing.

Every authenticated call carries ``ts`` (the current Unix time in whole
seconds) and ``api_sig``, the hex HMAC-SHA1 of ``ts`` keyed by the private key.
"""

from __future__ import annotations

import hashlib
import hmac
import time


def hmac_sha1_hex(key: str, message: str) -> str:
    """Return the lowercase hex HMAC-SHA1 digest of message."""
    digest = hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha1)
    return digest.hexdigest()


def current_timestamp() -> str:
    """Current Unix time as a decimal string."""
    return str(int(time.time()))


def sign(private_key: str, timestamp: str | None = None) -> tuple[str, str]:
    """Compute the signature for a request.

    Args:
        private_key: Gengo private key.
        timestamp: Timestamp to sign. Defaults to the current time.

    Returns:
        Tuple of (api_sig, ts).
    """
    ts = timestamp if timestamp is not None else current_timestamp()
    return hmac_sha1_hex(private_key, ts), ts
