# SPDX-License-Identifier: Apache-2.0
"""Response envelope decoding.

Every Gengo response is a JSON object of the form::

    {"opstat": "ok", "response": ...}
    {"opstat": "error", "err": {"code": 1150, "msg": "..."}}

The API also returns several numeric fields (credits, job_id, unit_count...)
as strings on some endpoints and as numbers on others, so decoders go
through as_int / as_float rather than trusting the JSON type.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from gengo_client.errors import GengoAPIError, ResponseFormatError

logger = logging.getLogger(__name__)

OPSTAT_OK = "ok"
OPSTAT_ERROR = "error"


def decode_json(body: bytes | str) -> Any:
    """Parse a response body as JSON.

    Raises:
        ResponseFormatError: If the body is not valid JSON.
    """
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise ResponseFormatError(f"Could not parse JSON response: {e}") from e


def unwrap(envelope: Any) -> Any:
    """Return the ``response`` member of a decoded envelope.

    Raises:
        GengoAPIError: If opstat is "error".
        ResponseFormatError: If the envelope is malformed.
    """
    if not isinstance(envelope, dict):
        raise ResponseFormatError(
            f"Expected JSON object, got {type(envelope).__name__}"
        )
    if "opstat" not in envelope:
        raise ResponseFormatError("Bad JSON: 'opstat' not in response")

    opstat = envelope["opstat"]
    if opstat == OPSTAT_OK:
        return envelope.get("response")
    if opstat != OPSTAT_ERROR:
        raise ResponseFormatError(f"Bad JSON: 'opstat' is {opstat!r}")

    err = envelope.get("err")
    if not isinstance(err, dict) or "code" not in err or "msg" not in err:
        raise ResponseFormatError("Bad JSON: error response without err.code/err.msg")

    msg = str(err["msg"])
    try:
        code: int | str = as_int(err["code"]) or 0
    except ResponseFormatError:
        # Keep non-numeric codes as sent
        code = str(err["code"])
    logger.warning("Gengo API error %s: %s", code, msg)
    raise GengoAPIError(code, msg)


def parse_envelope(body: bytes | str) -> Any:
    """Decode a raw response body and return its ``response`` member."""
    return unwrap(decode_json(body))


def as_float(value: Any) -> float | None:
    """Coerce a number or numeric string to float.

    None and "" map to None.

    Raises:
        ResponseFormatError: If the value is not numeric.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ResponseFormatError(f"Expected number, got boolean {value!r}")
    if isinstance(value, (int, float, str)):
        try:
            return float(value)
        except OverflowError as e:
            raise ResponseFormatError(f"Number out of range: {value!r:.40}") from e
        except ValueError:
            pass
    raise ResponseFormatError(f"Expected number, got {value!r}")


def as_int(value: Any) -> int | None:
    """Coerce a number or numeric string to int.

    Integral floats ("12.0", 12.0) are accepted and booleans map to 1/0.
    None and "" map to None.

    Raises:
        ResponseFormatError: If the value is not an integer.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ResponseFormatError(f"Expected integer, got {value!r}")
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            number = None
        if number is not None and number.is_integer():
            return int(number)
    raise ResponseFormatError(f"Expected integer, got {value!r}")


def as_str(value: Any) -> str | None:
    """Stringify a value, keeping None as None."""
    if value is None:
        return None
    return str(value)
