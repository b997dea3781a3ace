# SPDX-License-Identifier: Apache-2.0
"""Tests for response envelope decoding."""

import json

import pytest

from gengo_client.envelope import as_float, as_int, as_str, parse_envelope, unwrap
from gengo_client.errors import GengoAPIError, GengoError, ResponseFormatError


class TestParseEnvelope:
    """Tests for parse_envelope and unwrap."""

    def test_ok_returns_response(self) -> None:
        body = json.dumps({"opstat": "ok", "response": {"credits": "10.5"}}).encode()
        assert parse_envelope(body) == {"credits": "10.5"}

    def test_ok_without_response(self) -> None:
        """An ok envelope without a response member yields None."""
        assert parse_envelope(b'{"opstat": "ok"}') is None

    def test_error_raises_api_error(self) -> None:
        body = b'{"opstat": "error", "err": {"code": 1150, "msg": "api_key is a required field"}}'
        with pytest.raises(GengoAPIError) as exc_info:
            parse_envelope(body)
        assert exc_info.value.code == 1150
        assert exc_info.value.msg == "api_key is a required field"
        assert str(exc_info.value) == (
            "Failed response. Code: 1150, Message: api_key is a required field"
        )

    def test_error_code_as_string(self) -> None:
        """Error codes typed as strings are coerced."""
        body = b'{"opstat": "error", "err": {"code": "2250", "msg": "not reviewable"}}'
        with pytest.raises(GengoAPIError) as exc_info:
            parse_envelope(body)
        assert exc_info.value.code == 2250

    def test_error_code_not_numeric(self) -> None:
        """A non-numeric error code still raises GengoAPIError with the raw code."""
        body = b'{"opstat": "error", "err": {"code": "E1", "msg": "bad"}}'
        with pytest.raises(GengoAPIError) as exc_info:
            parse_envelope(body)
        assert exc_info.value.code == "E1"
        assert exc_info.value.msg == "bad"

    def test_invalid_json(self) -> None:
        with pytest.raises(ResponseFormatError):
            parse_envelope(b"<html>Bad gateway</html>")

    def test_empty_body(self) -> None:
        with pytest.raises(ResponseFormatError):
            parse_envelope(b"")

    def test_not_an_object(self) -> None:
        with pytest.raises(ResponseFormatError):
            parse_envelope(b"[1, 2, 3]")

    def test_missing_opstat(self) -> None:
        with pytest.raises(ResponseFormatError) as exc_info:
            unwrap({"response": {}})
        assert "opstat" in str(exc_info.value)

    def test_unknown_opstat(self) -> None:
        with pytest.raises(ResponseFormatError):
            unwrap({"opstat": "maybe"})

    def test_error_without_err(self) -> None:
        with pytest.raises(ResponseFormatError):
            unwrap({"opstat": "error"})

    def test_error_missing_msg(self) -> None:
        with pytest.raises(ResponseFormatError):
            unwrap({"opstat": "error", "err": {"code": 1}})

    def test_errors_share_base_class(self) -> None:
        """Both failure kinds can be caught as GengoError."""
        assert issubclass(GengoAPIError, GengoError)
        assert issubclass(ResponseFormatError, GengoError)


class TestNumericCoercion:
    """Tests for the string-typed number workaround."""

    def test_float_from_string(self) -> None:
        assert as_float("10.50") == 10.5

    def test_float_from_number(self) -> None:
        assert as_float(3) == 3.0

    def test_float_none_and_empty(self) -> None:
        assert as_float(None) is None
        assert as_float("") is None

    def test_float_invalid(self) -> None:
        with pytest.raises(ResponseFormatError):
            as_float("ten")

    def test_float_rejects_bool(self) -> None:
        with pytest.raises(ResponseFormatError):
            as_float(True)

    def test_float_overflow(self) -> None:
        """Integers too large for a float are a format error."""
        with pytest.raises(ResponseFormatError):
            as_float(10**400)

    def test_int_from_bool(self) -> None:
        """Booleans map to 1 and 0."""
        assert as_int(True) == 1
        assert as_int(False) == 0

    def test_int_from_string(self) -> None:
        assert as_int("384828") == 384828

    def test_int_from_integral_float_string(self) -> None:
        assert as_int("12.0") == 12

    def test_int_from_integral_float(self) -> None:
        assert as_int(7.0) == 7

    def test_int_rejects_fraction(self) -> None:
        with pytest.raises(ResponseFormatError):
            as_int(1.5)
        with pytest.raises(ResponseFormatError):
            as_int("1.5")

    def test_int_invalid(self) -> None:
        with pytest.raises(ResponseFormatError):
            as_int("abc")

    def test_int_none_and_empty(self) -> None:
        assert as_int(None) is None
        assert as_int("") is None

    def test_as_str(self) -> None:
        assert as_str(None) is None
        assert as_str(5) == "5"
