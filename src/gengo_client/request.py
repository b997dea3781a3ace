# SPDX-License-Identifier: Apache-2.0
"""URL and body builders for Gengo API requests."""

from __future__ import annotations

import json
from typing import Any, Mapping
from urllib.parse import urlencode

from gengo_client.auth import sign


def build_url(base_url: str, endpoint: str) -> str:
    """Join the base URL and an endpoint path such as 'account/stats'."""
    return base_url + endpoint.lstrip("/")


def normalize_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Stringify optional parameters.

    None values are dropped and booleans become "1"/"0", the form the API
    expects for flags such as ``pre_mt``.
    """
    normalized: dict[str, str] = {}
    if not params:
        return normalized
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            normalized[key] = "1" if value else "0"
        else:
            normalized[key] = str(value)
    return normalized


def encode_data(payload: Any) -> str:
    """Compact JSON encoding used for the ``data`` form field."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def build_query(
    public_key: str,
    private_key: str,
    auth_required: bool,
    params: Mapping[str, Any] | None = None,
    timestamp: str | None = None,
) -> str:
    """Build the query string for a GET or DELETE request.

    Args:
        public_key: Sent as ``api_key``.
        private_key: Signing key.
        auth_required: Whether to attach ``api_sig`` and ``ts``.
        params: Optional endpoint parameters. These override the
            authentication fields if they share a name.
        timestamp: Fixed timestamp to sign (defaults to now).

    Returns:
        URL-encoded query string with keys in sorted order.
    """
    values: dict[str, str] = {"api_key": public_key}
    if auth_required:
        api_sig, ts = sign(private_key, timestamp)
        values["api_sig"] = api_sig
        values["ts"] = ts
    values.update(normalize_params(params))
    return urlencode(sorted(values.items()))


def build_form(
    public_key: str,
    private_key: str,
    data: Any,
    timestamp: str | None = None,
) -> str:
    """Build the form-encoded body for a POST or PUT request.

    Writes are always signed. ``data`` is JSON-encoded into a single field.
    """
    api_sig, ts = sign(private_key, timestamp)
    values = {
        "api_key": public_key,
        "api_sig": api_sig,
        "data": encode_data(data),
        "ts": ts,
    }
    return urlencode(sorted(values.items()))
