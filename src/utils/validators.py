"""Lightweight validation helpers."""

import json
from typing import Any, Mapping, Optional

from utils.error_handling import MissingParameterError


def ensure_present(value: Any, field: str) -> str:
    """Return the stripped value or raise MissingParameterError if blank."""
    if value is None:
        raise MissingParameterError(field)
    cleaned = str(value).strip()
    if not cleaned:
        raise MissingParameterError(field)
    return cleaned


def request_param(event: Mapping[str, Any], name: str) -> Optional[str]:
    """
    Read a parameter from the query string, falling back to a JSON body.

    Returns None when the parameter is absent; validation is left to callers.
    """
    query_params = event.get("queryStringParameters") or {}
    if query_params.get(name) is not None:
        return query_params[name]

    body = event.get("body")
    if not body:
        return None
    try:
        payload = json.loads(body)
    except (TypeError, ValueError):
        return None
    if isinstance(payload, dict) and payload.get(name) is not None:
        return str(payload[name])
    return None
