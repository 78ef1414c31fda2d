"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

One function serves every route so the DynamoDB resource stays warm across
entry and exit calls.
"""

from typing import Callable, Dict, Tuple
import json

from . import health_check, plate_lookup, vehicle_entry, vehicle_exit


def _response(status: int, body: Dict) -> Dict:
    """Format a JSON API Gateway HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def _route_key(event: Dict) -> str:
    """Build "METHOD /path" from an HTTP API (v2) or REST API (v1) event."""
    http = event.get("requestContext", {}).get("http", {})
    method = http.get("method") or event.get("httpMethod") or ""
    path = http.get("path") or event.get("path") or ""
    if len(path) > 1:
        path = path.rstrip("/")
    return f"{method.upper()} {path}"


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway.

    Routes are matched exactly; anything else is a 404.
    """
    route_key = _route_key(event)

    route_table: Tuple[Tuple[str, Callable], ...] = (
        ("GET /health", health_check.lambda_handler),
        ("POST /entry", vehicle_entry.lambda_handler),
        ("POST /exit", vehicle_exit.lambda_handler),
        ("GET /tickets", plate_lookup.lambda_handler),
    )

    for key, handler in route_table:
        if route_key == key:
            return handler(event, context)

    return _response(404, {"message": "Route not found", "route": route_key})
