"""Lightweight health check handler."""

from datetime import datetime, timezone

from models.response import HealthStatus
from utils.settings import ServiceSettings


def lambda_handler(event, context):
    """Return a simple 200 response to verify the stack is alive."""
    settings = ServiceSettings.from_environment()
    status = HealthStatus(
        version=settings.service_version,
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": status.model_dump_json(exclude_none=True),
    }
