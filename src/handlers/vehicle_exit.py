"""
Vehicle exit handler for POST /exit?ticketId=.

Settles an active ticket and returns the receipt. Business rejections map to
400/404, store trouble to 503.
"""

from __future__ import annotations

import json
import uuid
from typing import Dict

from handlers.dependencies import get_parking_service
from utils.error_handling import AppError, to_response
from utils.logging_config import get_logger
from utils.validators import request_param

logger = get_logger(__name__)


def lambda_handler(event, context) -> Dict:
    """Handle POST /exit."""
    correlation_id = str(uuid.uuid4())
    ticket_id = request_param(event, "ticketId")

    try:
        receipt = get_parking_service().exit(ticket_id)
    except AppError as exc:
        logger.warning(
            "Exit rejected",
            extra={
                "correlation_id": correlation_id,
                "ticket_id": ticket_id,
                "status_code": exc.status_code,
                "error": str(exc),
            },
        )
        return to_response(exc, correlation_id)
    except Exception as exc:
        logger.exception(
            "Exit failed", extra={"correlation_id": correlation_id, "ticket_id": ticket_id}
        )
        return {
            "statusCode": 500,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(
                {
                    "error": "Internal server error",
                    "message": str(exc),
                    "correlation_id": correlation_id,
                }
            ),
        }

    logger.info(
        "Exit processed",
        extra={
            "correlation_id": correlation_id,
            "ticket_id": ticket_id,
            "charge": receipt.charge,
            "entry_time_estimated": receipt.entry_time_estimated,
        },
    )
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": receipt.model_dump_json(by_alias=True),
    }
