"""
Vehicle entry handler for POST /entry?plate=&parkingLot=.

Validates the two parameters, issues an active ticket and returns its id.
"""

from __future__ import annotations

import json
import uuid
from typing import Dict

from handlers.dependencies import get_parking_service
from models.ticket import EntryResponse
from utils.clock import isoformat_ms
from utils.error_handling import AppError, to_response
from utils.logging_config import get_logger
from utils.validators import request_param

logger = get_logger(__name__)


def lambda_handler(event, context) -> Dict:
    """Handle POST /entry."""
    correlation_id = str(uuid.uuid4())
    plate = request_param(event, "plate")
    lot_id = request_param(event, "parkingLot")

    try:
        ticket = get_parking_service().enter(plate, lot_id)
    except AppError as exc:
        logger.warning(
            "Entry rejected",
            extra={"correlation_id": correlation_id, "status_code": exc.status_code, "error": str(exc)},
        )
        return to_response(exc, correlation_id)
    except Exception as exc:
        logger.exception("Entry failed", extra={"correlation_id": correlation_id})
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

    response = EntryResponse(
        ticket_id=ticket.ticket_id,
        plate=ticket.plate,
        parking_lot=ticket.lot_id,
        timestamp=isoformat_ms(ticket.entry_time),
    )
    logger.info(
        "Entry recorded",
        extra={"correlation_id": correlation_id, "ticket_id": ticket.ticket_id},
    )
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": response.model_dump_json(by_alias=True),
    }
