"""Handler for GET /tickets?plate=."""

import json
import uuid

from handlers.dependencies import get_parking_service
from models.ticket import PlateTickets
from utils.error_handling import AppError, to_response
from utils.logging_config import get_logger
from utils.validators import request_param

logger = get_logger(__name__)


def lambda_handler(event, context):
    """Return the tickets recorded for a plate, newest first."""
    correlation_id = str(uuid.uuid4())
    plate = request_param(event, "plate")

    try:
        tickets = get_parking_service().tickets_for_plate(plate)
    except AppError as exc:
        return to_response(exc, correlation_id)
    except Exception as exc:
        logger.exception("Plate lookup failed", extra={"correlation_id": correlation_id})
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

    logger.info("Plate tickets served", extra={"plate": plate, "count": len(tickets)})
    body = PlateTickets(plate=plate.strip(), tickets=tickets)
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": body.model_dump_json(by_alias=True),
    }
