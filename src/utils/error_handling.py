"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for application errors."""

    error = "Request failed"

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def details(self) -> Dict[str, Any]:
        """Extra fields merged into the response body."""
        return {}


class MissingParameterError(AppError):
    """Raised when a required request parameter is missing or blank."""

    error = "Missing parameter"

    def __init__(self, param: str, message: Optional[str] = None):
        super().__init__(message or f"{param} is required", status_code=400)
        self.param = param

    def details(self) -> Dict[str, Any]:
        return {"param": self.param}


class NotFoundError(AppError):
    """Raised when a requested resource is missing."""

    error = "Not found"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class TicketNotFoundError(NotFoundError):
    """Raised when no ticket exists for the given id."""

    def __init__(self, ticket_id: str):
        super().__init__("Ticket not found")
        self.ticket_id = ticket_id


class InvalidTicketStateError(AppError):
    """Raised when exit is requested for a ticket that is no longer active."""

    error = "Invalid ticket status"

    def __init__(self, ticket_id: str, ticket_status: Optional[str] = None):
        super().__init__("Ticket already processed", status_code=400)
        self.ticket_id = ticket_id
        self.ticket_status = ticket_status

    def details(self) -> Dict[str, Any]:
        return {"ticketStatus": self.ticket_status} if self.ticket_status else {}


class TicketConflictError(AppError):
    """Raised when a create would overwrite an existing ticket id."""

    error = "Ticket conflict"

    def __init__(self, ticket_id: str):
        super().__init__(f"Ticket {ticket_id} already exists", status_code=409)
        self.ticket_id = ticket_id


class StoreUnavailableError(AppError):
    """Raised when the ticket store cannot be reached; clients may retry."""

    error = "Database service unavailable"

    def __init__(self, message: str = "Ticket store unavailable, retry later"):
        super().__init__(message, status_code=503)


def to_response(error: AppError, correlation_id: Optional[str] = None) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    body: Dict[str, Any] = {
        "error": error.error,
        "message": error.message,
        "status": "error",
        **error.details(),
    }
    if correlation_id:
        body["correlation_id"] = correlation_id
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }
