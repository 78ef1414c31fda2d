"""Pydantic models for API payloads and stored tickets."""

from models.response import HealthStatus  # noqa: F401
from models.ticket import (  # noqa: F401
    EntryResponse,
    ExitReceipt,
    PlateTickets,
    Ticket,
    TicketStatus,
)
