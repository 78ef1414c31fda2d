"""Ticket models."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TicketStatus(str, Enum):
    """Lifecycle states; a ticket moves ACTIVE -> PROCESSED once."""

    ACTIVE = "active"
    PROCESSED = "processed"


class Ticket(BaseModel):
    """A parking session as stored in the tickets table."""

    model_config = ConfigDict(populate_by_name=True)

    ticket_id: str = Field(alias="ticketId")
    plate: str
    lot_id: str = Field(alias="lotId")
    entry_time: int = Field(alias="entryTime", description="epoch milliseconds")
    status: TicketStatus = TicketStatus.ACTIVE
    created: Optional[str] = None
    exit_time: Optional[int] = Field(default=None, alias="exitTime")
    fee: Optional[float] = Field(default=None, ge=0)
    total_minutes: Optional[int] = Field(default=None, alias="totalMinutes")
    processing_date: Optional[str] = Field(default=None, alias="processingDate")

    @field_validator("plate", "lot_id")
    @classmethod
    def validate_required(cls, value: str) -> str:
        """Plate and lot are free-form but never blank."""
        cleaned = (value or "").strip()
        if not cleaned:
            raise ValueError("plate and lotId must be provided")
        return cleaned

    def to_item(self) -> Dict[str, Any]:
        """Attributes to persist, camelCase, without unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class EntryResponse(BaseModel):
    """Body returned by POST /entry."""

    model_config = ConfigDict(populate_by_name=True)

    ticket_id: str = Field(alias="ticketId")
    plate: str
    parking_lot: str = Field(alias="parkingLot")
    timestamp: str


class ExitReceipt(BaseModel):
    """Body returned by POST /exit."""

    model_config = ConfigDict(populate_by_name=True)

    ticket_id: str = Field(alias="ticketId")
    plate: str
    parking_lot: str = Field(alias="parkingLot")
    entry_time: str = Field(alias="entryTime")
    exit_time: str = Field(alias="exitTime")
    total_minutes: int = Field(alias="totalTimeMinutes", ge=1)
    charge: float = Field(ge=0)
    # True when the stored entry time was unreadable and the fallback was used.
    entry_time_estimated: bool = Field(default=False, exclude=True)


class PlateTickets(BaseModel):
    """Body returned by GET /tickets?plate=."""

    plate: str
    tickets: List[Ticket] = Field(default_factory=list)
