"""
Parking ticket lifecycle.

Entry writes an active ticket; exit prices the stay and settles the ticket
with a single conditional write so a ticket is charged at most once. The
store, clock and id generator are injected so handlers and tests can wire
their own.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

from models.ticket import ExitReceipt, Ticket, TicketStatus
from repositories.ticket_store import TicketStore
from services.fee_calculator import quote
from utils.clock import isoformat_ms, to_epoch_ms, utc_now
from utils.error_handling import InvalidTicketStateError, TicketNotFoundError
from utils.logging_config import get_logger
from utils.validators import ensure_present

logger = get_logger(__name__)

# Assumed stay when a stored entry time cannot be read.
ENTRY_TIME_FALLBACK = timedelta(hours=1)
# 9999-12-31T23:59:59.999Z
MAX_EPOCH_MS = 253402300799999


def _new_ticket_id() -> str:
    return str(uuid.uuid4())


def parse_entry_time(raw: Any) -> Optional[int]:
    """
    Read a stored entry time as epoch milliseconds.

    Accepts numbers (DynamoDB hands back Decimal), numeric strings and
    ISO-8601 strings. Returns None for anything else.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float, Decimal)):
        try:
            value = int(raw)
        except (ValueError, OverflowError, InvalidOperation):
            return None
        return value if 0 < value <= MAX_EPOCH_MS else None
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            return parse_entry_time(Decimal(text))
        except InvalidOperation:
            pass
        try:
            moment = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
        return parse_entry_time(to_epoch_ms(moment))
    return None


class ParkingService:
    """Issues and settles parking tickets against a TicketStore."""

    def __init__(
        self,
        store: TicketStore,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = _new_ticket_id,
    ) -> None:
        self.store = store
        self.clock = clock
        self.id_factory = id_factory

    def enter(self, plate: Optional[str], lot_id: Optional[str]) -> Ticket:
        """Record a vehicle arrival and return the new active ticket."""
        plate = ensure_present(plate, "plate")
        lot_id = ensure_present(lot_id, "parkingLot")

        now = self.clock()
        entry_ms = to_epoch_ms(now)
        ticket = Ticket(
            ticket_id=self.id_factory(),
            plate=plate,
            lot_id=lot_id,
            entry_time=entry_ms,
            status=TicketStatus.ACTIVE,
            created=isoformat_ms(entry_ms),
        )
        self.store.create(ticket.ticket_id, ticket.to_item())

        logger.info(
            "Ticket issued",
            extra={"ticket_id": ticket.ticket_id, "plate": plate, "lot_id": lot_id},
        )
        return ticket

    def exit(self, ticket_id: Optional[str]) -> ExitReceipt:
        """Price the stay for ``ticket_id`` and mark the ticket processed."""
        ticket_id = ensure_present(ticket_id, "ticketId")

        record = self.store.get(ticket_id)
        if not record:
            raise TicketNotFoundError(ticket_id)

        status = record.get("status")
        if status != TicketStatus.ACTIVE.value:
            raise InvalidTicketStateError(ticket_id, status)

        now_ms = to_epoch_ms(self.clock())
        entry_ms = parse_entry_time(record.get("entryTime"))
        estimated = entry_ms is None
        if estimated:
            entry_ms = now_ms - int(ENTRY_TIME_FALLBACK.total_seconds() * 1000)
            logger.warning(
                "No valid entryTime on ticket, using fallback",
                extra={
                    "event": "entry_time_fallback",
                    "ticket_id": ticket_id,
                    "raw_entry_time": str(record.get("entryTime")),
                    "fallback_minutes": int(ENTRY_TIME_FALLBACK.total_seconds() // 60),
                },
            )

        fee_quote = quote(now_ms - entry_ms)
        applied = self.store.update(
            ticket_id,
            {
                "status": TicketStatus.PROCESSED.value,
                "exitTime": now_ms,
                "fee": fee_quote.fee,
                "totalMinutes": fee_quote.total_minutes,
                "processingDate": isoformat_ms(now_ms),
            },
            expected_status=TicketStatus.ACTIVE.value,
        )
        if not applied:
            # Another exit settled the ticket between our read and write.
            raise InvalidTicketStateError(ticket_id, TicketStatus.PROCESSED.value)

        logger.info(
            "Ticket processed",
            extra={
                "ticket_id": ticket_id,
                "fee": fee_quote.fee,
                "total_minutes": fee_quote.total_minutes,
            },
        )
        return ExitReceipt(
            ticket_id=ticket_id,
            plate=record.get("plate", ""),
            parking_lot=record.get("lotId", ""),
            entry_time=isoformat_ms(entry_ms),
            exit_time=isoformat_ms(now_ms),
            total_minutes=fee_quote.total_minutes,
            charge=fee_quote.fee,
            entry_time_estimated=estimated,
        )

    def tickets_for_plate(self, plate: Optional[str], limit: int = 20) -> List[Ticket]:
        """Tickets recorded for a plate, newest first; unreadable records are skipped."""
        plate = ensure_present(plate, "plate")
        tickets: List[Ticket] = []
        for item in self.store.list_by_plate(plate, limit=limit):
            try:
                tickets.append(Ticket.model_validate(item))
            except ValidationError as exc:
                logger.warning(
                    "Skipping unreadable ticket record",
                    extra={"ticket_id": item.get("ticketId"), "error": str(exc)},
                )
        tickets.sort(key=lambda t: t.entry_time, reverse=True)
        return tickets
