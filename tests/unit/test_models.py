"""
Pydantic model validation tests.

Ensures all models validate correctly and reject invalid data.
No AWS connection required.

Run with: pytest tests/unit/test_models.py -v
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError


class TestTicket:
    """Test Ticket model validation and persistence shape."""

    def test_from_stored_item(self):
        """DynamoDB items (camelCase, Decimal numbers) load into a Ticket."""
        from models.ticket import Ticket, TicketStatus

        ticket = Ticket.model_validate(
            {
                "ticketId": "t-1",
                "plate": "ABC123",
                "lotId": "LOT1",
                "entryTime": Decimal("1714554000000"),
                "status": "processed",
                "exitTime": Decimal("1714555200000"),
                "fee": Decimal("5"),
                "totalMinutes": Decimal("20"),
            }
        )
        assert ticket.status is TicketStatus.PROCESSED
        assert ticket.entry_time == 1714554000000
        assert ticket.fee == 5.0
        assert ticket.total_minutes == 20

    def test_to_item_uses_aliases_and_drops_unset(self):
        from models.ticket import Ticket

        item = Ticket(ticket_id="t-1", plate="ABC123", lot_id="LOT1", entry_time=1).to_item()
        assert item == {
            "ticketId": "t-1",
            "plate": "ABC123",
            "lotId": "LOT1",
            "entryTime": 1,
            "status": "active",
        }

    def test_blank_plate_rejected(self):
        from models.ticket import Ticket

        with pytest.raises(ValidationError):
            Ticket(ticket_id="t-1", plate=" ", lot_id="LOT1", entry_time=1)

    def test_unknown_status_rejected(self):
        from models.ticket import Ticket

        with pytest.raises(ValidationError):
            Ticket(ticket_id="t-1", plate="A", lot_id="L", entry_time=1, status="lost")

    def test_negative_fee_rejected(self):
        from models.ticket import Ticket

        with pytest.raises(ValidationError):
            Ticket(ticket_id="t-1", plate="A", lot_id="L", entry_time=1, fee=-2.5)


class TestExitReceipt:
    """Receipt serialization matches the HTTP contract."""

    def test_serializes_with_http_names(self):
        from models.ticket import ExitReceipt

        receipt = ExitReceipt(
            ticket_id="t-1",
            plate="ABC123",
            parking_lot="LOT1",
            entry_time="2024-05-01T09:00:00.000Z",
            exit_time="2024-05-01T09:20:00.000Z",
            total_minutes=20,
            charge=5.0,
            entry_time_estimated=True,
        )
        dumped = receipt.model_dump(by_alias=True)
        assert dumped["totalTimeMinutes"] == 20
        assert dumped["parkingLot"] == "LOT1"
        assert "entry_time_estimated" not in dumped
        assert "entryTimeEstimated" not in dumped

    def test_total_minutes_at_least_one(self):
        from models.ticket import ExitReceipt

        with pytest.raises(ValidationError):
            ExitReceipt(
                ticket_id="t-1",
                plate="A",
                parking_lot="L",
                entry_time="x",
                exit_time="y",
                total_minutes=0,
                charge=2.5,
            )


class TestEntryResponse:
    def test_serializes_with_http_names(self):
        from models.ticket import EntryResponse

        response = EntryResponse(
            ticket_id="t-1", plate="ABC123", parking_lot="LOT1", timestamp="now"
        )
        assert response.model_dump(by_alias=True) == {
            "ticketId": "t-1",
            "plate": "ABC123",
            "parkingLot": "LOT1",
            "timestamp": "now",
        }
