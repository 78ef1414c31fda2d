"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import vehicle_entry` to work
when running tests, simulating the Lambda environment where code
is deployed from the src/ directory.
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import boto3
import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    # Add repo root first (for imports like infrastructure.*)
    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    # Add src/ for Lambda-style imports (from handlers import ...)
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Ensure boto3 has offline-friendly defaults so tests do not require AWS access.
os.environ.setdefault("AWS_REGION", "eu-west-2")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-2")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_SESSION_TOKEN", "test")
os.environ.setdefault("ENVIRONMENT", "dev")

# Lambda environment variables used by handlers
os.environ.setdefault("TICKETS_TABLE", "test-parking-tickets")
os.environ.setdefault("PLATE_INDEX", "plateIndex")

# Create a default boto3 session so resources/clients do not error during import.
boto3.setup_default_session(region_name="eu-west-2")


class FakeTicketStore:
    """In-memory TicketStore that counts calls and can simulate outages."""

    def __init__(self):
        self.items = {}
        self.calls = {"create": 0, "get": 0, "update": 0, "list_by_plate": 0}
        self.fail_on = set()
        # Status forced onto a record right before a conditional update,
        # to simulate a competing exit landing first.
        self.race_status = None

    def _maybe_fail(self, operation):
        from utils.error_handling import StoreUnavailableError

        self.calls[operation] += 1
        if operation in self.fail_on:
            raise StoreUnavailableError()

    def create(self, ticket_id, fields):
        from utils.error_handling import TicketConflictError

        self._maybe_fail("create")
        if ticket_id in self.items:
            raise TicketConflictError(ticket_id)
        self.items[ticket_id] = dict(fields, ticketId=ticket_id)

    def get(self, ticket_id):
        self._maybe_fail("get")
        item = self.items.get(ticket_id)
        return dict(item) if item else None

    def update(self, ticket_id, fields, expected_status=None):
        self._maybe_fail("update")
        item = self.items.get(ticket_id)
        if item is None:
            return False
        if self.race_status is not None:
            item["status"] = self.race_status
        if expected_status is not None and item.get("status") != expected_status:
            return False
        item.update(fields)
        return True

    def list_by_plate(self, plate, limit=20):
        self._maybe_fail("list_by_plate")
        return [dict(i) for i in self.items.values() if i.get("plate") == plate][:limit]

    @property
    def total_calls(self):
        return sum(self.calls.values())


class FakeClock:
    """Manually advanced clock returning aware UTC datetimes."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 5, 1, 9, 0, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def fake_store():
    return FakeTicketStore()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def parking_service(fake_store, fake_clock):
    from services.parking_service import ParkingService

    return ParkingService(fake_store, clock=fake_clock)


@pytest.fixture
def wired_service(parking_service):
    """Install the fake-backed service for the Lambda handlers."""
    from handlers import dependencies

    dependencies.set_parking_service(parking_service)
    yield parking_service
    dependencies.set_parking_service(None)
