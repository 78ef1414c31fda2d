"""
Lazy wiring of the parking service for the Lambda handlers.

The service (and its DynamoDB table resource) is built on first use and then
reused across warm invocations. Tests swap in their own service with
``set_parking_service``.
"""

from typing import Optional

from services.parking_service import ParkingService
from utils.settings import ServiceSettings

_parking_service: Optional[ParkingService] = None


def get_parking_service() -> ParkingService:
    """Build the ParkingService from environment settings on first call."""
    global _parking_service
    if _parking_service is None:
        from repositories.dynamodb_repo import DynamoDbTicketRepository

        settings = ServiceSettings.from_environment()
        store = DynamoDbTicketRepository(
            settings.tickets_table,
            plate_index=settings.plate_index,
            config=settings.boto_config(),
        )
        _parking_service = ParkingService(store)
    return _parking_service


def set_parking_service(service: Optional[ParkingService]) -> None:
    """Override (or with None, reset) the shared service."""
    global _parking_service
    _parking_service = service
