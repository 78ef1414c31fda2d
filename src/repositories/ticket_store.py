"""Persistence contract the parking service depends on."""

from typing import Any, Dict, List, Optional, Protocol


class TicketStore(Protocol):
    """
    Key-value store of ticket records keyed by ticketId.

    Implementations raise StoreUnavailableError for any backend failure and
    TicketConflictError when create would overwrite an existing id.
    """

    def create(self, ticket_id: str, fields: Dict[str, Any]) -> None:
        ...

    def get(self, ticket_id: str) -> Optional[Dict[str, Any]]:
        ...

    def update(
        self,
        ticket_id: str,
        fields: Dict[str, Any],
        expected_status: Optional[str] = None,
    ) -> bool:
        """Apply a partial update; False if ``expected_status`` did not match."""
        ...

    def list_by_plate(self, plate: str, limit: int = 20) -> List[Dict[str, Any]]:
        ...
