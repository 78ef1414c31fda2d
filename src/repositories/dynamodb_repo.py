"""DynamoDB repository for parking tickets."""

from decimal import Decimal
from typing import Any, Dict, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from utils.error_handling import StoreUnavailableError, TicketConflictError
from utils.logging_config import get_logger

logger = get_logger(__name__)

CONDITION_FAILED = "ConditionalCheckFailedException"


def _to_dynamo(value: Any) -> Any:
    """boto3 rejects floats; send them as Decimal."""
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class DynamoDbTicketRepository:
    """Ticket store backed by a single table with ticketId as partition key."""

    def __init__(
        self,
        table_name: str,
        plate_index: str = "plateIndex",
        config: Optional[Config] = None,
        table=None,
    ):
        self.table_name = table_name
        self.plate_index = plate_index
        self.table = table or boto3.resource("dynamodb", config=config).Table(table_name)

    def create(self, ticket_id: str, fields: Dict[str, Any]) -> None:
        """Insert a ticket; never overwrites an existing id."""
        item = {key: _to_dynamo(value) for key, value in fields.items()}
        item["ticketId"] = ticket_id
        try:
            self.table.put_item(
                Item=item,
                ConditionExpression="attribute_not_exists(ticketId)",
            )
        except ClientError as exc:
            if _error_code(exc) == CONDITION_FAILED:
                raise TicketConflictError(ticket_id) from exc
            raise self._unavailable("create", ticket_id, exc) from exc
        except BotoCoreError as exc:
            raise self._unavailable("create", ticket_id, exc) from exc

    def get(self, ticket_id: str) -> Optional[Dict[str, Any]]:
        """Point lookup by ticketId."""
        try:
            resp = self.table.get_item(Key={"ticketId": ticket_id}, ConsistentRead=True)
        except (ClientError, BotoCoreError) as exc:
            raise self._unavailable("get", ticket_id, exc) from exc
        return resp.get("Item")

    def update(
        self,
        ticket_id: str,
        fields: Dict[str, Any],
        expected_status: Optional[str] = None,
    ) -> bool:
        """
        Partial update of an existing ticket.

        With ``expected_status`` the write only lands if the stored status
        still matches, so two concurrent exits cannot both settle a ticket.
        """
        names: Dict[str, str] = {}
        values: Dict[str, Any] = {}
        assignments = []
        for index, (key, value) in enumerate(fields.items()):
            names[f"#f{index}"] = key
            values[f":v{index}"] = _to_dynamo(value)
            assignments.append(f"#f{index} = :v{index}")

        condition = "attribute_exists(ticketId)"
        if expected_status is not None:
            names["#status"] = "status"
            values[":expected"] = expected_status
            condition += " AND #status = :expected"

        try:
            self.table.update_item(
                Key={"ticketId": ticket_id},
                UpdateExpression="SET " + ", ".join(assignments),
                ConditionExpression=condition,
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
            )
        except ClientError as exc:
            if _error_code(exc) == CONDITION_FAILED:
                logger.info(
                    "Conditional ticket update rejected",
                    extra={"ticket_id": ticket_id, "expected_status": expected_status},
                )
                return False
            raise self._unavailable("update", ticket_id, exc) from exc
        except BotoCoreError as exc:
            raise self._unavailable("update", ticket_id, exc) from exc
        return True

    def list_by_plate(self, plate: str, limit: int = 20) -> List[Dict[str, Any]]:
        """Newest tickets for a plate via the plate secondary index (sorted by entryTime)."""
        try:
            resp = self.table.query(
                IndexName=self.plate_index,
                KeyConditionExpression="plate = :plate",
                ExpressionAttributeValues={":plate": plate},
                Limit=limit,
                ScanIndexForward=False,
            )
        except (ClientError, BotoCoreError) as exc:
            raise self._unavailable("list_by_plate", plate, exc) from exc
        return resp.get("Items", [])

    def _unavailable(self, operation: str, key: str, exc: Exception) -> StoreUnavailableError:
        logger.warning(
            "Ticket store call failed",
            extra={
                "operation": operation,
                "key": key,
                "table": self.table_name,
                "error": str(exc),
            },
        )
        return StoreUnavailableError()


def _error_code(exc: ClientError) -> str:
    return exc.response.get("Error", {}).get("Code", "")
