"""
Data layer construct: DynamoDB tickets table keyed by ticketId.
"""

from aws_cdk import (
    RemovalPolicy,
    aws_dynamodb as dynamodb,
)
from constructs import Construct


class DataLayerConstruct(Construct):
    """Provision the tickets table and its plate lookup index."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        table_name: str,
        plate_index_name: str,
        point_in_time_recovery: bool,
        retain_table: bool,
    ) -> None:
        super().__init__(scope, construct_id)

        self.tickets_table = dynamodb.Table(
            self,
            "Tickets",
            table_name=table_name,
            partition_key=dynamodb.Attribute(
                name="ticketId", type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=point_in_time_recovery,
            removal_policy=RemovalPolicy.RETAIN if retain_table else RemovalPolicy.DESTROY,
        )

        # Lookup of all tickets for a vehicle.
        self.tickets_table.add_global_secondary_index(
            index_name=plate_index_name,
            partition_key=dynamodb.Attribute(name="plate", type=dynamodb.AttributeType.STRING),
            sort_key=dynamodb.Attribute(name="entryTime", type=dynamodb.AttributeType.NUMBER),
            projection_type=dynamodb.ProjectionType.ALL,
        )
        self.plate_index_name = plate_index_name
