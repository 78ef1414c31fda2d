"""
Main CDK Stack for the parking lot service.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
)
from constructs import Construct

from infrastructure.constructs.data_layer import DataLayerConstruct
from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class ParkingLotStack(Stack):
    """Main stack wiring the tickets table and the API together."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Global tags for cost/accounting.
        Tags.of(self).add("Project", "parking-lot")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        # 1) Data layer.
        data_construct = DataLayerConstruct(
            self,
            "DataLayer",
            table_name=settings.table_name,
            plate_index_name=settings.plate_index_name,
            point_in_time_recovery=settings.point_in_time_recovery,
            retain_table=settings.retain_table,
        )

        # 2) API layer (single Lambda).
        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            service_version=settings.service_version,
            tickets_table=data_construct.tickets_table,
            plate_index_name=data_construct.plate_index_name,
            store_connect_timeout=settings.store_connect_timeout,
            store_read_timeout=settings.store_read_timeout,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
            lambda_architecture=settings.lambda_architecture,
        )

        # Outputs to quickly find resources.
        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "TicketsTable", value=data_construct.tickets_table.table_name)
