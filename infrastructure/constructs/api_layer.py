"""
API layer construct: shared Lambda + HTTP API routes.

A single Lambda keeps the DynamoDB client warm for entry and exit calls.
Uses Docker bundling for dependencies (runs in CI/CD pipeline).
"""

from aws_cdk import (
    BundlingOptions,
    Duration,
    aws_dynamodb as dynamodb,
    aws_lambda as _lambda,
    aws_apigatewayv2 as apigw,
    aws_apigatewayv2_integrations as integrations,
    aws_logs as logs,
)
from constructs import Construct

ROUTES = (
    (apigw.HttpMethod.POST, "/entry"),
    (apigw.HttpMethod.POST, "/exit"),
    (apigw.HttpMethod.GET, "/tickets"),
    (apigw.HttpMethod.GET, "/health"),
)


class ApiLayerConstruct(Construct):
    """Expose parking endpoints via HTTP API."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        service_version: str,
        tickets_table: dynamodb.ITable,
        plate_index_name: str,
        store_connect_timeout: float,
        store_read_timeout: float,
        lambda_memory_mb: int = 256,
        lambda_timeout_seconds: int = 10,
        lambda_architecture: str = "X86_64",
    ) -> None:
        super().__init__(scope, construct_id)

        # Bundle Lambda code with dependencies using Docker (works in CI/CD)
        bundled_code = _lambda.Code.from_asset(
            "src",
            bundling=BundlingOptions(
                image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install -r requirements-lambda.txt -t /asset-output && "
                    "cp -r . /asset-output"
                ],
            ),
        )

        architecture = (
            _lambda.Architecture.ARM_64
            if lambda_architecture == "ARM_64"
            else _lambda.Architecture.X86_64
        )

        self.main_lambda = _lambda.Function(
            self,
            "ApiHandler",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="handlers.main.lambda_handler",
            code=bundled_code,
            memory_size=lambda_memory_mb,
            timeout=Duration.seconds(lambda_timeout_seconds),
            architecture=architecture,
            environment={
                "ENVIRONMENT": environment,
                "SERVICE_VERSION": service_version,
                "TICKETS_TABLE": tickets_table.table_name,
                "PLATE_INDEX": plate_index_name,
                "STORE_CONNECT_TIMEOUT": str(store_connect_timeout),
                "STORE_READ_TIMEOUT": str(store_read_timeout),
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )
        tickets_table.grant_read_write_data(self.main_lambda)

        self.api = apigw.HttpApi(
            self,
            "HttpApi",
            api_name=f"parking-lot-api-{environment}",
        )

        integration = integrations.HttpLambdaIntegration(
            "LambdaIntegration", self.main_lambda
        )

        for method, path in ROUTES:
            self.api.add_routes(
                path=path,
                methods=[method],
                integration=integration,
            )
