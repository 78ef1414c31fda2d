"""
Environment-specific deployment settings.

Cost-optimized defaults for development/testing.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings with cost-optimized defaults."""

    # Environment
    environment: str = "dev"
    aws_region: str = "eu-west-2"  # Default AWS region
    service_version: str = "1.0.0"

    # Tickets table
    tickets_table_name: str = "parking-tickets"
    plate_index_name: str = "plateIndex"
    point_in_time_recovery: bool = False
    retain_table: bool = False

    # Lambda Configuration
    lambda_memory_mb: int = 256
    lambda_timeout_seconds: int = 10
    # x86_64 so Docker-bundled wheels match GitHub runners
    lambda_architecture: str = "X86_64"

    # Store call limits passed through to the Lambda
    store_connect_timeout: float = 2.0
    store_read_timeout: float = 5.0

    @property
    def table_name(self) -> str:
        """Physical table name, suffixed per environment."""
        return f"{self.tickets_table_name}-{self.environment}"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        region = os.environ.get("AWS_REGION", "eu-west-2")
        version = os.environ.get("SERVICE_VERSION", "1.0.0")

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                service_version=version,
                point_in_time_recovery=True,
                retain_table=True,
                lambda_memory_mb=512,
                lambda_timeout_seconds=15,
            )

        return cls(environment=env, aws_region=region, service_version=version)
