"""
Runtime settings for the parking Lambdas.

Values come from the Lambda environment set by the CDK stack; defaults keep
local runs and tests working without any configuration.
"""

from dataclasses import dataclass
import os

from botocore.config import Config


@dataclass
class ServiceSettings:
    """Settings read once per cold start."""

    environment: str = "dev"
    service_version: str = "1.0.0"

    # DynamoDB
    tickets_table: str = "parking-tickets"
    plate_index: str = "plateIndex"

    # Store call limits. One attempt means the core never retries on its own.
    store_connect_timeout: float = 2.0
    store_read_timeout: float = 5.0
    store_max_attempts: int = 1

    @classmethod
    def from_environment(cls) -> "ServiceSettings":
        """Load settings from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            service_version=os.environ.get("SERVICE_VERSION", "1.0.0"),
            tickets_table=os.environ.get("TICKETS_TABLE", "parking-tickets"),
            plate_index=os.environ.get("PLATE_INDEX", "plateIndex"),
            store_connect_timeout=float(os.environ.get("STORE_CONNECT_TIMEOUT", "2")),
            store_read_timeout=float(os.environ.get("STORE_READ_TIMEOUT", "5")),
            store_max_attempts=int(os.environ.get("STORE_MAX_ATTEMPTS", "1")),
        )

    def boto_config(self) -> Config:
        """botocore client config bounding every store call."""
        return Config(
            connect_timeout=self.store_connect_timeout,
            read_timeout=self.store_read_timeout,
            retries={"max_attempts": self.store_max_attempts, "mode": "standard"},
        )
