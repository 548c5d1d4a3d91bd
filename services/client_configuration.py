"""
Client configuration shared by every service client.
"""
from concurrent.futures import Executor
from dataclasses import dataclass, field
from typing import Optional

from botocore.config import Config as BotoConfig

from config import Config


@dataclass
class ClientConfiguration:
    """Settings a service client is constructed with."""

    region: Optional[str] = "us-east-1"
    endpoint_override: Optional[str] = None
    use_fips: bool = False
    use_dual_stack: bool = False
    max_attempts: int = 3
    retry_mode: str = "standard"
    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    max_pool_connections: int = 10
    verify_ssl: bool = True
    user_agent_extra: Optional[str] = None
    max_workers: int = 8
    executor: Optional[Executor] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_config(cls, config: Config) -> "ClientConfiguration":
        """
        Build a client configuration from the validated environment config.

        Args:
            config: Environment configuration (see ``config.get_config``)

        Returns:
            ClientConfiguration with the same region, endpoint and transport settings
        """
        return cls(
            region=config.aws_region,
            endpoint_override=config.endpoint_url,
            use_fips=config.use_fips_endpoint,
            use_dual_stack=config.use_dualstack_endpoint,
            max_attempts=config.max_attempts,
            retry_mode=config.retry_mode,
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            max_workers=config.max_workers,
        )

    def to_boto_config(self, service_client_name: str, signing_region: Optional[str]) -> BotoConfig:
        """
        Translate into the botocore transport configuration.

        Args:
            service_client_name: Name added to the user agent (e.g. ``MediaTailor``)
            signing_region: Region requests are signed for

        Returns:
            botocore Config with retry, timeout and pool settings applied
        """
        user_agent_extra = f"md/client#{service_client_name.replace(' ', '')}"
        if self.user_agent_extra:
            user_agent_extra = f"{user_agent_extra} {self.user_agent_extra}"

        return BotoConfig(
            region_name=signing_region,
            retries={"max_attempts": self.max_attempts, "mode": self.retry_mode},
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
            max_pool_connections=self.max_pool_connections,
            user_agent_extra=user_agent_extra,
        )
