"""
Shared configuration management for the Redis policy adapter.
"""

from typing import Optional
from urllib.parse import urlsplit

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ADDRESS = "localhost"
DEFAULT_KEY = "casbin_rules"


class AdapterConfig(BaseSettings):
    """Configuration for the Redis-backed policy store.

    Values are read from ``POLICY_REDIS_*`` environment variables or a
    ``.env`` file. The defaults connect to a local Redis without a password
    and keep every rule under the ``casbin_rules`` key.
    """

    model_config = SettingsConfigDict(
        env_prefix="POLICY_REDIS_",
        env_file=".env",
        case_sensitive=False,
        extra="allow"
    )

    # Connection target
    address: str = Field(default=DEFAULT_ADDRESS, description="Redis host or host:port")
    password: Optional[str] = Field(default=None, description="Redis password")
    db: int = Field(default=0, description="Redis database index")

    # Rule container
    key: str = Field(default=DEFAULT_KEY, description="Sorted set key holding the rules")

    # Transport
    socket_timeout: float = Field(default=5.0, description="Socket timeout in seconds")
    socket_connect_timeout: float = Field(default=5.0, description="Connect timeout in seconds")

    # Observability
    log_level: str = Field(default="info", description="Log level for configure_logging")

    @property
    def redis_url(self) -> str:
        """Connection URL without credentials; the password is passed separately.

        ``db`` is appended only when the address does not name a database.
        """
        address = self.address
        if "://" not in address:
            address = f"redis://{address}"
        if urlsplit(address).path.strip("/"):
            return address
        return f"{address.rstrip('/')}/{self.db}"
