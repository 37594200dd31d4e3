"""
Redis sorted-set store for policy rules.
"""

from typing import List, Protocol

import redis.asyncio as redis
from ..shared.config import AdapterConfig
from ..shared.errors import StoreConnectionError
from ..shared.logging import get_logger


class RuleStore(Protocol):
    """Sorted-set capability the adapter needs from a store."""

    async def range_all(self) -> List[str]:
        ...

    async def add(self, member: str, score: float) -> None:
        ...

    async def remove(self, member: str) -> int:
        ...

    async def delete_key(self) -> None:
        ...

    async def close(self) -> None:
        ...


class RedisRuleStore:
    """Rules kept as members of one Redis sorted set.

    Errors raised by the Redis client during reads and writes are not
    caught here; the caller sees them unchanged.
    """

    def __init__(self, client: redis.Redis, key: str, owns_client: bool = False):
        self.redis = client
        self.key = key
        self.owns_client = owns_client
        self.logger = get_logger("policy_adapter.store.redis")

    @classmethod
    def from_config(cls, config: AdapterConfig) -> "RedisRuleStore":
        """Create a store with its own connection pool."""
        client = redis.from_url(
            config.redis_url,
            password=config.password,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=config.socket_connect_timeout,
            socket_timeout=config.socket_timeout,
            health_check_interval=30
        )
        return cls(client, config.key, owns_client=True)

    async def start(self):
        """Check that Redis answers before the store is used."""
        try:
            await self.redis.ping()
            self.logger.info("Redis rule store started", key=self.key)

        except Exception as e:
            self.logger.error("Failed to start Redis rule store", key=self.key, error=str(e))
            raise StoreConnectionError(str(e), {"key": self.key}) from e

    async def close(self):
        """Release the connection if this store created it."""
        if self.owns_client and self.redis is not None:
            await self.redis.aclose()
            self.logger.info("Redis rule store stopped", key=self.key)

    async def range_all(self) -> List[str]:
        """All members in ascending score order. A missing key reads as empty."""
        members = await self.redis.zrange(self.key, 0, -1)
        return [m.decode("utf-8") if isinstance(m, bytes) else m for m in members]

    async def add(self, member: str, score: float) -> None:
        await self.redis.zadd(self.key, {member: score})
        self.logger.debug("Rule member added", key=self.key, score=score)

    async def remove(self, member: str) -> int:
        """Remove one member; returns 1 if it was stored, else 0."""
        removed = await self.redis.zrem(self.key, member)
        self.logger.debug("Rule member removed", key=self.key, removed=removed)
        return removed

    async def delete_key(self) -> None:
        await self.redis.delete(self.key)
        self.logger.debug("Rule container deleted", key=self.key)

    async def health_check(self) -> bool:
        """Check Redis health."""
        try:
            await self.redis.ping()
            return True
        except Exception:
            return False
