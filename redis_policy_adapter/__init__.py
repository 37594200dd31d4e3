"""
Redis policy adapter.

Persists access-control policy rules (``p`` permission rules and ``g``
role-inheritance rules) in a Redis sorted set and loads them back into an
in-memory policy engine. It provides:

- adapter: RedisAdapter, the load/save/add/remove surface for the engine.
- rules: Rule record model, wire codec and filter matching.
- store: Sorted-set capability and its redis.asyncio implementation.
- hooks: Transform strategy applied between encoding and I/O.
- shared: Configuration, structured logging and error types.

Guidelines:
- The adapter is stateless apart from the is_filtered flag.
- Filtering is client-side after a full read; size the rule set accordingly.
"""

from .adapter import RedisAdapter
from .hooks import AdapterHooks
from .model import PolicyModel, PolicyRow
from .rules.models import Filter, RuleRecord
from .shared.config import AdapterConfig
from .shared.errors import InvalidRuleError, PolicyAdapterException, StoreConnectionError
from .store.redis_store import RedisRuleStore, RuleStore

__all__ = [
    "RedisAdapter",
    "AdapterHooks",
    "PolicyModel",
    "PolicyRow",
    "Filter",
    "RuleRecord",
    "AdapterConfig",
    "InvalidRuleError",
    "PolicyAdapterException",
    "StoreConnectionError",
    "RedisRuleStore",
    "RuleStore",
]
