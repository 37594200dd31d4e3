"""
Store package for the policy adapter.

Provides the sorted-set capability the adapter writes through
(``RuleStore``) and its Redis implementation.
"""

from .redis_store import RedisRuleStore, RuleStore

__all__ = ["RedisRuleStore", "RuleStore"]
