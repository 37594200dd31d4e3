"""
Redis storage adapter for an in-memory policy engine.

All rules live as JSON members of one sorted set, scored by insertion time.
Filtering is done client-side after a full ``ZRANGE``: every load and every
remove-by-filter reads the whole rule set, so cost grows with the total
number of stored rules.

No locking or MULTI/EXEC is used. Multi-step operations are independent
round trips:

- ``save_policy`` deletes the key and then re-adds every rule; readers in
  between see an empty rule set.
- ``remove_filtered_policy`` reads, then removes what it matched. A rule
  added after the read survives; a rule it did not match is never removed.
- Concurrent writers resolve as last write wins per member.
"""

import time
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .hooks import AdapterHooks
from .model import PolicyModel, PolicyRow
from .rules.codec import decode, deserialize, encode, serialize
from .rules.filters import apply_field_filter, apply_filter
from .rules.models import SECTIONS, Filter, RuleRecord
from .shared.config import AdapterConfig
from .shared.logging import configure_logging, get_logger
from .store.redis_store import RedisRuleStore, RuleStore


class RedisAdapter:
    """Load, save and mutate policy rules in a Redis sorted set."""

    def __init__(self, store: RuleStore, hooks: Optional[AdapterHooks] = None):
        self.store = store
        self.hooks = hooks or AdapterHooks()
        self.logger = get_logger("policy_adapter.adapter")
        self._is_filtered = False

    @classmethod
    def from_config(
        cls,
        config: Optional[AdapterConfig] = None,
        hooks: Optional[AdapterHooks] = None,
        setup_logging: bool = False
    ) -> "RedisAdapter":
        """Adapter owning a new Redis connection; release it with ``close()``.

        With ``setup_logging`` the process-wide structlog pipeline is
        configured at ``config.log_level``.
        """
        config = config or AdapterConfig()
        if setup_logging:
            configure_logging("policy_adapter", config.log_level)
        return cls(RedisRuleStore.from_config(config), hooks)

    async def close(self):
        """Release the store connection."""
        await self.store.close()

    async def __aenter__(self) -> "RedisAdapter":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def is_filtered(self) -> bool:
        """Whether the last completed load used a filter."""
        return self._is_filtered

    # Load policy

    async def load_policy(self, model: PolicyModel) -> None:
        """Load every stored rule into ``model``."""
        records = await self._read_records()
        records = self.hooks.transform_on_load(model, records)
        model.load(self._to_rows(records))
        self._is_filtered = False

        self.logger.info("Policy loaded", rules=len(records))

    async def load_filtered_policy(self, model: PolicyModel, rule_filter: Filter) -> None:
        """Load the stored rules matching ``rule_filter`` into ``model``."""
        records = apply_filter(await self._read_records(), rule_filter)
        records = self.hooks.transform_on_load(model, records)
        model.load(self._to_rows(records))
        self._is_filtered = True

        self.logger.info(
            "Filtered policy loaded",
            rules=len(records),
            section=rule_filter.section,
            policy_type=rule_filter.policy_type
        )

    # Save policy

    async def save_policy(self, model: PolicyModel) -> None:
        """Replace the stored rules with the model's rules.

        A model with no rules leaves the store untouched.
        """
        records: List[RuleRecord] = []
        for section in SECTIONS:
            for policy_type in model.policy_types(section):
                for row in model.iter_policy_rows(section, policy_type):
                    records.append(encode(policy_type, row))

        if not records:
            self.logger.debug("Save skipped, model has no rules")
            return

        records = _validated(self.hooks.transform_on_save(model, records))
        members = [serialize(record) for record in records]

        await self.store.delete_key()
        for member in members:
            await self.store.add(member, time.time())

        self.logger.info("Policy saved", rules=len(members))

    # Add policy

    async def add_policy(self, section: str, policy_type: str, rule: Optional[Sequence[str]]) -> None:
        """Store one rule. Re-adding an existing rule is harmless."""
        if not rule:
            return

        record = encode(policy_type, rule)
        record = self.hooks.transform_on_add(section, policy_type, rule, record)
        record = encode(record.policy_type, record.fields)
        await self.store.add(serialize(record), time.time())

    async def add_policies(
        self,
        section: str,
        policy_type: str,
        rules: Optional[Iterable[Sequence[str]]]
    ) -> None:
        """Store several rules, each with its own write."""
        if rules is None:
            return

        rules = list(rules)
        if not rules:
            return

        records = [encode(policy_type, rule) for rule in rules]
        records = _validated(self.hooks.transform_on_add_batch(section, policy_type, rules, records))
        members = [serialize(record) for record in records]

        # No rollback: a failed write leaves the earlier ones in place.
        for member in members:
            await self.store.add(member, time.time())

    # Remove policy

    async def remove_policy(self, section: str, policy_type: str, rule: Optional[Sequence[str]]) -> None:
        """Remove the rule whose leading values equal ``rule``."""
        if not rule:
            return

        await self.remove_filtered_policy(section, policy_type, 0, *rule)

    async def remove_filtered_policy(
        self,
        section: str,
        policy_type: str,
        field_index: int,
        *field_values: str
    ) -> int:
        """Remove rules whose values from ``field_index`` on match ``field_values``.

        An empty string in ``field_values`` matches any value. Returns the
        number of members removed.
        """
        if not field_values:
            return 0

        stored: Dict[RuleRecord, List[str]] = {}
        for member, record in await self._read_members():
            stored.setdefault(record, []).append(member)

        records = apply_field_filter(list(stored), policy_type, field_index, field_values)
        records = self.hooks.transform_on_remove_filtered(
            section, policy_type, field_index, field_values, records
        )

        # Records read from the store are removed by their stored member,
        # which may differ from the canonical encoding.
        removed = 0
        for record in records:
            for member in stored.get(record) or [serialize(record)]:
                removed += await self.store.remove(member)

        self.logger.debug(
            "Filtered policy removed",
            policy_type=policy_type,
            field_index=field_index,
            matched=len(records),
            removed=removed
        )
        return removed

    async def remove_policies(
        self,
        section: str,
        policy_type: str,
        rules: Optional[Iterable[Sequence[str]]]
    ) -> None:
        """Remove several rules, each independently."""
        if rules is None:
            return

        for rule in list(rules):
            await self.remove_filtered_policy(section, policy_type, 0, *(rule or ()))

    # Store maintenance

    async def clear_policy(self) -> None:
        """Delete every stored rule."""
        await self.store.delete_key()
        self.logger.info("Policy store cleared")

    async def get_policies_in_store(self) -> List[List[str]]:
        """Stored rule values in score order, without the policy type."""
        return [list(record.fields) for record in await self._read_records()]

    async def _read_members(self) -> List[Tuple[str, RuleRecord]]:
        """Every stored member with its decoded record."""
        return [(member, deserialize(member)) for member in await self.store.range_all()]

    async def _read_records(self) -> List[RuleRecord]:
        """Decode every stored member."""
        return [record for _, record in await self._read_members()]

    def _to_rows(self, records: Iterable[RuleRecord]) -> List[PolicyRow]:
        return [decode(record) for record in records]


def _validated(records: Iterable[RuleRecord]) -> List[RuleRecord]:
    """Re-check hook output so a malformed record fails before any write."""
    return [encode(record.policy_type, record.fields) for record in records]
