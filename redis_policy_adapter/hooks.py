"""
Transform hooks run by the adapter between encoding and store/engine I/O.

Pass an ``AdapterHooks`` instance (or any object with the same methods) to
``RedisAdapter`` to audit, default or augment rules. Whatever a hook
returns replaces its input for the rest of the call.
"""

from typing import List, Sequence

from .model import PolicyModel
from .rules.models import RuleRecord


class AdapterHooks:
    """Identity hooks; override the points you need."""

    def transform_on_load(self, model: PolicyModel, records: List[RuleRecord]) -> List[RuleRecord]:
        return records

    def transform_on_save(self, model: PolicyModel, records: List[RuleRecord]) -> List[RuleRecord]:
        return records

    def transform_on_add(
        self,
        section: str,
        policy_type: str,
        rule: Sequence[str],
        record: RuleRecord
    ) -> RuleRecord:
        return record

    def transform_on_add_batch(
        self,
        section: str,
        policy_type: str,
        rules: Sequence[Sequence[str]],
        records: List[RuleRecord]
    ) -> List[RuleRecord]:
        return records

    def transform_on_remove_filtered(
        self,
        section: str,
        policy_type: str,
        field_index: int,
        field_values: Sequence[str],
        records: List[RuleRecord]
    ) -> List[RuleRecord]:
        return records
