"""
Rule filter matching.

Two predicates select stored records:

- ``matches_field_filter``: the field-index form used by remove operations,
  where ``values[k]`` is compared with column ``field_index + k`` and an
  empty string matches anything.
- ``matches_filter``: the structured ``Filter`` used by filtered loads.

Both are pure and never raise on odd indices; they just return False.
"""

from typing import Iterable, List, Sequence

from .models import MAX_FIELDS, Filter, RuleRecord


def matches_field_filter(
    record: RuleRecord,
    policy_type: str,
    field_index: int,
    values: Sequence[str]
) -> bool:
    """Check a record against a contiguous run of expected column values."""
    if record.policy_type != policy_type:
        return False

    if field_index < 0 or field_index >= MAX_FIELDS:
        return False

    for offset, expected in enumerate(values):
        if not expected:
            continue
        if record.field_at(field_index + offset) != expected:
            return False

    return True


def matches_filter(record: RuleRecord, rule_filter: Filter) -> bool:
    """Check a record against a structured filter."""
    if record.section != rule_filter.section:
        return False

    if rule_filter.policy_type and record.policy_type != rule_filter.policy_type:
        return False

    for index, candidates in enumerate(rule_filter.fields):
        if not candidates:
            continue
        if record.field_at(index) not in candidates:
            return False

    return True


def apply_field_filter(
    records: Iterable[RuleRecord],
    policy_type: str,
    field_index: int,
    values: Sequence[str]
) -> List[RuleRecord]:
    """Records matching a field-index filter, order preserved."""
    return [
        record for record in records
        if matches_field_filter(record, policy_type, field_index, values)
    ]


def apply_filter(records: Iterable[RuleRecord], rule_filter: Filter) -> List[RuleRecord]:
    """Records matching a structured filter, order preserved."""
    return [record for record in records if matches_filter(record, rule_filter)]
