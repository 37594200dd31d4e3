"""
Conversion between policy rows, rule records and stored members.

Members are JSON objects with the keys ``ptype`` and ``v0``..``v5``.
Unset columns are written as ``null``. The key order and separators are
fixed so that the same record always produces the same member string;
the sorted set relies on that for deduplication and for ``ZREM``.
"""

import json
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..shared.errors import InvalidRuleError
from .models import MAX_FIELDS, RuleRecord


FIELD_KEYS = tuple(f"v{i}" for i in range(MAX_FIELDS))
POLICY_TYPE_KEY = "ptype"


def encode(policy_type: str, fields: Optional[Iterable[str]]) -> RuleRecord:
    """Build a rule record from a policy type and its ordered values."""
    if not policy_type:
        raise InvalidRuleError("Policy type must not be empty")
    if fields is None:
        raise InvalidRuleError("Rule values must not be None", {"policy_type": policy_type})

    values = tuple(fields)
    if len(values) > MAX_FIELDS:
        raise InvalidRuleError(
            f"Rule has more than {MAX_FIELDS} values",
            {"policy_type": policy_type, "count": len(values)}
        )

    for index, value in enumerate(values):
        if not isinstance(value, str):
            raise InvalidRuleError(
                "Rule values must be strings",
                {"policy_type": policy_type, "index": index}
            )

    return RuleRecord(policy_type=policy_type, fields=values)


def decode(record: RuleRecord) -> Tuple[str, List[str]]:
    """Split a record into its policy type and set values."""
    return record.policy_type, list(record.fields)


def to_dict(record: RuleRecord) -> Dict[str, Optional[str]]:
    """Wire object for a record, unset columns as None."""
    data: Dict[str, Optional[str]] = {POLICY_TYPE_KEY: record.policy_type}
    for index, key in enumerate(FIELD_KEYS):
        data[key] = record.field_at(index)
    return data


def serialize(record: RuleRecord) -> str:
    """Canonical member string for a record."""
    return json.dumps(to_dict(record), separators=(",", ":"), ensure_ascii=False)


def deserialize(member: Union[str, bytes]) -> RuleRecord:
    """Rebuild a record from a stored member."""
    if isinstance(member, bytes):
        member = member.decode("utf-8")

    try:
        data: Any = json.loads(member)
    except ValueError as e:
        raise InvalidRuleError("Stored member is not valid JSON", {"member": member}) from e

    if not isinstance(data, dict) or not isinstance(data.get(POLICY_TYPE_KEY), str):
        raise InvalidRuleError("Stored member has no policy type", {"member": member})

    values = [data[key] for key in FIELD_KEYS if data.get(key) is not None]
    return encode(data[POLICY_TYPE_KEY], values)
