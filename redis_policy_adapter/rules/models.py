"""
Rule data models for the Redis policy adapter.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass, field


# Number of value columns (v0..v5) a stored rule can carry.
MAX_FIELDS = 6

POLICY_SECTION = "p"
GROUPING_SECTION = "g"
SECTIONS = (POLICY_SECTION, GROUPING_SECTION)


@dataclass(frozen=True)
class RuleRecord:
    """One stored policy or grouping rule.

    ``fields`` holds only the values that are set, in column order, so a
    record can never carry ``v2`` without ``v0`` and ``v1``. Build records
    through ``codec.encode`` to get the length and type checks.
    """
    policy_type: str
    fields: Tuple[str, ...] = ()

    @property
    def section(self) -> str:
        """Section of the rule: ``p`` for ``p``/``p2``, ``g`` for ``g``/``g2``."""
        return self.policy_type[:1]

    def field_at(self, index: int) -> Optional[str]:
        """Value at column ``index``, or None when unset or out of range."""
        if 0 <= index < len(self.fields):
            return self.fields[index]
        return None

    def to_row(self) -> List[str]:
        """Flat line form: policy type followed by the set values."""
        return [self.policy_type, *self.fields]


@dataclass
class Filter:
    """Structured query over one section of stored rules.

    ``fields[i]`` lists the accepted values for column ``i``. An empty list
    accepts anything. Lists are ANDed across columns and ORed within one.
    ``policy_type`` narrows the section to a single variant such as ``p2``.
    """
    section: str = POLICY_SECTION
    fields: List[List[str]] = field(default_factory=list)
    policy_type: Optional[str] = None
