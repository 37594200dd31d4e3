"""
Shared fixtures for the Redis policy adapter tests.
"""

import pytest
from typing import Dict, Iterable, List, Sequence

from redis_policy_adapter.adapter import RedisAdapter
from redis_policy_adapter.model import PolicyRow


class InMemorySortedSetStore:
    """Sorted-set store kept in a dict, ordered like Redis (score, then member)."""

    def __init__(self):
        self.members: Dict[str, float] = {}
        self.closed = False
        self.calls: List[str] = []

    async def range_all(self) -> List[str]:
        self.calls.append("range_all")
        return [m for m, _ in sorted(self.members.items(), key=lambda item: (item[1], item[0]))]

    async def add(self, member: str, score: float) -> None:
        self.calls.append("add")
        self.members[member] = score

    async def remove(self, member: str) -> int:
        self.calls.append("remove")
        if member not in self.members:
            return 0
        del self.members[member]
        return 1

    async def delete_key(self) -> None:
        self.calls.append("delete_key")
        self.members.clear()

    async def close(self) -> None:
        self.closed = True


class InMemoryPolicyModel:
    """Minimal policy model: rows grouped by section and policy type."""

    def __init__(self):
        self.policies: Dict[str, Dict[str, List[List[str]]]] = {"p": {}, "g": {}}
        self.loaded: List[PolicyRow] = []

    def load(self, rows: List[PolicyRow]) -> None:
        self.loaded = list(rows)
        self.policies = {"p": {}, "g": {}}
        for policy_type, values in rows:
            self.add_rule(policy_type, values)

    def add_rule(self, policy_type: str, values: Sequence[str]) -> None:
        section = self.policies.setdefault(policy_type[0], {})
        section.setdefault(policy_type, []).append(list(values))

    def policy_types(self, section: str) -> Iterable[str]:
        return list(self.policies.get(section, {}))

    def iter_policy_rows(self, section: str, policy_type: str) -> Iterable[Sequence[str]]:
        return list(self.policies.get(section, {}).get(policy_type, []))

    def rows(self) -> List[List[str]]:
        return [values for _, values in self.loaded]


@pytest.fixture
def store():
    """Create an empty in-memory sorted-set store."""
    return InMemorySortedSetStore()


@pytest.fixture
def model():
    """Create an empty policy model."""
    return InMemoryPolicyModel()


@pytest.fixture
def adapter(store):
    """Create RedisAdapter over the in-memory store."""
    return RedisAdapter(store)
