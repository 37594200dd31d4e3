"""
Policy engine capability consumed by the adapter.
"""

from typing import Iterable, List, Protocol, Sequence, Tuple


# (policy_type, [v0, v1, ...]) as handed to PolicyModel.load
PolicyRow = Tuple[str, List[str]]


class PolicyModel(Protocol):
    """In-memory policy model the adapter loads into and saves from."""

    def load(self, rows: List[PolicyRow]) -> None:
        """Replace the current rule set with ``rows``."""
        ...

    def policy_types(self, section: str) -> Iterable[str]:
        """Policy types present in ``section`` (``p`` or ``g``)."""
        ...

    def iter_policy_rows(self, section: str, policy_type: str) -> Iterable[Sequence[str]]:
        """Current rows of one policy type."""
        ...
