"""
Unit tests for rule filter matching.
"""

import pytest

from redis_policy_adapter.rules.filters import (
    apply_field_filter, apply_filter, matches_field_filter, matches_filter
)
from redis_policy_adapter.rules.models import Filter, RuleRecord


ALICE = RuleRecord("p", ("alice", "data1", "read"))
BOB = RuleRecord("p", ("bob", "data2", "write"))
ALICE_P2 = RuleRecord("p2", ("alice", "data1", "read"))
ALICE_ADMIN = RuleRecord("g", ("alice", "admin"))


class TestFieldFilter:
    """Test cases for matches_field_filter."""

    def test_exact_match_from_zero(self):
        assert matches_field_filter(ALICE, "p", 0, ["alice", "data1", "read"]) is True

    def test_prefix_match(self):
        assert matches_field_filter(ALICE, "p", 0, ["alice"]) is True

    def test_offset_match(self):
        assert matches_field_filter(ALICE, "p", 1, ["data1"]) is True
        assert matches_field_filter(BOB, "p", 1, ["data1"]) is False

    def test_empty_value_is_wildcard(self):
        assert matches_field_filter(ALICE, "p", 0, ["", "data1"]) is True
        assert matches_field_filter(BOB, "p", 0, ["", "", "write"]) is True

    def test_different_policy_type_never_matches(self):
        assert matches_field_filter(ALICE_P2, "p", 0, ["alice"]) is False
        assert matches_field_filter(ALICE, "g", 0, [""]) is False

    def test_unset_field_does_not_match(self):
        assert matches_field_filter(ALICE_ADMIN, "g", 1, ["admin", "domain1"]) is False

    def test_unset_field_with_wildcard_matches(self):
        assert matches_field_filter(ALICE_ADMIN, "g", 1, ["admin", ""]) is True

    @pytest.mark.parametrize("field_index", [-1, 6, 10])
    def test_out_of_range_index_is_no_match(self, field_index):
        assert matches_field_filter(ALICE, "p", field_index, ["alice"]) is False

    def test_values_past_last_column_do_not_match(self):
        record = RuleRecord("p", ("a", "b", "c", "d", "e", "f"))

        assert matches_field_filter(record, "p", 5, ["f", "g"]) is False
        assert matches_field_filter(record, "p", 5, ["f"]) is True

    def test_apply_field_filter_preserves_order(self):
        records = [BOB, ALICE, ALICE_P2]

        assert apply_field_filter(records, "p", 0, ["", "data"]) == []
        assert apply_field_filter(records, "p", 2, [""]) == [BOB, ALICE]


class TestStructuredFilter:
    """Test cases for matches_filter."""

    def test_single_field_candidates(self):
        rule_filter = Filter(section="p", fields=[["alice"], [], []])

        assert matches_filter(ALICE, rule_filter) is True
        assert matches_filter(BOB, rule_filter) is False

    def test_candidates_are_ored(self):
        rule_filter = Filter(section="p", fields=[["alice", "bob"]])

        assert apply_filter([ALICE, BOB], rule_filter) == [ALICE, BOB]

    def test_fields_are_anded(self):
        rule_filter = Filter(section="p", fields=[["alice", "bob"], ["data2"]])

        assert apply_filter([ALICE, BOB], rule_filter) == [BOB]

    def test_empty_filter_matches_whole_section(self):
        rule_filter = Filter(section="p")

        assert apply_filter([ALICE, BOB, ALICE_P2, ALICE_ADMIN], rule_filter) == [ALICE, BOB, ALICE_P2]

    def test_grouping_section(self):
        rule_filter = Filter(section="g", fields=[[], ["admin"]])

        assert apply_filter([ALICE, ALICE_ADMIN], rule_filter) == [ALICE_ADMIN]

    def test_policy_type_narrows_section(self):
        rule_filter = Filter(section="p", fields=[["alice"]], policy_type="p2")

        assert apply_filter([ALICE, ALICE_P2], rule_filter) == [ALICE_P2]

    def test_candidate_on_unset_field_does_not_match(self):
        rule_filter = Filter(section="g", fields=[[], [], ["domain1"]])

        assert matches_filter(ALICE_ADMIN, rule_filter) is False
