"""
Unit tests for the event comparator (src/event_consistency/comparison/comparator.py)

Tests covering:
- Identity and disjoint-key comparisons
- user_id / userId alias handling
- Same-name type mismatch detection
- Grading thresholds
- Issue ordering and determinism
- Configurable alias rules
"""

import copy

import pytest

from event_consistency.comparison.comparator import (
    DEFAULT_ALIAS_RULES,
    AliasRule,
    EventComparator,
    compare_events,
    grade_for_issue_count,
)
from event_consistency.domain.issue import IssueKind
from event_consistency.domain.result import ConsistencyGrade
from event_consistency.domain.type_category import TypeCategory


@pytest.fixture
def sample_events():
    """Sample login events from two client versions."""
    event_a = {"user_id": 123, "action": "login", "timestamp": "2025-11-22T15:00:00Z"}
    event_b = {"userId": "123", "type": "LOGIN", "timestamp": "2025-11-22T15:00:00Z"}
    return event_a, event_b


class TestIdentity:
    """Comparing an event with itself."""

    @pytest.mark.parametrize(
        "event",
        [
            {},
            {"a": 1},
            {"user_id": 1, "name": "x", "tags": [1, 2], "meta": {"k": None}, "ok": True},
        ],
    )
    def test_identical_events_have_no_issues(self, event):
        """Test identical events yield High with zero issues."""
        result = compare_events(event, copy.deepcopy(event))
        assert result.issues == ()
        assert result.consistency is ConsistencyGrade.HIGH

    def test_empty_events(self):
        """Test two empty events are fully consistent."""
        result = compare_events({}, {})
        assert result.issue_count == 0
        assert result.is_consistent


class TestDisjointKeys:
    """Events with no field in common."""

    def test_every_key_reported_once(self):
        """Test each key produces one only-in issue for its side."""
        result = compare_events({"a": 1, "b": 2}, {"c": 3})
        assert result.messages == [
            "Field only in Event A: a",
            "Field only in Event A: b",
            "Field only in Event B: c",
        ]
        assert result.consistency is ConsistencyGrade.LOW

    def test_issue_count_is_sum_of_sizes(self):
        """Test total issues equals |A| + |B| for disjoint records."""
        event_a = {f"a{i}": i for i in range(4)}
        event_b = {f"b{i}": i for i in range(3)}
        result = compare_events(event_a, event_b)
        assert result.issue_count == 7

    def test_one_side_empty(self):
        """Test one empty side reports all keys of the other side."""
        result = compare_events({}, {"x": 1})
        assert result.messages == ["Field only in Event B: x"]
        assert result.consistency is ConsistencyGrade.MEDIUM


class TestAliasRule:
    """Default user_id / userId alias."""

    def test_alias_with_type_mismatch(self):
        """Test alias produces naming and type issues and nothing else."""
        result = compare_events({"user_id": 1}, {"userId": "1"})
        assert result.messages == [
            "Field name mismatch: user_id (Event A) vs userId (Event B)",
            "Type mismatch for user/user_id: number vs string",
        ]
        assert result.consistency is ConsistencyGrade.MEDIUM

    def test_alias_with_same_type(self):
        """Test alias with matching types produces only the naming issue."""
        result = compare_events({"user_id": 1}, {"userId": 2})
        assert result.messages == [
            "Field name mismatch: user_id (Event A) vs userId (Event B)"
        ]

    def test_aliased_keys_not_reported_as_only_in(self):
        """Test aliased keys never appear in only-in issues."""
        result = compare_events({"user_id": 1}, {"userId": "1"})
        assert result.issues_of(IssueKind.ONLY_IN_A, IssueKind.ONLY_IN_B) == []

    def test_alias_is_directional(self):
        """Test userId in A and user_id in B is not treated as an alias."""
        result = compare_events({"userId": 1}, {"user_id": 1})
        assert result.messages == [
            "Field only in Event A: userId",
            "Field only in Event B: user_id",
        ]

    def test_other_naming_conventions_not_aliased(self):
        """Test only the declared pair is aliased, not snake/camel case in general."""
        result = compare_events({"session_id": "s"}, {"sessionId": "s"})
        assert result.messages == [
            "Field only in Event A: session_id",
            "Field only in Event B: sessionId",
        ]

    def test_alias_and_exact_match_both_apply(self):
        """Test user_id present in both plus userId in B follows exact matching."""
        result = compare_events({"user_id": 1}, {"userId": "1", "user_id": 1})
        assert result.messages == [
            "Field name mismatch: user_id (Event A) vs userId (Event B)",
            "Type mismatch for user/user_id: number vs string",
        ]

    def test_userid_in_both_without_alias_partner(self):
        """Test userId in both sides is compared as an ordinary shared key."""
        result = compare_events({"user_id": 1, "userId": 1}, {"userId": "1"})
        assert result.messages == [
            "Field name mismatch: user_id (Event A) vs userId (Event B)",
            "Type mismatch for user/user_id: number vs string",
            'Type mismatch for "userId": number vs string',
        ]
        assert result.consistency is ConsistencyGrade.LOW


class TestTypeMismatch:
    """Same-name fields with different type categories."""

    def test_number_vs_string(self):
        """Test number vs string mismatch wording."""
        result = compare_events({"a": 1}, {"a": "1"})
        assert result.messages == ['Type mismatch for "a": number vs string']
        assert result.consistency is ConsistencyGrade.MEDIUM

    def test_issue_carries_structured_fields(self):
        """Test the type mismatch issue exposes its categories."""
        issue = compare_events({"a": True}, {"a": 1}).issues[0]
        assert issue.kind is IssueKind.TYPE_MISMATCH
        assert issue.field_a == "a"
        assert issue.field_b == "a"
        assert issue.type_a is TypeCategory.BOOLEAN
        assert issue.type_b is TypeCategory.NUMBER

    @pytest.mark.parametrize(
        "value_a,value_b,expected",
        [
            (None, {}, 'Type mismatch for "f": null vs object'),
            ([], {}, 'Type mismatch for "f": array vs object'),
            (True, 1, 'Type mismatch for "f": boolean vs number'),
            ("x", None, 'Type mismatch for "f": string vs null'),
        ],
    )
    def test_categories_are_distinguished(self, value_a, value_b, expected):
        """Test null, array, boolean and object categories are all distinct."""
        assert compare_events({"f": value_a}, {"f": value_b}).messages == [expected]

    @pytest.mark.parametrize(
        "value_a,value_b",
        [(1, 2.5), ("a", ""), ([1], ["x", {}]), ({"k": 1}, {}), (None, None)],
    )
    def test_same_category_values_match(self, value_a, value_b):
        """Test differing values of the same category are not reported."""
        assert compare_events({"f": value_a}, {"f": value_b}).is_consistent

    def test_mismatches_follow_event_a_key_order(self):
        """Test type mismatches are emitted in Event A's key order."""
        result = compare_events({"z": 1, "a": 1}, {"a": "1", "z": "1"})
        assert result.messages == [
            'Type mismatch for "z": number vs string',
            'Type mismatch for "a": number vs string',
        ]


class TestGrading:
    """Issue count thresholds."""

    @pytest.mark.parametrize(
        "count,grade",
        [
            (0, ConsistencyGrade.HIGH),
            (1, ConsistencyGrade.MEDIUM),
            (2, ConsistencyGrade.MEDIUM),
            (3, ConsistencyGrade.LOW),
            (10, ConsistencyGrade.LOW),
        ],
    )
    def test_grade_for_issue_count(self, count, grade):
        """Test grade thresholds 0 / 1-2 / 3+."""
        assert grade_for_issue_count(count) is grade

    def test_two_issues_is_medium(self):
        """Test exactly two issues grade Medium."""
        result = compare_events({"a": 1}, {"b": 1})
        assert result.issue_count == 2
        assert result.consistency is ConsistencyGrade.MEDIUM

    def test_three_issues_is_low(self):
        """Test exactly three issues grade Low."""
        result = compare_events({"a": 1, "c": 1}, {"b": 1})
        assert result.issue_count == 3
        assert result.consistency is ConsistencyGrade.LOW


class TestEndToEndSample:
    """Bundled sample login events."""

    def test_sample_pair(self, sample_events):
        """Test sample pair yields the four documented issues in order."""
        event_a, event_b = sample_events
        result = compare_events(event_a, event_b)
        assert result.messages == [
            "Field name mismatch: user_id (Event A) vs userId (Event B)",
            "Type mismatch for user/user_id: number vs string",
            "Field only in Event A: action",
            "Field only in Event B: type",
        ]
        assert result.issue_count == 4
        assert result.consistency is ConsistencyGrade.LOW

    def test_repeated_calls_are_identical(self, sample_events):
        """Test comparison output is deterministic."""
        event_a, event_b = sample_events
        first = compare_events(event_a, event_b)
        for _ in range(5):
            assert compare_events(event_a, event_b) == first

    def test_inputs_not_mutated(self, sample_events):
        """Test comparison leaves both inputs untouched."""
        event_a, event_b = sample_events
        before_a, before_b = copy.deepcopy(event_a), copy.deepcopy(event_b)
        compare_events(event_a, event_b)
        assert event_a == before_a
        assert event_b == before_b


class TestConfigurableAliases:
    """EventComparator with custom alias rules."""

    def test_default_rules(self):
        """Test default comparator uses the single user_id/userId rule."""
        assert EventComparator().alias_rules == DEFAULT_ALIAS_RULES
        assert DEFAULT_ALIAS_RULES == (AliasRule("user_id", "userId", "user"),)

    def test_empty_rules_disable_alias_step(self):
        """Test no alias rules reports user_id and userId as only-in fields."""
        result = EventComparator([]).compare({"user_id": 1}, {"userId": "1"})
        assert result.messages == [
            "Field only in Event A: user_id",
            "Field only in Event B: userId",
        ]

    def test_custom_rule_without_concept(self):
        """Test a custom rule without concept labels mismatches name_a/name_b."""
        comparator = EventComparator([AliasRule("ts", "timestamp")])
        result = comparator.compare({"ts": 1}, {"timestamp": "2025"})
        assert result.messages == [
            "Field name mismatch: ts (Event A) vs timestamp (Event B)",
            "Type mismatch for ts/timestamp: number vs string",
        ]

    def test_rules_apply_in_declaration_order(self):
        """Test multiple alias rules emit issues in rule order."""
        comparator = EventComparator(
            [AliasRule("b_a", "bA", "b"), AliasRule("a_a", "aA", "a")]
        )
        result = comparator.compare({"a_a": 1, "b_a": 1}, {"aA": 1, "bA": 1})
        assert result.messages == [
            "Field name mismatch: b_a (Event A) vs bA (Event B)",
            "Field name mismatch: a_a (Event A) vs aA (Event B)",
        ]

    def test_compare_events_accepts_rules(self):
        """Test module-level helper honors explicit alias rules."""
        result = compare_events({"user_id": 1}, {"userId": 1}, alias_rules=())
        assert result.issue_count == 2
