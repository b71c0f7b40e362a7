"""
Tests: merging and grouping accumulated requirements.

Run with:
    pytest requirement_elicitation/tests/test_aggregation.py -v
"""

from requirement_elicitation.models.enums import RequirementCategory
from requirement_elicitation.orchestration.aggregation import categorize, merge_requirements

from .helpers import make_requirement


class TestMerge:
    def test_appends_only_new_ids_in_order(self):
        a, b, c = make_requirement("a"), make_requirement("b"), make_requirement("c")
        merged = merge_requirements([a, b], [c, b])
        assert [r.id for r in merged] == ["a", "b", "c"]

    def test_identity_is_by_id_not_content(self):
        original = make_requirement("a")
        edited = make_requirement("a", title="Something else")
        merged = merge_requirements([original], [edited])
        assert merged == [original]

    def test_idempotent(self):
        existing = [make_requirement("a")]
        incoming = [make_requirement("b"), make_requirement("c")]
        once = merge_requirements(existing, incoming)
        assert merge_requirements(once, incoming) == once

    def test_inputs_not_mutated(self):
        existing = [make_requirement("a")]
        incoming = [make_requirement("b")]
        merge_requirements(existing, incoming)
        assert [r.id for r in existing] == ["a"]
        assert [r.id for r in incoming] == ["b"]

    def test_empty_inputs(self):
        assert merge_requirements([], []) == []


class TestCategorize:
    def test_groups_in_first_seen_order(self):
        reqs = [
            make_requirement("a", category=RequirementCategory.SECURITY),
            make_requirement("b", category=RequirementCategory.AUTHENTICATION),
            make_requirement("c", category=RequirementCategory.SECURITY),
        ]
        grouped = categorize(reqs)
        assert list(grouped) == ["Security", "Authentication"]
        assert [r.id for r in grouped["Security"]] == ["a", "c"]
