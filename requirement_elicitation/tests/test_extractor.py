"""
Tests: keyword taxonomy and requirement extraction.

Run with:
    pytest requirement_elicitation/tests/test_extractor.py -v
"""

import pytest

from requirement_elicitation.models.enums import Priority, RequirementCategory, RequirementType
from requirement_elicitation.rules.extractor import RequirementExtractor, make_title, split_segments
from requirement_elicitation.rules.taxonomy import DEFAULT_TAXONOMY
from requirement_elicitation.utils.ids import RequirementIdFactory


class TestSegmentation:
    def test_splits_on_terminal_punctuation(self):
        assert split_segments("One. Two! Three?") == ["One", " Two", " Three"]

    def test_drops_empty_segments(self):
        assert split_segments("Done... Really?!  ") == ["Done", " Really"]

    def test_blank_text_has_no_segments(self):
        assert split_segments("   ") == []


class TestTitle:
    def test_long_text_truncated_to_eight_words(self):
        text = "The user can search products by name price and category"
        assert make_title(text) == "The user can search products by name price..."

    def test_title_is_literal_prefix_of_description(self):
        text = "The  user can\tsearch products by name price and category"
        title = make_title(text)
        assert title == "The  user can\tsearch products by name price..."
        assert text.startswith(title[: -len("...")])

    def test_short_text_kept_verbatim(self):
        assert make_title("The user can search products") == "The user can search products"

    def test_exactly_eight_words_has_no_ellipsis(self):
        text = "The system must allow users to login securely"
        assert make_title(text) == text


class TestExtraction:
    def test_no_keywords_yields_nothing(self, extractor):
        assert extractor.extract("The weather is nice today") == []

    def test_empty_message_yields_nothing(self, extractor):
        assert extractor.extract("") == []

    def test_functional_wins_over_non_functional(self, extractor):
        reqs = extractor.extract("Users should login quickly with good performance")
        assert len(reqs) == 1
        assert reqs[0].type == RequirementType.FUNCTIONAL

    def test_non_functional_only(self, extractor):
        reqs = extractor.extract("Uptime has to stay above four nines")
        assert len(reqs) == 1
        assert reqs[0].type == RequirementType.NON_FUNCTIONAL

    def test_first_matching_category_wins(self, extractor):
        reqs = extractor.extract("user login should be secure")
        assert reqs[0].category == RequirementCategory.AUTHENTICATION

    def test_default_category_is_general(self, extractor):
        reqs = extractor.extract("Display a critical alert")
        assert reqs[0].category == RequirementCategory.GENERAL

    def test_substring_matching_is_not_word_bounded(self, extractor):
        reqs = extractor.extract("The checkout is insecure")
        assert reqs[0].type == RequirementType.NON_FUNCTIONAL
        assert reqs[0].category == RequirementCategory.SECURITY

    @pytest.mark.parametrize(
        "text, priority",
        [
            ("Display a critical alert", Priority.HIGH),
            ("Dark mode is an optional feature", Priority.LOW),
            ("Search by name", Priority.MEDIUM),
        ],
    )
    def test_priority(self, extractor, text, priority):
        assert extractor.extract(text)[0].priority == priority

    def test_acceptance_criteria_follow_type(self, extractor):
        functional, non_functional = extractor.extract("Users can login. The page must load fast.")
        assert functional.acceptance_criteria == DEFAULT_TAXONOMY.acceptance_criteria[RequirementType.FUNCTIONAL]
        assert non_functional.acceptance_criteria == DEFAULT_TAXONOMY.acceptance_criteria[RequirementType.NON_FUNCTIONAL]
        assert len(functional.acceptance_criteria) == 3
        assert len(non_functional.acceptance_criteria) == 3

    def test_sentence_split_produces_one_requirement_per_matching_sentence(self, extractor):
        reqs = extractor.extract("Users can login. The page must load fast! Hello?")
        assert [r.description for r in reqs] == ["Users can login", "The page must load fast"]
        assert reqs[1].category == RequirementCategory.PERFORMANCE
        assert reqs[1].priority == Priority.HIGH

    def test_whole_message_mode_keeps_one_segment(self, extractor):
        reqs = extractor.extract("Users can login. The page must load fast.", split_sentences=False)
        assert len(reqs) == 1
        assert reqs[0].description == "Users can login. The page must load fast."
        assert reqs[0].type == RequirementType.FUNCTIONAL

    def test_fixed_fields(self, extractor):
        req = extractor.extract("  Users can delete their account  ")[0]
        assert req.description == "Users can delete their account"
        assert req.estimated_effort == "TBD"
        assert req.dependencies == ()
        assert req.created_at is not None

    def test_ids_unique_within_and_across_calls(self, extractor):
        first = extractor.extract("Users can login. Users can register.")
        second = extractor.extract("Users can login. Users can register.")
        ids = [r.id for r in first + second]
        assert len(set(ids)) == 4
        assert first[0].id == "req_test_1_0"
        assert second[1].id == "req_test_2_1"

    def test_requirements_are_immutable(self, extractor):
        req = extractor.extract("Users can login")[0]
        with pytest.raises(Exception):
            req.title = "changed"


class TestIdFactory:
    def test_tokens_are_monotonic(self):
        factory = RequirementIdFactory(prefix="abc")
        assert [factory.next_token() for _ in range(3)] == [1, 2, 3]
        assert factory.make_id(3, 0) == "req_abc_3_0"

    def test_random_prefix_per_factory(self):
        assert RequirementIdFactory().prefix != RequirementIdFactory().prefix


class TestTaxonomy:
    def test_categories_cover_closed_set_in_order(self):
        names = [category.value for category, _ in DEFAULT_TAXONOMY.categories]
        assert names == [
            "Authentication",
            "User Management",
            "Data Processing",
            "API Integration",
            "Security",
            "Performance",
            "UI/UX",
            "Reporting",
        ]

    def test_taxonomy_is_read_only(self):
        with pytest.raises(Exception):
            DEFAULT_TAXONOMY.functional_keywords = ()

    def test_custom_taxonomy(self, id_factory):
        taxonomy = DEFAULT_TAXONOMY.model_copy(update={"functional_keywords": ("widget",)})
        reqs = RequirementExtractor(id_factory, taxonomy).extract("Add a widget")
        assert reqs[0].type == RequirementType.FUNCTIONAL
