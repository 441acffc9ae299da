"""Unit tests for query normalization and the Match Predicate."""

import pytest

from sieve.contexts.filtering import MATCH_ALL, evaluate, filter_entries, matches, normalize_query
from sieve.contexts.indexing import Entry

ALPHA = Entry(
    title="Alpha Guide", tags=(), date_iso="2025-10-16", date_human="october 16, 2025"
)
BETA = Entry(
    title="Beta Notes", tags=("js",), date_iso="2025-09-01", date_human="september 01, 2025"
)
UNDATED = Entry(title="Gamma Draft", tags=("Web Dev",))


@pytest.mark.unit
class TestNormalizeQuery:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("alpha", "alpha"),
            ("  Alpha  ", "alpha"),
            ("BETA Notes", "beta notes"),
            ("\tjs\n", "js"),
        ],
    )
    def test_trimmed_and_lowercased(self, raw, expected):
        assert normalize_query(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
    def test_blank_input_is_match_all(self, raw):
        assert normalize_query(raw) == MATCH_ALL

    def test_inner_whitespace_preserved(self):
        assert normalize_query("  alpha   guide ") == "alpha   guide"


@pytest.mark.unit
class TestMatches:
    def test_empty_query_matches_everything(self):
        assert all(matches("", entry) for entry in (ALPHA, BETA, UNDATED))

    def test_title_substring(self):
        assert matches("alpha", ALPHA)
        assert matches("ha gu", ALPHA)
        assert not matches("alpha", BETA)

    def test_tag_substring(self):
        assert matches("js", BETA)
        assert not matches("js", ALPHA)

    def test_tags_match_as_one_joined_string(self):
        assert matches("web dev", UNDATED)

    def test_iso_date_prefix(self):
        assert matches("2025-10", ALPHA)
        assert not matches("2025-10", BETA)

    def test_long_form_date(self):
        assert matches("september", BETA)
        assert matches("october 16", ALPHA)
        assert not matches("september", ALPHA)

    def test_substring_not_word_boundary(self):
        assert matches("ctob", ALPHA)

    def test_partial_date_digits_match_loosely(self):
        # "16" is the day of ALPHA; it also appears nowhere in BETA
        assert matches("16", ALPHA)
        assert not matches("16", BETA)
        assert matches("01", BETA)

    def test_query_case_is_folded(self):
        for query in ("ALPHA", "Alpha", "aLpHa"):
            assert matches(query, ALPHA) == matches(query.lower(), ALPHA)
        assert matches("SEPTEMBER", BETA)

    def test_undated_entry_only_matches_by_title_or_tags(self):
        assert matches("gamma", UNDATED)
        assert not matches("2025", UNDATED)

    def test_predicate_is_pure(self):
        first = matches("note", BETA)
        second = matches("note", BETA)
        assert first is second is True
        assert BETA.title == "Beta Notes"


@pytest.mark.unit
class TestEvaluate:
    def test_verdicts_in_index_order(self):
        assert evaluate("2025", (ALPHA, BETA, UNDATED)) == [True, True, False]

    def test_empty_index(self):
        assert evaluate("anything", ()) == []
        assert filter_entries("anything", ()) == []

    def test_filter_entries_keeps_order(self):
        assert filter_entries("", (BETA, ALPHA)) == [BETA, ALPHA]
        assert filter_entries("e", (ALPHA, BETA, UNDATED)) == [ALPHA, BETA, UNDATED]
