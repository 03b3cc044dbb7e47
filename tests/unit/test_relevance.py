"""Tests for relevance scoring, matched fields and excerpt extraction."""

from itdocs.application.services.relevance import (
    calculate_relevance_score,
    extract_matched_text,
    get_matched_fields,
)


class TestCalculateRelevanceScore:
    def test_exact_title_match_ignores_case(self) -> None:
        assert calculate_relevance_score("acme", "Acme") == 100

    def test_title_contains_without_word_boundary(self) -> None:
        assert calculate_relevance_score("cme", "Acme Corp") == 50

    def test_title_contains_as_whole_word(self) -> None:
        assert calculate_relevance_score("acme", "Acme Corp") == 80

    def test_title_and_description_word_matches_add_up(self) -> None:
        assert calculate_relevance_score("corp", "Acme Corp", "A technology corp") == 120

    def test_description_only(self) -> None:
        assert calculate_relevance_score("switch", "Network Diagram", "Core switch layout") == 40

    def test_description_substring_only(self) -> None:
        assert calculate_relevance_score("witch", "Network Diagram", "Core switch layout") == 25

    def test_no_match_scores_zero(self) -> None:
        assert calculate_relevance_score("zzz", "Acme", "Corp") == 0

    def test_missing_title_and_description(self) -> None:
        assert calculate_relevance_score("acme", None, None) == 0

    def test_email_local_part_is_a_word(self) -> None:
        """'@' and '.' are word boundaries, so jane in jane@acme.com is a whole word."""
        assert calculate_relevance_score("jane", "Jane Doe", "jane@acme.com") == 120

    def test_possessive_title(self) -> None:
        assert calculate_relevance_score("jane", "Jane's Report") == 80

    def test_regex_metacharacters_in_query_are_literal(self) -> None:
        assert calculate_relevance_score("c++", "C++ Guide") == 50
        assert calculate_relevance_score("a.b", "axb") == 0


class TestGetMatchedFields:
    def test_returns_matching_fields_in_order(self) -> None:
        fields = {"first_name": "Jane", "last_name": "Doe", "email": "jane@acme.com"}
        assert get_matched_fields("JANE", fields) == ["first_name", "email"]

    def test_skips_empty_and_none_values(self) -> None:
        assert get_matched_fields("x", {"a": None, "b": "", "c": "box"}) == ["c"]

    def test_non_string_values_are_stringified(self) -> None:
        assert get_matched_fields("42", {"port": 8042}) == ["port"]


class TestExtractMatchedText:
    def test_empty_text(self) -> None:
        assert extract_matched_text("q", "") == ""
        assert extract_matched_text("q", None) == ""

    def test_short_text_returned_whole(self) -> None:
        assert extract_matched_text("acme", "Acme Corp") == "Acme Corp"

    def test_window_with_ellipses_on_both_sides(self) -> None:
        text = "a" * 100 + "needle" + "b" * 100
        excerpt = extract_matched_text("needle", text)
        assert excerpt == "..." + "a" * 50 + "needle" + "b" * 50 + "..."

    def test_match_near_start_has_no_leading_ellipsis(self) -> None:
        text = "needle" + "b" * 100
        assert extract_matched_text("needle", text) == "needle" + "b" * 50 + "..."

    def test_no_match_truncates_to_max_length(self) -> None:
        text = "x" * 200
        assert extract_matched_text("needle", text) == "x" * 150 + "..."

    def test_no_match_short_text_untouched(self) -> None:
        assert extract_matched_text("needle", "short") == "short"

    def test_custom_max_length(self) -> None:
        assert extract_matched_text("zz", "abcdef", max_length=3) == "abc..."
