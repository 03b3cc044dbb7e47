"""Tests for search filter DTOs, post-fetch filtering and relevance ordering."""

import json
from datetime import datetime, timedelta, timezone

from itdocs.application.dtos.search import DateRange, SearchFilters, SearchResult
from itdocs.application.use_cases.search.filters import apply_filters, sort_by_relevance
from itdocs.domain.enums import SearchResultType

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _result(
    id: str,
    type: SearchResultType = SearchResultType.DOCUMENT,
    score: int = 0,
    organization_id: str | None = "org-1",
    category: str | None = None,
    created_at: datetime | None = None,
) -> SearchResult:
    return SearchResult(
        id=id,
        title=id,
        type=type,
        organization_id=organization_id,
        category=category,
        relevance_score=score,
        created_at=created_at,
    )


class TestSearchFilters:
    def test_empty_by_default(self) -> None:
        assert SearchFilters().is_empty()

    def test_cache_token_is_order_insensitive(self) -> None:
        a = SearchFilters(content_types=("contact", "document"))
        b = SearchFilters(content_types=("document", "contact"))
        assert a.cache_token() == b.cache_token()

    def test_cache_token_distinguishes_filters(self) -> None:
        assert SearchFilters(categories=("x",)).cache_token() != SearchFilters().cache_token()

    def test_cache_token_is_json(self) -> None:
        token = json.loads(SearchFilters(date_range=DateRange(T0, T0)).cache_token())
        assert token["date_range"] == [T0.isoformat(), T0.isoformat()]

    def test_date_range_is_inclusive_and_naive_means_utc(self) -> None:
        date_range = DateRange(T0, T0 + timedelta(days=1))
        assert date_range.contains(T0)
        assert date_range.contains(T0 + timedelta(days=1))
        assert date_range.contains(datetime(2024, 1, 1, 12))
        assert not date_range.contains(T0 - timedelta(seconds=1))


class TestApplyFilters:
    def test_none_or_empty_filters_keep_everything(self) -> None:
        results = [_result("a"), _result("b")]
        assert apply_filters(results, None) == results
        assert apply_filters(results, SearchFilters()) == results

    def test_content_types_keep_relative_order(self) -> None:
        results = [
            _result("c1", SearchResultType.CONTACT),
            _result("d1", SearchResultType.DOCUMENT),
            _result("l1", SearchResultType.LOCATION),
            _result("c2", SearchResultType.CONTACT),
        ]
        filtered = apply_filters(
            results, SearchFilters(content_types=("contact", "location"))
        )
        assert [r.id for r in filtered] == ["c1", "l1", "c2"]

    def test_organization_ids_drop_results_without_organization(self) -> None:
        results = [
            _result("a", organization_id="org-1"),
            _result("b", organization_id=None),
            _result("c", organization_id="org-2"),
        ]
        filtered = apply_filters(results, SearchFilters(organization_ids=("org-1",)))
        assert [r.id for r in filtered] == ["a"]

    def test_categories(self) -> None:
        results = [_result("a", category="Network"), _result("b", category=None)]
        filtered = apply_filters(results, SearchFilters(categories=("Network",)))
        assert [r.id for r in filtered] == ["a"]

    def test_date_range_keeps_undated_results(self) -> None:
        results = [
            _result("in", created_at=T0),
            _result("out", created_at=T0 - timedelta(days=3)),
            _result("undated"),
        ]
        filters = SearchFilters(date_range=DateRange(T0, T0 + timedelta(days=1)))
        assert [r.id for r in apply_filters(results, filters)] == ["in", "undated"]

    def test_filters_combine_with_and(self) -> None:
        results = [
            _result("a", SearchResultType.DOCUMENT, category="Network"),
            _result("b", SearchResultType.PASSWORD, category="Network"),
            _result("c", SearchResultType.DOCUMENT, category="Reports"),
        ]
        filters = SearchFilters(content_types=("document",), categories=("Network",))
        assert [r.id for r in apply_filters(results, filters)] == ["a"]


class TestSortByRelevance:
    def test_descending_scores(self) -> None:
        results = [_result("low", score=10), _result("high", score=90), _result("mid", score=50)]
        assert [r.id for r in sort_by_relevance(results)] == ["high", "mid", "low"]

    def test_ties_keep_merge_order(self) -> None:
        results = [
            _result("first", score=80),
            _result("top", score=100),
            _result("second", score=80),
            _result("third", score=80),
        ]
        assert [r.id for r in sort_by_relevance(results)] == ["top", "first", "second", "third"]

    def test_does_not_mutate_input(self) -> None:
        results = [_result("a", score=1), _result("b", score=2)]
        sort_by_relevance(results)
        assert [r.id for r in results] == ["a", "b"]
