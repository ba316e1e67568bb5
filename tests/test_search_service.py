"""Tests for SearchService business logic."""

import pytest
from test_helpers import make_card

from services.search_service import (
    SearchService,
    SortMode,
    get_search_service,
    parse_collector_number,
    reset_search_service,
)


@pytest.fixture
def service():
    return SearchService()


def _names(cards):
    return [card.name for card in cards]


def _numbers(cards):
    return [card.collector_number for card in cards]


# ============= Filtering =============


def test_filter_by_name_is_case_insensitive_substring(service):
    cards = [make_card("Rhystic Study", "1"), make_card("Smothering Tithe", "2")]

    assert _names(service.filter_by_name(cards, "STUDY")) == ["Rhystic Study"]
    assert _names(service.filter_by_name(cards, "th")) == ["Smothering Tithe"]


def test_filter_by_name_empty_query_keeps_everything(service):
    cards = [make_card("B", "2"), make_card("A", "1")]

    assert service.filter_by_name(cards, "") == cards


def test_filter_by_name_no_match(service):
    assert service.filter_by_name([make_card("Necropotence", "1")], "zzz") == []


def test_filter_by_format_uses_legal_status_only(service):
    legal = make_card("Legal", "1", legalities={"modern": "legal"})
    banned = make_card("Banned", "2", legalities={"modern": "banned"})
    unlisted = make_card("Unlisted", "3", legalities={})

    assert _names(service.filter_by_format([legal, banned, unlisted], "modern")) == ["Legal"]
    assert len(service.filter_by_format([legal, banned, unlisted], None)) == 3


def test_filter_empty_catalog(service):
    assert service.filter_by_name([], "anything") == []
    assert service.sort_cards([], SortMode.NUMERIC) == []


# ============= Sorting =============


def test_alphabetical_sort_and_reverse(service):
    cards = [make_card("b", "1"), make_card("C", "2"), make_card("a", "3")]

    ascending = service.sort_cards(cards, SortMode.ALPHABETICAL, ascending=True)
    descending = service.sort_cards(cards, SortMode.ALPHABETICAL, ascending=False)

    # Plain code-point order: upper case sorts before lower case.
    assert _names(ascending) == ["C", "a", "b"]
    assert descending == list(reversed(ascending))


def test_numeric_sort_puts_non_numeric_last(service):
    cards = [
        make_card("Ten", "10"),
        make_card("Two", "2"),
        make_card("Nine A", "9a"),
        make_card("One", "1"),
    ]

    ascending = service.sort_cards(cards, SortMode.NUMERIC, ascending=True)

    assert _numbers(ascending) == ["1", "2", "10", "9a"]


def test_numeric_descending_is_exact_reverse(service):
    cards = [
        make_card("Ten", "10"),
        make_card("Two", "2"),
        make_card("Nine A", "9a"),
        make_card("Star", "5★"),
        make_card("One", "1"),
    ]

    ascending = service.sort_cards(cards, SortMode.NUMERIC, ascending=True)
    descending = service.sort_cards(cards, SortMode.NUMERIC, ascending=False)

    assert descending == list(reversed(ascending))
    assert _numbers(descending)[:2] == ["9a", "5★"]


def test_numeric_ties_break_by_name(service):
    cards = [make_card("Zebra", "3"), make_card("Apple", "3", slug="apple-alt")]

    assert _names(service.sort_cards(cards, SortMode.NUMERIC)) == ["Apple", "Zebra"]


def test_all_unparseable_numbers_sort_alphabetically(service):
    cards = [make_card("Gamma", "x1"), make_card("Alpha", "x3"), make_card("Beta", "x2")]

    assert _names(service.sort_cards(cards, SortMode.NUMERIC)) == ["Alpha", "Beta", "Gamma"]


def test_sort_accepts_mode_value(service):
    cards = [make_card("B", "1"), make_card("A", "2")]

    assert _names(service.sort_cards(cards, "numeric")) == ["B", "A"]


def test_sort_returns_new_list(service):
    cards = [make_card("B", "1"), make_card("A", "2")]

    service.sort_cards(cards)

    assert _names(cards) == ["B", "A"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1", 1), (" 42 ", 42), ("007", 7), ("9a", None), ("", None), ("٣", None), ("-1", None)],
)
def test_parse_collector_number(value, expected):
    assert parse_collector_number(value) == expected


# ============= Catalog Facts =============


def test_available_formats_are_sorted_and_unique(service):
    cards = [
        make_card("A", "1", legalities={"modern": "legal", "legacy": "legal"}),
        make_card("B", "2", legalities={"commander": "not_legal", "modern": "banned"}),
    ]

    assert service.available_formats(cards) == ["commander", "legacy", "modern"]


def test_get_search_service_is_shared():
    first = get_search_service()
    assert get_search_service() is first
    reset_search_service()
    assert get_search_service() is not first
