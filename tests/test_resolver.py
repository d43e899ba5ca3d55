"""Tests for result resolution."""

import pytest
from conftest import TableScorer

from faq_navigator.core import (
    CategorySet,
    FuzzySearchMatcher,
    Item,
    NavigationState,
    ResultResolver,
    toggle_tag,
)


def ids(result: list[Item]) -> list[str]:
    return [item.id for item in result]


def test_category_listing_sorted_by_views() -> None:
    """Test the basic category scenario."""
    categories = CategorySet(values=("Top", "A", "B"), default="Top", curated="Top")
    items = [
        Item(id="1", title="One", category="A", view_count=10),
        Item(id="2", title="Two", category="A", view_count=50),
        Item(id="3", title="Three", category="B", view_count=5),
    ]
    resolver = ResultResolver(categories, FuzzySearchMatcher(TableScorer({})))
    
    result = resolver.resolve(NavigationState(category="A"), items)
    
    assert ids(result) == ["2", "1"]


def test_category_listing_ties_keep_collection_order(resolver: ResultResolver, items: list[Item]) -> None:
    """Test equal view counts retain original relative order."""
    result = resolver.resolve(NavigationState(category="A"), items)
    
    assert ids(result) == ["2", "4", "1"]
    assert all(item.category == "A" for item in result)


def test_search_wins_over_category_and_tag(resolver: ResultResolver, items: list[Item]) -> None:
    """Test category and tag are ignored while searching."""
    result = resolver.resolve(NavigationState(category="B", query="piano", tag="payment"), items)
    
    assert ids(result) == ["1"]


@pytest.mark.parametrize("category", ["Top", "A", "B", "Contact"])
@pytest.mark.parametrize("tag", [None, "payment", "missing"])
def test_search_result_independent_of_category_and_tag(
    resolver: ResultResolver, items: list[Item], category: str, tag
) -> None:
    """Test search output does not depend on category or tag."""
    state = NavigationState(category=category, query=" piano ", tag=tag)
    
    assert ids(resolver.resolve(state, items)) == ["1"]


def test_whitespace_query_is_not_a_search(resolver: ResultResolver, items: list[Item]) -> None:
    """Test all-whitespace query falls through to the category listing."""
    result = resolver.resolve(NavigationState(category="B", query="   "), items)
    
    assert ids(result) == ["3"]


def test_curated_category_uses_fixed_order(resolver: ResultResolver, items: list[Item]) -> None:
    """Test curated view ignores view counts and drops missing ids."""
    result = resolver.resolve(NavigationState(category="Top"), items)
    
    assert ids(result) == ["3", "1"]


def test_tag_narrows_category_listing(resolver: ResultResolver, items: list[Item]) -> None:
    """Test tag filter keeps the established order."""
    result = resolver.resolve(NavigationState(category="A", tag="payment"), items)
    
    assert ids(result) == ["2", "4"]


def test_tag_narrows_curated_listing(resolver: ResultResolver, items: list[Item]) -> None:
    """Test tag filter applies to the curated view too."""
    result = resolver.resolve(NavigationState(category="Top", tag="tuning"), items)
    
    assert ids(result) == ["3", "1"]
    
    result = resolver.resolve(NavigationState(category="Top", tag="shipping"), items)
    
    assert ids(result) == ["3"]


def test_unknown_tag_yields_empty_result(resolver: ResultResolver, items: list[Item]) -> None:
    """Test unmatched tag is not an error."""
    assert resolver.resolve(NavigationState(category="A", tag="missing"), items) == []


def test_tag_filter_disabled(categories: CategorySet, items: list[Item]) -> None:
    """Test tag is ignored when the filter is switched off."""
    resolver = ResultResolver(categories, FuzzySearchMatcher(TableScorer({})), tag_filter_enabled=False)
    
    result = resolver.resolve(NavigationState(category="A", tag="missing"), items)
    
    assert ids(result) == ["2", "4", "1"]


def test_empty_collection(resolver: ResultResolver) -> None:
    """Test empty inputs give empty output."""
    assert resolver.resolve(NavigationState(category="A"), []) == []
    assert resolver.resolve(NavigationState(category="Top"), []) == []
    assert resolver.resolve(NavigationState(category="A", query="piano"), []) == []


def test_category_without_items(categories: CategorySet, items: list[Item]) -> None:
    """Test a known category with no items."""
    categories = CategorySet(values=categories.values + ("Empty",), default="Top")
    resolver = ResultResolver(categories, FuzzySearchMatcher(TableScorer({})))
    
    assert resolver.resolve(NavigationState(category="Empty"), items) == []


def test_toggle_tag() -> None:
    """Test tag selection toggles rather than accumulates."""
    assert toggle_tag(None, "payment") == "payment"
    assert toggle_tag("payment", "payment") is None
    assert toggle_tag("payment", "tuning") == "tuning"
    assert toggle_tag(None, "") is None
