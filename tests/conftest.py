"""Shared fixtures."""

import pytest

from faq_navigator.core import CategorySet, FuzzySearchMatcher, Item, ResultResolver, TitleScorer


class TableScorer(TitleScorer):
    """Scores looked up by title; unknown titles score 0."""
    
    def __init__(self, scores: dict[str, float]) -> None:
        self.scores = scores
        self.calls: list[tuple[str, str]] = []
    
    def score(self, query: str, title: str) -> float:
        self.calls.append((query, title))
        return self.scores.get(title, 0.0)


@pytest.fixture
def categories() -> CategorySet:
    return CategorySet(
        values=("Top", "A", "B", "Contact"),
        default="Top",
        curated="Top",
        curated_ids=("3", "1", "9"),
        direct_links={"Contact": "7"},
    )


@pytest.fixture
def items() -> list[Item]:
    return [
        Item(id="1", title="Piano tuning cost", category="A", view_count=10, tags=("tuning",)),
        Item(id="2", title="Payment methods", category="A", view_count=50, tags=("payment",)),
        Item(id="3", title="Delivery times", category="B", view_count=5, tags=("shipping", "tuning")),
        Item(id="4", title="Card refunds", category="A", view_count=50, tags=("payment",)),
        Item(id="7", title="Business inquiries", category="Contact", view_count=1),
    ]


@pytest.fixture
def resolver(categories: CategorySet) -> ResultResolver:
    matcher = FuzzySearchMatcher(TableScorer({"Piano tuning cost": 90.0}))
    return ResultResolver(categories, matcher)
