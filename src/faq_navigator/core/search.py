"""Fuzzy title search."""

from typing import Sequence

from faq_navigator.core.entities import Item
from faq_navigator.core.interfaces import TitleScorer


DEFAULT_THRESHOLD = 70.0


class FuzzySearchMatcher:
    """Rank items by title similarity, dropping those below a cutoff."""
    
    def __init__(self, scorer: TitleScorer, threshold: float = DEFAULT_THRESHOLD) -> None:
        self.scorer = scorer
        self.threshold = threshold
    
    def search(self, query: str, items: Sequence[Item]) -> list[Item]:
        """Return items whose title scores at least `threshold`, best first.
        
        Only the title is compared. Equal scores keep collection order.
        
        Args:
            query: Raw search text; surrounding whitespace is ignored
            items: Item collection to search
            
        Returns:
            Matching items ordered by descending score
        """
        text = query.strip()
        if not text:
            return []
        
        scored: list[tuple[float, Item]] = []
        for item in items:
            score = self.scorer.score(text, item.title)
            if score >= self.threshold:
                scored.append((score, item))
        
        # sorted() is stable, ties stay in collection order
        scored = sorted(scored, key=lambda pair: pair[0], reverse=True)
        return [item for _, item in scored]
