"""Resolution of the displayed item list from navigation state."""

from typing import Optional, Sequence

from faq_navigator.core.curation import curated
from faq_navigator.core.entities import CategorySet, Item, NavigationState
from faq_navigator.core.search import FuzzySearchMatcher


class ResultResolver:
    """Decide which signal produces the displayed list and in what order.
    
    Precedence:
        1. An active search query wins; category and tag are ignored.
        2. The curated category lists its fixed ids in authorial order.
        3. Any other category lists its items by view count, descending.
        4. A tag, when set and enabled, narrows the listing of 2 or 3.
    """
    
    def __init__(
        self,
        categories: CategorySet,
        matcher: FuzzySearchMatcher,
        tag_filter_enabled: bool = True,
    ) -> None:
        self.categories = categories
        self.matcher = matcher
        self.tag_filter_enabled = tag_filter_enabled
    
    def resolve(self, state: NavigationState, items: Sequence[Item]) -> list[Item]:
        """Compute the displayed list for state."""
        if state.is_searching:
            return self.matcher.search(state.search_text, items)
        
        if state.category == self.categories.curated:
            result = curated(self.categories.curated_ids, items)
        else:
            result = [item for item in items if item.category == state.category]
            result.sort(key=lambda item: item.view_count, reverse=True)
        
        if state.tag and self.tag_filter_enabled:
            result = [item for item in result if state.tag in item.tags]
        
        return result


def toggle_tag(current: Optional[str], clicked: str) -> Optional[str]:
    """Clicking the active tag clears it, any other tag replaces it."""
    if current == clicked:
        return None
    return clicked or None
