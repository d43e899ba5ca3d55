"""Mapping of external strings onto the closed category set."""

from typing import Optional

from faq_navigator.core.entities import CategorySet


class CategoryValidator:
    """Validate raw category tokens, falling back to the default."""
    
    def __init__(self, categories: CategorySet) -> None:
        self.categories = categories
    
    def validate(self, raw: Optional[str]) -> str:
        """Return raw if it is a known category, otherwise the default.
        
        Matching is exact: casing and surrounding whitespace are not
        normalized, so "faq " or "FAQ" fall back like any unknown token.
        """
        if raw and raw in self.categories:
            return raw
        return self.categories.default
