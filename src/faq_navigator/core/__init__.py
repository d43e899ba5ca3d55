"""Core domain layer."""

from faq_navigator.core.category_validator import CategoryValidator
from faq_navigator.core.curation import curated, resolve_direct_link
from faq_navigator.core.entities import CategorySet, DetailView, Item, NavigationState, Route
from faq_navigator.core.errors import ContentStoreError, ItemNotFoundError
from faq_navigator.core.interfaces import Clipboard, History, ItemStore, ManualCopy, TitleScorer
from faq_navigator.core.resolver import ResultResolver, toggle_tag
from faq_navigator.core.search import FuzzySearchMatcher

__all__ = [
    "Item",
    "CategorySet",
    "NavigationState",
    "Route",
    "DetailView",
    "ContentStoreError",
    "ItemNotFoundError",
    "ItemStore",
    "TitleScorer",
    "History",
    "Clipboard",
    "ManualCopy",
    "CategoryValidator",
    "FuzzySearchMatcher",
    "ResultResolver",
    "curated",
    "resolve_direct_link",
    "toggle_tag",
]
