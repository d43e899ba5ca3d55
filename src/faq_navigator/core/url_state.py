"""URL <-> navigation state synchronization.

Inbound URL changes and outbound user actions both go through `reduce`, a
pure function returning the next state and, when the action calls for it,
the route to push onto the history.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union
from urllib.parse import parse_qs, quote, urlsplit

from faq_navigator.core.category_validator import CategoryValidator
from faq_navigator.core.curation import resolve_direct_link
from faq_navigator.core.entities import CategorySet, NavigationState, Route
from faq_navigator.core.resolver import toggle_tag


LISTING_PATH = "/"
DETAIL_PREFIX = "/faq/"


def parse_url(url: str) -> tuple[str, dict[str, str]]:
    """Split a URL into its path and first value of each query parameter."""
    parts = urlsplit(url)
    params = {key: values[0] for key, values in parse_qs(parts.query).items() if values}
    return parts.path or LISTING_PATH, params


def home_route() -> Route:
    """Canonical home URL: default category, no query, no tag."""
    return Route(LISTING_PATH)


def listing_route(category: str, tag: Optional[str] = None) -> Route:
    """Listing route for a category, with the tag when one is active."""
    params = {"category": category}
    if tag:
        params["tag"] = tag
    return Route(LISTING_PATH, params)


def detail_route(item_id: str, category: Optional[str] = None) -> Route:
    """Detail route; category is carried for back navigation only."""
    params = {"category": category} if category else {}
    return Route(f"{DETAIL_PREFIX}{quote(item_id, safe='')}", params)


def state_from_params(
    params: dict[str, str],
    validator: CategoryValidator,
    current: NavigationState,
) -> NavigationState:
    """Read category and tag from URL params into state.
    
    Returns `current` itself when the resolved values are unchanged.
    """
    category = validator.validate(params.get("category"))
    tag = params.get("tag") or None
    
    if category == current.category and tag == current.tag:
        return current
    return replace(current, category=category, tag=tag)


@dataclass(frozen=True)
class UrlChanged:
    """The URL changed outside of a user action (load, back, forward)."""
    params: dict[str, str]


@dataclass(frozen=True)
class QueryChanged:
    query: str
    on_listing: bool = True


@dataclass(frozen=True)
class CategorySelected:
    category: str


@dataclass(frozen=True)
class TagSelected:
    tag: str


@dataclass(frozen=True)
class Reset:
    """Title/logo click: back to the canonical home view."""


Action = Union[UrlChanged, QueryChanged, CategorySelected, TagSelected, Reset]


@dataclass(frozen=True)
class Transition:
    """Result of reducing an action: next state and an optional URL write."""
    
    state: NavigationState
    route: Optional[Route] = None


def initial_state(categories: CategorySet) -> NavigationState:
    """State of a fresh home view: default category, no query, no tag."""
    return NavigationState(category=categories.default)


def reduce(state: NavigationState, action: Action, categories: CategorySet) -> Transition:
    """Apply an action to state."""
    validator = CategoryValidator(categories)
    
    if isinstance(action, UrlChanged):
        return Transition(state_from_params(action.params, validator, state))
    
    if isinstance(action, QueryChanged):
        new_state = replace(state, query=action.query)
        if action.on_listing:
            return Transition(new_state)
        # Typing on a detail page returns to the listing to show results
        return Transition(new_state, listing_route(new_state.category, new_state.tag))
    
    if isinstance(action, CategorySelected):
        category = validator.validate(action.category)
        new_state = replace(state, category=category)
        item_id = resolve_direct_link(category, categories.direct_links)
        if item_id is not None:
            return Transition(new_state, detail_route(item_id, category))
        return Transition(new_state, listing_route(category, new_state.tag))
    
    if isinstance(action, TagSelected):
        new_state = replace(state, tag=toggle_tag(state.tag, action.tag))
        return Transition(new_state, listing_route(new_state.category, new_state.tag))
    
    if isinstance(action, Reset):
        return Transition(initial_state(categories), home_route())
    
    raise TypeError(f"Unknown action: {action!r}")
