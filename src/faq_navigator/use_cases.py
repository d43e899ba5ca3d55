"""Business logic use cases."""

import asyncio
from typing import Optional, Sequence

from faq_navigator.core import (
    CategorySet,
    CategoryValidator,
    Clipboard,
    DetailView,
    History,
    Item,
    ItemNotFoundError,
    ManualCopy,
    NavigationState,
    ResultResolver,
    Route,
    resolve_direct_link,
)
from faq_navigator.core.url_state import (
    LISTING_PATH,
    Action,
    CategorySelected,
    QueryChanged,
    Reset,
    TagSelected,
    Transition,
    UrlChanged,
    home_route,
    initial_state,
    listing_route,
    parse_url,
    reduce,
)


DISPLAY_TAG_LIMIT = 3


class NavigationService:
    """Single source of truth for navigation state.
    
    State is derived from the history's URL on construction and on every
    back/forward event. User actions go through the reducer; any route they
    produce is pushed as a new history entry.
    """
    
    def __init__(
        self,
        categories: CategorySet,
        items: Sequence[Item],
        resolver: ResultResolver,
        history: History,
    ) -> None:
        self.categories = categories
        self.items = list(items)
        self.resolver = resolver
        self.history = history
        self.validator = CategoryValidator(categories)
        self.state: NavigationState = initial_state(categories)
        self.path = LISTING_PATH
        
        history.subscribe(self.sync_from_url)
        self.sync_from_url(history.current_url)
    
    @property
    def on_listing(self) -> bool:
        return self.path == LISTING_PATH
    
    @property
    def results(self) -> list[Item]:
        """Items for the current state.
        
        Empty while a direct-link category is selected without a search:
        that category shows its linked item, never a list.
        """
        if self.direct_link is not None:
            return []
        return self.resolver.resolve(self.state, self.items)
    
    @property
    def direct_link(self) -> Optional[str]:
        """Item id to redirect to, or None when a list should be shown."""
        if self.state.is_searching:
            return None
        return resolve_direct_link(self.state.category, self.categories.direct_links)
    
    def current_route(self) -> Route:
        """Listing route that reproduces the current category and tag."""
        if self.state.category == self.categories.default and not self.state.tag:
            return home_route()
        return listing_route(self.state.category, self.state.tag)
    
    def dispatch(self, action: Action) -> Transition:
        transition = reduce(self.state, action, self.categories)
        self.state = transition.state
        
        if transition.route is not None:
            self.history.push(transition.route.to_url())
            self.path = transition.route.path
        
        return transition
    
    def sync_from_url(self, url: str) -> None:
        """Inbound: adopt category and tag from url."""
        path, params = parse_url(url)
        self.path = path
        self.dispatch(UrlChanged(params))
    
    def set_query(self, query: str) -> Transition:
        return self.dispatch(QueryChanged(query, on_listing=self.on_listing))
    
    def select_category(self, category: str) -> Transition:
        """Select a category; direct-link categories navigate to their item."""
        return self.dispatch(CategorySelected(category))
    
    def select_tag(self, tag: str) -> Transition:
        return self.dispatch(TagSelected(tag))
    
    def reset(self) -> Transition:
        return self.dispatch(Reset())
    
    def find_item(self, item_id: str) -> Item:
        for item in self.items:
            if item.id == item_id:
                return item
        raise ItemNotFoundError(item_id)
    
    def open_item(self, item_id: str, category: Optional[str] = None) -> DetailView:
        """Build the detail view context for an item.
        
        Args:
            item_id: Item to show
            category: Category the user came from, used for the back link only
        
        Raises:
            ItemNotFoundError: If no item has this id
        """
        item = self.find_item(item_id)
        
        if category and category in self.categories:
            back_url = listing_route(category).to_url()
        else:
            category = None
            back_url = home_route().to_url()
        
        return DetailView(
            item=item,
            back_url=back_url,
            display_tags=item.tags[:DISPLAY_TAG_LIMIT],
            category=category,
        )


class ShareService:
    """Copy a URL for sharing, with a temporary "copied" indicator."""
    
    def __init__(
        self,
        clipboard: Clipboard,
        fallback: ManualCopy,
        reset_delay: float = 2.0,
    ) -> None:
        self.clipboard = clipboard
        self.fallback = fallback
        self.reset_delay = reset_delay
        self.copied = False
        self._reset_handle: Optional[asyncio.TimerHandle] = None
    
    async def share(self, url: str) -> None:
        """Copy url; clipboard failures fall back to manual copy."""
        try:
            await self.clipboard.copy(url)
        except Exception as e:
            print(f"⚠️  Warning: Could not copy to clipboard: {e}")
            try:
                self.fallback.copy(url)
            except Exception as fallback_error:
                print(f"⚠️  Warning: Manual copy failed: {fallback_error}")
                return
        
        self._mark_copied()
    
    def _mark_copied(self) -> None:
        self.copied = True
        
        if self._reset_handle is not None:
            self._reset_handle.cancel()
        
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self.reset_delay, self._clear_copied)
    
    def _clear_copied(self) -> None:
        self.copied = False
        self._reset_handle = None


def home_url(base_url: str) -> str:
    """Absolute URL of the home view."""
    return absolute_url(base_url, home_route())


def absolute_url(base_url: str, route: Route) -> str:
    return base_url.rstrip("/") + route.to_url()
