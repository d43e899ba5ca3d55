"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Callable

from faq_navigator.core.entities import Item


class ItemStore(ABC):
    """Interface for the read-only FAQ content store."""
    
    @abstractmethod
    def load_items(self) -> list[Item]:
        """Load the ordered item collection."""
        pass


class TitleScorer(ABC):
    """Interface for approximate title matching."""
    
    @abstractmethod
    def score(self, query: str, title: str) -> float:
        """Return similarity between query and title on a 0-100 scale."""
        pass


class History(ABC):
    """Interface for a browser-like navigation history."""
    
    @property
    @abstractmethod
    def current_url(self) -> str:
        """URL of the current history entry."""
        pass
    
    @abstractmethod
    def push(self, url: str) -> None:
        """Push a new navigable entry. Does not notify subscribers."""
        pass
    
    @abstractmethod
    def back(self) -> None:
        """Go to the previous entry and notify subscribers."""
        pass
    
    @abstractmethod
    def forward(self) -> None:
        """Go to the next entry and notify subscribers."""
        pass
    
    @abstractmethod
    def subscribe(self, callback: Callable[[str], None]) -> None:
        """Register a callback invoked with the new URL on back/forward."""
        pass


class Clipboard(ABC):
    """Interface for copying text to the system clipboard."""
    
    @abstractmethod
    async def copy(self, text: str) -> None:
        """Copy text. Raises on failure."""
        pass


class ManualCopy(ABC):
    """Interface for the synchronous copy fallback."""
    
    @abstractmethod
    def copy(self, text: str) -> None:
        """Make text available for manual copying."""
        pass
