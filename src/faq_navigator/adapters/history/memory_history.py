"""In-memory browser-like history."""

from typing import Callable

from faq_navigator.core import History


class MemoryHistory(History):
    """History stack with a cursor, like a browser tab.
    
    Pushing truncates any forward entries. Only back/forward notify
    subscribers; pushes come from the application itself.
    """
    
    def __init__(self, initial_url: str = "/") -> None:
        self.entries: list[str] = [initial_url]
        self.index = 0
        self._subscribers: list[Callable[[str], None]] = []
    
    @property
    def current_url(self) -> str:
        return self.entries[self.index]
    
    def push(self, url: str) -> None:
        del self.entries[self.index + 1:]
        self.entries.append(url)
        self.index += 1
    
    def back(self) -> None:
        if self.index == 0:
            return
        self.index -= 1
        self._notify()
    
    def forward(self) -> None:
        if self.index >= len(self.entries) - 1:
            return
        self.index += 1
        self._notify()
    
    def subscribe(self, callback: Callable[[str], None]) -> None:
        self._subscribers.append(callback)
    
    def _notify(self) -> None:
        for callback in self._subscribers:
            callback(self.current_url)
