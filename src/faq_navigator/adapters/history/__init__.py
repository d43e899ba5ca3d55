"""Navigation history adapters."""

from faq_navigator.adapters.history.memory_history import MemoryHistory

__all__ = ["MemoryHistory"]
