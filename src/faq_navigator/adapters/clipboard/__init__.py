"""Clipboard adapters."""

from faq_navigator.adapters.clipboard.console import ConsoleCopy
from faq_navigator.adapters.clipboard.system import SystemClipboard

__all__ = ["ConsoleCopy", "SystemClipboard"]
