"""Content store adapters."""

from faq_navigator.adapters.store.http_store import HttpItemStore
from faq_navigator.adapters.store.yaml_store import YamlItemStore

__all__ = ["HttpItemStore", "YamlItemStore"]
