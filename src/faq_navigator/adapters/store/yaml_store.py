"""Content store backed by a local YAML file."""

from pathlib import Path

import yaml

from faq_navigator.adapters.store.records import items_from_document
from faq_navigator.core import ContentStoreError, Item, ItemStore


class YamlItemStore(ItemStore):
    """Load FAQ items from a YAML document."""
    
    def __init__(self, path: Path) -> None:
        self.path = path
    
    def load_items(self) -> list[Item]:
        if not self.path.exists():
            raise ContentStoreError(f"Content file not found: {self.path}")
        
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ContentStoreError(f"Could not parse {self.path}: {e}") from e
        
        return items_from_document(document)
