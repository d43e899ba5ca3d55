"""Shared parsing of raw FAQ records."""

from typing import Any

from faq_navigator.core import ContentStoreError, Item


def items_from_document(document: Any) -> list[Item]:
    """
    Build items from a parsed YAML/JSON document.
    
    Accepts either a list of records or a mapping with a "faqs" list.
    Each record needs "id", "title" and "category"; "views" (or
    "view_count"), "tags" and "content" are optional.
    
    Raises:
        ContentStoreError: If the document shape or a record is invalid,
            or if two records share an id
    """
    if document is None:
        return []
    
    if isinstance(document, dict):
        document = document.get("faqs", [])
    
    if not isinstance(document, list):
        raise ContentStoreError("Content document must be a list of FAQ records")
    
    items: list[Item] = []
    seen_ids: set[str] = set()
    
    for index, record in enumerate(document):
        if not isinstance(record, dict):
            raise ContentStoreError(f"Record #{index} is not a mapping")
        
        try:
            item = Item(
                id=str(record["id"]),
                title=str(record["title"]),
                category=str(record["category"]),
                view_count=int(record.get("views", record.get("view_count", 0))),
                tags=tuple(str(tag) for tag in record.get("tags") or ()),
                content=record.get("content"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ContentStoreError(f"Record #{index} is invalid: {e}") from e
        
        if item.id in seen_ids:
            raise ContentStoreError(f"Duplicate item id: {item.id}")
        seen_ids.add(item.id)
        items.append(item)
    
    return items
