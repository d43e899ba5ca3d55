"""Curated ordering and direct-link redirection."""

from typing import Mapping, Optional, Sequence

from faq_navigator.core.entities import Item


def curated(ids: Sequence[str], items: Sequence[Item]) -> list[Item]:
    """Return items in the exact order of ids, skipping unknown ids."""
    by_id = {}
    for item in items:
        by_id.setdefault(item.id, item)
    
    return [by_id[item_id] for item_id in ids if item_id in by_id]


def resolve_direct_link(category: str, direct_links: Mapping[str, str]) -> Optional[str]:
    """Return the item id a direct-link category points to, or None."""
    return direct_links.get(category) or None
