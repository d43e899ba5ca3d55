"""Core domain entities."""

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import quote, urlencode


@dataclass(frozen=True)
class Item:
    """FAQ entry supplied by the content store."""
    
    id: str
    title: str
    category: str
    view_count: int = 0
    tags: tuple[str, ...] = ()
    content: Optional[str] = None
    
    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ID cannot be empty")
        if not self.title:
            raise ValueError("Title cannot be empty")
        if self.view_count < 0:
            raise ValueError("View count cannot be negative")


@dataclass(frozen=True)
class CategorySet:
    """Closed set of category tokens with default, curated and direct-link roles."""
    
    values: tuple[str, ...]
    default: str
    curated: Optional[str] = None
    curated_ids: tuple[str, ...] = ()
    direct_links: dict[str, str] = field(default_factory=dict)
    
    def __post_init__(self) -> None:
        if self.default not in self.values:
            raise ValueError(f"Default category {self.default!r} is not a known category")
        if self.curated is not None and self.curated not in self.values:
            raise ValueError(f"Curated category {self.curated!r} is not a known category")
        for category in self.direct_links:
            if category not in self.values:
                raise ValueError(f"Direct-link category {category!r} is not a known category")
    
    def __contains__(self, value: object) -> bool:
        return value in self.values


@dataclass(frozen=True)
class NavigationState:
    """The (query, category, tag) triple that determines the displayed list."""
    
    category: str
    query: str = ""
    tag: Optional[str] = None
    
    @property
    def search_text(self) -> str:
        return self.query.strip()
    
    @property
    def is_searching(self) -> bool:
        return bool(self.search_text)


@dataclass(frozen=True)
class Route:
    """Navigable location: a path plus query parameters."""
    
    path: str
    params: dict[str, str] = field(default_factory=dict)
    
    @property
    def is_listing(self) -> bool:
        return self.path == "/"
    
    def to_url(self) -> str:
        if not self.params:
            return self.path
        return f"{self.path}?{urlencode(self.params, quote_via=quote)}"


@dataclass(frozen=True)
class DetailView:
    """Context for rendering a single item."""
    
    item: Item
    back_url: str
    display_tags: tuple[str, ...]
    category: Optional[str] = None
