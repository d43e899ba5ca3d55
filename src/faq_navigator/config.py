"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from faq_navigator.core import CategorySet


@dataclass
class CategoriesConfig:
    """Category set settings."""
    values: list[str] = field(default_factory=lambda: [
        "Top 10",
        "Payment/Shipping",
        "Tuning/Retune",
        "Repair",
        "Care",
        "Features",
        "Lessons",
        "Contact",
    ])
    default: str = "Top 10"
    curated: Optional[str] = "Top 10"
    curated_ids: list[str] = field(default_factory=list)
    direct_links: dict[str, str] = field(default_factory=dict)


@dataclass
class SearchConfig:
    """Fuzzy search settings."""
    threshold: float = 70.0


@dataclass
class ContentConfig:
    """Content store settings."""
    path: Path = Path("data/faqs.yaml")
    url: Optional[str] = None
    timeout: float = 30.0


@dataclass
class SiteConfig:
    """Site and UI behaviour settings."""
    base_url: str = "http://localhost:3000"
    share_reset_delay: float = 2.0
    tag_filter_enabled: bool = True


@dataclass
class Settings:
    """Application settings."""
    
    categories: CategoriesConfig = field(default_factory=CategoriesConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    content: ContentConfig = field(default_factory=ContentConfig)
    site: SiteConfig = field(default_factory=SiteConfig)
    
    @property
    def search_threshold(self) -> float:
        return self.search.threshold
    
    @property
    def base_url(self) -> str:
        return self.site.base_url
    
    def category_set(self) -> CategorySet:
        """Build the validated category set.
        
        Raises:
            ValueError: If default, curated or direct-link categories are
                not among the configured values
        """
        return CategorySet(
            values=tuple(self.categories.values),
            default=self.categories.default,
            curated=self.categories.curated,
            curated_ids=tuple(str(item_id) for item_id in self.categories.curated_ids),
            direct_links={
                category: str(item_id)
                for category, item_id in self.categories.direct_links.items()
            },
        )


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}
    
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)
    
    settings = Settings()
    
    if "categories" in config:
        settings.categories = CategoriesConfig(**config["categories"])
    
    if "search" in config:
        for key, value in config["search"].items():
            setattr(settings.search, key, value)
    
    if "content" in config:
        for key, value in config["content"].items():
            if key == "path":
                value = Path(value)
            setattr(settings.content, key, value)
    
    if "site" in config:
        for key, value in config["site"].items():
            setattr(settings.site, key, value)
    
    # Relative content paths resolve against the config file location
    if not settings.content.path.is_absolute() and config:
        settings.content.path = config_path.parent / settings.content.path
    
    # Environment overrides
    content_path = os.getenv("FAQ_CONTENT_PATH")
    if content_path:
        settings.content.path = Path(content_path)
    
    content_url = os.getenv("FAQ_CONTENT_URL")
    if content_url:
        settings.content.url = content_url
    
    base_url = os.getenv("FAQ_BASE_URL")
    if base_url:
        settings.site.base_url = base_url
    
    return settings
