"""CLI entry point for FAQ navigator."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from faq_navigator.adapters.clipboard import ConsoleCopy, SystemClipboard
from faq_navigator.adapters.history import MemoryHistory
from faq_navigator.adapters.search import RapidFuzzScorer
from faq_navigator.adapters.store import HttpItemStore, YamlItemStore
from faq_navigator.config import Settings, get_settings
from faq_navigator.core import (
    ContentStoreError,
    DetailView,
    FuzzySearchMatcher,
    ItemNotFoundError,
    ItemStore,
    ResultResolver,
)
from faq_navigator.core.url_state import detail_route
from faq_navigator.use_cases import NavigationService, ShareService, absolute_url, home_url

app = typer.Typer(help="Browse FAQ entries by search, category and tag.", no_args_is_help=True)


class State:
    settings: Settings = Settings()


state = State()


@app.callback()
def main(
    config: Path = typer.Option(Path("config.yaml"), "--config", "-c", help="Path to config.yaml"),
) -> None:
    """FAQ navigator."""
    state.settings = get_settings(config)


def build_store(settings: Settings) -> ItemStore:
    if settings.content.url:
        return HttpItemStore(settings.content.url, timeout=settings.content.timeout)
    return YamlItemStore(settings.content.path)


def build_service(settings: Settings, start_url: str = "/") -> NavigationService:
    """Wire the navigation service from settings."""
    try:
        categories = settings.category_set()
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        raise typer.Exit(code=1)
    
    try:
        items = build_store(settings).load_items()
    except ContentStoreError as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)
    
    matcher = FuzzySearchMatcher(RapidFuzzScorer(), threshold=settings.search_threshold)
    resolver = ResultResolver(
        categories,
        matcher,
        tag_filter_enabled=settings.site.tag_filter_enabled,
    )
    return NavigationService(categories, items, resolver, MemoryHistory(start_url))


def print_detail(view: DetailView) -> None:
    item = view.item
    print(f"\n📄 {item.title}")
    print(f"  • ID: {item.id}")
    print(f"  • Category: {item.category}")
    print(f"  • Views: {item.view_count}")
    if view.display_tags:
        print(f"  • Tags: {', '.join(view.display_tags)}")
    print(f"  • Back: {view.back_url}")
    if item.content:
        print(f"\n{item.content}")
    print()


@app.command("list")
def list_items(
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Fuzzy title search"),
    category: Optional[str] = typer.Option(None, "--category", help="Category to list"),
    tag: Optional[str] = typer.Option(None, "--tag", help="Only items with this tag"),
    url: str = typer.Option("/", "--url", help="Restore state from a listing URL"),
) -> None:
    """List items for a search query, category and tag."""
    settings = state.settings
    service = build_service(settings, start_url=url)
    
    if category is not None:
        service.select_category(category)
    
    if tag is not None:
        service.select_tag(tag)
    
    if query is not None:
        service.set_query(query)
    
    item_id = service.direct_link
    if item_id is not None:
        # Direct-link category: no list, straight to the item
        current_category = service.state.category
        print(f"↪️  {current_category} → {detail_route(item_id, current_category).to_url()}")
        try:
            print_detail(service.open_item(item_id, current_category))
        except ItemNotFoundError as e:
            print(f"❌ {e}")
            raise typer.Exit(code=1)
        return
    
    current = service.state
    results = service.results
    
    if current.is_searching:
        print(f"\n🔍 Search: \"{current.search_text}\"")
    else:
        print(f"\n📂 Category: {current.category}")
        if current.tag:
            print(f"🏷️  Tag: {current.tag}")
    
    if not results:
        print("  No questions to show.")
    for item in results:
        print(f"  Q [{item.id}] {item.title}")
    
    print(f"\n🔗 {absolute_url(settings.base_url, service.current_route())}")
    print()


@app.command()
def show(
    item_id: str = typer.Argument(..., help="Item ID"),
    category: Optional[str] = typer.Option(None, "--category", help="Category to return to"),
) -> None:
    """Show a single item."""
    service = build_service(state.settings)
    
    try:
        view = service.open_item(item_id, category)
    except ItemNotFoundError as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)
    
    print_detail(view)


@app.command()
def categories() -> None:
    """Show configured categories."""
    try:
        category_set = state.settings.category_set()
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        raise typer.Exit(code=1)
    
    print("\n📂 Categories:")
    for value in category_set.values:
        markers = []
        if value == category_set.default:
            markers.append("default")
        if value == category_set.curated:
            markers.append("⭐ curated")
        if value in category_set.direct_links:
            markers.append(f"→ item {category_set.direct_links[value]}")
        suffix = f" ({', '.join(markers)})" if markers else ""
        print(f"  • {value}{suffix}")
    print()


@app.command()
def share(
    url: Optional[str] = typer.Option(None, "--url", help="Path to share, defaults to home"),
) -> None:
    """Copy a shareable link to the clipboard."""
    settings = state.settings
    target = home_url(settings.base_url) if url is None else settings.base_url.rstrip("/") + url
    
    service = ShareService(
        SystemClipboard(),
        ConsoleCopy(),
        reset_delay=settings.site.share_reset_delay,
    )
    asyncio.run(service.share(target))
    
    if service.copied:
        print(f"✓ Copied: {target}")


if __name__ == "__main__":
    app()
