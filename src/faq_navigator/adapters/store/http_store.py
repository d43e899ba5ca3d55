"""Content store fetched over HTTP."""

import httpx
import yaml

from faq_navigator.adapters.store.records import items_from_document
from faq_navigator.core import ContentStoreError, Item, ItemStore


class HttpItemStore(ItemStore):
    """Fetch FAQ items from a remote JSON or YAML document."""
    
    def __init__(self, url: str, timeout: float = 30.0) -> None:
        self.url = url
        self.timeout = timeout
    
    def load_items(self) -> list[Item]:
        try:
            with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
                response = client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise ContentStoreError(f"Could not fetch {self.url}: {e}") from e
        
        return self._parse(response.text)
    
    async def fetch_items(self) -> list[Item]:
        """Async variant of `load_items`."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise ContentStoreError(f"Could not fetch {self.url}: {e}") from e
        
        return self._parse(response.text)
    
    def _parse(self, text: str) -> list[Item]:
        # JSON is a subset of YAML, one parser covers both
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ContentStoreError(f"Could not parse response from {self.url}: {e}") from e
        
        return items_from_document(document)
