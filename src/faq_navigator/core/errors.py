"""Domain errors raised outside the total navigation core."""


class ContentStoreError(Exception):
    """The content store could not be read or holds invalid records."""


class ItemNotFoundError(LookupError):
    """No item with the requested id exists."""
    
    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item not found: {item_id}")
        self.item_id = item_id
