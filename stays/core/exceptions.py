"""
Domain errors raised by the services and rendered by the API error handlers.
"""
from typing import List, Optional


class StaysError(Exception):
    """Base class for errors the API knows how to render"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StaysError):
    """Lookup by id (or slug) matched no row"""

    def __init__(self, entity: str, key: str):
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class PersistenceError(StaysError):
    """A store operation failed; wraps the store's own message"""

    def __init__(self, message: str, operation: Optional[str] = None, table: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
        self.table = table


class PartialReplacementFailure(PersistenceError):
    """
    Image set replacement failed after the property row was written.

    ``restored`` tells whether the previous image rows are in place;
    ``pending_urls`` is the set that still has to be written
    (see PropertySyncService.retry_image_replacement).
    """

    def __init__(self, property_id: str, pending_urls: List[str], restored: bool, cause: str):
        state = "previous images in place" if restored else "property currently has no images"
        super().__init__(
            f"Image replacement failed for property {property_id} ({state}): {cause}",
            operation="replace",
            table="property_images",
        )
        self.property_id = property_id
        self.pending_urls = list(pending_urls)
        self.restored = restored


class AuthError(StaysError):
    """Sign-in rejected or session missing"""
