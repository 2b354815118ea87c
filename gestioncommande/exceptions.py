"""
Custom exceptions for the persistence layer.
"""

from typing import Any


class StoreError(Exception):
    """Base exception for store-related errors."""
    pass


class EntityNotFoundError(StoreError):
    """Raised when an operation requires a record that does not exist."""

    def __init__(self, model_name: str, entity_id: Any):
        self.model_name = model_name
        self.entity_id = entity_id
        super().__init__(f"{model_name} with id {entity_id} not found")


class StorageUnavailableError(StoreError):
    """Raised when the backing database cannot be reached."""
    pass
