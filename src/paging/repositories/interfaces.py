"""Abstract base classes for repository interfaces.

Defines the contract a query layer fulfils for paginated listings.
Routers depend on this interface (not concrete classes) so tests can
swap in mocks.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from uuid import UUID

from src.paging.domain.pagination import PaginationRequest

T = TypeVar("T")


class PageRepositoryInterface(ABC, Generic[T]):
    """Abstract interface for storage that serves paginated listings."""

    @abstractmethod
    async def get_by_id(self, item_id: UUID) -> T | None:
        """Get a single item by its ID.

        Args:
            item_id: Item identifier

        Returns:
            The item if found, None otherwise
        """
        ...

    @abstractmethod
    async def add(self, item: T) -> T:
        """Store a new item.

        Args:
            item: Item to store

        Returns:
            The stored item
        """
        ...

    @abstractmethod
    async def list_page(self, request: PaginationRequest) -> tuple[list[T], int]:
        """Execute the count and page queries for a request.

        Implementations use only the request's normalized accessors.

        Args:
            request: Decoded pagination request

        Returns:
            Tuple of (items on the requested page, total matching items)
        """
        ...
