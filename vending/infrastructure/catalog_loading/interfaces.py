"""
Interfaces for catalog loading strategies.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class DataLoader(ABC, Generic[T]):
    """Base interface for all data loaders."""

    @abstractmethod
    def load(self, source: Path) -> Iterator[T]:
        """
        Load data from source and yield domain entities.

        Args:
            source: Path to data file.

        Yields:
            Domain entities in file order.

        Raises:
            CatalogLoadError: If the source is missing or invalid.
        """
        pass

    @abstractmethod
    def supports(self, source: Path) -> bool:
        """Check if this loader can handle the given source."""
        pass
