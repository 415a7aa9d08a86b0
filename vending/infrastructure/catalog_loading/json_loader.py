"""
JSON catalog loader implementation with orjson.
"""

from pathlib import Path
from typing import Any, Iterator

import orjson
from pydantic import ValidationError
from structlog import get_logger

from vending.domain import Catalog, CatalogLoadError, Product, ProductAdapter
from vending.domain.exceptions import DuplicateProductError
from vending.infrastructure.catalog_loading.interfaces import DataLoader

logger = get_logger(__name__)


class ProductJsonLoader(DataLoader[Product]):
    """
    Loads products from a JSON array using orjson.

    Expected JSON format:
        [{"kind": "drink", "id": "D1", "name": "Soda", "cost": 20,
          "flavor": "Cola"}]

    Any invalid record fails the whole file; records are never skipped.
    """

    MAX_FILE_SIZE = 1024 * 1024

    def supports(self, source: Path) -> bool:
        """Check if file is JSON."""
        return source.suffix.lower() == ".json"

    def _validate_file(self, source: Path) -> None:
        """Validate file before processing."""
        if not source.exists():
            raise CatalogLoadError(f"Catalog file not found: {source}")

        if not source.is_file():
            raise CatalogLoadError(f"Path is not a file: {source}")

        file_size = source.stat().st_size
        if file_size > self.MAX_FILE_SIZE:
            raise CatalogLoadError(
                f"File too large: {file_size} bytes > {self.MAX_FILE_SIZE} "
                "bytes"
            )

        if file_size == 0:
            raise CatalogLoadError(f"File is empty: {source}")

    def load(self, source: Path) -> Iterator[Product]:
        """
        Load products from a JSON file.

        Args:
            source: Path to JSON file.

        Yields:
            Product entities in file order.
        """
        self._validate_file(source)

        logger.info(f"Loading catalog from {source}")

        try:
            data = orjson.loads(source.read_bytes())
        except orjson.JSONDecodeError as e:
            logger.error(f"JSON decode error in {source}: {e}")
            raise CatalogLoadError(f"Invalid JSON format: {e}") from e

        if not isinstance(data, list):
            raise CatalogLoadError("Catalog JSON must be an array of objects")

        for position, item in enumerate(data, 1):
            yield self._dict_to_product(item, position)

    def _dict_to_product(self, data: Any, position: int) -> Product:
        if not isinstance(data, dict):
            raise CatalogLoadError(
                f"Catalog record {position} is not a JSON object"
            )

        try:
            return ProductAdapter.validate_python(data)
        except ValidationError as e:
            logger.error(
                f"Invalid catalog record {position}",
                errors=e.error_count(),
            )
            raise CatalogLoadError(
                f"Invalid catalog record {position}: {e}"
            ) from e


def load_catalog(source: Path | str) -> Catalog:
    """
    Build a catalog from a JSON file.

    Raises:
        CatalogLoadError: File is not JSON, is missing or malformed,
            contains an invalid product or repeats a product id.
    """
    path = Path(source)
    loader = ProductJsonLoader()
    if not loader.supports(path):
        raise CatalogLoadError(f"Unsupported catalog format: {path.name}")

    try:
        catalog = Catalog(loader.load(path))
    except DuplicateProductError as e:
        raise CatalogLoadError(e.message) from e

    logger.info(f"Catalog loaded: {len(catalog)} products")
    return catalog
