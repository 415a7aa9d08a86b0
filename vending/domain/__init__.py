"""
Domain layer containing business entities and value objects.

This layer is framework-agnostic and contains core business logic.
"""

from .entities.catalog import Catalog, default_catalog
from .entities.product import (
    AnyProduct,
    Drink,
    Product,
    ProductAdapter,
    Snack,
    Toy,
)
from .exceptions import (
    CatalogLoadError,
    DuplicateProductError,
    InsufficientFundsError,
    InvalidDenominationError,
    ProductNotFoundError,
    VendingError,
)
from .value_objects.change_report import ChangeEntry, ChangeReport, break_down
from .value_objects.denomination import Denomination
from .value_objects.money_pool import MoneyPool

__all__ = [
    # Entities
    "Catalog",
    "default_catalog",
    "Product",
    "AnyProduct",
    "ProductAdapter",
    "Drink",
    "Snack",
    "Toy",
    # Value Objects
    "Denomination",
    "MoneyPool",
    "ChangeEntry",
    "ChangeReport",
    "break_down",
    # Errors
    "VendingError",
    "ProductNotFoundError",
    "InsufficientFundsError",
    "InvalidDenominationError",
    "DuplicateProductError",
    "CatalogLoadError",
]
