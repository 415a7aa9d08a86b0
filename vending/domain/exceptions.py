"""
Domain exceptions for the vending machine.

Every error carries a short user-facing message; the console shell prints
it and keeps running.
"""

from typing import Any


class VendingError(Exception):
    """Base class for all vending machine errors."""

    message: str = "Vending machine error."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ProductNotFoundError(VendingError):
    message = "Product not found."

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__()


class InsufficientFundsError(VendingError):
    message = "Insufficient funds."

    def __init__(self, product_id: str, cost: int, available: int) -> None:
        self.product_id = product_id
        self.cost = cost
        self.available = available
        super().__init__()


class InvalidDenominationError(VendingError, ValueError):
    message = "Invalid denomination."

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__()


class DuplicateProductError(VendingError, ValueError):
    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Duplicate product id in catalog: {product_id}")


class CatalogLoadError(VendingError):
    """Catalog file is missing, malformed or contains invalid products."""
