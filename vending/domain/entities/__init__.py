from .catalog import Catalog, default_catalog
from .product import AnyProduct, Drink, Product, ProductAdapter, Snack, Toy

__all__ = [
    "Catalog",
    "default_catalog",
    "Product",
    "AnyProduct",
    "ProductAdapter",
    "Drink",
    "Snack",
    "Toy",
]
