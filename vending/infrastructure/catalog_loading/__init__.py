from .interfaces import DataLoader
from .json_loader import ProductJsonLoader, load_catalog

__all__ = [
    "DataLoader",
    "ProductJsonLoader",
    "load_catalog",
]
