from typing import Iterable, Iterator

from vending.domain.entities.product import Drink, Product, Snack, Toy
from vending.domain.exceptions import DuplicateProductError


class Catalog:
    """Fixed, ordered list of products. Set once at construction."""

    def __init__(self, products: Iterable[Product]) -> None:
        items = tuple(products)
        seen: set[str] = set()
        for product in items:
            if product.id in seen:
                raise DuplicateProductError(product.id)
            seen.add(product.id)
        self._products = items

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def find(self, product_id: str) -> Product | None:
        """Return the first product with ``product_id``, or None."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return any(product.id == product_id for product in self._products)

    def __repr__(self) -> str:
        return f"Catalog({[p.id for p in self._products]})"


def default_catalog() -> Catalog:
    return Catalog(
        [
            Drink(id="D1", name="Soda", flavor="Cola", cost=20),
            Snack(id="S1", name="Chips", type="Potato", cost=15),
            Toy(id="T1", name="Robot", category="Electronic", cost=50),
        ]
    )
