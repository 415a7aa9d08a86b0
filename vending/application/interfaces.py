"""
Interfaces for vending machine operations.
"""

from abc import ABC, abstractmethod

from vending.domain import ChangeReport, Denomination, MoneyPool, Product


class IVending(ABC):
    """Operations a customer session can perform on a machine."""

    @abstractmethod
    def show_all(self) -> list[str]:
        """One summary line per catalog product, in catalog order."""
        pass

    @abstractmethod
    def details(self, product_id: str) -> str:
        """Full description of a product, or a not-found message."""
        pass

    @abstractmethod
    def insert_money(self, denomination: Denomination) -> None:
        """Add one note of ``denomination`` to the money pool."""
        pass

    @abstractmethod
    def purchase(self, product_id: str) -> Product | None:
        """
        Buy a product if credit allows.

        Returns:
            The product, or None if it is unknown or unaffordable.
        """
        pass

    @abstractmethod
    def end_transaction(self) -> ChangeReport:
        """Hand back the money pool as change and reset it."""
        pass


class CreditPolicy(ABC):
    """
    Decides which inserted money counts as credit and how the pool is
    settled at the end of a transaction.
    """

    name: str

    @abstractmethod
    def available(self, pool: MoneyPool, spent: int) -> int:
        """
        Credit usable for the next purchase.

        Args:
            pool: Money inserted during the transaction.
            spent: Total cost of purchases made so far.
        """
        pass

    @abstractmethod
    def settle(self, pool: MoneyPool, spent: int) -> ChangeReport:
        """Change to hand back for ``pool`` after ``spent`` was used."""
        pass
