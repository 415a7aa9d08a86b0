"""
Vending machine service: catalog, money pool and purchase/change logic.
"""

from enum import StrEnum

from structlog import get_logger

from vending.application.interfaces import CreditPolicy, IVending
from vending.application.services.credit_policies import (
    HundredNotesCreditPolicy,
)
from vending.domain import (
    Catalog,
    ChangeReport,
    Denomination,
    InsufficientFundsError,
    InvalidDenominationError,
    MoneyPool,
    Product,
    ProductNotFoundError,
    VendingError,
    default_catalog,
)

logger = get_logger(__name__)

PRODUCT_NOT_FOUND_MESSAGE = ProductNotFoundError.message


class MachineState(StrEnum):
    """Transaction state of the machine."""

    IDLE = "idle"
    ACCUMULATING = "accumulating"


class VendingMachineService(IVending):
    """
    Single-session vending machine.

    Money inserted during a transaction stays in the pool until
    ``end_transaction`` hands it back as change; purchases only debit the
    credit computed by the credit policy.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        credit_policy: CreditPolicy | None = None,
    ) -> None:
        """
        Initialize the machine.

        Args:
            catalog: Products on sale. Defaults to the reference catalog.
            credit_policy: Credit rule. Defaults to ``hundred_notes``.
        """
        self._catalog = catalog if catalog is not None else default_catalog()
        self._credit_policy = credit_policy or HundredNotesCreditPolicy()
        self._pool = MoneyPool()
        self._spent = 0
        self._state = MachineState.IDLE

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def credit_policy(self) -> CreditPolicy:
        return self._credit_policy

    @property
    def state(self) -> MachineState:
        return self._state

    @property
    def pool(self) -> dict[Denomination, int]:
        """Copy of the money pool counts."""
        return self._pool.snapshot()

    @property
    def available_credit(self) -> int:
        return self._credit_policy.available(self._pool, self._spent)

    def show_all(self) -> list[str]:
        return [product.summary() for product in self._catalog]

    def details(self, product_id: str) -> str:
        product = self._catalog.find(product_id)
        if product is None:
            return PRODUCT_NOT_FOUND_MESSAGE
        return product.describe()

    def insert_money(self, denomination: Denomination) -> None:
        if not isinstance(denomination, Denomination):
            raise InvalidDenominationError(denomination)

        self._pool.add(denomination)
        self._state = MachineState.ACCUMULATING
        logger.debug(
            "Money inserted",
            denomination=denomination.value,
            credit=self.available_credit,
        )

    def buy(self, product_id: str) -> Product:
        """
        Buy a product, debiting its cost from the available credit.

        Raises:
            ProductNotFoundError: No product has ``product_id``.
            InsufficientFundsError: Credit is below the product cost.
        """
        product = self._catalog.find(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        available = self.available_credit
        if available < product.cost:
            raise InsufficientFundsError(product.id, product.cost, available)

        self._spent += product.cost
        logger.info(
            f"Purchased {product.name}",
            product_id=product.id,
            cost=product.cost,
            credit=self.available_credit,
        )
        return product

    def purchase(self, product_id: str) -> Product | None:
        try:
            return self.buy(product_id)
        except VendingError as e:
            logger.info(
                f"Purchase rejected: {e.message}", product_id=product_id
            )
            return None

    def end_transaction(self) -> ChangeReport:
        change = self._credit_policy.settle(self._pool, self._spent)

        self._pool.clear()
        self._spent = 0
        self._state = MachineState.IDLE

        logger.info(
            "Transaction ended",
            change=change.total_value,
            notes=len(change),
        )
        return change
