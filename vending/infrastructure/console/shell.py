"""
Interactive text shell driving a vending machine.
"""

from typing import Callable

from structlog import get_logger

from vending.application.services import VendingMachineService
from vending.domain import ChangeReport, Denomination, VendingError

logger = get_logger(__name__)

EXIT_COMMAND = "exit"
DETAILS_COMMAND = "details"

DENOMINATION_MENU = ", ".join(f"{d.value}kr" for d in Denomination)

PRODUCT_PROMPT = (
    "Enter the product ID you want to purchase (or 'exit' to end): "
)
DENOMINATION_PROMPT = f"Enter the denomination ({DENOMINATION_MENU}): "


class VendingShell:
    """
    Read-eval-print loop over a ``VendingMachineService``.

    Each round shows the catalog, asks for a product ID and one note, inserts
    the note and tries to buy the product. ``exit`` (any case) or end of
    input ends the session and prints the change.
    """

    def __init__(
        self,
        service: VendingMachineService,
        reader: Callable[[str], str] | None = None,
        writer: Callable[[str], None] | None = None,
    ) -> None:
        self.service = service
        self.reader = reader or input
        self.writer = writer or print

    def run(self) -> ChangeReport:
        """
        Run rounds until exit, then settle and print the change.

        Change is paid out even when the loop is interrupted, e.g. by
        Ctrl-C; the interruption is re-raised afterwards.
        """
        try:
            self._loop()
        finally:
            change = self.service.end_transaction()
            self._print_change(change)
        return change

    def _loop(self) -> None:
        while True:
            self._print_menu()

            command = self._prompt(PRODUCT_PROMPT)
            if command is None or command.lower() == EXIT_COMMAND:
                return

            if self._is_details_command(command):
                self._show_details(command)
                continue

            raw_denomination = self._prompt(DENOMINATION_PROMPT)
            if raw_denomination is None:
                return

            self._handle_purchase(command, raw_denomination)

    def _prompt(self, text: str) -> str | None:
        try:
            return self.reader(text).strip()
        except EOFError:
            logger.debug("Input closed, ending session")
            return None

    def _print_menu(self) -> None:
        self.writer("Available Products:")
        for line in self.service.show_all():
            self.writer(line)
        self.writer(f"Available Denominations: {DENOMINATION_MENU}")

    def _is_details_command(self, command: str) -> bool:
        head, _, _ = command.partition(" ")
        return head.lower() == DETAILS_COMMAND

    def _show_details(self, command: str) -> None:
        _, _, product_id = command.partition(" ")
        self.writer(self.service.details(product_id.strip()))

    def _handle_purchase(self, product_id: str, raw_denomination: str) -> None:
        try:
            denomination = Denomination.parse(raw_denomination)
        except VendingError as e:
            logger.info(f"Rejected denomination input: {raw_denomination!r}")
            self.writer(e.message)
            return

        self.service.insert_money(denomination)

        try:
            product = self.service.buy(product_id)
        except VendingError as e:
            self.writer(e.message)
            return

        self.writer(f"Purchased: {product.name}")
        self.writer(product.use())

    def _print_change(self, change: ChangeReport) -> None:
        self.writer("Change:")
        for line in change.lines():
            self.writer(line)
