"""
Session use case: run one interactive shopping session.
"""

from typing import Callable
from uuid import uuid4

from structlog import get_logger

from vending.application.services import VendingMachineService
from vending.domain import ChangeReport
from vending.infrastructure.console import VendingShell
from vending.infrastructure.logger import bind_context, clear_context

logger = get_logger(__name__)


class ShoppingSessionUseCase:
    """Drive a machine through the console shell until the customer exits."""

    def __init__(
        self,
        service: VendingMachineService,
        reader: Callable[[str], str] | None = None,
        writer: Callable[[str], None] | None = None,
    ):
        self.service = service
        self.shell = VendingShell(service, reader=reader, writer=writer)

    def execute(self) -> ChangeReport:
        bind_context(session_id=uuid4().hex[:8])
        logger.info("Session started")

        try:
            change = self.shell.run()
        finally:
            logger.info("Session finished")
            clear_context("session_id")

        return change


def run_shopping_session(
    service: VendingMachineService,
    reader: Callable[[str], str] | None = None,
    writer: Callable[[str], None] | None = None,
) -> ChangeReport:
    """
    Run a session on ``service`` and return the change handed back.

    Args:
        service: Machine to drive.
        reader: Prompt function, ``input`` by default.
        writer: Output function, ``print`` by default.
    """
    return ShoppingSessionUseCase(service, reader, writer).execute()
