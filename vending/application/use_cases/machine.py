"""
Machine use case: assemble a vending machine from configuration.
"""

from pathlib import Path

from structlog import get_logger

from vending.application.interfaces import CreditPolicy
from vending.application.services import (
    VendingMachineService,
    get_credit_policy,
)
from vending.config import MachineConfig
from vending.domain import Catalog, default_catalog
from vending.infrastructure.catalog_loading import load_catalog

logger = get_logger(__name__)


class BuildMachineUseCase:
    """
    Build a machine.

    1. Catalog: JSON file if configured, otherwise the built-in catalog
    2. Credit policy: looked up by name
    """

    def __init__(self, config: MachineConfig):
        """
        Initialize use case.

        Args:
            config: Machine section of the application settings.
        """
        self.config = config

    def execute(self) -> VendingMachineService:
        catalog = self._build_catalog(self.config.catalog_file)
        credit_policy = self._build_credit_policy(self.config.credit_policy)

        logger.info(
            f"Machine ready with {len(catalog)} products",
            credit_policy=credit_policy.name,
        )
        return VendingMachineService(catalog, credit_policy)

    def _build_catalog(self, catalog_file: Path | None) -> Catalog:
        if catalog_file is None:
            return default_catalog()
        return load_catalog(catalog_file)

    def _build_credit_policy(self, name: str) -> CreditPolicy:
        return get_credit_policy(name)


def build_machine(
    config: MachineConfig | None = None,
) -> VendingMachineService:
    """
    Build a machine with default configuration.

    Args:
        config: Machine settings; defaults apply when omitted.

    Returns:
        Ready to use machine service.
    """
    return BuildMachineUseCase(config or MachineConfig()).execute()
