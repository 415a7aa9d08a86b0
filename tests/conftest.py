import pytest
from structlog.testing import capture_logs

from vending.application.services import (
    TotalValueCreditPolicy,
    VendingMachineService,
)


@pytest.fixture(autouse=True)
def log_events():
    with capture_logs() as events:
        yield events


@pytest.fixture
def machine() -> VendingMachineService:
    return VendingMachineService()


@pytest.fixture
def total_value_machine() -> VendingMachineService:
    return VendingMachineService(credit_policy=TotalValueCreditPolicy())


@pytest.fixture
def scripted_input():
    """Build a reader that answers prompts in order, then raises EOFError."""

    def _scripted(*answers: str):
        remaining = list(answers)
        prompts: list[str] = []

        def reader(prompt: str) -> str:
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        reader.prompts = prompts
        return reader

    return _scripted
