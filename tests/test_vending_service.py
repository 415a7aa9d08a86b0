import pytest

from vending.application.services import MachineState, VendingMachineService
from vending.domain import (
    Catalog,
    Denomination,
    Drink,
    InsufficientFundsError,
    InvalidDenominationError,
    ProductNotFoundError,
)

EMPTY_POOL = {d: 0 for d in Denomination}


@pytest.mark.parametrize("denomination", list(Denomination))
def test_inserted_note_is_returned_as_change(machine, denomination):
    machine.insert_money(denomination)

    change = machine.end_transaction()

    assert change.as_dict() == {denomination: 1}
    assert machine.pool == EMPTY_POOL


def test_show_all_lists_catalog_in_order(machine):
    assert machine.show_all() == [
        "Id: D1, Name: Soda, Cost: 20 kr",
        "Id: S1, Name: Chips, Cost: 15 kr",
        "Id: T1, Name: Robot, Cost: 50 kr",
    ]


def test_show_all_length_is_unaffected_by_activity(machine):
    machine.insert_money(Denomination.HUNDRED_KR)
    machine.purchase("T1")
    machine.purchase("D1")
    machine.insert_money(Denomination.FIVE_KR)

    assert len(machine.show_all()) == 3


def test_details(machine):
    details = machine.details("D1")

    assert "Soda" in details
    assert "Cola" in details
    assert machine.details("unknown") == "Product not found."


def test_purchase_ignores_notes_other_than_hundreds(machine):
    for _ in range(5):
        machine.insert_money(Denomination.TWENTY_KR)
    machine.insert_money(Denomination.THOUSAND_KR)

    assert machine.purchase("D1") is None
    assert machine.available_credit == 0


def test_one_hundred_note_pays_for_two_robots(machine):
    machine.insert_money(Denomination.HUNDRED_KR)
    assert machine.available_credit == 100

    first = machine.purchase("T1")
    assert first is not None and first.id == "T1"
    assert machine.available_credit == 50

    assert machine.purchase("T1") is not None
    assert machine.available_credit == 0

    assert machine.purchase("T1") is None
    assert machine.available_credit == 0


def test_end_transaction_on_virgin_pool(machine):
    change = machine.end_transaction()

    assert change.is_empty
    assert machine.pool == EMPTY_POOL
    assert machine.state is MachineState.IDLE


def test_end_transaction_returns_unspent_credit(machine):
    machine.insert_money(Denomination.HUNDRED_KR)
    machine.insert_money(Denomination.TEN_KR)
    machine.purchase("S1")

    change = machine.end_transaction()

    assert change.as_dict() == {
        Denomination.FIFTY_KR: 1,
        Denomination.TWENTY_KR: 1,
        Denomination.TEN_KR: 2,
        Denomination.FIVE_KR: 1,
    }
    assert machine.available_credit == 0


def test_end_transaction_without_purchase_returns_exact_pool(machine):
    machine.insert_money(Denomination.HUNDRED_KR)
    machine.insert_money(Denomination.HUNDRED_KR)
    machine.insert_money(Denomination.ONE_KR)

    change = machine.end_transaction()

    assert change.lines() == ["100 kr: 2 notes", "1 kr: 1 notes"]


def test_state_transitions(machine):
    assert machine.state is MachineState.IDLE

    machine.insert_money(Denomination.FIFTY_KR)
    assert machine.state is MachineState.ACCUMULATING

    machine.purchase("D1")
    assert machine.state is MachineState.ACCUMULATING

    machine.end_transaction()
    assert machine.state is MachineState.IDLE


@pytest.mark.parametrize("value", [100, "100", 3, None])
def test_insert_money_rejects_non_denominations(machine, value):
    with pytest.raises(InvalidDenominationError):
        machine.insert_money(value)

    assert machine.pool == EMPTY_POOL
    assert machine.state is MachineState.IDLE


def test_buy_raises_for_unknown_product(machine):
    machine.insert_money(Denomination.HUNDRED_KR)

    with pytest.raises(ProductNotFoundError) as exc_info:
        machine.buy("X9")

    assert exc_info.value.product_id == "X9"
    assert machine.available_credit == 100


def test_buy_raises_for_insufficient_funds(machine):
    with pytest.raises(InsufficientFundsError) as exc_info:
        machine.buy("T1")

    assert exc_info.value.cost == 50
    assert exc_info.value.available == 0


def test_purchase_does_not_mutate_pool_on_failure(machine):
    machine.insert_money(Denomination.FIFTY_KR)
    before = machine.pool

    assert machine.purchase("T1") is None
    assert machine.purchase("nope") is None
    assert machine.pool == before


def test_custom_catalog():
    catalog = Catalog([Drink(id="W1", name="Water", flavor="Plain", cost=100)])
    machine = VendingMachineService(catalog=catalog)
    machine.insert_money(Denomination.HUNDRED_KR)

    assert machine.show_all() == ["Id: W1, Name: Water, Cost: 100 kr"]
    assert machine.purchase("W1").name == "Water"
    assert machine.end_transaction().is_empty


def test_empty_catalog_is_kept():
    machine = VendingMachineService(catalog=Catalog([]))

    assert machine.show_all() == []


def test_operations_are_logged(machine, log_events):
    machine.insert_money(Denomination.HUNDRED_KR)
    machine.purchase("T1")
    machine.purchase("T9")
    machine.end_transaction()

    events = [e["event"] for e in log_events]
    assert "Money inserted" in events
    assert "Purchased Robot" in events
    assert "Purchase rejected: Product not found." in events
    assert "Transaction ended" in events
