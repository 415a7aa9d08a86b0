import pytest

from vending.domain import Denomination
from vending.infrastructure.console import VendingShell
from vending.infrastructure.console.shell import (
    DENOMINATION_PROMPT,
    PRODUCT_PROMPT,
)


def run_shell(machine, reader):
    output: list[str] = []
    change = VendingShell(machine, reader=reader, writer=output.append).run()
    return change, output


def test_menu_is_printed(machine, scripted_input):
    _, output = run_shell(machine, scripted_input("exit"))

    assert output[:5] == [
        "Available Products:",
        "Id: D1, Name: Soda, Cost: 20 kr",
        "Id: S1, Name: Chips, Cost: 15 kr",
        "Id: T1, Name: Robot, Cost: 50 kr",
        "Available Denominations: "
        "1kr, 5kr, 10kr, 20kr, 50kr, 100kr, 500kr, 1000kr",
    ]


def test_exit_is_case_insensitive(machine, scripted_input):
    reader = scripted_input(" ExIt ")

    change, output = run_shell(machine, reader)

    assert change.is_empty
    assert output[-1] == "Change:"
    assert reader.prompts == [PRODUCT_PROMPT]


def test_successful_purchase(machine, scripted_input):
    change, output = run_shell(machine, scripted_input("T1", "100", "exit"))

    assert "Purchased: Robot" in output
    assert "Play with your Electronic toy!" in output
    assert output[-2:] == ["Change:", "50 kr: 1 notes"]
    assert change.as_dict() == {Denomination.FIFTY_KR: 1}


def test_invalid_denomination_is_not_inserted(machine, scripted_input):
    change, output = run_shell(machine, scripted_input("D1", "abc", "exit"))

    assert "Invalid denomination." in output
    assert not any(line.startswith("Purchased") for line in output)
    assert change.is_empty


def test_insufficient_funds_keeps_money(machine, scripted_input):
    change, output = run_shell(machine, scripted_input("D1", "20kr", "exit"))

    assert "Insufficient funds." in output
    assert output[-2:] == ["Change:", "20 kr: 1 notes"]


def test_unknown_product_keeps_money(machine, scripted_input):
    change, output = run_shell(machine, scripted_input("X9", "100", "exit"))

    assert "Product not found." in output
    assert change.as_dict() == {Denomination.HUNDRED_KR: 1}


def test_credit_carries_over_between_rounds(machine, scripted_input):
    reader = scripted_input("T1", "100", "T1", "5", "T1", "5", "exit")

    change, output = run_shell(machine, reader)

    assert output.count("Purchased: Robot") == 2
    assert output.count("Insufficient funds.") == 1
    assert change.as_dict() == {Denomination.FIVE_KR: 2}


def test_details_command_does_not_ask_for_money(machine, scripted_input):
    reader = scripted_input("details D1", "DETAILS nope", "exit")

    _, output = run_shell(machine, reader)

    assert "Drink: Soda, Flavor: Cola, Cost: 20 kr" in output
    assert "Product not found." in output
    assert DENOMINATION_PROMPT not in reader.prompts


def test_end_of_input_ends_session(machine, scripted_input):
    change, output = run_shell(machine, scripted_input("S1", "100"))

    assert "Purchased: Chips" in output
    assert output[-5:] == [
        "Change:",
        "50 kr: 1 notes",
        "20 kr: 1 notes",
        "10 kr: 1 notes",
        "5 kr: 1 notes",
    ]
    assert change.total_value == 85


def test_end_of_input_at_denomination_prompt(machine, scripted_input):
    change, output = run_shell(machine, scripted_input("S1"))

    assert output[-1] == "Change:"
    assert change.is_empty


def test_oversized_denomination_is_rejected(machine, scripted_input):
    reader = scripted_input("T1", "100", "D1", "9" * 5000, "exit")

    change, output = run_shell(machine, reader)

    assert "Invalid denomination." in output
    assert output[-2:] == ["Change:", "50 kr: 1 notes"]
    assert change.total_value == 50


def test_interrupt_still_returns_change(machine):
    answers = ["T1", "100"]
    output: list[str] = []

    def reader(prompt: str) -> str:
        if not answers:
            raise KeyboardInterrupt
        return answers.pop(0)

    shell = VendingShell(machine, reader=reader, writer=output.append)
    with pytest.raises(KeyboardInterrupt):
        shell.run()

    assert output[-2:] == ["Change:", "50 kr: 1 notes"]
    assert machine.pool[Denomination.HUNDRED_KR] == 0
