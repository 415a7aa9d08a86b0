import orjson

from vending.application.services import (
    HundredNotesCreditPolicy,
    TotalValueCreditPolicy,
)
from vending.application.use_cases import build_machine
from vending.config import MachineConfig
from vending.domain import Denomination


def test_default_machine():
    machine = build_machine()

    assert len(machine.catalog) == 3
    assert isinstance(machine.credit_policy, HundredNotesCreditPolicy)


def test_machine_from_config(tmp_path):
    catalog_file = tmp_path / "catalog.json"
    catalog_file.write_bytes(
        orjson.dumps(
            [
                {
                    "kind": "snack",
                    "id": "N1",
                    "name": "Nuts",
                    "type": "Salted",
                    "cost": 25,
                }
            ]
        )
    )
    config = MachineConfig(
        credit_policy="total_value", catalog_file=catalog_file
    )

    machine = build_machine(config)
    machine.insert_money(Denomination.TWENTY_KR)
    machine.insert_money(Denomination.FIVE_KR)

    assert isinstance(machine.credit_policy, TotalValueCreditPolicy)
    assert machine.show_all() == ["Id: N1, Name: Nuts, Cost: 25 kr"]
    assert machine.purchase("N1").use() == "Enjoy your Salted snack!"
    assert machine.end_transaction().is_empty
