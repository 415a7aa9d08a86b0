from .credit_policies import (
    CreditPolicyFactory,
    CreditPolicyNames,
    HundredNotesCreditPolicy,
    TotalValueCreditPolicy,
    get_credit_policy,
)
from .vending_service import MachineState, VendingMachineService

__all__ = [
    "VendingMachineService",
    "MachineState",
    "CreditPolicyFactory",
    "CreditPolicyNames",
    "HundredNotesCreditPolicy",
    "TotalValueCreditPolicy",
    "get_credit_policy",
]
