"""
Credit policies.

``hundred_notes`` keeps the behaviour of the machine this project replaces:
only 100 kr notes pay for products. ``total_value`` counts every inserted
note.
"""

from collections import Counter
from enum import StrEnum

from structlog import get_logger

from vending.application.interfaces import CreditPolicy
from vending.domain import ChangeReport, Denomination, MoneyPool, break_down
from vending.utils.metaclasses import Singleton
from vending.utils.registry import BaseFactory, register_in

logger = get_logger(__name__)


class CreditPolicyNames(StrEnum):
    HUNDRED_NOTES = "hundred_notes"
    TOTAL_VALUE = "total_value"


class CreditPolicyFactory(BaseFactory[CreditPolicy], metaclass=Singleton):
    pass


@register_in(CreditPolicyFactory, CreditPolicyNames.HUNDRED_NOTES)
class HundredNotesCreditPolicy(CreditPolicy):
    """
    Only 100 kr notes are credit.

    Five 20 kr notes do not pay for a 20 kr product; one 100 kr note pays
    for two 50 kr products. Notes of other denominations are returned
    untouched at settlement. Unspent 100 kr credit is returned as whole
    100 kr notes plus smaller change for any remainder.
    """

    name = CreditPolicyNames.HUNDRED_NOTES

    def available(self, pool: MoneyPool, spent: int) -> int:
        hundreds = pool.count(Denomination.HUNDRED_KR)
        return hundreds * Denomination.HUNDRED_KR.value - spent

    def settle(self, pool: MoneyPool, spent: int) -> ChangeReport:
        counts = Counter(pool.snapshot())
        hundreds = counts.pop(Denomination.HUNDRED_KR)
        remaining = self.available(pool, spent)

        change = counts + break_down(
            remaining, held={Denomination.HUNDRED_KR: hundreds}
        )
        return ChangeReport.from_counts(change)


@register_in(CreditPolicyFactory, CreditPolicyNames.TOTAL_VALUE)
class TotalValueCreditPolicy(CreditPolicy):
    """
    Every inserted note is credit.

    Settlement hands back inserted notes first, largest first, and makes up
    the rest from the machine float.
    """

    name = CreditPolicyNames.TOTAL_VALUE

    def available(self, pool: MoneyPool, spent: int) -> int:
        return pool.total_value - spent

    def settle(self, pool: MoneyPool, spent: int) -> ChangeReport:
        remaining = self.available(pool, spent)
        return ChangeReport.from_counts(
            break_down(remaining, held=pool.snapshot())
        )


def get_credit_policy(name: str) -> CreditPolicy:
    """
    Create a registered credit policy by name.

    Raises:
        ValueError: If no policy is registered under ``name``.
    """
    policy = CreditPolicyFactory().create(name)
    logger.debug(f"Using credit policy: {policy.name}")
    return policy
