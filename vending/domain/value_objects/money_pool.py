"""
Money pool: how many notes and coins of each denomination the machine holds
for the current transaction.
"""

from typing import Iterator

from vending.domain.exceptions import InvalidDenominationError
from vending.domain.value_objects.denomination import Denomination


class MoneyPool:
    """
    Count per denomination, covering every denomination at all times.

    Counts start at zero and never go negative.
    """

    def __init__(self) -> None:
        self._counts: dict[Denomination, int] = {
            denomination: 0 for denomination in Denomination
        }

    def add(self, denomination: Denomination, count: int = 1) -> None:
        """Add ``count`` notes of ``denomination`` to the pool."""
        if not isinstance(denomination, Denomination):
            raise InvalidDenominationError(denomination)
        if count <= 0:
            raise ValueError(f"Count must be positive: {count}")
        self._counts[denomination] += count

    def count(self, denomination: Denomination) -> int:
        return self._counts[denomination]

    @property
    def total_value(self) -> int:
        return sum(d.value * n for d, n in self._counts.items())

    @property
    def is_empty(self) -> bool:
        return not any(self._counts.values())

    def items(self) -> Iterator[tuple[Denomination, int]]:
        """Yield ``(denomination, count)`` pairs, largest first."""
        for denomination in Denomination.descending():
            yield denomination, self._counts[denomination]

    def clear(self) -> None:
        for denomination in self._counts:
            self._counts[denomination] = 0

    def snapshot(self) -> dict[Denomination, int]:
        return dict(self._counts)

    def __repr__(self) -> str:
        held = ", ".join(f"{d.value}: {n}" for d, n in self.items() if n)
        return f"MoneyPool({{{held}}})"
