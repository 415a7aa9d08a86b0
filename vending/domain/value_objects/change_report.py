"""
Change report value object.

Lists what is handed back at the end of a transaction, largest denomination
first, one entry per denomination with a positive count.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Mapping

from vending.domain.value_objects.denomination import Denomination


@dataclass(frozen=True)
class ChangeEntry:
    denomination: Denomination
    count: int

    @property
    def value(self) -> int:
        return self.denomination.value * self.count

    def __str__(self) -> str:
        return f"{self.denomination.value} kr: {self.count} notes"


@dataclass(frozen=True)
class ChangeReport:
    """
    Ordered change handed back to the customer.

    Attributes:
        entries: Change entries in descending denomination order.
    """

    entries: tuple[ChangeEntry, ...] = ()

    @classmethod
    def from_counts(cls, counts: Mapping[Denomination, int]) -> "ChangeReport":
        """Build a report from denomination counts, dropping zeros."""
        return cls(
            tuple(
                ChangeEntry(denomination, counts[denomination])
                for denomination in Denomination.descending()
                if counts.get(denomination, 0) > 0
            )
        )

    @property
    def total_value(self) -> int:
        return sum(entry.value for entry in self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def as_dict(self) -> dict[Denomination, int]:
        return {entry.denomination: entry.count for entry in self.entries}

    def lines(self) -> list[str]:
        return [str(entry) for entry in self.entries]

    def __iter__(self) -> Iterator[ChangeEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def break_down(
    amount: int,
    held: Mapping[Denomination, int] | None = None,
) -> Counter[Denomination]:
    """
    Split ``amount`` into notes, largest first.

    Notes in ``held`` are used first and never beyond their count; whatever
    is left is paid from the machine float, which has every denomination.

    Raises:
        ValueError: If amount is negative.
    """
    if amount < 0:
        raise ValueError(f"Amount cannot be negative: {amount}")

    result: Counter[Denomination] = Counter()
    remaining = amount

    if held:
        for denomination in Denomination.descending():
            use = min(
                remaining // denomination.value, held.get(denomination, 0)
            )
            if use > 0:
                result[denomination] += use
                remaining -= denomination.value * use

    for denomination in Denomination.descending():
        use = remaining // denomination.value
        if use > 0:
            result[denomination] += use
            remaining -= denomination.value * use

    return result
