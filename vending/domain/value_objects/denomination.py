"""
Denomination value object.

The machine accepts a closed set of notes and coins; anything outside it is
rejected at parse time.
"""

import re
from enum import IntEnum
from typing import Any

from vending.domain.exceptions import InvalidDenominationError

_NUMERIC_INPUT = re.compile(r"^([0-9]{1,4})\s*(kr)?$", re.IGNORECASE)


class Denomination(IntEnum):
    """Notes and coins accepted by the machine, valued in kronor."""

    ONE_KR = 1
    FIVE_KR = 5
    TEN_KR = 10
    TWENTY_KR = 20
    FIFTY_KR = 50
    HUNDRED_KR = 100
    FIVE_HUNDRED_KR = 500
    THOUSAND_KR = 1000

    @property
    def label(self) -> str:
        return f"{self.value} kr"

    @classmethod
    def descending(cls) -> list["Denomination"]:
        """All denominations, largest value first."""
        return sorted(cls, reverse=True)

    @classmethod
    def parse(cls, raw: Any) -> "Denomination":
        """
        Parse user input into a denomination.

        Accepts the numeric value with an optional ``kr`` suffix
        (``"100"``, ``"100kr"``, ``"100 kr"``) or the member name in either
        CamelCase or upper snake case (``"HundredKr"``, ``"HUNDRED_KR"``).

        Raises:
            InvalidDenominationError: Input is not one of the known values.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, bool):
            raise InvalidDenominationError(raw)
        if isinstance(raw, int):
            return cls._from_value(raw)
        if not isinstance(raw, str):
            raise InvalidDenominationError(raw)

        text = raw.strip()
        match = _NUMERIC_INPUT.match(text)
        if match:
            return cls._from_value(int(match.group(1)))

        key = text.replace("_", "").lower()
        for member in cls:
            if member.name.replace("_", "").lower() == key:
                return member

        raise InvalidDenominationError(raw)

    @classmethod
    def _from_value(cls, value: int) -> "Denomination":
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidDenominationError(value) from e

    def __str__(self) -> str:
        return self.label
