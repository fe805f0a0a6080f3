from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import math


# Number of significant decimal places kept after any leading zero decimals.
NON_ZERO_DECIMALS = 2

# Formatted numbers longer than this switch to scientific notation.
MAX_TEXT_LEN = 10

ValueFormatter = Callable[[float], str]


@dataclass(frozen=True, eq=False)
class Value:
    """A value displayed on an axis.

    Numeric values keep the original float next to the rounded one used for
    display. Text values carry a caller supplied string and ignore the
    rounding entirely.
    """

    value: float
    rounded: float
    zero_decimals: int
    non_zero_decimals: int
    custom_text: str | None = None
    formatter: ValueFormatter | None = field(default=None, repr=False)

    @property
    def is_text(self) -> bool:
        return self.custom_text is not None

    def text(self) -> str:
        if self.custom_text is not None:
            return self.custom_text
        if self.formatter is not None:
            return self.formatter(self.value)
        if math.ceil(self.rounded) == self.rounded:
            return f"{self.rounded:.0f}"

        places = self.non_zero_decimals + self.zero_decimals
        out = f"{self.rounded:.{places}f}"
        if "." in out:
            out = out.rstrip("0").rstrip(".")
        if len(out) > MAX_TEXT_LEN:
            out = f"{self.rounded:.2e}"
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.is_text == other.is_text and self.text() == other.text()

    def __hash__(self) -> int:
        return hash((self.is_text, self.text()))

    def __str__(self) -> str:
        return self.text()


def new_value(v: float, non_zero_decimals: int, formatter: ValueFormatter | None = None) -> Value:
    """Creates a numeric value rounded up to non_zero_decimals significant decimals."""
    rounded, zero_decimals = round_to_non_zero_places(float(v), non_zero_decimals)
    return Value(
        value=float(v),
        rounded=rounded,
        zero_decimals=zero_decimals,
        non_zero_decimals=non_zero_decimals,
        formatter=formatter,
    )


def new_text_value(text: str) -> Value:
    return Value(value=0.0, rounded=0.0, zero_decimals=0, non_zero_decimals=0, custom_text=str(text))


def round_to_non_zero_places(v: float, places: int) -> tuple[float, int]:
    """Rounds v up so that it has at most places non-zero decimal places.

    Returns the rounded float and the number of leading decimal places that
    are zero, e.g. 0.0372 with two places gives (0.038, 1). Negative places
    are treated as positive.
    """
    if v == 0:
        return 0.0, 0
    frac = zero_before_decimal(v)
    if frac == 0:
        return v, 0
    zeroes = zero_decimals(frac)
    return round_up(v, zeroes + abs(places)), zeroes


def zero_before_decimal(v: float) -> float:
    """Drops the integral part of v, keeping its sign."""
    sign = -1.0 if v < 0 else 1.0
    v = abs(v)
    return (v - math.floor(v)) * sign


def zero_decimals(v: float) -> int:
    """Counts the zero decimal places that lead the fractional part of v."""
    v = abs(v)
    if v == 0:
        return 0
    zeroes = 0
    while v * 10 < 1:
        v *= 10
        zeroes += 1
    return zeroes


def round_up(v: float, places: int) -> float:
    factor = 10.0**places
    scaled = v * factor
    # Snap float noise such as 171.99999999999997 before taking the ceiling.
    nearest = round(scaled)
    if abs(scaled - nearest) <= 1e-9 * max(1.0, abs(scaled)):
        scaled = float(nearest)
    return math.ceil(scaled) / factor


def round_half_away(v: float) -> int:
    """Rounds half away from zero, unlike the builtin round()."""
    return int(math.copysign(math.floor(abs(v) + 0.5), v))
