"""Amounts of money held as text in a given currency."""

from __future__ import annotations

import re

from .currency import Currency, conversion_rate

__all__ = ["Cash", "format_amount", "as_bgn", "bgn", "eur", "usd"]

_NUMBER = re.compile(
    r"-?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def format_amount(value: float) -> str:
    """Render ``value`` with six significant digits, trailing zeros dropped."""
    return f"{value:.6g}"


def _parse_amount(text: str) -> float:
    match = _NUMBER.match(text)
    return float(match.group()) if match else 0.0


class Cash:
    """A mutable amount of money; arithmetic converts the other operand to BGN."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, currency: Currency = Currency.BGN, amount: str = "") -> None:
        self.currency = currency
        self.amount = amount

    def __repr__(self) -> str:
        return f"Cash({self.currency!r}, {self.amount!r})"

    @property
    def value(self) -> float:
        """The amount as a number; unparsable text counts as zero."""
        return _parse_amount(self.amount)

    def add(self, other: Cash) -> None:
        """Add ``other`` (converted to BGN) to this amount."""
        self.amount = format_amount(self.value + as_bgn(other).value)

    def sub(self, other: Cash) -> None:
        """Subtract ``other`` (converted to BGN) from this amount."""
        self.amount = format_amount(self.value - as_bgn(other).value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cash):
            return NotImplemented
        return self.value < as_bgn(other).value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Cash):
            return NotImplemented
        return self.value > as_bgn(other).value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cash):
            return NotImplemented
        return self.value == as_bgn(other).value


def as_bgn(cash: Cash) -> Cash:
    """Return ``cash`` converted to BGN."""
    converted = cash.value * conversion_rate(cash.currency)
    return Cash(Currency.BGN, format_amount(converted))


def bgn(value: float) -> Cash:
    """An amount in BGN."""
    return Cash(Currency.BGN, format_amount(value))


def eur(value: float) -> Cash:
    """An amount in EUR."""
    return Cash(Currency.EUR, format_amount(value))


def usd(value: float) -> Cash:
    """An amount in USD."""
    return Cash(Currency.USD, format_amount(value))