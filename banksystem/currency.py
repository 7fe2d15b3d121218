"""Supported currencies, their display names and conversion rates to BGN."""

from __future__ import annotations

from enum import Enum

__all__ = ["Currency", "register_currencies", "currency_name", "conversion_rate"]


class Currency(Enum):
    """A currency the bank accepts."""

    BGN = 0
    EUR = 1
    USD = 2


_DEFAULT_NAMES = {Currency.BGN: "BGN", Currency.EUR: "EUR", Currency.USD: "USD"}
_DEFAULT_RATES = {Currency.BGN: 1.0, Currency.EUR: 1.95, Currency.USD: 1.80}

_names: dict[Currency, str] = {}
_rates: dict[Currency, float] = {}


def register_currencies() -> None:
    """Install the standard currency names and conversion rates."""
    _names.clear()
    _names.update(_DEFAULT_NAMES)
    _rates.clear()
    _rates.update(_DEFAULT_RATES)


def currency_name(currency: Currency) -> str:
    """Return the display name of ``currency``."""
    try:
        return _names[currency]
    except KeyError:
        raise ValueError(f"unknown currency: {currency!r}") from None


def conversion_rate(currency: Currency) -> float:
    """Return how many BGN one unit of ``currency`` is worth."""
    try:
        return _rates[currency]
    except KeyError:
        raise ValueError(f"unknown currency: {currency!r}") from None


register_currencies()