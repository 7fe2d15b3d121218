import pytest

from banksystem.currency import (
    Currency,
    conversion_rate,
    currency_name,
    register_currencies,
)


def test_register_currencies_sets_names_and_rates():
    register_currencies()
    assert currency_name(Currency.BGN) == "BGN"
    assert currency_name(Currency.EUR) == "EUR"
    assert currency_name(Currency.USD) == "USD"
    assert conversion_rate(Currency.BGN) == 1.0
    assert conversion_rate(Currency.EUR) == 1.95
    assert conversion_rate(Currency.USD) == 1.80


@pytest.mark.parametrize(
    "currency, name",
    [(Currency.BGN, "BGN"), (Currency.EUR, "EUR"), (Currency.USD, "USD")],
)
def test_currency_name(currency, name):
    assert currency_name(currency) == name


def test_enum_order_matches_registry():
    assert [c.value for c in Currency] == [0, 1, 2]
    assert [currency_name(c) for c in Currency] == ["BGN", "EUR", "USD"]


def test_register_is_idempotent():
    register_currencies()
    register_currencies()
    assert conversion_rate(Currency.EUR) == 1.95


def test_unknown_currency_raises():
    with pytest.raises(ValueError):
        conversion_rate("GBP")
    with pytest.raises(ValueError):
        currency_name("GBP")