# banksystem

A small in-memory bank. It keeps registered users, their balances and
their status. It supports deposits, withdrawals, transfers and account
suspension. Amounts may be given in BGN, EUR or USD. Every amount is
converted to BGN at a fixed rate: 1 EUR = 1.95 BGN and 1 USD = 1.80 BGN.
Account balances are kept in BGN.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from banksystem.bank import BankSystem, BankError, OperationError
from banksystem.cash import bgn, eur

bank = BankSystem()
bank.register_user("Pesho")        # True
bank.register_user("Ivan")         # True
bank.register_user("Pesho")        # False: the name is already taken

bank.cash_in("Ivan", eur(10.00))   # balance is now 19.5 BGN
bank.cash_in("Pesho", bgn(10.00))
bank.transfer("Pesho", "Ivan", bgn(5.00))

try:
    bank.cash_out("Pesho", bgn(100.00))
except BankError as err:
    assert err.error is OperationError.INSUFFICIENT_FUNDS

bank.suspend_user("Pesho")         # a suspended user cannot withdraw or send money
bank.print_data()
```

`cash_in`, `cash_out` and `transfer` return an `OperationResult` whose
`balance` is a copy of the acting user's new balance. `user_balance` and
`user_status` look up a single user.

A failed operation raises `BankError`. Its `error` attribute holds the
`OperationError` that caused it. The possible values are
`USER_NOT_FOUND`, `USER_SUSPENDED`, `INSUFFICIENT_FUNDS` and
`UNKNOWN_ERROR`.

## Amounts

`banksystem.cash.Cash` holds a currency and an amount as text. The helpers
`bgn`, `eur` and `usd` build one from a number; `as_bgn` converts any
amount to BGN. Amounts are written with six significant digits
(`format_amount`), so very large or very precise values are rounded.
Comparisons convert the right-hand amount to BGN.

## Demo

Installing the package also installs a command that runs a short example
session and prints every balance:

```
banksystem-demo
```

## Limitations

All data lives in memory. Nothing is saved to disk or a database, and
every `BankSystem` starts empty. There is no interactive command or
server; the only command is the fixed demo above.