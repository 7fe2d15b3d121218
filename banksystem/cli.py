"""Command that runs a short demonstration session against the bank."""

from __future__ import annotations

import argparse
from contextlib import suppress

from .bank import BankError, BankSystem
from .cash import bgn, eur

__all__ = ["main"]


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration and print the accounts before and after."""
    parser = argparse.ArgumentParser(
        prog="banksystem",
        description="Register two users, move money between them and print the accounts.",
    )
    parser.parse_args(argv)

    bank = BankSystem()
    bank.register_user("Pesho")
    bank.register_user("Ivan")

    bank.cash_in("Ivan", eur(100000.00))
    bank.cash_in("Pesho", bgn(10.00))
    bank.cash_in("Pesho", eur(10.00))

    bank.print_data()

    bank.suspend_user("Pesho")
    with suppress(BankError):
        bank.cash_out("Pesho", bgn(10.00))
    with suppress(BankError):
        bank.transfer("Pesho", "Ivan", bgn(10.00))
    bank.cash_in("Pesho", bgn(10.00))
    with suppress(BankError):
        bank.transfer("Ivan", "Pesho", bgn(10.00))
    bank.print_data()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())