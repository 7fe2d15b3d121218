"""The bank: registered users, their balances and the operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .cash import Cash
from .currency import currency_name, register_currencies
from .log import log
from .user import User, UserFactory

__all__ = [
    "OperationError",
    "OperationType",
    "UserStatus",
    "OperationResult",
    "OpData",
    "UserData",
    "BankError",
    "BankSystem",
]

_SEPARATOR = "==============================="


class OperationError(Enum):
    """Why an operation was refused."""

    SUCCESS = 0
    USER_NOT_FOUND = 1
    USER_SUSPENDED = 2
    INSUFFICIENT_FUNDS = 3
    INTERNAL_ERROR = 4
    UNKNOWN_ERROR = 5


class OperationType(Enum):
    """The kinds of operation the bank carries out."""

    CASH_IN = 0
    CASH_OUT = 1
    TRANSFER = 2
    SUSPEND = 3


class UserStatus(Enum):
    """Whether a user may take money out."""

    SUSPENDED = 0
    ACTIVE = 1


def _copy(cash: Cash) -> Cash:
    return Cash(cash.currency, cash.amount)


@dataclass
class OperationResult:
    """The outcome of a successful operation: the acting user's new balance."""

    balance: Cash = field(default_factory=Cash)


@dataclass
class OpData:
    """A request to the bank: what to do, how much, and to whom."""

    type: Any
    amount: Cash = field(default_factory=Cash)
    users: tuple[str, ...] = ()


@dataclass
class UserData:
    """The account state kept for one user."""

    status: UserStatus = UserStatus.ACTIVE
    balance: Cash = field(default_factory=Cash)


class BankError(Exception):
    """Raised when the bank refuses an operation."""

    def __init__(self, error: OperationError) -> None:
        super().__init__(error.name)
        self.error = error


class BankSystem:
    """Keeps users and their accounts and performs operations on them."""

    def __init__(self) -> None:
        register_currencies()
        self._factory = UserFactory()
        self._users: dict[int, User] = {}
        self._data: dict[int, UserData] = {}

    def register_user(self, name: str) -> bool:
        """Add a user called ``name``; return False if the name is taken."""
        if any(user.name == name for user in self._users.values()):
            return False
        user = self._factory.create_user(name)
        self._users[user.user_id] = user
        self._data[user.user_id] = UserData()
        return True

    def cash_in(self, name: str, amount: Cash) -> OperationResult:
        """Deposit ``amount`` into the account of ``name``."""
        return self.handle_operation(OpData(OperationType.CASH_IN, amount, (name,)))

    def cash_out(self, name: str, amount: Cash) -> OperationResult:
        """Withdraw ``amount`` from the account of ``name``."""
        return self.handle_operation(OpData(OperationType.CASH_OUT, amount, (name,)))

    def transfer(self, sender: str, recipient: str, amount: Cash) -> OperationResult:
        """Move ``amount`` from ``sender`` to ``recipient``; returns the sender's balance."""
        return self.handle_operation(
            OpData(OperationType.TRANSFER, amount, (sender, recipient))
        )

    def suspend_user(self, name: str) -> OperationResult:
        """Stop ``name`` from withdrawing or sending money."""
        return self.handle_operation(OpData(OperationType.SUSPEND, Cash(), (name,)))

    def handle_operation(self, operation: OpData) -> OperationResult:
        """Check and carry out ``operation``; raise BankError if it is refused."""
        first, second = self.check_preconditions(operation)
        data = self._data[first]
        if operation.type is OperationType.SUSPEND:
            data.status = UserStatus.SUSPENDED
            return OperationResult()
        if operation.type is OperationType.CASH_IN:
            data.balance.add(operation.amount)
        elif operation.type is OperationType.CASH_OUT:
            data.balance.sub(operation.amount)
        else:
            data.balance.sub(operation.amount)
            self._data[second].balance.add(operation.amount)
        return OperationResult(_copy(data.balance))

    def check_preconditions(self, operation: OpData) -> tuple[int, int | None]:
        """Return the ids of the users involved, or raise BankError."""
        name = operation.users[0] if operation.users else None
        first = self.find_user(name)

        if operation.type in (OperationType.CASH_OUT, OperationType.TRANSFER):
            data = self._data[first]
            if data.status is UserStatus.SUSPENDED:
                raise BankError(OperationError.USER_SUSPENDED)
            if data.balance < operation.amount:
                raise BankError(OperationError.INSUFFICIENT_FUNDS)
        elif operation.type not in (OperationType.CASH_IN, OperationType.SUSPEND):
            raise BankError(OperationError.UNKNOWN_ERROR)

        second = None
        if operation.type is OperationType.TRANSFER:
            other = operation.users[1] if len(operation.users) > 1 else None
            second = self.find_user(other)
        return first, second

    def find_user(self, name: str | None) -> int:
        """Return the id of the user called ``name``."""
        for user_id, user in self._users.items():
            if user.name == name:
                return user_id
        raise BankError(OperationError.USER_NOT_FOUND)

    def user_balance(self, name: str) -> Cash:
        """Return a copy of the balance of ``name``."""
        return _copy(self._data[self.find_user(name)].balance)

    def user_status(self, name: str) -> UserStatus:
        """Return the status of ``name``."""
        return self._data[self.find_user(name)].status

    def print_data(self) -> None:
        """Print every user with their balance."""
        log(_SEPARATOR)
        for user_id, user in self._users.items():
            balance = self._data[user_id].balance
            log(
                "User: {} Balance: {:.2f}{}",
                user.name,
                balance.value,
                currency_name(balance.currency),
            )
        log(_SEPARATOR)