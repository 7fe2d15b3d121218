"""Bank customers and the factory that numbers them."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

__all__ = ["User", "UserFactory"]


@dataclass
class User:
    """A named bank customer with a numeric identifier."""

    name: str = ""
    user_id: int = 0


@dataclass
class UserFactory:
    """Creates users with consecutive identifiers starting at zero."""

    _ids: itertools.count = field(default_factory=itertools.count, repr=False)

    def create_user(self, name: str) -> User:
        """Return a new user called ``name`` with the next identifier."""
        return User(name, next(self._ids))