"""Formatted line output to standard output."""

from __future__ import annotations

__all__ = ["log"]


def log(fmt: str, *args: object) -> None:
    """Format ``args`` into ``fmt`` and print the result as one line."""
    print(fmt.format(*args), flush=True)