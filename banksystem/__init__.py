"""In-memory bank with users, multi-currency cash and basic account operations."""

__version__ = "0.1.0"
__all__ = ["bank", "cash", "cli", "currency", "log", "user"]