# File: backend/economy/crud/__init__.py

from . import (
    crud_account,
    crud_faction,
    crud_item,
)

__all__ = [
    "crud_account",
    "crud_faction",
    "crud_item",
]
