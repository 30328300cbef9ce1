# File: backend/economy/models/__init__.py

from .account import Account
from .faction import Faction
from .item import Item

__all__ = [
    "Account",
    "Faction",
    "Item",
]
