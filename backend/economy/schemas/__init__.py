# File: backend/economy/schemas/__init__.py

from .account import Account, AccountStats, AccountSummary, DollarsResponse, HpResponse
from .faction import Faction, FactionCreateResponse, MembershipResponse
from .item import (
    ItemActionResponse,
    ItemCreate,
    ItemCreateResponse,
    ItemDisplay,
    ItemUpdate,
)
from .reference import ItemType, Rarity

__all__ = [
    "Account",
    "AccountStats",
    "AccountSummary",
    "DollarsResponse",
    "Faction",
    "FactionCreateResponse",
    "HpResponse",
    "ItemActionResponse",
    "ItemCreate",
    "ItemCreateResponse",
    "ItemDisplay",
    "ItemType",
    "ItemUpdate",
    "MembershipResponse",
    "Rarity",
]
