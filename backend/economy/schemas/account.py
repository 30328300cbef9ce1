# backend/economy/schemas/account.py
import uuid
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .item import ItemDisplay


class AccountSummary(BaseModel):
    """Leaderboard row."""

    id: str
    dollars: int

    model_config = ConfigDict(from_attributes=True)


class AccountStats(AccountSummary):
    """An account without its inventory; also used for faction member lists."""

    hp: int


class Account(AccountStats):
    faction_id: Optional[uuid.UUID] = Field(None, alias="factionID")
    inventory: List[ItemDisplay] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class HpResponse(BaseModel):
    hp: int


class DollarsResponse(BaseModel):
    dollars: int
