# backend/economy/schemas/faction.py
import uuid
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .account import AccountStats


class Faction(BaseModel):
    id: uuid.UUID
    name: str
    emoji_name: str = Field(..., alias="emojiName")
    members: List[AccountStats] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class FactionCreateResponse(BaseModel):
    faction_id: uuid.UUID = Field(..., alias="factionID")

    model_config = ConfigDict(populate_by_name=True)


class MembershipResponse(BaseModel):
    message: str
    faction_id: uuid.UUID = Field(..., alias="factionID")
    user_id: str = Field(..., alias="userID")
    dissolved: bool = Field(False, description="True when the last member left and the faction was deleted")

    model_config = ConfigDict(populate_by_name=True)
