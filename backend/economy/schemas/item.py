# backend/economy/schemas/item.py
import uuid
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .reference import ItemType, Rarity

# Request bodies and responses use the camelCase keys the bot clients already send.


# --- Item Schemas ---
class ItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    rarity_id: int = Field(..., alias="rarityID")
    type_id: int = Field(..., alias="typeID")
    amount: int = Field(1, ge=1, description="Number of separate units to create, not a stack size column")
    owner_id: str = Field(..., min_length=1, alias="ownerID")
    attributes: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ItemUpdate(BaseModel):  # Allow partial updates
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    rarity_id: Optional[int] = Field(None, alias="rarityID")
    type_id: Optional[int] = Field(None, alias="typeID")
    attributes: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ItemCreateResponse(BaseModel):
    item_ids: List[uuid.UUID] = Field(..., alias="itemIDs")

    model_config = ConfigDict(populate_by_name=True)


class ItemActionResponse(BaseModel):
    """Returned by transfer/equip/drop: what happened and which rows were touched."""

    message: str
    item_ids: List[uuid.UUID] = Field(default_factory=list, alias="itemIDs")

    model_config = ConfigDict(populate_by_name=True)


# --- Display Schemas ---
# A display record is either a single item (amount 1) or a read-time stack.
class ItemDisplay(BaseModel):
    id: uuid.UUID = Field(..., description="Id of the representative (first) unit")
    owner_id: str = Field(..., alias="ownerID")
    name: str
    description: Optional[str] = None
    type: Optional[ItemType] = None
    rarity: Optional[Rarity] = None
    amount: int = Field(1, ge=1)
    is_equipped: bool = Field(False, alias="isEquipped")
    is_dropped: bool = Field(False, alias="isDropped")
    attributes: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(populate_by_name=True)
