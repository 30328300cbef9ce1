# backend/economy/schemas/reference.py
from pydantic import BaseModel, ConfigDict, Field


# Seed files may carry extra display fields (colours, icons); they are kept and echoed back.
class Rarity(BaseModel):
    id: int
    name: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="allow", frozen=True)


class ItemType(BaseModel):
    id: int
    name: str = Field(..., min_length=1)
    max_stack_amount: int = Field(..., ge=1, alias="maxStackAmount")
    is_equippable: bool = Field(False, alias="isEquippable")

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)
