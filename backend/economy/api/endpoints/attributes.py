# backend/economy/api/endpoints/attributes.py
import logging
from typing import List

from fastapi import APIRouter, Depends

from ... import schemas
from ...core.errors import NotFound
from ...reference_data import ReferenceData
from ..dependencies import get_reference_data

logger = logging.getLogger(__name__)
router = APIRouter()


# --- Rarities ---
@router.get("/rarities", response_model=List[schemas.Rarity])
def list_rarities(reference: ReferenceData = Depends(get_reference_data)):
    return reference.rarities


@router.get("/rarity/id/{rarity_id}", response_model=schemas.Rarity)
def read_rarity(rarity_id: int, reference: ReferenceData = Depends(get_reference_data)):
    logger.debug(f"Requesting item rarity by ID {rarity_id}")
    rarity = reference.get_rarity(rarity_id)
    if rarity is None:
        raise NotFound("A rarity with that ID could not be found.")
    return rarity


@router.get("/rarity/name/{name}", response_model=schemas.Rarity)
def read_rarity_by_name(name: str, reference: ReferenceData = Depends(get_reference_data)):
    logger.debug(f"Requesting item rarity by name '{name}'")
    rarity = reference.get_rarity_by_name(name)
    if rarity is None:
        raise NotFound("A rarity with that name could not be found.")
    return rarity


# --- Types ---
@router.get("/types", response_model=List[schemas.ItemType])
def list_types(reference: ReferenceData = Depends(get_reference_data)):
    return reference.types


@router.get("/type/id/{type_id}", response_model=schemas.ItemType)
def read_type(type_id: int, reference: ReferenceData = Depends(get_reference_data)):
    logger.debug(f"Requesting item type by ID {type_id}")
    item_type = reference.get_type(type_id)
    if item_type is None:
        raise NotFound("A type with that ID could not be found.")
    return item_type


@router.get("/type/name/{name}", response_model=schemas.ItemType)
def read_type_by_name(name: str, reference: ReferenceData = Depends(get_reference_data)):
    logger.debug(f"Requesting item type by name '{name}'")
    item_type = reference.get_type_by_name(name)
    if item_type is None:
        raise NotFound("A type with that name could not be found.")
    return item_type
