# backend/economy/api/endpoints/items.py
import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...db.session import get_db
from ...reference_data import ReferenceData
from ..dependencies import get_reference_data

logger = logging.getLogger(__name__)
router = APIRouter()


def _ids(items) -> List[uuid.UUID]:
    return [item.id for item in items]


@router.post("/create/", response_model=schemas.ItemCreateResponse)
def create_items(
    item_in: schemas.ItemCreate,
    db: Session = Depends(get_db),
    reference: ReferenceData = Depends(get_reference_data),
):
    """
    Create `amount` units of an item for `ownerID`. Every unit is its own row with its own id.
    """
    logger.info(f"Requesting to create {item_in.amount}x '{item_in.name}' for {item_in.owner_id}")
    item_ids = crud.crud_item.create_items(db, reference, item_in=item_in)
    return schemas.ItemCreateResponse(item_ids=item_ids)


@router.get("/{item_id}", response_model=List[schemas.ItemDisplay])
def read_item(
    item_id: uuid.UUID,
    stack: bool = Query(False, description="Group the item with every unit of the same name and owner"),
    db: Session = Depends(get_db),
    reference: ReferenceData = Depends(get_reference_data),
):
    """
    Returns one display record, or with `stack` one record per held/dropped group.
    """
    logger.debug(f"Requesting item {item_id} (stack={stack})")
    return crud.crud_item.get_item_display(db, reference, item_id, stack=stack)


@router.patch("/{item_id}/", response_model=schemas.ItemDisplay)
def edit_item(
    item_id: uuid.UUID,
    item_in: schemas.ItemUpdate,
    db: Session = Depends(get_db),
    reference: ReferenceData = Depends(get_reference_data),
):
    logger.info(f"Requesting to edit item {item_id}")
    db_item = crud.crud_item.update_item(db, reference, item_id=item_id, item_in=item_in)
    return crud.crud_item.to_display(db_item, reference)


@router.post("/{item_id}/transfer/{new_owner_id}/", response_model=schemas.ItemActionResponse)
def transfer_item(
    item_id: uuid.UUID,
    new_owner_id: str,
    stack: bool = Query(False),
    db: Session = Depends(get_db),
):
    logger.info(f"Requesting to transfer item {item_id} to {new_owner_id} (stack={stack})")
    moved = crud.crud_item.transfer_item(db, item_id=item_id, new_owner_id=new_owner_id, stack=stack)
    return schemas.ItemActionResponse(message="Item transferred successfully", item_ids=_ids(moved))


@router.post("/{item_id}/equip/", response_model=schemas.ItemActionResponse)
def equip_item(
    item_id: uuid.UUID,
    db: Session = Depends(get_db),
    reference: ReferenceData = Depends(get_reference_data),
):
    item = crud.crud_item.set_equipped(db, reference, item_id=item_id, equipped=True)
    return schemas.ItemActionResponse(message=f"{item.name} equipped", item_ids=[item.id])


@router.post("/{item_id}/unequip/", response_model=schemas.ItemActionResponse)
def unequip_item(
    item_id: uuid.UUID,
    db: Session = Depends(get_db),
    reference: ReferenceData = Depends(get_reference_data),
):
    item = crud.crud_item.set_equipped(db, reference, item_id=item_id, equipped=False)
    return schemas.ItemActionResponse(message=f"{item.name} unequipped", item_ids=[item.id])


@router.post("/{item_id}/drop/", response_model=schemas.ItemActionResponse)
def drop_item(
    item_id: uuid.UUID,
    stack: bool = Query(False),
    db: Session = Depends(get_db),
):
    dropped = crud.crud_item.set_dropped(db, item_id=item_id, dropped=True, stack=stack)
    return schemas.ItemActionResponse(message="Item dropped", item_ids=_ids(dropped))


@router.post("/{item_id}/pickup/", response_model=schemas.ItemActionResponse)
def pickup_item(
    item_id: uuid.UUID,
    stack: bool = Query(False),
    db: Session = Depends(get_db),
):
    picked_up = crud.crud_item.set_dropped(db, item_id=item_id, dropped=False, stack=stack)
    return schemas.ItemActionResponse(message="Item picked up", item_ids=_ids(picked_up))
