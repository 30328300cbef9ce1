# backend/economy/crud/crud_item.py
import logging
import uuid
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from .. import models, schemas
from ..core.errors import InvalidRarity, InvalidType, NotEquippable, NotFound, StackLimitExceeded
from ..reference_data import ReferenceData
from . import crud_account
from .utils import commit_or_raise

logger = logging.getLogger(__name__)

NULLABLE_ITEM_FIELDS = ("description", "attributes")


def get_item(db: Session, item_id: uuid.UUID) -> Optional[models.Item]:
    return db.query(models.Item).filter(models.Item.id == item_id).first()


def require_item(db: Session, item_id: uuid.UUID) -> models.Item:
    item = get_item(db, item_id)
    if item is None:
        raise NotFound("An item with that ID does not exist")
    return item


def get_stack_members(db: Session, item: models.Item, include_dropped: bool = True) -> List[models.Item]:
    """Every item with the same name and owner as `item`, itself included. Rarity and type are ignored."""
    query = db.query(models.Item).filter(
        models.Item.name == item.name,
        models.Item.owner_id == item.owner_id,
    )
    if not include_dropped:
        query = query.filter(models.Item.is_dropped.is_(False))
    return query.order_by(models.Item.type_id, models.Item.id).all()


def get_items_by_owner(db: Session, owner_id: str) -> List[models.Item]:
    return (
        db.query(models.Item)
        .filter(models.Item.owner_id == owner_id)
        .order_by(models.Item.type_id, models.Item.name, models.Item.id)
        .all()
    )


# --- Display ---

def to_display(item: models.Item, reference: ReferenceData, amount: int = 1) -> schemas.ItemDisplay:
    return schemas.ItemDisplay(
        id=item.id,
        owner_id=item.owner_id,
        name=item.name,
        description=item.description,
        type=reference.get_type(item.type_id),
        rarity=reference.get_rarity(item.rarity_id),
        amount=amount,
        is_equipped=item.is_equipped,
        is_dropped=item.is_dropped,
        attributes=item.attributes,
    )


def build_stacks(items: Sequence[models.Item], reference: ReferenceData) -> List[schemas.ItemDisplay]:
    """
    Groups items by (name, dropped state), keeping first-seen order. Each group becomes one
    display record carrying the first member's values and the group size as `amount`.
    Callers pass items of a single owner.
    """
    groups: Dict[Tuple[str, bool], List[models.Item]] = {}
    for item in items:
        groups.setdefault((item.name, item.is_dropped), []).append(item)
    return [to_display(members[0], reference, amount=len(members)) for members in groups.values()]


def get_item_display(
    db: Session, reference: ReferenceData, item_id: uuid.UUID, stack: bool = False
) -> List[schemas.ItemDisplay]:
    item = require_item(db, item_id)
    if not stack:
        return [to_display(item, reference)]

    members = get_stack_members(db, item)
    if len(members) <= 1:
        return [to_display(item, reference)]
    return build_stacks(members, reference)


def get_inventory(db: Session, reference: ReferenceData, owner_id: str) -> List[schemas.ItemDisplay]:
    crud_account.require_account(db, owner_id)
    return build_stacks(get_items_by_owner(db, owner_id), reference)


# --- Validation ---

def _validate_references(
    reference: ReferenceData, type_id: Optional[int], rarity_id: Optional[int], amount: Optional[int] = None
) -> None:
    if type_id is not None:
        item_type = reference.get_type(type_id)
        if item_type is None:
            raise InvalidType("Type supplied does not exist")
        if amount is not None and amount > item_type.max_stack_amount:
            raise StackLimitExceeded(
                f"Stack amount {amount} exceeds the {item_type.name} limit of {item_type.max_stack_amount}"
            )
    if rarity_id is not None and reference.get_rarity(rarity_id) is None:
        raise InvalidRarity("Rarity supplied does not exist")


# --- Mutations ---

def create_items(db: Session, reference: ReferenceData, *, item_in: schemas.ItemCreate) -> List[uuid.UUID]:
    """
    Inserts `item_in.amount` separate rows and returns their ids in insertion order.
    All checks run before the first insert.
    """
    _validate_references(reference, item_in.type_id, item_in.rarity_id, amount=item_in.amount)
    crud_account.require_account(db, item_in.owner_id)

    new_items = [
        models.Item(
            id=uuid.uuid4(),
            name=item_in.name,
            description=item_in.description,
            rarity_id=item_in.rarity_id,
            type_id=item_in.type_id,
            owner_id=item_in.owner_id,
            attributes=item_in.attributes,
            is_equipped=False,
            is_dropped=False,
        )
        for _ in range(item_in.amount)
    ]
    db.add_all(new_items)
    commit_or_raise(db, "create the items")

    item_ids = [item.id for item in new_items]
    logger.info(f"Created {len(item_ids)}x '{item_in.name}' for {item_in.owner_id}: {item_ids}")
    return item_ids


def update_item(
    db: Session, reference: ReferenceData, *, item_id: uuid.UUID, item_in: schemas.ItemUpdate
) -> models.Item:
    db_item = require_item(db, item_id)
    # description and attributes may be cleared; the other columns are NOT NULL
    update_data = {
        key: value
        for key, value in item_in.model_dump(exclude_unset=True).items()
        if value is not None or key in NULLABLE_ITEM_FIELDS
    }
    _validate_references(reference, update_data.get("type_id"), update_data.get("rarity_id"))

    for key, value in update_data.items():
        setattr(db_item, key, value)
    commit_or_raise(db, "update the item")
    db.refresh(db_item)
    logger.info(f"Updated item {item_id}: {sorted(update_data)}")
    return db_item


def transfer_item(db: Session, *, item_id: uuid.UUID, new_owner_id: str, stack: bool = False) -> List[models.Item]:
    """
    Moves the item to `new_owner_id`. With `stack` and more than one held unit of the same name and owner,
    moves those held units instead; a dropped source item then stays with its owner.
    Equip and drop state travel with the item unchanged. Returns the moved items.
    """
    item = require_item(db, item_id)
    new_owner = crud_account.get_account(db, new_owner_id)
    if new_owner is None:
        raise NotFound("This user does not exist")

    to_move = [item]
    if stack:
        held = get_stack_members(db, item, include_dropped=False)
        if len(held) > 1:
            to_move = held

    previous_owner = item.owner_id
    for db_item in to_move:
        db_item.owner_id = new_owner.id
    commit_or_raise(db, "transfer the item")

    logger.info(f"Transferred {len(to_move)}x '{item.name}' from {previous_owner} to {new_owner.id}")
    return to_move


def set_equipped(db: Session, reference: ReferenceData, *, item_id: uuid.UUID, equipped: bool) -> models.Item:
    item = require_item(db, item_id)
    item_type = reference.get_type(item.type_id)
    if item_type is None or not item_type.is_equippable:
        type_name = item_type.name if item_type else f"type {item.type_id}"
        logger.warning(f"[EQUIP_FAIL] Item '{item.name}' ({item_id}) of {type_name} is not equippable.")
        raise NotEquippable(f"{item.name} is not equippable")

    item.is_equipped = equipped
    commit_or_raise(db, "equip the item" if equipped else "unequip the item")
    logger.debug(f"Item {item_id} is_equipped -> {equipped}")
    return item


def set_dropped(db: Session, *, item_id: uuid.UUID, dropped: bool, stack: bool = False) -> List[models.Item]:
    """
    Drops or picks up the item. Either direction clears is_equipped, so a dropped item is
    never equipped and a picked-up item has to be equipped again explicitly.
    With `stack`, every unit of the same name and owner is updated, whatever its current drop state.
    """
    item = require_item(db, item_id)

    targets = [item]
    if stack:
        members = get_stack_members(db, item)
        if len(members) > 1:
            targets = members

    for db_item in targets:
        db_item.is_dropped = dropped
        db_item.is_equipped = False
    commit_or_raise(db, "drop the item" if dropped else "pick up the item")

    logger.info(f"{'Dropped' if dropped else 'Picked up'} {len(targets)}x '{item.name}' owned by {item.owner_id}")
    return targets
