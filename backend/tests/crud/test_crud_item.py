# backend/tests/crud/test_crud_item.py
import uuid
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from economy import models, schemas
from economy.core.errors import (
    InvalidRarity,
    InvalidType,
    NotEquippable,
    NotFound,
    StackLimitExceeded,
    StoreFailure,
)
from economy.crud import crud_item

WEAPON, CONSUMABLE, AMMUNITION = 1, 3, 5
COMMON, RARE = 1, 3


def _create(db, reference, name="Arrow", amount=1, owner="alice", type_id=AMMUNITION, rarity_id=COMMON, **extra):
    item_in = schemas.ItemCreate(
        name=name, amount=amount, owner_id=owner, type_id=type_id, rarity_id=rarity_id, **extra
    )
    return crud_item.create_items(db, reference, item_in=item_in)


@pytest.fixture
def alice(make_account):
    return make_account("alice")


@pytest.fixture
def bob(make_account):
    return make_account("bob")


# --- Creation ---

def test_create_inserts_one_row_per_unit(db, reference, alice):
    ids = _create(db, reference, amount=5, attributes={"damage": 2})

    assert len(ids) == 5
    assert len(set(ids)) == 5
    rows = db.query(models.Item).filter(models.Item.owner_id == "alice").all()
    assert {row.id for row in rows} == set(ids)
    assert all(row.attributes == {"damage": 2} for row in rows)
    assert not any(row.is_equipped or row.is_dropped for row in rows)


def test_create_over_stack_limit_inserts_nothing(db, reference, alice):
    with pytest.raises(StackLimitExceeded):
        _create(db, reference, name="Potion", type_id=CONSUMABLE, amount=11)

    assert db.query(models.Item).count() == 0


def test_create_at_stack_limit_is_allowed(db, reference, alice):
    assert len(_create(db, reference, name="Potion", type_id=CONSUMABLE, amount=10)) == 10


def test_create_rejects_unknown_type_and_rarity(db, reference, alice):
    with pytest.raises(InvalidType):
        _create(db, reference, type_id=999)
    with pytest.raises(InvalidRarity):
        _create(db, reference, rarity_id=999)
    assert db.query(models.Item).count() == 0


def test_create_requires_existing_owner(db, reference):
    with pytest.raises(NotFound):
        _create(db, reference, owner="nobody")


def test_create_surfaces_store_failure(db, reference, alice):
    with patch.object(db, "commit", side_effect=OperationalError("INSERT", {}, Exception("disk full"))):
        with pytest.raises(StoreFailure):
            _create(db, reference, amount=3)
    assert db.query(models.Item).count() == 0


# --- Stack resolution ---

def test_stack_display_counts_all_units(db, reference, alice):
    ids = _create(db, reference, amount=4)

    stacks = crud_item.get_item_display(db, reference, ids[0], stack=True)

    assert len(stacks) == 1
    assert stacks[0].amount == 4
    assert stacks[0].name == "Arrow"
    assert stacks[0].type.name == "Ammunition"
    assert stacks[0].rarity.name == "Common"


def test_non_stack_display_is_a_single_unit(db, reference, alice):
    ids = _create(db, reference, amount=4)

    records = crud_item.get_item_display(db, reference, ids[0], stack=False)

    assert len(records) == 1
    assert records[0].amount == 1
    assert records[0].id == ids[0]


def test_stack_ignores_rarity_and_type_but_splits_on_dropped(db, reference, alice):
    ids = _create(db, reference, amount=3)
    _create(db, reference, amount=1, rarity_id=RARE, type_id=WEAPON)
    crud_item.set_dropped(db, item_id=ids[0], dropped=True)

    stacks = crud_item.get_item_display(db, reference, ids[1], stack=True)

    by_dropped = {s.is_dropped: s.amount for s in stacks}
    assert by_dropped == {False: 3, True: 1}


def test_stack_of_one_falls_back_to_single_item(db, reference, alice):
    (item_id,) = _create(db, reference, name="Sword", type_id=WEAPON)

    records = crud_item.get_item_display(db, reference, item_id, stack=True)

    assert len(records) == 1
    assert records[0].id == item_id
    assert records[0].amount == 1


def test_stack_does_not_cross_owners(db, reference, alice, bob):
    ids = _create(db, reference, amount=2)
    _create(db, reference, amount=3, owner="bob")

    stacks = crud_item.get_item_display(db, reference, ids[0], stack=True)
    assert [s.amount for s in stacks] == [2]


def test_display_unknown_item(db, reference):
    with pytest.raises(NotFound):
        crud_item.get_item_display(db, reference, uuid.uuid4())


# --- Transfer ---

def test_single_transfer_leaves_siblings_alone(db, reference, alice, bob):
    ids = _create(db, reference, amount=3)

    moved = crud_item.transfer_item(db, item_id=ids[0], new_owner_id="bob", stack=False)

    assert [i.id for i in moved] == [ids[0]]
    owners = {i.id: i.owner_id for i in db.query(models.Item).all()}
    assert owners[ids[0]] == "bob"
    assert owners[ids[1]] == owners[ids[2]] == "alice"


def test_stack_transfer_moves_held_units_only(db, reference, alice, bob):
    ids = _create(db, reference, amount=4)
    crud_item.set_dropped(db, item_id=ids[3], dropped=True)

    moved = crud_item.transfer_item(db, item_id=ids[0], new_owner_id="bob", stack=True)

    assert {i.id for i in moved} == set(ids[:3])
    assert crud_item.get_item(db, ids[3]).owner_id == "alice"
    assert all(crud_item.get_item(db, i).owner_id == "bob" for i in ids[:3])


def test_stack_transfer_from_dropped_unit_moves_held_units(db, reference, alice, bob):
    ids = _create(db, reference, amount=3)
    crud_item.set_dropped(db, item_id=ids[0], dropped=True)

    moved = crud_item.transfer_item(db, item_id=ids[0], new_owner_id="bob", stack=True)

    assert {i.id for i in moved} == set(ids[1:])
    assert all(crud_item.get_item(db, i).owner_id == "bob" for i in ids[1:])
    assert crud_item.get_item(db, ids[0]).owner_id == "alice"


def test_stack_transfer_of_dropped_unit_with_one_held_sibling_moves_only_itself(db, reference, alice, bob):
    ids = _create(db, reference, amount=2)
    crud_item.set_dropped(db, item_id=ids[0], dropped=True)

    moved = crud_item.transfer_item(db, item_id=ids[0], new_owner_id="bob", stack=True)

    assert [i.id for i in moved] == [ids[0]]
    assert crud_item.get_item(db, ids[1]).owner_id == "alice"


def test_stack_transfer_rolls_back_on_store_failure(db, reference, alice, bob):
    ids = _create(db, reference, amount=3)

    with patch.object(db, "commit", side_effect=OperationalError("UPDATE", {}, Exception("connection lost"))):
        with pytest.raises(StoreFailure):
            crud_item.transfer_item(db, item_id=ids[0], new_owner_id="bob", stack=True)

    assert all(crud_item.get_item(db, i).owner_id == "alice" for i in ids)


def test_transfer_keeps_equip_state(db, reference, alice, bob):
    (item_id,) = _create(db, reference, name="Sword", type_id=WEAPON)
    crud_item.set_equipped(db, reference, item_id=item_id, equipped=True)

    crud_item.transfer_item(db, item_id=item_id, new_owner_id="bob")

    item = crud_item.get_item(db, item_id)
    assert item.owner_id == "bob"
    assert item.is_equipped is True


def test_transfer_to_unknown_account(db, reference, alice):
    (item_id,) = _create(db, reference)
    with pytest.raises(NotFound):
        crud_item.transfer_item(db, item_id=item_id, new_owner_id="ghost")
    assert crud_item.get_item(db, item_id).owner_id == "alice"


def test_transfer_unknown_item(db, bob):
    with pytest.raises(NotFound):
        crud_item.transfer_item(db, item_id=uuid.uuid4(), new_owner_id="bob")


# --- Equip ---

def test_equip_and_unequip(db, reference, alice):
    (item_id,) = _create(db, reference, name="Sword", type_id=WEAPON)

    assert crud_item.set_equipped(db, reference, item_id=item_id, equipped=True).is_equipped is True
    assert crud_item.set_equipped(db, reference, item_id=item_id, equipped=False).is_equipped is False


def test_equip_non_equippable_type_fails_and_changes_nothing(db, reference, alice):
    (item_id,) = _create(db, reference, name="Potion", type_id=CONSUMABLE)

    with pytest.raises(NotEquippable):
        crud_item.set_equipped(db, reference, item_id=item_id, equipped=True)
    assert crud_item.get_item(db, item_id).is_equipped is False


def test_equip_unknown_item(db, reference):
    with pytest.raises(NotFound):
        crud_item.set_equipped(db, reference, item_id=uuid.uuid4(), equipped=True)


# --- Drop / pickup ---

def test_stack_drop_updates_every_unit_and_unequips(db, reference, alice):
    ids = _create(db, reference, amount=3)
    for item_id in ids:
        crud_item.set_equipped(db, reference, item_id=item_id, equipped=True)

    dropped = crud_item.set_dropped(db, item_id=ids[0], dropped=True, stack=True)

    assert {i.id for i in dropped} == set(ids)
    for item_id in ids:
        item = crud_item.get_item(db, item_id)
        assert item.is_dropped is True
        assert item.is_equipped is False


def test_single_drop_touches_only_target(db, reference, alice):
    ids = _create(db, reference, amount=2)

    crud_item.set_dropped(db, item_id=ids[0], dropped=True, stack=False)

    assert crud_item.get_item(db, ids[0]).is_dropped is True
    assert crud_item.get_item(db, ids[1]).is_dropped is False


def test_pickup_clears_equip(db, reference, alice):
    (item_id,) = _create(db, reference, name="Sword", type_id=WEAPON)
    crud_item.set_equipped(db, reference, item_id=item_id, equipped=True)

    item = crud_item.set_dropped(db, item_id=item_id, dropped=False)[0]

    assert item.is_dropped is False
    assert item.is_equipped is False


def test_stack_pickup_includes_already_dropped_units(db, reference, alice):
    ids = _create(db, reference, amount=3)
    crud_item.set_dropped(db, item_id=ids[0], dropped=True, stack=True)

    picked_up = crud_item.set_dropped(db, item_id=ids[1], dropped=False, stack=True)

    assert len(picked_up) == 3
    assert not any(crud_item.get_item(db, i).is_dropped for i in ids)


def test_stack_drop_rolls_back_on_store_failure(db, reference, alice):
    ids = _create(db, reference, amount=3)

    with patch.object(db, "commit", side_effect=OperationalError("UPDATE", {}, Exception("connection lost"))):
        with pytest.raises(StoreFailure):
            crud_item.set_dropped(db, item_id=ids[0], dropped=True, stack=True)

    assert not any(crud_item.get_item(db, i).is_dropped for i in ids)


# --- Edit ---

def test_update_item_validates_references(db, reference, alice):
    (item_id,) = _create(db, reference, name="Sword", type_id=WEAPON)

    with pytest.raises(InvalidRarity):
        crud_item.update_item(db, reference, item_id=item_id, item_in=schemas.ItemUpdate(rarity_id=42))

    updated = crud_item.update_item(
        db, reference, item_id=item_id,
        item_in=schemas.ItemUpdate(name="Flaming Sword", rarity_id=RARE, attributes={"element": "fire"}),
    )
    assert updated.name == "Flaming Sword"
    assert updated.rarity_id == RARE
    assert updated.attributes == {"element": "fire"}
    assert updated.type_id == WEAPON


# --- Inventory ---

def test_inventory_groups_by_name(db, reference, alice):
    _create(db, reference, name="Arrow", amount=5)
    _create(db, reference, name="Sword", type_id=WEAPON)

    inventory = crud_item.get_inventory(db, reference, "alice")

    assert {(s.name, s.amount) for s in inventory} == {("Arrow", 5), ("Sword", 1)}
    # ordered by type id: weapons before ammunition
    assert inventory[0].name == "Sword"
