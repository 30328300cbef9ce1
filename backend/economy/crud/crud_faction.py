# backend/economy/crud/crud_faction.py
import logging
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models
from ..core.errors import AlreadyExists, AlreadyInFaction, NotFound
from . import crud_account
from .utils import commit_or_raise

logger = logging.getLogger(__name__)


def get_faction(db: Session, faction_id: uuid.UUID) -> Optional[models.Faction]:
    return db.query(models.Faction).filter(models.Faction.id == faction_id).first()


def get_faction_by_name(db: Session, name: str) -> Optional[models.Faction]:
    return db.query(models.Faction).filter(models.Faction.name == name).first()


def require_faction(db: Session, faction_id: uuid.UUID) -> models.Faction:
    faction = get_faction(db, faction_id)
    if faction is None:
        raise NotFound("A faction with that ID does not exist")
    return faction


def get_members(db: Session, faction_id: uuid.UUID) -> List[models.Account]:
    return (
        db.query(models.Account)
        .filter(models.Account.faction_id == faction_id)
        .order_by(models.Account.id)
        .all()
    )


def create_faction(db: Session, *, name: str, emoji_name: str) -> models.Faction:
    if get_faction_by_name(db, name) is not None:
        raise AlreadyExists("A faction with that name already exists")

    db_faction = models.Faction(id=uuid.uuid4(), name=name, emoji_name=emoji_name)
    db.add(db_faction)
    commit_or_raise(db, "create the faction")
    logger.info(f"Created faction '{name}' ({db_faction.id})")
    return db_faction


def join_faction(db: Session, *, faction_id: uuid.UUID, account_id: str) -> models.Account:
    faction = require_faction(db, faction_id)
    account = crud_account.require_account(db, account_id)
    if account.faction_id is not None:
        raise AlreadyInFaction("This user is already in a faction")

    account.faction_id = faction.id
    commit_or_raise(db, "join the faction")
    logger.info(f"Account {account_id} joined faction '{faction.name}'")
    return account


def leave_faction(db: Session, *, faction_id: uuid.UUID, account_id: str) -> bool:
    """
    Clears the account's faction (without checking it was in this one) and deletes the
    faction if nobody is left in it. Returns True when the faction was dissolved.
    """
    faction = require_faction(db, faction_id)
    account = crud_account.require_account(db, account_id)

    account.faction_id = None
    db.flush()

    dissolved = not get_members(db, faction.id)
    if dissolved:
        db.delete(faction)
    commit_or_raise(db, "leave the faction")

    if dissolved:
        logger.info(f"Account {account_id} left faction '{faction.name}'; no members remain, faction dissolved")
    else:
        logger.info(f"Account {account_id} left faction '{faction.name}'")
    return dissolved
