# backend/economy/crud/crud_account.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models
from ..core.errors import AlreadyExists, NotFound
from ..models.account import DEFAULT_DOLLARS, DEFAULT_HP, MAX_HP, MIN_HP
from .utils import clamp, commit_or_raise

logger = logging.getLogger(__name__)


def get_account(db: Session, account_id: str) -> Optional[models.Account]:
    return db.query(models.Account).filter(models.Account.id == account_id).first()


def require_account(db: Session, account_id: str) -> models.Account:
    account = get_account(db, account_id)
    if account is None:
        raise NotFound("A user with that ID does not exist")
    return account


def get_leaderboard(db: Session) -> List[models.Account]:
    return db.query(models.Account).order_by(models.Account.dollars.desc(), models.Account.id).all()


def create_account(db: Session, account_id: str) -> models.Account:
    if get_account(db, account_id) is not None:
        raise AlreadyExists("A user with that ID already exists")

    db_account = models.Account(id=account_id, dollars=DEFAULT_DOLLARS, hp=DEFAULT_HP, faction_id=None)
    db.add(db_account)
    commit_or_raise(db, "create the account")
    db.refresh(db_account)
    logger.info(f"Created account {account_id}")
    return db_account


def adjust_hp(db: Session, account_id: str, delta: int) -> int:
    """Adds `delta` to the account's hp, clamped to [0, 100]. Persists even when nothing changes."""
    account = require_account(db, account_id)
    new_hp = clamp(account.hp + delta, MIN_HP, MAX_HP)
    account.hp = new_hp
    commit_or_raise(db, "update the account's hp")
    logger.info(f"Account {account_id} hp adjusted by {delta} -> {new_hp}")
    return new_hp


def adjust_dollars(db: Session, account_id: str, delta: int) -> int:
    """Adds `delta` to the account's dollars. Balances may go negative."""
    account = require_account(db, account_id)
    new_dollars = account.dollars + delta
    account.dollars = new_dollars
    commit_or_raise(db, "update the account's dollars")
    logger.info(f"Account {account_id} dollars adjusted by {delta} -> {new_dollars}")
    return new_dollars
