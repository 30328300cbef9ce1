# backend/economy/api/endpoints/accounts.py
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...core.errors import MissingParameter
from ...db.session import get_db
from ...reference_data import ReferenceData
from ..dependencies import get_reference_data

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/leaderboard/", response_model=List[schemas.AccountSummary])
def read_leaderboard(db: Session = Depends(get_db)):
    """
    Every account, richest first.
    """
    logger.info("Requesting account leaderboard")
    return crud.crud_account.get_leaderboard(db)


@router.get("/{account_id}/", response_model=schemas.Account)
def read_account(
    account_id: str,
    db: Session = Depends(get_db),
    reference: ReferenceData = Depends(get_reference_data),
):
    logger.info(f"Requesting account {account_id}")
    account = crud.crud_account.require_account(db, account_id)
    inventory = crud.crud_item.get_inventory(db, reference, account_id)
    return schemas.Account(
        id=account.id,
        dollars=account.dollars,
        hp=account.hp,
        faction_id=account.faction_id,
        inventory=inventory,
    )


@router.post("/create/{account_id}/", response_model=schemas.AccountStats)
def create_account(account_id: str, db: Session = Depends(get_db)):
    logger.info(f"Requesting to create account {account_id}")
    return crud.crud_account.create_account(db, account_id)


# A delta of 0 is treated as a missing parameter, as the bot clients have always relied on.
@router.post("/{account_id}/add-hp/{amount}/", response_model=schemas.HpResponse)
def add_hp(account_id: str, amount: int, db: Session = Depends(get_db)):
    logger.info(f"Attempting to modify account {account_id} hp by {amount}")
    if not amount:
        raise MissingParameter("User ID & health amount parameters not supplied")
    return schemas.HpResponse(hp=crud.crud_account.adjust_hp(db, account_id, amount))


@router.post("/{account_id}/add-dollars/{amount}/", response_model=schemas.DollarsResponse)
def add_dollars(account_id: str, amount: int, db: Session = Depends(get_db)):
    logger.info(f"Attempting to modify account {account_id} dollars by {amount}")
    if not amount:
        raise MissingParameter("User ID & dollars amount parameters not supplied")
    return schemas.DollarsResponse(dollars=crud.crud_account.adjust_dollars(db, account_id, amount))
