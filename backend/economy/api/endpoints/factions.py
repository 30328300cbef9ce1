# backend/economy/api/endpoints/factions.py
import logging
import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ... import crud, models, schemas
from ...core.errors import NotFound
from ...db.session import get_db

logger = logging.getLogger(__name__)
router = APIRouter()


def _faction_with_members(db: Session, faction: models.Faction) -> schemas.Faction:
    members = crud.crud_faction.get_members(db, faction.id)
    return schemas.Faction(
        id=faction.id,
        name=faction.name,
        emoji_name=faction.emoji_name,
        members=[schemas.AccountStats.model_validate(member) for member in members],
    )


@router.get("/id/{faction_id}/", response_model=schemas.Faction)
def read_faction(faction_id: uuid.UUID, db: Session = Depends(get_db)):
    logger.info(f"Requesting faction {faction_id}")
    faction = crud.crud_faction.require_faction(db, faction_id)
    return _faction_with_members(db, faction)


@router.get("/name/{name}/", response_model=schemas.Faction)
def read_faction_by_name(name: str, db: Session = Depends(get_db)):
    logger.info(f"Requesting faction by name '{name}'")
    faction = crud.crud_faction.get_faction_by_name(db, name)
    if faction is None:
        raise NotFound("A faction with that name does not exist")
    return _faction_with_members(db, faction)


@router.post("/create/{name}/{emoji_name}/", response_model=schemas.FactionCreateResponse)
def create_faction(name: str, emoji_name: str, db: Session = Depends(get_db)):
    logger.info(f"Requesting to create faction '{name}' ({emoji_name})")
    faction = crud.crud_faction.create_faction(db, name=name, emoji_name=emoji_name)
    return schemas.FactionCreateResponse(faction_id=faction.id)


@router.post("/{faction_id}/join/{user_id}/", response_model=schemas.MembershipResponse)
def join_faction(faction_id: uuid.UUID, user_id: str, db: Session = Depends(get_db)):
    logger.info(f"Account {user_id} requesting to join faction {faction_id}")
    crud.crud_faction.join_faction(db, faction_id=faction_id, account_id=user_id)
    return schemas.MembershipResponse(
        message="Joined faction successfully!", faction_id=faction_id, user_id=user_id
    )


@router.post("/{faction_id}/leave/{user_id}/", response_model=schemas.MembershipResponse)
def leave_faction(faction_id: uuid.UUID, user_id: str, response: Response, db: Session = Depends(get_db)):
    """
    200 when the faction still has members, 201 when this was the last member and the faction was deleted.
    """
    logger.info(f"Account {user_id} requesting to leave faction {faction_id}")
    dissolved = crud.crud_faction.leave_faction(db, faction_id=faction_id, account_id=user_id)
    response.status_code = status.HTTP_201_CREATED if dissolved else status.HTTP_200_OK
    return schemas.MembershipResponse(
        message="Left faction successfully!", faction_id=faction_id, user_id=user_id, dissolved=dissolved
    )
