# backend/economy/crud/utils.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.errors import StoreFailure

logger = logging.getLogger(__name__)


def commit_or_raise(db: Session, action: str) -> None:
    """
    Commits everything staged on the session as one transaction.
    On failure the session is rolled back, so multi-row updates never half-apply.
    """
    try:
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Commit failed while trying to {action}: {e}", exc_info=True)
        db.rollback()
        raise StoreFailure(f"An error occurred while trying to {action}") from e


def clamp(value: int, minimum: int, maximum: int) -> int:
    return min(max(value, minimum), maximum)
