# backend/economy/models/account.py
import uuid
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..db.base_class import Base

if TYPE_CHECKING:
    from .faction import Faction  # noqa: F401
    from .item import Item  # noqa: F401

DEFAULT_DOLLARS = 100
DEFAULT_HP = 100
MIN_HP = 0
MAX_HP = 100


class Account(Base):
    __tablename__ = "accounts"

    # Supplied by the caller (e.g. a chat platform user id), never generated here
    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    # No floor on dollars; only hp is clamped
    dollars: Mapped[int] = mapped_column(Integer, nullable=False, default=DEFAULT_DOLLARS)
    hp: Mapped[int] = mapped_column(Integer, nullable=False, default=DEFAULT_HP)

    faction_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("factions.id", ondelete="SET NULL"), nullable=True, index=True, default=None
    )

    faction: Mapped[Optional["Faction"]] = relationship(back_populates="members")
    items: Mapped[List["Item"]] = relationship(back_populates="owner")

    def __repr__(self) -> str:
        return f"<Account(id='{self.id}', dollars={self.dollars}, hp={self.hp}, faction_id={self.faction_id})>"
