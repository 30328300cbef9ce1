# backend/economy/models/faction.py
import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..db.base_class import Base

if TYPE_CHECKING:
    from .account import Account  # noqa: F401


class Faction(Base):
    __tablename__ = "factions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # Uniqueness is checked by crud_faction.create_faction, not by the database
    name: Mapped[str] = mapped_column(String(100), index=True, nullable=False)
    emoji_name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Membership lives on accounts.faction_id
    members: Mapped[List["Account"]] = relationship(back_populates="faction", order_by="Account.id")

    def __repr__(self) -> str:
        return f"<Faction(id={self.id}, name='{self.name}', emoji='{self.emoji_name}')>"
