# backend/economy/models/item.py
import uuid
from typing import TYPE_CHECKING, Any, Dict, Optional

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..db.base_class import Base

if TYPE_CHECKING:
    from .account import Account  # noqa: F401


class Item(Base):
    """
    One physical unit. A stack of five arrows is five rows sharing name and owner;
    stacks only exist at read time (see crud_item.build_stacks).
    """

    __tablename__ = "items"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_id: Mapped[str] = mapped_column(String(64), ForeignKey("accounts.id"), index=True, nullable=False)

    name: Mapped[str] = mapped_column(String(100), index=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Ids into the reference data (types.json / rarities.json), not foreign keys
    type_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    rarity_id: Mapped[int] = mapped_column(Integer, nullable=False)

    is_equipped: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_dropped: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    attributes: Mapped[Optional[Dict[str, Any]]] = mapped_column(
        JSON, nullable=True, comment="Free-form modifiers, e.g. {'damage': 4, 'element': 'fire'}"
    )

    owner: Mapped["Account"] = relationship(back_populates="items")

    def __repr__(self) -> str:
        return (
            f"<Item(id={self.id}, name='{self.name}', owner='{self.owner_id}', "
            f"equipped={self.is_equipped}, dropped={self.is_dropped})>"
        )
