"""Item and Tag models - canonical grocery products and their alternate names."""

from sqlalchemy import String, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shopfaster.db.base import Base
from shopfaster.models.mixins import IntegerPrimaryKeyMixin, TimestampMixin


class Item(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "items"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)

    # Relationships
    tags = relationship("Tag", back_populates="item", lazy="selectin", cascade="all, delete-orphan")
    inventory = relationship("InventoryItem", back_populates="item")

    def __repr__(self) -> str:
        return f"<Item {self.name}>"


class Tag(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True
    )

    item = relationship("Item", back_populates="tags")

    def __repr__(self) -> str:
        return f"<Tag {self.name} -> item={self.item_id}>"
