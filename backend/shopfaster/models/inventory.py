"""Inventory model - an item placed on a tile within a store."""

from sqlalchemy import Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shopfaster.db.base import Base
from shopfaster.models.mixins import IntegerPrimaryKeyMixin, TimestampMixin


class InventoryItem(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "inventory_items"
    __table_args__ = (
        UniqueConstraint("store_id", "item_id", name="uq_inventory_items_store_item"),
    )

    # Foreign keys
    store_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True
    )
    tile_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    store = relationship("Store", back_populates="inventory")
    tile = relationship("Tile")
    item = relationship("Item", back_populates="inventory")

    def __repr__(self) -> str:
        return f"<InventoryItem store={self.store_id} item={self.item_id} tile={self.tile_id}>"
