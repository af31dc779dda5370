"""Store model."""

from sqlalchemy import String, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shopfaster.db.base import Base
from shopfaster.models.mixins import IntegerPrimaryKeyMixin, TimestampMixin


class Store(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "stores"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    map_url: Mapped[str | None] = mapped_column(String(500), comment="Floor-plan image")

    # Tiles reference stores too, so these FKs are added after both tables exist
    entrance_tile_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("tiles.id", ondelete="SET NULL", use_alter=True, name="fk_stores_entrance_tile"),
    )
    checkout_tile_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("tiles.id", ondelete="SET NULL", use_alter=True, name="fk_stores_checkout_tile"),
    )

    # Relationships
    tiles = relationship("Tile", back_populates="store", foreign_keys="Tile.store_id")
    inventory = relationship("InventoryItem", back_populates="store")

    def __repr__(self) -> str:
        return f"<Store {self.id}: {self.name}>"
