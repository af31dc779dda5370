"""Tile model - one grid square of a store's floor plan."""

from sqlalchemy import Boolean, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shopfaster.db.base import Base
from shopfaster.models.mixins import IntegerPrimaryKeyMixin, TimestampMixin


class Tile(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "tiles"
    __table_args__ = (
        UniqueConstraint("store_id", "column", "row", name="uq_tiles_store_column_row"),
    )

    column: Mapped[int] = mapped_column(Integer, nullable=False)
    row: Mapped[int] = mapped_column(Integer, nullable=False)
    obstacle: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Foreign keys
    store_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    store = relationship("Store", back_populates="tiles", foreign_keys=[store_id])

    def __repr__(self) -> str:
        return f"<Tile store={self.store_id} ({self.column}, {self.row})>"
