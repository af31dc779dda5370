"""ListItem model - one entry on a user's shopping list."""

from sqlalchemy import Boolean, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shopfaster.db.base import Base
from shopfaster.models.mixins import IntegerPrimaryKeyMixin, TimestampMixin


class ListItem(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "list_items"
    __table_args__ = (
        UniqueConstraint("user_id", "inventory_id", name="uq_list_items_user_inventory"),
    )

    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    crossed_off: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Foreign keys
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    inventory_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("inventory_items.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    user = relationship("User", back_populates="list_items")
    inventory_item = relationship("InventoryItem")

    def __repr__(self) -> str:
        return (
            f"<ListItem user={self.user_id} inventory={self.inventory_id} "
            f"active={self.active} crossed_off={self.crossed_off}>"
        )
