"""Initial database schema - stores, tiles, items, tags, inventory items, users, list items

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # --- Stores (entrance/checkout FKs added once tiles exist) ---
    op.create_table(
        "stores",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("map_url", sa.String(500)),
        sa.Column("entrance_tile_id", sa.Integer),
        sa.Column("checkout_tile_id", sa.Integer),
        *_timestamps(),
    )

    # --- Tiles ---
    op.create_table(
        "tiles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("store_id", sa.Integer, sa.ForeignKey("stores.id", ondelete="CASCADE"), nullable=False),
        sa.Column("column", sa.Integer, nullable=False),
        sa.Column("row", sa.Integer, nullable=False),
        sa.Column("obstacle", sa.Boolean, nullable=False, server_default=sa.text("false")),
        *_timestamps(),
        sa.UniqueConstraint("store_id", "column", "row", name="uq_tiles_store_column_row"),
    )
    op.create_index("ix_tiles_store_id", "tiles", ["store_id"])

    op.create_foreign_key(
        "fk_stores_entrance_tile", "stores", "tiles", ["entrance_tile_id"], ["id"], ondelete="SET NULL"
    )
    op.create_foreign_key(
        "fk_stores_checkout_tile", "stores", "tiles", ["checkout_tile_id"], ["id"], ondelete="SET NULL"
    )

    # --- Items ---
    op.create_table(
        "items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        *_timestamps(),
    )
    op.create_index("ix_items_name", "items", ["name"])

    # --- Tags ---
    op.create_table(
        "tags",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("item_id", sa.Integer, sa.ForeignKey("items.id", ondelete="CASCADE"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_tags_name", "tags", ["name"])
    op.create_index("ix_tags_item_id", "tags", ["item_id"])

    # --- Inventory items ---
    op.create_table(
        "inventory_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("store_id", sa.Integer, sa.ForeignKey("stores.id", ondelete="CASCADE"), nullable=False),
        sa.Column("tile_id", sa.Integer, sa.ForeignKey("tiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("item_id", sa.Integer, sa.ForeignKey("items.id", ondelete="CASCADE"), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("store_id", "item_id", name="uq_inventory_items_store_item"),
    )
    op.create_index("ix_inventory_items_store_id", "inventory_items", ["store_id"])
    op.create_index("ix_inventory_items_tile_id", "inventory_items", ["tile_id"])
    op.create_index("ix_inventory_items_item_id", "inventory_items", ["item_id"])

    # --- Users ---
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(255), nullable=False, unique=True),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("current_store_id", sa.Integer, sa.ForeignKey("stores.id", ondelete="SET NULL")),
        *_timestamps(),
    )
    op.create_index("ix_users_username", "users", ["username"])

    # --- List items ---
    op.create_table(
        "list_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("inventory_id", sa.Integer, sa.ForeignKey("inventory_items.id", ondelete="CASCADE"), nullable=False),
        sa.Column("active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        sa.Column("crossed_off", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("sort_order", sa.Integer, nullable=False, server_default=sa.text("0")),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "inventory_id", name="uq_list_items_user_inventory"),
    )
    op.create_index("ix_list_items_user_id", "list_items", ["user_id"])
    op.create_index("ix_list_items_inventory_id", "list_items", ["inventory_id"])


def downgrade() -> None:
    op.drop_table("list_items")
    op.drop_table("users")
    op.drop_table("inventory_items")
    op.drop_table("tags")
    op.drop_table("items")
    op.drop_constraint("fk_stores_checkout_tile", "stores", type_="foreignkey")
    op.drop_constraint("fk_stores_entrance_tile", "stores", type_="foreignkey")
    op.drop_table("tiles")
    op.drop_table("stores")
