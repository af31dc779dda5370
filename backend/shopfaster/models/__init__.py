"""SQLAlchemy models for ShopFaster."""

from shopfaster.models.store import Store
from shopfaster.models.tile import Tile
from shopfaster.models.item import Item, Tag
from shopfaster.models.inventory import InventoryItem
from shopfaster.models.user import User
from shopfaster.models.list_item import ListItem

__all__ = [
    "Store",
    "Tile",
    "Item",
    "Tag",
    "InventoryItem",
    "User",
    "ListItem",
]
