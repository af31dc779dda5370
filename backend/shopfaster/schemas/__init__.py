from shopfaster.schemas.store import (
    NeighborRef, TileResponse, GridTile, StoreGrid, StoreResponse,
)
from shopfaster.schemas.list_item import (
    ListItemView, ShoppingListResponse,
)
from shopfaster.schemas.auth import CurrentUser

__all__ = [
    "NeighborRef", "TileResponse", "GridTile", "StoreGrid", "StoreResponse",
    "ListItemView", "ShoppingListResponse",
    "CurrentUser",
]
