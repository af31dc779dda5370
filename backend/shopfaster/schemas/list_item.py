"""Shopping list schemas."""

from pydantic import BaseModel, Field


class ListItemView(BaseModel):
    """Flattened list entry joined with its inventory item, item and tile."""
    list_item_id: int
    sort_order: int
    active: bool
    crossed_off: bool
    inventory_id: int
    item_id: int
    name: str
    tile_id: int
    column: int
    row: int
    store_id: int


class ShoppingListResponse(BaseModel):
    current_store_id: int | None = None
    list_items: list[ListItemView]


# ── Mutations ──────────────────────────────────────
class ListItemAdd(BaseModel):
    inventory_id: int


class ListItemBulkAdd(BaseModel):
    inventory_ids: list[int] = Field(..., min_length=1)


class ActiveUpdate(BaseModel):
    active: bool


class CrossedOffUpdate(BaseModel):
    crossed_off: bool


class SortOrderUpdate(BaseModel):
    sort_order: int


class SortOrderEntry(BaseModel):
    list_item_id: int
    sort_order: int


class SortOrderBulkUpdate(BaseModel):
    items: list[SortOrderEntry] = Field(..., min_length=1)
