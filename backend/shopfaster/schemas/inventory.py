"""Inventory schemas for request/response."""

from pydantic import BaseModel, ConfigDict

from shopfaster.schemas.store import TileResponse


class InventoryItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    store_id: int
    tile_id: int
    item_id: int


class InventoryDetailResponse(BaseModel):
    """Inventory item with the item name and the tile it sits on."""
    inventory_id: int
    name: str
    tile: TileResponse


class InventoryListResponse(BaseModel):
    items: list[InventoryItemResponse]
    count: int


class InventorySearchResult(BaseModel):
    inventory_id: int
    name: str


class InventorySearchResponse(BaseModel):
    items: list[InventorySearchResult]
