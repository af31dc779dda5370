"""Item and tag schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ItemDetailResponse(ItemResponse):
    tags: list[TagResponse] = []


class ItemListResponse(BaseModel):
    items: list[ItemResponse]
    total: int


class ItemCreate(BaseModel):
    """Create an item and place it on the tile at (column, row) of a store."""
    name: str = Field(..., min_length=1, max_length=255)
    store_id: int
    column: int = Field(..., ge=0)
    row: int = Field(..., ge=0)
    tags: list[str] = []


class ItemCreateResponse(BaseModel):
    item_id: int
    created: bool


class ItemSeed(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    column: int = Field(..., ge=0)
    row: int = Field(..., ge=0)
    tags: list[str] = []


class ItemBulkCreate(BaseModel):
    """Seeding payload: many items for one store."""
    store_id: int
    items: list[ItemSeed] = Field(..., min_length=1)


class ItemBulkCreateResponse(BaseModel):
    items_created: int
    inventory_created: int
