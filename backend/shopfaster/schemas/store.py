"""Store and grid schemas."""

from pydantic import BaseModel, ConfigDict, Field


class NeighborRef(BaseModel):
    """Reference to an adjacent grid cell by coordinate, not an embedded tile."""
    column: int
    row: int


class TileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    store_id: int
    column: int
    row: int
    obstacle: bool


class GridTile(TileResponse):
    """Tile decorated with its 8 clockwise neighbors, starting directly above."""
    neighbors: list[NeighborRef | None] = Field(default_factory=list)


class StoreGrid(BaseModel):
    num_cols: int
    num_rows: int
    # Indexed grid[column][row]; None marks a coordinate with no tile
    grid: list[list[GridTile | None]]


class StoreResponse(BaseModel):
    id: int
    name: str
    map_url: str | None = None
    entrance_tile: GridTile | None = None
    checkout_tile: GridTile | None = None
    num_cols: int
    num_rows: int
    grid: list[list[GridTile | None]]


class StoreListResponse(BaseModel):
    stores: list[StoreResponse]


class CurrentStoreResponse(BaseModel):
    current_store: StoreResponse | None = None
