"""Tile schemas used by store setup."""

from pydantic import BaseModel, Field

from shopfaster.schemas.store import TileResponse


class TileCreate(BaseModel):
    store_id: int
    column: int = Field(..., ge=0)
    row: int = Field(..., ge=0)
    obstacle: bool = False


class TileBulkCreate(BaseModel):
    tiles: list[TileCreate] = Field(..., min_length=1)


class TileObstacle(BaseModel):
    column: int = Field(..., ge=0)
    row: int = Field(..., ge=0)
    obstacle: bool


class TileObstacleUpdate(BaseModel):
    store_id: int
    tiles: list[TileObstacle] = Field(..., min_length=1)


class TileListResponse(BaseModel):
    tiles: list[TileResponse]
    count: int
