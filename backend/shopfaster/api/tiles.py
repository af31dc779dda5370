"""Tile endpoints used when laying out a store's floor plan."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shopfaster.db.base import get_db
from shopfaster.models.store import Store
from shopfaster.models.tile import Tile
from shopfaster.schemas.store import TileResponse
from shopfaster.schemas.tile import (
    TileCreate,
    TileBulkCreate,
    TileObstacleUpdate,
    TileListResponse,
)
from shopfaster.services.tiles import get_tile_by_coordinate, get_tiles_by_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tiles", tags=["tiles"])


async def _require_store(db: AsyncSession, store_id: int) -> Store:
    result = await db.execute(select(Store).where(Store.id == store_id))
    store = result.scalar_one_or_none()
    if not store:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No store by that ID",
        )
    return store


@router.post("", response_model=TileResponse, status_code=status.HTTP_201_CREATED)
async def create_tile(body: TileCreate, db: AsyncSession = Depends(get_db)):
    """Add one tile; a store has at most one tile per (column, row)."""
    await _require_store(db, body.store_id)

    if await get_tile_by_coordinate(db, body.store_id, body.column, body.row):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Tile already exists at that column/row",
        )

    tile = Tile(**body.model_dump())
    db.add(tile)
    try:
        await db.flush()
    except IntegrityError:
        logger.info(
            "Concurrent tile insert rejected: store=%s (%s, %s)",
            body.store_id, body.column, body.row,
        )
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Tile already exists at that column/row",
        )

    return TileResponse.model_validate(tile)


@router.post("/bulk", response_model=TileListResponse, status_code=status.HTTP_201_CREATED)
async def create_tiles(body: TileBulkCreate, db: AsyncSession = Depends(get_db)):
    """Add many tiles at once (store setup/seeding)."""
    tiles = [Tile(**t.model_dump()) for t in body.tiles]
    db.add_all(tiles)
    try:
        await db.flush()
    except IntegrityError:
        logger.warning("Bulk tile insert rejected: duplicate coordinate or unknown store")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Tiles conflict with existing tiles or reference an unknown store",
        )

    logger.info("Added %d tiles", len(tiles))
    return TileListResponse(
        tiles=[TileResponse.model_validate(t) for t in tiles],
        count=len(tiles),
    )


@router.patch("/obstacle", response_model=TileListResponse)
async def update_obstacles(body: TileObstacleUpdate, db: AsyncSession = Depends(get_db)):
    """Set ``obstacle`` on a store's tiles, addressed by column/row."""
    await _require_store(db, body.store_id)

    updated = []
    for entry in body.tiles:
        tile = await get_tile_by_coordinate(db, body.store_id, entry.column, entry.row)
        if tile is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No tile at column {entry.column}, row {entry.row}",
            )
        tile.obstacle = entry.obstacle
        updated.append(tile)

    await db.flush()
    return TileListResponse(
        tiles=[TileResponse.model_validate(t) for t in updated],
        count=len(updated),
    )


@router.get("/store/{store_id}", response_model=TileListResponse)
async def list_tiles(store_id: int, db: AsyncSession = Depends(get_db)):
    """All tiles of a store, ordered by column then row."""
    tiles = await get_tiles_by_store(db, store_id)
    return TileListResponse(
        tiles=[TileResponse.model_validate(t) for t in tiles],
        count=len(tiles),
    )


@router.get("/store/{store_id}/{column}/{row}", response_model=TileResponse)
async def get_tile(store_id: int, column: int, row: int, db: AsyncSession = Depends(get_db)):
    tile = await get_tile_by_coordinate(db, store_id, column, row)
    if not tile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tile not found",
        )
    return TileResponse.model_validate(tile)
