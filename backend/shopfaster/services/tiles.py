"""Tile lookups shared by the store, item and inventory endpoints."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shopfaster.models.tile import Tile


async def get_tiles_by_store(db: AsyncSession, store_id: int) -> Sequence[Tile]:
    result = await db.execute(
        select(Tile).where(Tile.store_id == store_id).order_by(Tile.column, Tile.row)
    )
    return result.scalars().all()


async def get_tile_by_id(db: AsyncSession, tile_id: int | None) -> Tile | None:
    if tile_id is None:
        return None
    result = await db.execute(select(Tile).where(Tile.id == tile_id))
    return result.scalar_one_or_none()


async def get_tile_by_coordinate(
    db: AsyncSession, store_id: int, column: int, row: int
) -> Tile | None:
    result = await db.execute(
        select(Tile).where(
            Tile.store_id == store_id,
            Tile.column == column,
            Tile.row == row,
        )
    )
    return result.scalar_one_or_none()
