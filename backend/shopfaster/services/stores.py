"""Store view assembly: store row + tiles -> grid response."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shopfaster.models.store import Store
from shopfaster.models.tile import Tile
from shopfaster.schemas.store import GridTile, StoreResponse
from shopfaster.services.grid import build_grid, decorate_tile
from shopfaster.services.tiles import get_tile_by_id, get_tiles_by_store

logger = logging.getLogger(__name__)


def _landmark(tile: Tile | None, num_cols: int, num_rows: int) -> GridTile | None:
    if tile is None:
        return None
    return decorate_tile(tile, num_cols, num_rows)


async def build_store(db: AsyncSession, store: Store) -> StoreResponse:
    """Build the front-end store object, rebuilt on every call and never cached.

    Entrance and checkout tiles are returned both inside the grid and as named
    fields; both carry the same coordinates and neighbors.
    """
    tiles = await get_tiles_by_store(db, store.id)
    store_grid = build_grid(tiles)

    entrance = await get_tile_by_id(db, store.entrance_tile_id)
    checkout = await get_tile_by_id(db, store.checkout_tile_id)
    if store.entrance_tile_id is not None and entrance is None:
        logger.warning("Store %s: entrance tile %s not found", store.id, store.entrance_tile_id)
    if store.checkout_tile_id is not None and checkout is None:
        logger.warning("Store %s: checkout tile %s not found", store.id, store.checkout_tile_id)

    return StoreResponse(
        id=store.id,
        name=store.name,
        map_url=store.map_url,
        entrance_tile=_landmark(entrance, store_grid.num_cols, store_grid.num_rows),
        checkout_tile=_landmark(checkout, store_grid.num_cols, store_grid.num_rows),
        num_cols=store_grid.num_cols,
        num_rows=store_grid.num_rows,
        grid=store_grid.grid,
    )


async def get_store_grid(db: AsyncSession, store_id: int) -> StoreResponse | None:
    """Return the store grid, or None when no store has that id."""
    result = await db.execute(select(Store).where(Store.id == store_id))
    store = result.scalar_one_or_none()
    if store is None:
        logger.info("Store %s not found", store_id)
        return None
    return await build_store(db, store)
