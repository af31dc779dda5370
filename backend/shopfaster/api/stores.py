"""Store endpoints: floor-plan grids and the shopper's current store."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shopfaster.core.deps import get_current_user
from shopfaster.db.base import get_db
from shopfaster.models.store import Store
from shopfaster.models.user import User
from shopfaster.schemas.auth import CurrentUser
from shopfaster.schemas.store import (
    CurrentStoreResponse,
    StoreListResponse,
    StoreResponse,
)
from shopfaster.services.stores import build_store, get_store_grid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stores", tags=["stores"])


async def _get_user(db: AsyncSession, user_id: int) -> User:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("", response_model=StoreListResponse)
async def list_stores(db: AsyncSession = Depends(get_db)):
    """List every store with its grid."""
    result = await db.execute(select(Store).order_by(Store.id))
    stores = result.scalars().all()
    return StoreListResponse(stores=[await build_store(db, store) for store in stores])


@router.get("/current", response_model=CurrentStoreResponse)
async def get_current_store(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get the caller's selected store; ``current_store`` is null if none is selected."""
    user = await _get_user(db, current_user.id)
    if user.current_store_id is None:
        return CurrentStoreResponse(current_store=None)

    return CurrentStoreResponse(current_store=await get_store_grid(db, user.current_store_id))


@router.put("/current/{store_id}", response_model=CurrentStoreResponse)
async def set_current_store(
    store_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Select a store. The shopping list switches to that store's entries."""
    store = await get_store_grid(db, store_id)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No store by that ID",
        )

    user = await _get_user(db, current_user.id)
    user.current_store_id = store_id
    await db.flush()

    logger.info("User %s selected store %s", user.id, store_id)
    return CurrentStoreResponse(current_store=store)


@router.get("/{store_id}", response_model=StoreResponse)
async def get_store(store_id: int, db: AsyncSession = Depends(get_db)):
    """Get one store: map, entrance/checkout tiles, and the tile grid."""
    store = await get_store_grid(db, store_id)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No store by that ID",
        )
    return store
