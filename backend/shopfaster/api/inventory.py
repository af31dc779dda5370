"""Store inventory endpoints: placement lookup and item search."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from shopfaster.core.deps import get_current_user
from shopfaster.db.base import get_db
from shopfaster.models.inventory import InventoryItem
from shopfaster.models.item import Item, Tag
from shopfaster.models.tile import Tile
from shopfaster.models.user import User
from shopfaster.schemas.auth import CurrentUser
from shopfaster.schemas.inventory import (
    InventoryDetailResponse,
    InventoryItemResponse,
    InventoryListResponse,
    InventorySearchResponse,
    InventorySearchResult,
)
from shopfaster.schemas.store import TileResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inventory", tags=["inventory"])


def _escape_like(s: str) -> str:
    """Escape SQL LIKE wildcards in user input."""
    return s.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@router.get("/search", response_model=InventorySearchResponse)
async def search_inventory(
    q: str = Query(..., min_length=1),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Search the current store for items whose name or any tag contains a term.

    Terms are whitespace-separated; an item matching any term is returned once.
    """
    result = await db.execute(select(User).where(User.id == current_user.id))
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if user.current_store_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No current store selected",
        )

    likes = [f"%{_escape_like(term)}%" for term in q.split()]
    if not likes:
        return InventorySearchResponse(items=[])

    conditions = [Item.name.ilike(like) for like in likes] + [Tag.name.ilike(like) for like in likes]
    query = (
        select(InventoryItem.id, Item.name)
        .join(Item, InventoryItem.item_id == Item.id)
        .outerjoin(Tag, Tag.item_id == Item.id)
        .where(
            InventoryItem.store_id == user.current_store_id,
            or_(*conditions),
        )
        .distinct()
        .order_by(Item.name)
    )
    rows = (await db.execute(query)).all()

    return InventorySearchResponse(
        items=[InventorySearchResult(inventory_id=inv_id, name=name) for inv_id, name in rows],
    )


@router.get("/store/{store_id}", response_model=InventoryListResponse)
async def list_store_inventory(store_id: int, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(InventoryItem)
        .where(InventoryItem.store_id == store_id)
        .order_by(InventoryItem.id)
    )
    items = result.scalars().all()

    return InventoryListResponse(
        items=[InventoryItemResponse.model_validate(i) for i in items],
        count=len(items),
    )


@router.get("/{inventory_id}", response_model=InventoryDetailResponse)
async def get_inventory_item(inventory_id: int, db: AsyncSession = Depends(get_db)):
    """Get an inventory item with its name and the tile it sits on."""
    result = await db.execute(
        select(InventoryItem, Item, Tile)
        .join(Item, InventoryItem.item_id == Item.id)
        .join(Tile, InventoryItem.tile_id == Tile.id)
        .where(InventoryItem.id == inventory_id)
    )
    row = result.one_or_none()

    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Inventory item not found",
        )

    inventory_item, item, tile = row
    return InventoryDetailResponse(
        inventory_id=inventory_item.id,
        name=item.name,
        tile=TileResponse.model_validate(tile),
    )
