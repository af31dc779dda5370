"""Item endpoints: canonical products, their tags and store placement."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shopfaster.db.base import get_db
from shopfaster.models.inventory import InventoryItem
from shopfaster.models.item import Item, Tag
from shopfaster.schemas.item import (
    ItemCreate,
    ItemCreateResponse,
    ItemBulkCreate,
    ItemBulkCreateResponse,
    ItemDetailResponse,
    ItemListResponse,
    ItemResponse,
)
from shopfaster.services.tiles import get_tile_by_coordinate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["items"])


async def _get_item_by_name(db: AsyncSession, name: str) -> Item | None:
    result = await db.execute(select(Item).where(Item.name == name))
    return result.scalar_one_or_none()


async def _place_item(
    db: AsyncSession, item_id: int, store_id: int, column: int, row: int
) -> InventoryItem:
    tile = await get_tile_by_coordinate(db, store_id, column, row)
    if tile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No tile at column {column}, row {row} in store {store_id}",
        )
    inventory_item = InventoryItem(store_id=store_id, tile_id=tile.id, item_id=item_id)
    db.add(inventory_item)
    return inventory_item


@router.get("", response_model=ItemListResponse)
async def list_items(db: AsyncSession = Depends(get_db)):
    count_result = await db.execute(select(func.count()).select_from(Item))
    total = count_result.scalar_one()

    result = await db.execute(select(Item).order_by(Item.name))
    items = result.scalars().all()

    return ItemListResponse(
        items=[ItemResponse.model_validate(i) for i in items],
        total=total,
    )


@router.get("/{item_id}", response_model=ItemDetailResponse)
async def get_item(item_id: int, db: AsyncSession = Depends(get_db)):
    """Get an item with its tags."""
    result = await db.execute(select(Item).where(Item.id == item_id))
    item = result.scalar_one_or_none()
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found",
        )
    return ItemDetailResponse.model_validate(item)


@router.post("", response_model=ItemCreateResponse)
async def create_item(body: ItemCreate, db: AsyncSession = Depends(get_db)):
    """Add an item, place it on a store tile and record its tags.

    If an item with that name already exists its id is returned unchanged;
    losing a race with a concurrent create of the same name is a 409.
    """
    existing = await _get_item_by_name(db, body.name)
    if existing:
        return ItemCreateResponse(item_id=existing.id, created=False)

    item = Item(name=body.name, tags=[Tag(name=t) for t in body.tags])
    db.add(item)
    try:
        await db.flush()  # get item.id
    except IntegrityError:
        logger.info("Concurrent create of item %s rejected", body.name)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Item with this name already exists",
        )

    await _place_item(db, item.id, body.store_id, body.column, body.row)
    await db.flush()

    logger.info("Created item %s (%s) in store %s", item.id, item.name, body.store_id)
    return ItemCreateResponse(item_id=item.id, created=True)


@router.post("/bulk", response_model=ItemBulkCreateResponse)
async def create_items(body: ItemBulkCreate, db: AsyncSession = Depends(get_db)):
    """Seed many items into one store.

    Known items keep their tags and only get placed if the store lacks them.
    """
    items_created = 0
    inventory_created = 0

    for seed in body.items:
        item = await _get_item_by_name(db, seed.name)
        placed = None
        if item:
            result = await db.execute(
                select(InventoryItem).where(
                    InventoryItem.item_id == item.id,
                    InventoryItem.store_id == body.store_id,
                )
            )
            placed = result.scalar_one_or_none()
        else:
            item = Item(name=seed.name, tags=[Tag(name=t) for t in seed.tags])
            db.add(item)
            await db.flush()
            items_created += 1

        if placed is None:
            await _place_item(db, item.id, body.store_id, seed.column, seed.row)
            await db.flush()
            inventory_created += 1

    logger.info(
        "Seeded store %s: %d new items, %d new placements",
        body.store_id, items_created, inventory_created,
    )
    return ItemBulkCreateResponse(
        items_created=items_created,
        inventory_created=inventory_created,
    )
