"""Shopping list endpoints.

Every mutation is followed by a fresh read of the caller's list, so the
response is always the complete, display-ordered list rather than the
mutated row.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select, update, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shopfaster.core.deps import get_current_user
from shopfaster.db.base import get_db
from shopfaster.models.inventory import InventoryItem
from shopfaster.models.list_item import ListItem
from shopfaster.schemas.auth import CurrentUser
from shopfaster.schemas.list_item import (
    ActiveUpdate,
    CrossedOffUpdate,
    ListItemAdd,
    ListItemBulkAdd,
    ShoppingListResponse,
    SortOrderBulkUpdate,
    SortOrderUpdate,
)
from shopfaster.services.shopping_list import get_shopping_list

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/list-items", tags=["list-items"])


async def _render_list(db: AsyncSession, user_id: int) -> ShoppingListResponse:
    shopping_list = await get_shopping_list(db, user_id)
    if shopping_list is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return shopping_list


async def _get_owned_list_item(db: AsyncSession, list_item_id: int, user_id: int) -> ListItem:
    result = await db.execute(
        select(ListItem).where(
            ListItem.id == list_item_id,
            ListItem.user_id == user_id,
        )
    )
    list_item = result.scalar_one_or_none()
    if not list_item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="List item not found",
        )
    return list_item


@router.get("", response_model=ShoppingListResponse)
async def get_list(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """The caller's list for their current store, in display order."""
    return await _render_list(db, current_user.id)


@router.post("", response_model=ShoppingListResponse, status_code=status.HTTP_201_CREATED)
async def add_list_item(
    body: ListItemAdd,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Add an inventory item to the caller's list.

    The insert itself is the duplicate check: the (user, inventory item)
    unique constraint rejects a second entry even under concurrent requests.
    """
    inventory_check = await db.execute(
        select(InventoryItem.id).where(InventoryItem.id == body.inventory_id)
    )
    if inventory_check.scalar_one_or_none() is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Inventory item not found",
        )

    db.add(ListItem(
        user_id=current_user.id,
        inventory_id=body.inventory_id,
        active=True,
        crossed_off=False,
    ))
    try:
        await db.flush()
    except IntegrityError:
        logger.info(
            "Duplicate list item rejected: user=%s inventory=%s",
            current_user.id, body.inventory_id,
        )
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Item already in shopping list",
        )

    return await _render_list(db, current_user.id)


@router.post("/bulk", response_model=ShoppingListResponse, status_code=status.HTTP_201_CREATED)
async def add_list_items(
    body: ListItemBulkAdd,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Add several inventory items; ones already on the list are skipped."""
    requested = list(dict.fromkeys(body.inventory_ids))

    count_result = await db.execute(
        select(func.count()).select_from(InventoryItem).where(InventoryItem.id.in_(requested))
    )
    if count_result.scalar_one() != len(requested):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="One or more inventory items not found",
        )

    existing_result = await db.execute(
        select(ListItem.inventory_id).where(
            ListItem.user_id == current_user.id,
            ListItem.inventory_id.in_(requested),
        )
    )
    existing = set(existing_result.scalars().all())

    db.add_all([
        ListItem(user_id=current_user.id, inventory_id=inv_id, active=True, crossed_off=False)
        for inv_id in requested
        if inv_id not in existing
    ])
    try:
        await db.flush()
    except IntegrityError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Item already in shopping list",
        )

    return await _render_list(db, current_user.id)


@router.patch("/active", response_model=ShoppingListResponse)
async def set_all_active(
    body: ActiveUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Set ``active`` on every entry of the caller; deactivating also un-crosses."""
    values = {"active": body.active}
    if not body.active:
        values["crossed_off"] = False

    await db.execute(
        update(ListItem).where(ListItem.user_id == current_user.id).values(**values)
    )
    return await _render_list(db, current_user.id)


@router.patch("/crossed-off", response_model=ShoppingListResponse)
async def set_all_crossed_off(
    body: CrossedOffUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Set ``crossed_off`` on every active entry of the caller."""
    await db.execute(
        update(ListItem)
        .where(ListItem.user_id == current_user.id, ListItem.active.is_(True))
        .values(crossed_off=body.crossed_off)
    )
    return await _render_list(db, current_user.id)


@router.patch("/clear-crossed-off", response_model=ShoppingListResponse)
async def clear_crossed_off(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Move every crossed-off entry to the inactive tail, un-crossed."""
    await db.execute(
        update(ListItem)
        .where(ListItem.user_id == current_user.id, ListItem.crossed_off.is_(True))
        .values(crossed_off=False, active=False)
    )
    return await _render_list(db, current_user.id)


@router.patch("/order", response_model=ShoppingListResponse)
async def set_sort_orders(
    body: SortOrderBulkUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    for entry in body.items:
        list_item = await _get_owned_list_item(db, entry.list_item_id, current_user.id)
        list_item.sort_order = entry.sort_order

    await db.flush()
    return await _render_list(db, current_user.id)


@router.patch("/{list_item_id}/active", response_model=ShoppingListResponse)
async def set_active(
    list_item_id: int,
    body: ActiveUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Activate or deactivate one entry; an inactive entry is never crossed off."""
    list_item = await _get_owned_list_item(db, list_item_id, current_user.id)
    list_item.active = body.active
    if not body.active:
        list_item.crossed_off = False

    await db.flush()
    return await _render_list(db, current_user.id)


@router.patch("/{list_item_id}/crossed-off", response_model=ShoppingListResponse)
async def set_crossed_off(
    list_item_id: int,
    body: CrossedOffUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    list_item = await _get_owned_list_item(db, list_item_id, current_user.id)
    if body.crossed_off and not list_item.active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive list items cannot be crossed off",
        )
    list_item.crossed_off = body.crossed_off

    await db.flush()
    return await _render_list(db, current_user.id)


@router.patch("/{list_item_id}/order", response_model=ShoppingListResponse)
async def set_sort_order(
    list_item_id: int,
    body: SortOrderUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    list_item = await _get_owned_list_item(db, list_item_id, current_user.id)
    list_item.sort_order = body.sort_order

    await db.flush()
    return await _render_list(db, current_user.id)


@router.delete("/{list_item_id}", response_model=ShoppingListResponse)
async def remove_list_item(
    list_item_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    list_item = await _get_owned_list_item(db, list_item_id, current_user.id)
    await db.delete(list_item)
    await db.flush()

    logger.info("User %s removed list item %s", current_user.id, list_item_id)
    return await _render_list(db, current_user.id)
