"""Shopping list aggregation and display ordering.

Display precedence, top to bottom:

1. active, not crossed off  (ascending ``sort_order``)
2. active, crossed off      (ascending ``sort_order``)
3. inactive                 (no defined order among themselves)

The comparator below is a total preorder and relies on a stable sort: rows
are fetched in list item id order, so equal entries keep creation order.
"""

import logging
from collections.abc import Iterable
from functools import cmp_to_key

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shopfaster.models.inventory import InventoryItem
from shopfaster.models.item import Item
from shopfaster.models.list_item import ListItem
from shopfaster.models.tile import Tile
from shopfaster.models.user import User
from shopfaster.schemas.list_item import ListItemView, ShoppingListResponse

logger = logging.getLogger(__name__)


def compare_list_items(a: ListItemView, b: ListItemView) -> int:
    if a.active and b.active:
        if a.crossed_off != b.crossed_off:
            return 1 if a.crossed_off else -1
        if a.sort_order == b.sort_order:
            return 0
        return -1 if a.sort_order < b.sort_order else 1
    if a.active:
        return -1
    if b.active:
        return 1
    # Inactive entries form an unordered tail
    return 0


def sort_list_items(items: Iterable[ListItemView]) -> list[ListItemView]:
    return sorted(items, key=cmp_to_key(compare_list_items))


def to_list_item_view(
    list_item: ListItem, inventory_item: InventoryItem, item: Item, tile: Tile
) -> ListItemView:
    return ListItemView(
        list_item_id=list_item.id,
        sort_order=list_item.sort_order,
        active=list_item.active,
        crossed_off=list_item.crossed_off,
        inventory_id=inventory_item.id,
        item_id=item.id,
        name=item.name,
        tile_id=tile.id,
        column=tile.column,
        row=tile.row,
        store_id=inventory_item.store_id,
    )


async def get_shopping_list(db: AsyncSession, user_id: int) -> ShoppingListResponse | None:
    """Return the user's list for their current store, sorted for display.

    Entries for other stores are left alone and simply not returned. A user
    with no current store gets an empty list with ``current_store_id=None``.
    Returns None if the user does not exist.
    """
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        logger.warning("Shopping list requested for unknown user %s", user_id)
        return None

    store_id = user.current_store_id
    if store_id is None:
        return ShoppingListResponse(current_store_id=None, list_items=[])

    rows = await db.execute(
        select(ListItem, InventoryItem, Item, Tile)
        .join(InventoryItem, ListItem.inventory_id == InventoryItem.id)
        .join(Item, InventoryItem.item_id == Item.id)
        .join(Tile, InventoryItem.tile_id == Tile.id)
        .where(
            ListItem.user_id == user_id,
            InventoryItem.store_id == store_id,
        )
        .order_by(ListItem.id)
    )
    views = [to_list_item_view(*row) for row in rows.all()]

    return ShoppingListResponse(
        current_store_id=store_id,
        list_items=sort_list_items(views),
    )
