"""Unit tests for shopping list ordering and aggregation."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from sqlalchemy.dialects import postgresql

from shopfaster.models.inventory import InventoryItem
from shopfaster.models.item import Item
from shopfaster.models.list_item import ListItem
from shopfaster.models.tile import Tile
from shopfaster.models.user import User
from shopfaster.schemas.list_item import ListItemView
from shopfaster.services.shopping_list import (
    compare_list_items,
    get_shopping_list,
    sort_list_items,
)


def view(list_item_id: int, active: bool, crossed_off: bool, sort_order: int = 0) -> ListItemView:
    return ListItemView(
        list_item_id=list_item_id,
        sort_order=sort_order,
        active=active,
        crossed_off=crossed_off,
        inventory_id=100 + list_item_id,
        item_id=200 + list_item_id,
        name=f"item {list_item_id}",
        tile_id=300 + list_item_id,
        column=list_item_id,
        row=0,
        store_id=1,
    )


def ids(items) -> list[int]:
    return [i.list_item_id for i in items]


# ── Comparator ────────────────────────────────────

def test_sort_precedence_active_then_crossed_off_then_inactive():
    a = view(1, active=True, crossed_off=False, sort_order=5)
    b = view(2, active=True, crossed_off=True, sort_order=1)
    c = view(3, active=False, crossed_off=True)

    assert ids(sort_list_items([c, b, a])) == [1, 2, 3]
    assert ids(sort_list_items([b, c, a])) == [1, 2, 3]


def test_active_entries_ordered_by_sort_order():
    items = [
        view(1, True, False, sort_order=3),
        view(2, True, False, sort_order=1),
        view(3, True, True, sort_order=9),
        view(4, True, True, sort_order=2),
    ]

    assert ids(sort_list_items(items)) == [2, 1, 4, 3]


def test_sort_is_stable_for_equal_sort_order():
    items = [view(i, True, False, sort_order=4) for i in (7, 3, 5)]

    assert ids(sort_list_items(items)) == [7, 3, 5]


def test_inactive_entries_compare_equal_regardless_of_flags():
    x = view(1, active=False, crossed_off=True, sort_order=1)
    y = view(2, active=False, crossed_off=False, sort_order=9)

    assert compare_list_items(x, y) == 0
    assert compare_list_items(y, x) == 0
    # Inactive tail keeps its incoming order
    assert ids(sort_list_items([x, y])) == [1, 2]
    assert ids(sort_list_items([y, x])) == [2, 1]


def test_active_always_before_inactive():
    inactive = view(1, active=False, crossed_off=False, sort_order=-100)
    active_crossed = view(2, active=True, crossed_off=True, sort_order=100)

    assert compare_list_items(active_crossed, inactive) == -1
    assert compare_list_items(inactive, active_crossed) == 1


# ── Aggregation ───────────────────────────────────

def make_row(list_item_id, active, crossed_off, sort_order, store_id=1):
    tile = Tile(id=50 + list_item_id, store_id=store_id, column=list_item_id, row=2, obstacle=False)
    item = Item(id=70 + list_item_id, name=f"item {list_item_id}")
    inventory_item = InventoryItem(
        id=90 + list_item_id, store_id=store_id, tile_id=tile.id, item_id=item.id,
    )
    list_item = ListItem(
        id=list_item_id, user_id=1, inventory_id=inventory_item.id,
        active=active, crossed_off=crossed_off, sort_order=sort_order,
    )
    return (list_item, inventory_item, item, tile)


@pytest.mark.asyncio
async def test_get_shopping_list_flattens_and_sorts():
    user = User(id=1, username="doug", hashed_password="x", current_store_id=1)

    user_result = MagicMock()
    user_result.scalar_one_or_none.return_value = user
    rows_result = MagicMock()
    rows_result.all.return_value = [
        make_row(1, active=False, crossed_off=False, sort_order=0),
        make_row(2, active=True, crossed_off=True, sort_order=0),
        make_row(3, active=True, crossed_off=False, sort_order=2),
        make_row(4, active=True, crossed_off=False, sort_order=1),
    ]

    mock_db = AsyncMock()
    mock_db.execute.side_effect = [user_result, rows_result]

    result = await get_shopping_list(mock_db, 1)

    assert result.current_store_id == 1
    assert ids(result.list_items) == [4, 3, 2, 1]

    first = result.list_items[0]
    assert first.inventory_id == 94
    assert first.item_id == 74
    assert first.name == "item 4"
    assert first.tile_id == 54
    assert (first.column, first.row) == (4, 2)
    assert first.store_id == 1


@pytest.mark.asyncio
async def test_get_shopping_list_without_current_store():
    user = User(id=1, username="doug", hashed_password="x", current_store_id=None)

    user_result = MagicMock()
    user_result.scalar_one_or_none.return_value = user

    mock_db = AsyncMock()
    mock_db.execute.return_value = user_result

    result = await get_shopping_list(mock_db, 1)

    assert result.current_store_id is None
    assert result.list_items == []
    assert mock_db.execute.await_count == 1


@pytest.mark.asyncio
async def test_get_shopping_list_unknown_user():
    user_result = MagicMock()
    user_result.scalar_one_or_none.return_value = None

    mock_db = AsyncMock()
    mock_db.execute.return_value = user_result

    assert await get_shopping_list(mock_db, 999) is None


@pytest.mark.asyncio
async def test_get_shopping_list_scoped_to_user_and_current_store():
    """Entries of other users or other stores are filtered in the query, not deleted."""
    user = User(id=1, username="doug", hashed_password="x", current_store_id=3)

    user_result = MagicMock()
    user_result.scalar_one_or_none.return_value = user
    rows_result = MagicMock()
    rows_result.all.return_value = []

    mock_db = AsyncMock()
    mock_db.execute.side_effect = [user_result, rows_result]

    await get_shopping_list(mock_db, 1)

    stmt = mock_db.execute.call_args_list[1].args[0].compile(dialect=postgresql.dialect())
    sql = str(stmt)
    assert sql.startswith("SELECT")
    assert "list_items.user_id = %(user_id_1)s" in sql
    assert "inventory_items.store_id = %(store_id_1)s" in sql
    assert stmt.params["user_id_1"] == 1
    assert stmt.params["store_id_1"] == 3
    assert "DELETE" not in sql
    mock_db.delete.assert_not_awaited()
