"""Unit tests for item creation and seeding."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from shopfaster.models.item import Item
from shopfaster.models.tile import Tile
from shopfaster.schemas.item import ItemBulkCreate, ItemCreate, ItemSeed


def scalar_result(value):
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


@pytest.mark.asyncio
async def test_create_item_existing_name_returns_id():
    from shopfaster.api.items import create_item

    mock_db = AsyncMock()
    mock_db.execute.return_value = scalar_result(Item(id=8, name="Bananas"))

    result = await create_item(ItemCreate(name="Bananas", store_id=1, column=1, row=1), mock_db)

    assert result.item_id == 8
    assert result.created is False


@pytest.mark.asyncio
async def test_create_item_on_missing_tile():
    from shopfaster.api.items import create_item

    mock_db = AsyncMock()
    mock_db.add = MagicMock()
    mock_db.execute.side_effect = [scalar_result(None), scalar_result(None)]

    with pytest.raises(HTTPException) as exc_info:
        await create_item(ItemCreate(name="Bananas", store_id=1, column=40, row=40), mock_db)

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_create_item_places_it_and_records_tags():
    from shopfaster.api.items import create_item

    tile = Tile(id=5, store_id=1, column=1, row=2, obstacle=False)
    mock_db = AsyncMock()
    mock_db.add = MagicMock()
    mock_db.execute.side_effect = [scalar_result(None), scalar_result(tile)]

    async def assign_id():
        mock_db.add.call_args_list[0].args[0].id = 8

    mock_db.flush.side_effect = assign_id

    body = ItemCreate(name="Bananas", store_id=1, column=1, row=2, tags=["banana", "fruit"])
    result = await create_item(body, mock_db)

    item = mock_db.add.call_args_list[0].args[0]
    placement = mock_db.add.call_args_list[1].args[0]
    assert result.item_id == 8
    assert result.created is True
    assert [t.name for t in item.tags] == ["banana", "fruit"]
    assert (placement.store_id, placement.tile_id, placement.item_id) == (1, 5, 8)


@pytest.mark.asyncio
async def test_bulk_seed_skips_items_already_in_store():
    from shopfaster.api.items import create_items

    existing_item = Item(id=3, name="Milk")
    already_placed = MagicMock()

    mock_db = AsyncMock()
    mock_db.add = MagicMock()
    mock_db.execute.side_effect = [
        scalar_result(existing_item),  # name lookup
        scalar_result(already_placed),  # placement lookup
    ]

    body = ItemBulkCreate(store_id=1, items=[ItemSeed(name="Milk", column=0, row=0)])
    result = await create_items(body, mock_db)

    assert result.items_created == 0
    assert result.inventory_created == 0
    mock_db.add.assert_not_called()


def test_item_create_requires_name():
    with pytest.raises(ValueError):
        ItemCreate(name="", store_id=1, column=0, row=0)


@pytest.mark.asyncio
async def test_create_item_concurrent_same_name_is_409():
    from shopfaster.api.items import create_item

    mock_db = AsyncMock()
    mock_db.add = MagicMock()
    mock_db.execute.return_value = scalar_result(None)
    mock_db.flush.side_effect = IntegrityError("INSERT INTO items", {}, Exception("duplicate key"))

    with pytest.raises(HTTPException) as exc_info:
        await create_item(ItemCreate(name="Bananas", store_id=1, column=1, row=2), mock_db)

    assert exc_info.value.status_code == 409
    assert mock_db.add.call_count == 1  # never placed
