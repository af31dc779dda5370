"""Unit tests for store grid assembly and tile neighbors."""

import pytest

from shopfaster.models.tile import Tile
from shopfaster.schemas.store import NeighborRef
from shopfaster.services.grid import (
    NEIGHBOR_OFFSETS,
    build_grid,
    grid_dimensions,
    neighbor_refs,
)


def make_tiles(num_cols: int, num_rows: int, store_id: int = 1) -> list[Tile]:
    tiles = []
    for col in range(num_cols):
        for row in range(num_rows):
            tiles.append(Tile(
                id=col * num_rows + row + 1,
                store_id=store_id,
                column=col,
                row=row,
                obstacle=False,
            ))
    return tiles


# ── Neighbor sequence ─────────────────────────────

def test_single_tile_has_no_neighbors():
    store_grid = build_grid(make_tiles(1, 1))
    tile = store_grid.grid[0][0]

    assert len(tile.neighbors) == 8
    assert all(n is None for n in tile.neighbors)


def test_center_of_3x3_has_all_neighbors_clockwise_from_above():
    store_grid = build_grid(make_tiles(3, 3))
    center = store_grid.grid[1][1]

    assert [(n.column, n.row) for n in center.neighbors] == [
        (1, 0),  # above
        (2, 0),
        (2, 1),
        (2, 2),
        (1, 2),  # below
        (0, 2),
        (0, 1),
        (0, 0),
    ]


def test_corner_of_3x3_has_three_neighbors():
    store_grid = build_grid(make_tiles(3, 3))
    corner = store_grid.grid[0][0]

    present = [n for n in corner.neighbors if n is not None]
    assert len(present) == 3
    # right, bottom-right, bottom
    assert corner.neighbors[2] == NeighborRef(column=1, row=0)
    assert corner.neighbors[3] == NeighborRef(column=1, row=1)
    assert corner.neighbors[4] == NeighborRef(column=0, row=1)


@pytest.mark.parametrize("num_cols,num_rows", [(1, 4), (4, 1), (4, 3), (5, 5)])
def test_neighbor_is_none_exactly_when_out_of_bounds(num_cols, num_rows):
    store_grid = build_grid(make_tiles(num_cols, num_rows))

    for col in range(num_cols):
        for row in range(num_rows):
            neighbors = store_grid.grid[col][row].neighbors
            assert len(neighbors) == 8
            for (dx, dy), neighbor in zip(NEIGHBOR_OFFSETS, neighbors):
                x, y = col + dx, row + dy
                in_bounds = 0 <= x < num_cols and 0 <= y < num_rows
                if in_bounds:
                    assert neighbor == NeighborRef(column=x, row=y)
                else:
                    assert neighbor is None


def test_neighbors_are_coordinate_references():
    neighbors = neighbor_refs(0, 0, 2, 2)
    assert neighbors[2].model_dump() == {"column": 1, "row": 0}


# ── Dimensions and layout ─────────────────────────

def test_ragged_store_uses_largest_row_over_all_columns():
    """A short first column must not shrink the grid."""
    tiles = [
        Tile(id=1, store_id=1, column=0, row=0, obstacle=False),
        Tile(id=2, store_id=1, column=0, row=1, obstacle=False),
    ] + [
        Tile(id=10 + r, store_id=1, column=1, row=r, obstacle=False)
        for r in range(5)
    ]

    store_grid = build_grid(tiles)

    assert store_grid.num_cols == 2
    assert store_grid.num_rows == 5
    assert store_grid.grid[0][4] is None
    assert store_grid.grid[1][4].id == 14
    # (0, 1) sees (0, 2) below even though column 0 has no tile there
    assert store_grid.grid[0][1].neighbors[4] == NeighborRef(column=0, row=2)


def test_missing_column_is_a_gap():
    tiles = [
        Tile(id=1, store_id=1, column=0, row=0, obstacle=False),
        Tile(id=2, store_id=1, column=2, row=0, obstacle=True),
    ]

    store_grid = build_grid(tiles)

    assert store_grid.num_cols == 3
    assert store_grid.grid[1] == [None]
    assert store_grid.grid[2][0].obstacle is True
    assert store_grid.grid[0][0].neighbors[2] == NeighborRef(column=1, row=0)


def test_empty_store_builds_empty_grid():
    store_grid = build_grid([])

    assert grid_dimensions([]) == (0, 0)
    assert store_grid.grid == []
    assert store_grid.num_cols == 0
    assert store_grid.num_rows == 0


def test_tiles_out_of_order_land_on_their_coordinates():
    tiles = list(reversed(make_tiles(3, 2)))

    store_grid = build_grid(tiles)

    for col in range(3):
        for row in range(2):
            assert (store_grid.grid[col][row].column, store_grid.grid[col][row].row) == (col, row)
