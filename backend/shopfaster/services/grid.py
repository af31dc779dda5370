"""Store floor-plan grid assembly and tile adjacency.

A store's tiles come out of the database as a flat list. The front end wants
them as a 2-D array indexed ``grid[column][row]``, with every tile carrying
the coordinates of its eight neighbors so it can walk the floor plan without
searching for adjacent cells itself.

Dimensions are taken from the largest column and row over *all* tiles, so a
ragged or sparse store (a short first column, a missing column) still gets
correct bounds. Coordinates inside the bounds that have no tile are ``None``
in the grid.
"""

from collections.abc import Iterable
from typing import Protocol

from shopfaster.schemas.store import GridTile, NeighborRef, StoreGrid

# Clockwise, starting directly above: N, NE, E, SE, S, SW, W, NW
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


class TileLike(Protocol):
    id: int
    store_id: int
    column: int
    row: int
    obstacle: bool


def grid_dimensions(tiles: Iterable[TileLike]) -> tuple[int, int]:
    """Return ``(num_cols, num_rows)`` covering every tile, ``(0, 0)`` if none."""
    num_cols = 0
    num_rows = 0
    for tile in tiles:
        num_cols = max(num_cols, tile.column + 1)
        num_rows = max(num_rows, tile.row + 1)
    return num_cols, num_rows


def neighbor_refs(column: int, row: int, num_cols: int, num_rows: int) -> list[NeighborRef | None]:
    """Return the 8 neighbor slots of (column, row); out-of-bounds slots are None."""
    neighbors: list[NeighborRef | None] = []
    for dx, dy in NEIGHBOR_OFFSETS:
        col, r = column + dx, row + dy
        if 0 <= col < num_cols and 0 <= r < num_rows:
            neighbors.append(NeighborRef(column=col, row=r))
        else:
            neighbors.append(None)
    return neighbors


def decorate_tile(tile: TileLike, num_cols: int, num_rows: int) -> GridTile:
    return GridTile(
        id=tile.id,
        store_id=tile.store_id,
        column=tile.column,
        row=tile.row,
        obstacle=tile.obstacle,
        neighbors=neighbor_refs(tile.column, tile.row, num_cols, num_rows),
    )


def build_grid(tiles: Iterable[TileLike]) -> StoreGrid:
    """Arrange a store's tiles into ``grid[column][row]`` and attach neighbors."""
    tiles = list(tiles)
    num_cols, num_rows = grid_dimensions(tiles)

    grid: list[list[GridTile | None]] = [[None] * num_rows for _ in range(num_cols)]
    for tile in tiles:
        grid[tile.column][tile.row] = decorate_tile(tile, num_cols, num_rows)

    return StoreGrid(num_cols=num_cols, num_rows=num_rows, grid=grid)
