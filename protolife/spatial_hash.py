"""A uniform grid for neighbour queries on a wrapping (toroidal) plane."""

from __future__ import annotations

import math
from typing import Generic, Iterator, TypeVar

from .math import Rect, Vec2

T = TypeVar("T")


class SpatialHashGrid(Generic[T]):
    """Buckets items by position so that radius queries touch only nearby cells."""

    def __init__(self, bounds: Rect, cell_count: tuple[int, int]) -> None:
        columns, rows = cell_count
        self.cell_count = (columns, rows)
        self.cells: list[list[tuple[Vec2, T]]] = [[] for _ in range(columns * rows)]
        self.update_bounds(bounds)

    def update_bounds(self, bounds: Rect) -> None:
        self.bounds = bounds
        columns, rows = self.cell_count
        self.cell_size = Vec2(
            abs(bounds.min.x - bounds.max.x) / columns,
            abs(bounds.min.y - bounds.max.y) / rows,
        )

    def clear(self) -> None:
        for cell in self.cells:
            cell.clear()

    def insert(self, pos: Vec2, item: T) -> None:
        """Store ``item`` at ``pos``; positions mapping outside the grid are dropped."""
        index = self.grid_to_index(self.world_to_grid(pos))
        if 0 <= index < len(self.cells):
            self.cells[index].append((pos, item))

    def query(self, pos: Vec2, radius: float) -> Iterator[tuple[Vec2, T]]:
        """Yield ``(position, item)`` pairs within ``radius`` of ``pos``."""
        for coords in self.get_query_cells(pos, radius):
            for item_pos, item in self.cells[self.grid_to_index(coords)]:
                if self.toroidal_distance(item_pos, pos) <= radius:
                    yield item_pos, item

    def toroidal_distance(self, a: Vec2, b: Vec2) -> float:
        width = self.bounds.max.x - self.bounds.min.x
        height = self.bounds.max.y - self.bounds.min.y

        dx = abs(a.x - b.x)
        dy = abs(a.y - b.y)

        if dx > width / 2.0:
            dx = width - dx
        if dy > height / 2.0:
            dy = height - dy

        return math.sqrt(dx * dx + dy * dy)

    def world_to_grid(self, pos: Vec2) -> tuple[int, int]:
        grid_x = math.floor((pos.x - self.bounds.min.x) / self.cell_size.x)
        grid_y = math.floor((pos.y - self.bounds.min.y) / self.cell_size.y)
        return grid_x, grid_y

    def wrap_coordinates(self, coords: tuple[int, int]) -> tuple[int, int]:
        x, y = coords
        columns, rows = self.cell_count
        return x % columns, y % rows

    def grid_to_index(self, coords: tuple[int, int]) -> int:
        x, y = coords
        return y * self.cell_count[0] + x

    def get_query_cells(self, pos: Vec2, radius: float) -> Iterator[tuple[int, int]]:
        """Yield wrapped cell coordinates covering ``radius`` around ``pos``, x-major."""
        grid_x, grid_y = self.world_to_grid(pos)
        x_radius = math.ceil(radius / self.cell_size.x)
        y_radius = math.ceil(radius / self.cell_size.y)

        for x in range(grid_x - x_radius, grid_x + x_radius + 1):
            for y in range(grid_y - y_radius, grid_y + y_radius + 1):
                yield self.wrap_coordinates((x, y))