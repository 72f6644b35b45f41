"""Spatial indexing for efficient proximity queries.

The grid is bulk-loaded from a snapshot of positions once per step and is
never updated afterwards. Points carry the snapshot index of the biot they
came from, so the grid never holds references to the biots themselves.
"""

import heapq
import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple

from biots.config.simulation import SPATIAL_CELL_SIZE


@dataclass(frozen=True)
class TreePoint:
    """A position tagged with the snapshot index of its biot."""

    x: float
    y: float
    idx: int

    def distance_2(self, x: float, y: float) -> float:
        dx = self.x - x
        dy = self.y - y
        return dx * dx + dy * dy


class SpatialGrid:
    """
    Uniform grid over a fixed set of points.

    Divides the plane into square cells of ``cell_size`` and buckets every
    point by the cell it falls in. Range queries only look at the cells that
    intersect the query circle; nearest-neighbour queries expand ring by ring
    around the query cell and only hand out a point once no unvisited cell
    can hold anything closer.

    All distances are squared Euclidean. No wraparound is applied: two points
    on opposite edges of the world are far apart.
    """

    def __init__(self, cell_size: float = SPATIAL_CELL_SIZE) -> None:
        """
        Initialize an empty grid.

        Args:
            cell_size: Side length of each grid cell in world units
        """
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = float(cell_size)

        # Points in snapshot-index order
        self._points: List[TreePoint] = []

        # Grid storage: (col, row) -> points in that cell, in index order
        self._cells: Dict[Tuple[int, int], List[TreePoint]] = {}

        # Occupied cell bounds
        self._min_col = 0
        self._max_col = -1
        self._min_row = 0
        self._max_row = -1

    @classmethod
    def bulk_load(
        cls, points: Iterable[TreePoint], cell_size: float = SPATIAL_CELL_SIZE
    ) -> "SpatialGrid":
        """Build a grid from scratch over ``points``."""
        grid = cls(cell_size)
        grid._load(points)
        return grid

    def _load(self, points: Iterable[TreePoint]) -> None:
        self._points = sorted(points, key=lambda p: p.idx)
        cells: Dict[Tuple[int, int], List[TreePoint]] = defaultdict(list)
        for point in self._points:
            cells[self._get_cell(point.x, point.y)].append(point)
        self._cells = dict(cells)

        if self._cells:
            cols = [col for col, _ in self._cells]
            rows = [row for _, row in self._cells]
            self._min_col, self._max_col = min(cols), max(cols)
            self._min_row, self._max_row = min(rows), max(rows)

    def _get_cell(self, x: float, y: float) -> Tuple[int, int]:
        """Get the grid cell coordinates for a position."""
        return (math.floor(x / self.cell_size), math.floor(y / self.cell_size))

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[TreePoint]:
        """Iterate over every indexed point in snapshot-index order."""
        return iter(self._points)

    def locate_within_distance(self, x: float, y: float, radius: float) -> List[TreePoint]:
        """Get all points within ``radius`` of ``(x, y)``, in index order.

        The boundary is inclusive: a point at exactly ``radius`` is returned.
        The query position itself is returned too if it is indexed.
        """
        radius_sq = radius * radius
        cs = self.cell_size
        min_col = max(self._min_col, math.floor((x - radius) / cs))
        max_col = min(self._max_col, math.floor((x + radius) / cs))
        min_row = max(self._min_row, math.floor((y - radius) / cs))
        max_row = min(self._max_row, math.floor((y + radius) / cs))

        result: List[TreePoint] = []
        result_append = result.append
        cells = self._cells
        for col in range(min_col, max_col + 1):
            for row in range(min_row, max_row + 1):
                cell_points = cells.get((col, row))
                if cell_points:
                    for point in cell_points:
                        dx = point.x - x
                        dy = point.y - y
                        if dx * dx + dy * dy <= radius_sq:
                            result_append(point)

        result.sort(key=lambda p: p.idx)
        return result

    def nearest_neighbor_iter_with_distance_2(
        self, x: float, y: float
    ) -> Iterator[Tuple[TreePoint, float]]:
        """Lazily yield ``(point, squared_distance)`` in ascending distance.

        Every call returns a fresh generator, so callers can stop as soon as
        the distance exceeds whatever threshold they care about. Equal
        distances come out in index order.
        """
        if not self._points:
            return

        cs = self.cell_size
        col, row = self._get_cell(x, y)
        max_ring = max(
            col - self._min_col,
            self._max_col - col,
            row - self._min_row,
            self._max_row - row,
            0,
        )
        cells = self._cells
        heap: List[Tuple[float, int, TreePoint]] = []

        for ring in range(max_ring + 1):
            for cell in self._ring_cells(col, row, ring):
                cell_points = cells.get(cell)
                if cell_points:
                    for point in cell_points:
                        heapq.heappush(heap, (point.distance_2(x, y), point.idx, point))

            # Nothing outside the visited square can be closer than its edge
            edge = min(
                x - (col - ring) * cs,
                (col + ring + 1) * cs - x,
                y - (row - ring) * cs,
                (row + ring + 1) * cs - y,
            )
            edge_sq = edge * edge
            while heap and heap[0][0] < edge_sq:
                dist_sq, _, point = heapq.heappop(heap)
                yield point, dist_sq

        while heap:
            dist_sq, _, point = heapq.heappop(heap)
            yield point, dist_sq

    def _ring_cells(self, col: int, row: int, ring: int) -> Iterator[Tuple[int, int]]:
        """Cells at Chebyshev distance ``ring`` from ``(col, row)`` that can be occupied."""
        if ring == 0:
            yield (col, row)
            return

        lo_col = max(self._min_col, col - ring)
        hi_col = min(self._max_col, col + ring)
        lo_row = max(self._min_row, row - ring)
        hi_row = min(self._max_row, row + ring)

        # Top and bottom edges
        for r in (row - ring, row + ring):
            if self._min_row <= r <= self._max_row:
                for c in range(lo_col, hi_col + 1):
                    yield (c, r)
        # Left and right edges, corners already covered
        for c in (col - ring, col + ring):
            if self._min_col <= c <= self._max_col:
                for r in range(max(lo_row, row - ring + 1), min(hi_row, row + ring - 1) + 1):
                    yield (c, r)
