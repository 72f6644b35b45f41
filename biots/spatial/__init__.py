"""Spatial indexing for neighbour and range queries over biot positions."""

from biots.spatial.grid import SpatialGrid, TreePoint

__all__ = ["SpatialGrid", "TreePoint"]
