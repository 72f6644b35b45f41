"""Population-level simulation constants.

These control how the collection orchestrates a step: neighbour search
radii, combat pairing and the spatial index.
"""

# =============================================================================
# INTERACTION RADII
# =============================================================================

# Pairs of biots within this distance are candidates for combat
COLLISION_RADIUS = 50.0

# Feeding detection reach: squared distance limit = intelligence**2 * factor
FEED_DETECTION_FACTOR = 1600.0

# Added to both axes before normalizing a feed direction so a neighbour
# sitting exactly on top of the biot never yields a zero-length vector
FEED_DIRECTION_EPSILON = 1e-4

# =============================================================================
# SPATIAL INDEX
# =============================================================================

# Grid cell size in world units. Matching the collision radius keeps range
# queries to a 3x3 block of cells.
SPATIAL_CELL_SIZE = 50.0
