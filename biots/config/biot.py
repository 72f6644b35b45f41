"""Organism model constants.

Everything an individual biot needs: genome layout, trait accumulation,
energy accounting, reproduction and movement.
"""

# =============================================================================
# GENOME
# =============================================================================

GENOME_LENGTH = 13

# Each Attack/Defense/Photosynthesis/Motion gene adds this to its trait
TRAIT_INCREMENT = 0.1
# Each Intelligence gene adds this to intelligence
INTELLIGENCE_INCREMENT = 10.0

# =============================================================================
# ENERGY
# =============================================================================

# metabolism = METABOLISM_SCALE * (sum of weighted traits)
METABOLISM_SCALE = 0.2
METABOLISM_ATTACK_COST = 4.5
METABOLISM_DEFENSE_COST = 2.3
METABOLISM_MOTION_COST = 2.5
METABOLISM_INTELLIGENCE_COST = 0.1

# Net energy per step = ENERGY_GAIN_FACTOR * (photosynthesis - metabolism)
ENERGY_GAIN_FACTOR = 0.4

# base_life = BASE_LIFE_FACTOR * weight
BASE_LIFE_FACTOR = 8.0

# =============================================================================
# REPRODUCTION
# =============================================================================

# A biot is an adult once its energy reaches ADULT_FACTOR * base_life.
# Reproducing drops the parent to (ADULT_FACTOR - 1) * base_life.
ADULT_FACTOR = 4.0

# Rank of the neighbour checked for crowding. The biot sees itself at
# distance 0, so rank 5 is the 5th distinct neighbour.
CROWDING_NEIGHBOR_RANK = 5
CROWDING_DISTANCE_SQUARED = 200.0

# Probability of one more mutation (geometric mutation count)
MUTATION_CHANCE = 0.2

# Impulse given to a fresh offspring
OFFSPRING_SPEED = 1.5

# =============================================================================
# MOVEMENT
# =============================================================================

# Velocity is multiplied by this every step
VELOCITY_DECAY = 0.9

# Impulse probability = MOTION_CHANCE_FACTOR * motion
MOTION_CHANCE_FACTOR = 0.2
# Impulse magnitude = MOTION_SPEED_FACTOR * motion / weight
MOTION_SPEED_FACTOR = 7.0

# =============================================================================
# LIFECYCLE & COMBAT
# =============================================================================

MAX_AGE = 10000

# a is stronger than b when a.attack > b.attack + STRENGTH_DEFENSE_FACTOR * b.defense
STRENGTH_DEFENSE_FACTOR = 0.8
# Share of the loser's energy the winner absorbs
ENERGY_TRANSFER_RATIO = 0.8

# Body-contact distance = CONTACT_DISTANCE_FACTOR * (weight_a + weight_b)
CONTACT_DISTANCE_FACTOR = 10.0
