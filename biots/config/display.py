"""Display and run-loop configuration constants."""

# World extent in pixels
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

# The frame rate for the windowed loop, in frames per second
FRAME_RATE = 60

# Width of the "=====" banners in headless logs
SEPARATOR_WIDTH = 60

# Number of random biots created at startup
INITIAL_POPULATION = 800

# Background colour of the window
BACKGROUND_COLOR = (0, 0, 0)

# Biot body layers, outermost first
PHOTOSYNTHESIS_COLOR = (0, 228, 48)
ATTACK_COLOR = (230, 41, 55)
DEFENSE_COLOR = (0, 82, 172)
MOTION_COLOR = (0, 121, 241)
INTELLIGENCE_COLOR = (0, 228, 48)

# Layer radius = BODY_SCALE * (sum of the traits drawn in that layer)
BODY_SCALE = 7.0

# Population counter text
COUNTER_COLOR = (255, 255, 255)
COUNTER_FONT_SIZE = 24
