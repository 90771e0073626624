"""Game-wide constants for Planetwalk."""

# --- Display ---
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
TITLE = "Planetwalk"
FOV_DEGREES = 70.0
NEAR_PLANE = 0.1

# --- Colors (RGB) ---
WHITE = (255, 255, 255)
CLEAR_COLOR = (25, 25, 25)
LIGHT_GREY = (180, 180, 190)
AMBER = (255, 191, 0)
CYAN = (0, 200, 220)

# Body surfaces
GRASS = (154, 205, 50)
DUST = (192, 192, 192)

# HUD panel
PANEL_BG = (20, 20, 30, 200)
PANEL_BORDER = (60, 60, 80)

# --- Star colors ---
RED_STAR = (254, 126, 35)
YELLOW_STAR = (254, 218, 182)
BLUE_STAR = (154, 175, 254)

STAR_PALETTE: tuple[tuple[int, int, int], ...] = (RED_STAR, YELLOW_STAR, BLUE_STAR)

# --- Scale ---
AU = 400_000.0
EARTH_RADIUS = 100.0
SOL_RADIUS = EARTH_RADIUS * 100.0
MOON_RADIUS = EARTH_RADIUS / 4.0
MOON_DISTANCE = AU / 400.0

GALAXY_RADIUS = AU * 200.0
STAR_RADIUS_RANGE = (SOL_RADIUS / 10.0, SOL_RADIUS * 10.0)
STAR_SEPARATION = AU * 20.0

DEFAULT_SEED = "Milky Way"
ANCHOR_STAR_NAME = "Sol"

# --- Player ---
PLAYER_SPAWN = (0.0, 100.0, 0.0)
WALK_SPEED = 50.0
LOOK_SENSITIVITY = 0.001

# Rig link offsets (local, relative to parent)
LEGS_OFFSET = 0.5
TORSO_OFFSET = 1.0
HEAD_OFFSET = 0.8
CAMERA_OFFSET = (0.0, 0.0, 7.0)
