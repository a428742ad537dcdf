# config.py
# All configurable constants and settings

import os

# Optional debug logging toggle: when enabled, guarded call sites append a
# timestamped trace to logs/debug.txt. Disabled by default for normal play.
LOG_ENABLED = bool(int(os.getenv("COLORGATE_LOG_ENABLED", "0")))
LOG_FILE_PATH = "logs/debug.txt"

# Canvas dimensions
WIDTH = 400
HEIGHT = 600

# Frames per second
FPS = int(os.getenv("COLORGATE_FPS", "60"))

# Gate colors; the player always wears one of these
PALETTE = ("#FF5252", "#FFEB3B", "#4CAF50", "#2196F3")
PALETTE_SIZE = 4

# Player
PLAYER_RADIUS = 20
PLAYER_SPEED = 5
PLAYER_Y_OFFSET = 50       # distance of the player centre from the bottom edge

# Obstacles
OBSTACLE_HEIGHT = 30
GAP_WIDTH = 100
GAP_MARGIN = 50
OBSTACLE_START_Y = -50

# Difficulty ramp
BASE_OBSTACLE_SPEED = 2
BASE_SPAWN_PERIOD = 100    # frames between spawns
RAMP_INTERVAL = 500        # frames between difficulty bumps
SPEED_INCREMENT = 0.5
PERIOD_DECREMENT = 10
MIN_SPAWN_PERIOD = 50

# UI glue
POPUP_DURATION = 2.0       # seconds the "made by" popup stays up
SWIPE_THRESHOLD = 5        # pixels of finger travel before a swipe counts
BACKGROUND_COLOR = (0, 0, 0)
LETTERBOX_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 255, 255)

# Settings dictionary re-read by the frame loop
settings_data = {
    "FPS": FPS,
    "POPUP_DURATION": POPUP_DURATION,
}
