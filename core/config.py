"""
Map Reference: Fixed star map (71 rows, 962x924 image).
Purpose: Configs for grid, viewport and client window.
Dependencies: os.
Ext Hooks: Load per-map settings from the metadata server.
"""

import os

# Grid
ROW_COUNT = 71
HEX_SIZE = 10  # Width and height of the hexagon box, world pixels

# Viewport
MAP_WIDTH = 962  # Default world size until the image arrives
MAP_HEIGHT = 924
MIN_SCALE = 1.0  # Whole map visible
MAX_SCALE = 5.0
WHEEL_SENSITIVITY = 1000.0
WHEEL_NOTCH = 100  # Wheel delta reported per pygame wheel step

# Client window
SCREEN_WIDTH = 962
SCREEN_HEIGHT = 924
FPS = 60
WINDOW_TITLE = "Star Map"
BACKGROUND_COLOR = (0, 0, 0)
ACTIVE_COLOR = (255, 255, 0)
SELECTED_COLOR = (0, 200, 255)
HEX_ALPHA = 96

# Network
SERVER_URL = os.environ.get("STARMAP_SERVER_URL", "http://localhost:5000")
METADATA_ENDPOINT = "/api/metadata"
IMAGE_ENDPOINT = "/api/map"
REQUEST_TIMEOUT = 5.0
