"""Drawer and demo configuration constants."""

from __future__ import annotations

# Performance
TARGET_FPS = 120

# Snap resolution
DRAG_THRESHOLD = 50.0            # px of net displacement
SNAP_VELOCITY_THRESHOLD = 100.0  # px/s
STILL_EPSILON = 0.5              # |displacement| at or below this has no direction
HANDLE_ALLOWANCE = 60.0          # px reserved above content for the handle

# Gesture sampling
VELOCITY_WINDOW_MS = 100
VELOCITY_HISTORY_LIMIT = 32

# Settle animation
SNAP_ANIM_MS = 300
SNAP_ANIM_CURVE = "spring"       # "spring" or "ease"
SPRING_RESPONSE_S = 0.3
SPRING_DAMPING = 0.7
SPRING_SETTLE_PX = 0.5           # spring ends once within this of its target

# Demo drawer heights (map screen of the prototype)
DEMO_MIN_HEIGHT = 150.0
DEMO_HALF_HEIGHT = 300.0
DEMO_MAX_HEIGHT = 600.0

# Demo window
SCREEN_W = 420
SCREEN_H = 800
WINDOW_TITLE = "SnapDrawer"

# Drawer layout
HANDLE_AREA_HEIGHT = 56
HANDLE_BAR_W = 40
HANDLE_BAR_H = 6
HANDLE_BAR_TOP = 8
CORNER_RADIUS = 20
TITLE_FONT_SIZE = 20
ROW_HEIGHT = 56
ROW_SPACING = 12
ROW_FONT_SIZE = 18
CONTENT_PADDING = 16

# Floating action button
FAB_RADIUS = 28
FAB_MARGIN = 20

# Input
TAP_SLOP_PX = 6.0
TAP_MAX_MS = 300

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_EXPAND = 265     # KEY_UP
KEY_COLLAPSE = 264   # KEY_DOWN
KEY_TOGGLE = 32      # KEY_SPACE
KEY_CLOSE = 256      # KEY_ESCAPE

# Colors (r, g, b, a)
COLOR_BACKDROP = (170, 205, 230, 255)
COLOR_BACKDROP_GRID = (150, 185, 212, 255)
COLOR_PANEL = (250, 250, 252, 245)
COLOR_PANEL_BORDER = (200, 200, 205, 255)
COLOR_HANDLE = (160, 160, 165, 200)
COLOR_TEXT = (30, 30, 35, 255)
COLOR_ROW = (232, 232, 236, 255)
COLOR_FAB = (255, 140, 60, 255)
COLOR_FAB_ICON = (255, 255, 255, 255)

DRAWER_TITLE = "Nearby groups"
DEMO_ROWS = [
    "Coffee: buy 2 get 1",
    "Lunch set for four",
    "Ride to the station",
    "Bulk grocery run",
    "Bubble tea 50% off",
    "Bakery closing sale",
    "Shared taxi downtown",
    "Weekend market trip",
]
