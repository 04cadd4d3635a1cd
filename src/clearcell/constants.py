GRID_ROWS = 12
GRID_COLS = 8
BOTTOM_MARGIN = 20
# Space kept free above the board for the score line.
TOP_MARGIN = 60

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.75
BOARD_MAX_HEIGHT_PCT = 0.85

# Seconds between row injections at the default cadence.
STEP_INTERVAL = 1.5

# Clearing strategy used when none is requested (directional runs + row collapse).
DEFAULT_STRATEGY = 1

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 800
WINDOW_TITLE = "Clear Cell"
