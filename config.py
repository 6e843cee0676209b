"""
Configuration file for the point-location driver.

Contains both SCREEN and CARTESIAN parameter sets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True when sessions were recorded on a canvas (y grows downward)
SCREEN_MODE = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

SESSION_PATTERN = "sessions/*.json"
OUTPUT_FOLDER = "output"


# ===============================================================
# SCREEN-MODE PARAMETERS
# ===============================================================

SCREEN = {
    "FLIP_Y": True,
    "CANVAS_WIDTH": 1280,
    "CANVAS_HEIGHT": 720,
}


# ===============================================================
# CARTESIAN-MODE PARAMETERS
# ===============================================================

CARTESIAN = {
    "FLIP_Y": False,
    "CANVAS_WIDTH": 800,
    "CANVAS_HEIGHT": 800,
}


# ---------------------------------------------------------------
# SHARED DRAWING PARAMETERS
# ---------------------------------------------------------------

PADDING = 20                # world units kept around the drawing
POINT_RADIUS = 6
LINE_WIDTH = 3              # plain edges
BASIC_LINE_WIDTH = 2        # thinnest chain
LINE_WIDTH_SHIFT = 3        # extra width per chain, earlier chains drawn wider
LABEL_SHIFT = 5             # weight label offset from the edge midpoint
LABEL_SCALE = 0.45


# ---------------------------------------------------------------
# VISUALIZATION COLORS (B, G, R)
# ---------------------------------------------------------------

COLOR_BACKGROUND = (59, 41, 30)
COLOR_POINT = (252, 250, 248)
COLOR_EDGE = (184, 163, 148)
COLOR_LABEL = (252, 250, 248)
COLOR_QUERY = (36, 191, 251)

CHAIN_COLORS = [
    (38, 38, 220),
    (116, 186, 253),
    (9, 83, 180),
    (128, 222, 74),
    (117, 94, 21),
    (250, 165, 96),
    (250, 139, 167),
    (182, 114, 244),
]


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by the driver and the drawing code so they only import one dictionary.
    """

    base = {
        "PADDING": PADDING,
        "POINT_RADIUS": POINT_RADIUS,
        "LINE_WIDTH": LINE_WIDTH,
        "BASIC_LINE_WIDTH": BASIC_LINE_WIDTH,
        "LINE_WIDTH_SHIFT": LINE_WIDTH_SHIFT,
        "LABEL_SHIFT": LABEL_SHIFT,
        "LABEL_SCALE": LABEL_SCALE,
    }

    # Merge in screen or cartesian mode values
    if SCREEN_MODE:
        base.update(SCREEN)
    else:
        base.update(CARTESIAN)

    return base
