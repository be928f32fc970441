"""
Configuration file for the collinear-points system.

Contains both EXACT and FLOAT parameter sets for slope arithmetic.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to False to compare slopes as IEEE doubles instead of fractions
EXACT_MODE = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_PATTERN = "input/*.txt"
OUTPUT_FOLDER = "output"


# ===============================================================
# EXACT-MODE PARAMETERS
# ===============================================================

EXACT = {
    "SLOPE_ARITHMETIC": "rational",
}


# ===============================================================
# FLOAT-MODE PARAMETERS
# ===============================================================

FLOAT = {
    "SLOPE_ARITHMETIC": "float",
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

MIN_RUN_LENGTH = 3                 # equal slopes in a row around an anchor
MIN_SEGMENT_POINTS = MIN_RUN_LENGTH + 1

USE_LINE_INDEX = True              # False = linear scan over all segments
REJECT_DUPLICATES = True
METHOD = "fast"                    # "fast" (slope sort) or "brute" (N^4)

PARALLEL_WORKERS = 1               # > 1 scans anchors in a process pool
PARALLEL_CHUNK_SIZE = 64


# ---------------------------------------------------------------
# CANVAS / DRAWING
# ---------------------------------------------------------------

COORD_MAX = 32768                  # input plane is [0, COORD_MAX] on both axes
CANVAS_SIZE = 800
CANVAS_MARGIN = 10

POINT_RADIUS = 2
SEGMENT_THICKNESS = 1

COLOR_BACKGROUND = (255, 255, 255) #white
COLOR_POINT = (0, 0, 0)            #black
COLOR_SEGMENT = (255, 0, 0)        #blue


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by models and detectors so they only import one dictionary.
    """

    base = {
        "MIN_RUN_LENGTH": MIN_RUN_LENGTH,
        "MIN_SEGMENT_POINTS": MIN_SEGMENT_POINTS,
        "USE_LINE_INDEX": USE_LINE_INDEX,
        "REJECT_DUPLICATES": REJECT_DUPLICATES,
        "METHOD": METHOD,
        "PARALLEL_WORKERS": PARALLEL_WORKERS,
        "PARALLEL_CHUNK_SIZE": PARALLEL_CHUNK_SIZE,
        "COORD_MAX": COORD_MAX,
        "CANVAS_SIZE": CANVAS_SIZE,
        "CANVAS_MARGIN": CANVAS_MARGIN,
    }

    # Merge in exact or float mode values
    if EXACT_MODE:
        base.update(EXACT)
    else:
        base.update(FLOAT)

    return base
