"""
Configuration file for the terminal drawing toolkit.

Contains both ANIMATED and STATIC parameter sets for the demonstration program.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True to pause between demo frames (interactive terminals)
ANIMATION_MODE = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

OUTPUT_FOLDER = "output"
SNAPSHOT_SUFFIX = ".txt"


# ===============================================================
# ANIMATED-MODE PARAMETERS
# ===============================================================

ANIMATED = {
    "FRAME_DELAY_MS": 120,
    "LINE_SHOW_SECONDS": 1,
    "PROMPT_BETWEEN_SCENES": True,
}


# ===============================================================
# STATIC-MODE PARAMETERS
# ===============================================================

STATIC = {
    "FRAME_DELAY_MS": 0,
    "LINE_SHOW_SECONDS": None,
    "PROMPT_BETWEEN_SCENES": False,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

VIEWPORT_WIDTH = 80                # columns
VIEWPORT_HEIGHT = 24               # rows

LINE_ORIGIN = (1, 1)               # 1-based (x, y)
LINE_LENGTH = 10

AUTO_FLUSH = True                  # flush the stream after every write

BLANK_GLYPH = " "
NULL_KEY = "\0"                    # returned by read_key() on empty input


# ---------------------------------------------------------------
# CONSOLE REPORT TAGS
# ---------------------------------------------------------------

TAG_OK = "[OK]"
TAG_WARN = "[WARN]"
TAG_ERROR = "[ERROR]"


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by models, the terminal session and the demo so they only
      import one dictionary.
    """

    base = {
        "VIEWPORT_WIDTH": VIEWPORT_WIDTH,
        "VIEWPORT_HEIGHT": VIEWPORT_HEIGHT,
        "LINE_ORIGIN": LINE_ORIGIN,
        "LINE_LENGTH": LINE_LENGTH,
        "AUTO_FLUSH": AUTO_FLUSH,
        "BLANK_GLYPH": BLANK_GLYPH,
        "NULL_KEY": NULL_KEY,
    }

    # Merge in animated or static mode values
    if ANIMATION_MODE:
        base.update(ANIMATED)
    else:
        base.update(STATIC)

    # Derived value used by the demo's frame pacing
    base["FRAME_DELAY_SECONDS"] = base["FRAME_DELAY_MS"] / 1000

    return base
