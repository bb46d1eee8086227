"""Shared constants for xortool defaults and home-directory locations."""

XORTOOL_HOME_EXT = ".xortool"  # user-level state/config directory suffix

# Reserved subdirectory that receives transformed files
DEFAULT_OUTPUT_DIR_NAME = "xor"

# Bytes read per chunk while streaming a file
DEFAULT_CHUNK_SIZE = 64 * 1024

# Minimum seconds between two progress redraws
DEFAULT_PROGRESS_INTERVAL_SECS = 0.2

# Character budget for the file name shown on progress lines
DEFAULT_DISPLAY_NAME_WIDTH = 30

# Cells in the progress bar
DEFAULT_BAR_WIDTH = 20
