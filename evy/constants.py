"""Constants and configuration for the evy editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Saving
    DEFAULT_SAVE_PATH = ".swapfile"  # Used by :w when no path is given
    NEW_FILE_MODE = 0o666  # Masked by the process umask on write
    TEMP_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Status line
    NORMAL_STATUS = "-- NORMAL --"
    INSERT_STATUS = "-- INSERT --"
    COMMAND_PROMPT = ":"
    STATUS_ROWS = 1  # Bottom rows reserved for status/command line

    # Viewport size assumed until a terminal reports one
    DEFAULT_COLUMNS = 80
    DEFAULT_ROWS = 24

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Logging
    LOG_APP_NAME = "evy"
    LOG_FILE_NAME = "evy.log"
    LOG_LEVEL_ENV = "EVY_LOG_LEVEL"
    LOG_FILE_ENV = "EVY_LOG_FILE"
    DEFAULT_LOG_LEVEL = "WARNING"
