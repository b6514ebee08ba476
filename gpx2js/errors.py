"""
Exceptions raised by gpx2js.

Configuration errors abort a run. Parse and write errors are
per-file: the conversion service records them and moves on.
"""


# =============================================================================
# Base
# =============================================================================

class Gpx2JsError(Exception):
    """Base gpx2js error."""
    pass


# =============================================================================
# Configuration (fatal)
# =============================================================================

class ConfigurationError(Gpx2JsError):
    """Run cannot start with the given inputs."""
    pass


class InputNotFoundError(ConfigurationError):
    """Input directory is missing or not a directory."""
    pass


class SkipFileUnreadableError(ConfigurationError):
    """Skip list was given but could not be read."""
    pass


# =============================================================================
# Per-file
# =============================================================================

class TrackParseError(Gpx2JsError):
    """Track file is not valid GPX."""

    def __init__(self, filename: str, detail: str):
        self.filename = filename
        self.detail = detail
        super().__init__(f"{filename}: {detail}")


class OutputWriteError(Gpx2JsError):
    """Output directory or file could not be written."""

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}")
