"""
Exception types for the fistbump package.
"""


class FistBumpError(Exception):
    """Base class for all fistbump errors."""


class MalformedHandError(FistBumpError, ValueError):
    """Raised when a hand does not have exactly 21 usable landmarks."""


class ProjectionError(FistBumpError, ValueError):
    """Raised when projection is asked for a non-positive canvas size."""


class ConfigError(FistBumpError):
    """Raised when a configuration file is missing a key or holds a bad value."""
