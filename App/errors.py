"""Error types surfaced to the user by the pattern pipeline.

AIDEV-NOTE: Everything a user can cause (bad file, bad setting) derives from
PatternError, which is a ValueError so callers that already catch ValueError
around image loading keep working. CatalogError is a RuntimeError on purpose:
an empty catalog is a broken install, not a bad request.
"""


class PatternError(ValueError):
    """Base class for user-facing pattern errors."""


class ImageDecodeError(PatternError):
    """Image bytes could not be decoded."""


class MissingValueError(PatternError):
    """A required input was not provided."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing value. Expected '{field}' to be provided")


class ConfigurationError(PatternError):
    """A pattern setting is outside its valid range."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid value in '{field}'. {message}")


class PatternExistsError(PatternError):
    """A saved pattern with the same name already exists."""


class CatalogError(RuntimeError):
    """The thread catalog cannot be used (e.g. it has no entries)."""
