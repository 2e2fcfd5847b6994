class LevelFormatError(ValueError):
    """Raised when level text has ragged rows or characters outside the legend."""


class MissingPlayerError(ValueError):
    """Raised when a world is started from a level without a player spawn."""
