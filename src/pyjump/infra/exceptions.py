class LevelLoadError(Exception):
    """Raised when a level pack cannot be read or holds no levels."""
