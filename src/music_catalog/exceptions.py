"""Custom exceptions for music catalog."""


class MusicCatalogError(Exception):
    """Base exception for music catalog errors."""
    pass


class ConfigurationError(MusicCatalogError):
    """Raised when there's an error in configuration."""
    pass


class ScriptError(MusicCatalogError):
    """Raised when an operation script cannot be read or is malformed."""
    pass
