"""Local exceptions used by library."""


class InvalidMessageError(Exception):
    """Thrown when a receiver message has unexpected structure or value types."""


class ImageFetchError(Exception):
    """Thrown when an image could not be downloaded."""


class SettingsError(Exception):
    """Thrown when a setting is invalid or cannot be changed."""
