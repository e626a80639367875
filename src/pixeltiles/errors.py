"""
Exception types for pixeltiles.

Encode-time and load-time failures are raised; out-of-range and unknown-tile
queries are signalled by returning None instead.
"""


class PixelTilesError(Exception):
    """Base class for all pixeltiles errors."""
    pass


class EncodeError(PixelTilesError):
    """Raised when a pixel buffer cannot be encoded into a container."""
    pass


class AssetBuildError(PixelTilesError):
    """Raised when the asset build step cannot read its inputs."""
    pass


class AssetNotFoundError(PixelTilesError, KeyError):
    """Raised when a container name is not registered."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"Asset not found: {name}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])


class InvalidContainerError(PixelTilesError, ValueError):
    """Raised when a container's packed indices do not match its header."""
    pass
