"""
Custom exceptions for orbitview.

This module provides domain-specific exceptions for clearer error messages
where a caller hands the controller something it cannot work with.

Clean Architecture Note:
- This file belongs to the Shared layer (cross-cutting concerns)
- Can be imported by any layer (rendering, interaction, controls, config)
- Input handling never raises these; unsupported cameras are logged instead
"""


class OrbitViewError(Exception):
    """Base exception for all orbitview errors."""

    pass


class ConfigError(OrbitViewError):
    """Raised when configuration is invalid or cannot be read."""

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        field_name: str | None = None,
    ):
        """
        Initialize ConfigError.

        Parameters
        ----------
        message : str
            Error message
        config_path : str | None
            Path to the config file
        field_name : str | None
            Name of the invalid config field
        """
        self.message = message
        self.config_path = config_path
        self.field_name = field_name

        full_message = message
        if field_name:
            full_message = f"{full_message} (field: {field_name})"
        if config_path:
            full_message = f"{full_message} (config: {config_path})"

        super().__init__(full_message)


class CameraError(OrbitViewError):
    """Raised when a camera is constructed with unusable parameters."""

    def __init__(self, message: str, camera_type: str | None = None):
        """
        Initialize CameraError.

        Parameters
        ----------
        message : str
            Error message
        camera_type : str | None
            Camera class name (e.g., 'PerspectiveCamera')
        """
        self.camera_type = camera_type

        full_message = message
        if camera_type:
            full_message = f"[{camera_type}] {full_message}"

        super().__init__(full_message)


__all__ = [
    "OrbitViewError",
    "ConfigError",
    "CameraError",
]
