"""Error types for filament profile operations."""


class ProfileError(Exception):
    """Base error for profile operations.

    Every error carries a human-readable message suitable for display.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ProfileError):
    """Raised when the suggestion service credential is not configured."""
    pass


class ServiceError(ProfileError):
    """Raised when the suggestion service fails or returns an unusable response."""
    pass


class ValidationError(ProfileError):
    """Raised when caller input violates a precondition."""
    pass
