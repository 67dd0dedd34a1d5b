"""Custom exceptions for dfimage."""


class DfimageError(Exception):
    """Base exception for all dfimage errors."""

    pass


class ConfigurationError(DfimageError):
    """Raised when the run is misconfigured before the engine is contacted."""

    pass


class ValidationError(ConfigurationError):
    """Raised when a user supplied path fails validation."""

    pass


class EngineError(DfimageError):
    """Base exception for container engine failures."""

    pass


class EngineConnectionError(EngineError):
    """Raised when unable to connect to the engine socket."""

    pass


class EngineAPIError(EngineError):
    """Raised when the engine answers with an error status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ImageNotFoundError(DfimageError):
    """Raised when the requested image is not in the local image store."""

    pass


class MissingHistoryError(DfimageError):
    """Raised when a history needed for reconstruction was not supplied."""

    pass
