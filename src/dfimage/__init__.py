"""dfimage - Reconstruct a Dockerfile from a locally stored image."""

__version__ = "0.1.1"

from .dockerfile import (
    check_engine_connectivity,
    dockerfile_from_image,
    write_dockerfile,
)
from .exceptions import (
    ConfigurationError,
    DfimageError,
    EngineAPIError,
    EngineConnectionError,
    EngineError,
    ImageNotFoundError,
    MissingHistoryError,
    ValidationError,
)
from .history import (
    BASE_NOT_FOUND,
    build_layer_index,
    format_step,
    infer_base_image,
    reconstruct_dockerfile,
    reconstruct_history,
    resolve_base_image,
)
from .models import HistoryEvent, Image

__all__ = [
    # Functional API
    "dockerfile_from_image",
    "write_dockerfile",
    "check_engine_connectivity",
    # Reconstruction core
    "BASE_NOT_FOUND",
    "build_layer_index",
    "format_step",
    "infer_base_image",
    "reconstruct_dockerfile",
    "reconstruct_history",
    "resolve_base_image",
    # Models
    "HistoryEvent",
    "Image",
    # Exceptions
    "DfimageError",
    "ConfigurationError",
    "ValidationError",
    "EngineError",
    "EngineConnectionError",
    "EngineAPIError",
    "ImageNotFoundError",
    "MissingHistoryError",
]
