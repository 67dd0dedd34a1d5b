"""Engine API operations."""

from .images import (
    get_history,
    inspect_all,
    inspect_image,
    list_images,
    load_snapshot,
)

__all__ = [
    "get_history",
    "inspect_all",
    "inspect_image",
    "list_images",
    "load_snapshot",
]
