"""Image history reconstruction."""

from .formatter import format_step, get_step, sanitize_step
from .layer_index import build_layer_index
from .reconstructor import (
    BASE_NOT_FOUND,
    infer_base_image,
    reconstruct_dockerfile,
    reconstruct_history,
)
from .resolver import resolve_base_image

__all__ = [
    "BASE_NOT_FOUND",
    "build_layer_index",
    "format_step",
    "get_step",
    "infer_base_image",
    "reconstruct_dockerfile",
    "reconstruct_history",
    "resolve_base_image",
    "sanitize_step",
]
