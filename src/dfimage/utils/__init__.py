"""Utility functions for dfimage."""

from .discovery import discover_socket
from .reference import find_image, normalize_reference, parse_repository_tag
from .validator import validate_output_path

__all__ = [
    "discover_socket",
    "find_image",
    "normalize_reference",
    "parse_repository_tag",
    "validate_output_path",
]
