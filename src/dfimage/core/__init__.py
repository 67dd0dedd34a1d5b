"""Engine connection primitives."""

from .connectivity import check_connectivity
from .session import create_session, engine_session, get_json
from .types import EngineConfig

__all__ = [
    "EngineConfig",
    "check_connectivity",
    "create_session",
    "engine_session",
    "get_json",
]
