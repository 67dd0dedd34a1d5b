"""Rebuild Dockerfile instructions from image history."""

import logging
from typing import Iterable, Mapping, Sequence

from ..exceptions import MissingHistoryError
from ..models import HistoryEvent, Image
from .formatter import format_step
from .layer_index import build_layer_index
from .resolver import resolve_base_image

logger = logging.getLogger(__name__)

BASE_NOT_FOUND = "FROM <base image not found locally>"


def get_boundary_marker(base_history: Sequence[HistoryEvent] | None) -> str | None:
    """Return the creation command of the base image's newest layer.

    An empty command marks nothing, so it yields ``None``.
    """
    if not base_history:
        return None
    return base_history[0].created_by or None


def reconstruct_history(
    history: Sequence[HistoryEvent],
    base_reference: str | None = None,
    base_history: Sequence[HistoryEvent] | None = None,
) -> list[str]:
    """Turn an image history into Dockerfile lines.

    Args:
        history: Target history, newest first
        base_reference: Resolved base image, if any
        base_history: History of the base image, newest first

    Returns:
        Dockerfile lines, oldest first, starting with the FROM line
    """
    boundary = get_boundary_marker(base_history) if base_reference else None

    commands = []
    for event in history:
        if boundary is not None and event.created_by == boundary:
            break
        commands.append(format_step(event.created_by))

    if base_reference:
        commands.append(f"FROM {base_reference}")
    else:
        commands.append(BASE_NOT_FOUND)

    commands.reverse()
    return commands


def infer_base_image(target: Image, images: Iterable[Image]) -> str | None:
    """Build the layer index over ``images`` and resolve the base of ``target``."""
    base_reference = resolve_base_image(target, build_layer_index(images))
    logger.debug("Base image for %s: %s", target.reference, base_reference)
    return base_reference


def _require_history(
    histories: Mapping[str, Sequence[HistoryEvent]], reference: str
) -> Sequence[HistoryEvent]:
    try:
        return histories[reference]
    except KeyError as e:
        raise MissingHistoryError(
            f'The history of image "{reference}" was not supplied'
        ) from e


def reconstruct_dockerfile(
    target: Image,
    images: Iterable[Image],
    histories: Mapping[str, Sequence[HistoryEvent]],
) -> list[str]:
    """Reconstruct a Dockerfile from an already fetched snapshot.

    Args:
        target: Inspected target image
        images: Every inspected local image, in engine enumeration order
        histories: Histories keyed by image reference; must hold the target
            and, when one resolves, the base image

    Returns:
        Dockerfile lines, oldest first

    Raises:
        MissingHistoryError: If the target or resolved base history is absent
    """
    base_reference = infer_base_image(target, images)
    history = _require_history(histories, target.reference)
    base_history = _require_history(histories, base_reference) if base_reference else None
    return reconstruct_history(history, base_reference, base_history)
