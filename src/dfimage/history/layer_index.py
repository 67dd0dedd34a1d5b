"""Index of local images by their topmost layer."""

import logging
from typing import Iterable

from ..models import Image

logger = logging.getLogger(__name__)


def build_layer_index(images: Iterable[Image]) -> dict[str, str]:
    """Map the last layer of every image to that image's primary reference.

    Images without layers or without a tag are skipped. When several images
    end on the same layer the one seen last wins, so the result depends on
    the order the engine enumerated the images in.

    Args:
        images: Inspected images, in engine enumeration order

    Returns:
        Mapping of layer id to ``repo:tag``
    """
    layer_index: dict[str, str] = {}
    for image in images:
        last_layer = image.last_layer
        reference = image.primary_reference
        if last_layer is None or reference is None:
            continue
        previous = layer_index.get(last_layer)
        if previous is not None and previous != reference:
            logger.debug(
                "Layer %s shared by %s and %s, keeping %s",
                last_layer[:19],
                previous,
                reference,
                reference,
            )
        layer_index[last_layer] = reference
    return layer_index
