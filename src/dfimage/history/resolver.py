"""Infer the base image of a target image."""

from ..models import Image


def resolve_base_image(image: Image, layer_index: dict[str, str]) -> str | None:
    """Find the local image the target was most likely built from.

    The target's layers are scanned oldest first and the first layer that
    ends some other tagged image decides the base. Hits on the target's own
    reference are ignored.

    Args:
        image: Inspected target image
        layer_index: Result of ``build_layer_index``

    Returns:
        Reference of the base image, or None if no base is stored locally
    """
    own_reference = image.primary_reference
    for layer_id in image.layers:
        reference = layer_index.get(layer_id)
        if reference is None or reference == own_reference:
            continue
        return reference
    return None
