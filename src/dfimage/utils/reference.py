"""Image reference parsing and lookup."""

import re
from typing import Iterable

from ..exceptions import ImageNotFoundError
from ..models import Image

DEFAULT_TAG = "latest"
HEX_PATTERN = re.compile(r"^[0-9a-f]+$")


def parse_repository_tag(repo_tag: str) -> tuple[str, str]:
    """Split a reference into repository and tag.

    Args:
        repo_tag: Reference such as ``nginx:alpine`` or
            ``localhost:5000/myapp:latest``

    Returns:
        (repository, tag) tuple, tag defaults to ``latest``

    Examples:
        >>> parse_repository_tag("localhost:5000/myapp")
        ('localhost:5000/myapp', 'latest')
    """
    repository, sep, tag = repo_tag.rpartition(":")
    # A colon before the last slash belongs to a registry port
    if sep and "/" not in tag:
        return repository, tag or DEFAULT_TAG
    return repo_tag, DEFAULT_TAG


def normalize_reference(name: str) -> str:
    """Append the default tag to references that carry none."""
    if "@" in name:
        return name
    repository, tag = parse_repository_tag(name)
    return f"{repository}:{tag}"


def _id_digest(image: Image) -> str:
    _, _, digest = image.id.partition(":")
    return digest or image.id


def find_image(images: Iterable[Image], name: str) -> Image:
    """Locate the requested image among the local images.

    Tags are matched first (``:latest`` is implied when no tag is given),
    then the name is tried as an image id or id prefix.

    Raises:
        ImageNotFoundError: If nothing matches or an id prefix is ambiguous
    """
    images = list(images)
    repo_tag = normalize_reference(name)
    for image in images:
        if repo_tag in image.repo_tags:
            return image

    candidate = name.lower()
    if candidate.startswith("sha256:"):
        candidate = candidate[len("sha256:"):]
    if HEX_PATTERN.match(candidate):
        matches = [image for image in images if _id_digest(image).startswith(candidate)]
        if len(matches) == 1:
            return matches[0]
        if len(matches) > 1:
            raise ImageNotFoundError(
                f'The id prefix "{name}" matches {len(matches)} images - use a longer prefix'
            )

    raise ImageNotFoundError(
        f'The image "{repo_tag}" was not found - make sure you pull it first'
    )
