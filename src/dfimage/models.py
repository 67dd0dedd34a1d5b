"""Data models for images and their history."""

from dataclasses import dataclass, replace
from typing import Any

# Placeholder the engine reports for untagged images
UNTAGGED = "<none>:<none>"


def _clean_tags(tags: Any) -> tuple[str, ...]:
    """Drop null and placeholder tags reported by the engine."""
    if not tags:
        return ()
    return tuple(tag for tag in tags if tag and tag != UNTAGGED)


@dataclass(frozen=True)
class HistoryEvent:
    """A single entry of an image's creation history."""

    created_by: str
    id: str = "<missing>"
    created: int = 0
    size: int = 0
    tags: tuple[str, ...] = ()
    comment: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "HistoryEvent":
        """Build an event from one element of the engine's history response."""
        return cls(
            created_by=data.get("CreatedBy") or "",
            id=data.get("Id") or "<missing>",
            created=data.get("Created") or 0,
            size=data.get("Size") or 0,
            tags=_clean_tags(data.get("Tags")),
            comment=data.get("Comment") or "",
        )


@dataclass(frozen=True)
class Image:
    """A locally stored image.

    ``layers`` holds the root filesystem layer ids, oldest first. Images
    coming from the list endpoint have no layers until they are inspected.
    """

    id: str
    repo_tags: tuple[str, ...] = ()
    layers: tuple[str, ...] = ()

    @property
    def primary_reference(self) -> str | None:
        """First ``repo:tag`` of the image, if it has any."""
        return self.repo_tags[0] if self.repo_tags else None

    @property
    def reference(self) -> str:
        """Name usable with the engine API: primary tag, else the id."""
        return self.primary_reference or self.id

    @property
    def last_layer(self) -> str | None:
        return self.layers[-1] if self.layers else None

    @property
    def short_id(self) -> str:
        _, _, digest = self.id.rpartition(":")
        return digest[:12]

    def with_layers(self, layers: list[str] | tuple[str, ...]) -> "Image":
        return replace(self, layers=tuple(layers))

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Image":
        """Build an image from a list or inspect response entry."""
        rootfs = data.get("RootFS") or {}
        return cls(
            id=data.get("Id", ""),
            repo_tags=_clean_tags(data.get("RepoTags")),
            layers=tuple(rootfs.get("Layers") or ()),
        )
