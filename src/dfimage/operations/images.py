"""Image related engine operations."""

import asyncio
import logging

import aiohttp

from ..core.session import get_json
from ..core.types import EngineConfig
from ..exceptions import EngineAPIError, ImageNotFoundError
from ..models import HistoryEvent, Image

logger = logging.getLogger(__name__)


async def _get_image_json(
    session: aiohttp.ClientSession, config: EngineConfig, name: str, path: str
):
    """GET an image scoped path, mapping 404 to ImageNotFoundError."""
    try:
        return await get_json(session, config, path)
    except EngineAPIError as e:
        if e.status == 404:
            raise ImageNotFoundError(f'The image "{name}" was not found') from e
        raise


async def list_images(
    session: aiohttp.ClientSession, config: EngineConfig
) -> list[Image]:
    """List local images in the order the engine enumerates them.

    The list endpoint does not report layers, so the returned images have
    an empty ``layers`` tuple.
    """
    data = await get_json(session, config, "/images/json")
    images = [Image.from_api(entry) for entry in data or []]
    logger.debug("Engine reported %d images", len(images))
    return images


async def inspect_image(
    session: aiohttp.ClientSession, config: EngineConfig, name: str
) -> Image:
    """Inspect an image by id or reference, including its layers."""
    data = await _get_image_json(session, config, name, f"/images/{name}/json")
    return Image.from_api(data)


async def get_history(
    session: aiohttp.ClientSession, config: EngineConfig, name: str
) -> list[HistoryEvent]:
    """Fetch the creation history of an image, newest first."""
    data = await _get_image_json(session, config, name, f"/images/{name}/history")
    return [HistoryEvent.from_api(entry) for entry in data or []]


async def inspect_all(
    session: aiohttp.ClientSession, config: EngineConfig, images: list[Image]
) -> list[Image]:
    """Fill in the layers of every image.

    Inspections run concurrently, bounded by ``config.max_concurrency``.
    The result keeps the order of ``images``. If one inspection fails, the
    others are cancelled before the error propagates.
    """
    semaphore = asyncio.Semaphore(config.max_concurrency)

    async def inspect_layers(image: Image) -> Image:
        async with semaphore:
            inspected = await inspect_image(session, config, image.id)
        return image.with_layers(inspected.layers)

    tasks = [asyncio.ensure_future(inspect_layers(image)) for image in images]
    try:
        return list(await asyncio.gather(*tasks))
    except Exception:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def load_snapshot(
    session: aiohttp.ClientSession, config: EngineConfig
) -> list[Image]:
    """List and inspect every local image, in engine enumeration order."""
    images = await list_images(session, config)
    return await inspect_all(session, config, images)
