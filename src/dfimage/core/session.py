"""aiohttp session handling for the engine socket."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import aiohttp

from ..exceptions import EngineAPIError, EngineConnectionError
from .types import EngineConfig

logger = logging.getLogger(__name__)


async def create_session(config: EngineConfig) -> aiohttp.ClientSession:
    """Create a client session bound to the engine's unix socket."""
    connector = aiohttp.UnixConnector(path=config.socket_path)
    return aiohttp.ClientSession(
        connector=connector,
        timeout=aiohttp.ClientTimeout(total=config.timeout),
    )


@asynccontextmanager
async def engine_session(config: EngineConfig) -> AsyncIterator[aiohttp.ClientSession]:
    """Open a session for the duration of one run."""
    session = await create_session(config)
    try:
        yield session
    finally:
        await session.close()


async def parse_error_message(resp: aiohttp.ClientResponse) -> str:
    """Extract the engine's error message from a failed response."""
    try:
        data = await resp.json(content_type=None)
    except (aiohttp.ClientError, ValueError):
        return resp.reason or ""
    if isinstance(data, dict):
        return str(data.get("message", ""))
    return str(data)


async def get_json(
    session: aiohttp.ClientSession, config: EngineConfig, path: str
) -> Any:
    """Perform a GET against the engine API and decode the JSON body.

    Args:
        session: Session from ``create_session``
        config: Engine configuration
        path: API path, e.g. ``/images/json``

    Returns:
        Decoded JSON response

    Raises:
        EngineConnectionError: If the socket cannot be reached
        EngineAPIError: If the engine answers with an error status
    """
    url = config.url(path)
    logger.debug("GET %s", url)
    try:
        async with session.get(url) as resp:
            if resp.status >= 400:
                message = await parse_error_message(resp)
                raise EngineAPIError(
                    f"Engine returned {resp.status} for {path}: {message}",
                    status=resp.status,
                )
            return await resp.json()
    except aiohttp.ClientConnectionError as e:
        raise EngineConnectionError(
            f"Unable to reach the engine at {config.socket_path}: {e}"
        ) from e
    except aiohttp.ClientError as e:
        raise EngineAPIError(f"Request to {path} failed: {e}") from e
    except asyncio.TimeoutError as e:
        raise EngineConnectionError(
            f"Request to {path} timed out after {config.timeout}s"
        ) from e
