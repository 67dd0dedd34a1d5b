"""Engine availability checks."""

import asyncio

import aiohttp

from .session import engine_session
from .types import EngineConfig


async def check_connectivity(config: EngineConfig) -> bool:
    """Check whether the engine answers its ping endpoint.

    Args:
        config: Engine configuration

    Returns:
        True if the engine responded with 200
    """
    try:
        async with engine_session(config) as session:
            async with session.get(config.url("/_ping")) as resp:
                return resp.status == 200
    except (aiohttp.ClientError, asyncio.TimeoutError):
        return False
