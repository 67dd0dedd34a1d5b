"""Discovery of the local engine socket."""

import logging
import os
from pathlib import Path

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

UNIX_SCHEME = "unix://"
SYSTEM_SOCKET = "/var/run/docker.sock"


def candidate_socket_paths(home: Path | None = None) -> list[Path]:
    """Conventional socket locations, in lookup order."""
    home = home or Path.home()
    return [
        home / ".rd" / "docker.sock",
        home / ".docker" / "run" / "docker.sock",
        Path(SYSTEM_SOCKET),
    ]


def socket_from_docker_host(docker_host: str | None) -> str | None:
    """Extract the socket path from a ``unix://`` DOCKER_HOST value."""
    if docker_host and docker_host.startswith(UNIX_SCHEME):
        return docker_host[len(UNIX_SCHEME):]
    return None


def discover_socket(socket_path: str | None = None, home: Path | None = None) -> str:
    """Resolve the engine socket to connect to.

    An explicit path always wins. Otherwise ``DOCKER_HOST`` is honoured when
    it names a unix socket, and then the conventional locations are probed.

    Raises:
        ConfigurationError: If no socket can be found
    """
    if socket_path:
        return socket_path

    from_env = socket_from_docker_host(os.environ.get("DOCKER_HOST"))
    if from_env:
        logger.debug("Using socket from DOCKER_HOST: %s", from_env)
        return from_env

    for candidate in candidate_socket_paths(home):
        if candidate.exists():
            logger.debug("Found engine socket at %s", candidate)
            return str(candidate)

    raise ConfigurationError(
        "Failed to find the docker socket - use --socket to specify the path to docker.sock"
    )
