"""Configuration types for the engine client."""

from dataclasses import dataclass

ENGINE_HOST = "http://localhost"


@dataclass
class EngineConfig:
    """Connection settings for a local container engine."""

    socket_path: str
    api_version: str | None = None
    timeout: int = 30
    max_concurrency: int = 8

    def __post_init__(self) -> None:
        if self.api_version:
            self.api_version = self.api_version.lstrip("v")

    @property
    def base_url(self) -> str:
        if self.api_version:
            return f"{ENGINE_HOST}/v{self.api_version}"
        return ENGINE_HOST

    def url(self, path: str) -> str:
        """Build the request URL for an API path such as ``/images/json``."""
        return f"{self.base_url}/{path.lstrip('/')}"
