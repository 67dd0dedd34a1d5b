"""Async functional Dockerfile reconstruction operations."""

import asyncio
import logging
from pathlib import Path
from typing import Iterable

import aiofiles
import aiohttp

from .core.connectivity import check_connectivity
from .core.session import engine_session
from .core.types import EngineConfig
from .history.reconstructor import infer_base_image, reconstruct_dockerfile
from .operations.images import get_history, inspect_all, list_images
from .utils.discovery import discover_socket
from .utils.reference import find_image

logger = logging.getLogger(__name__)


async def _reconstruct(
    session: aiohttp.ClientSession, config: EngineConfig, image_name: str
) -> list[str]:
    """Run the whole reconstruction over one engine session."""
    images = await list_images(session, config)
    target = find_image(images, image_name)
    logger.info("Reconstructing %s (%s)", target.reference, target.short_id)

    images = await inspect_all(session, config, images)
    target = next(image for image in images if image.id == target.id)

    base_reference = infer_base_image(target, images)
    if base_reference:
        logger.info("Resolved base image: %s", base_reference)
    else:
        logger.info("No base image found locally for %s", target.reference)

    references = [target.reference]
    if base_reference:
        references.append(base_reference)
    fetched = await asyncio.gather(
        *(get_history(session, config, reference) for reference in references)
    )
    histories = dict(zip(references, fetched))

    return reconstruct_dockerfile(target, images, histories)


async def dockerfile_from_image(
    image_name: str,
    socket_path: str | None = None,
    api_version: str | None = None,
    timeout: int = 30,
    max_concurrency: int = 8,
) -> list[str]:
    """로컬 이미지의 히스토리로부터 Dockerfile을 재구성합니다.

    로컬 이미지 저장소의 다른 이미지들과 레이어를 비교하여 베이스 이미지(FROM)를
    추정하고, 베이스 이후에 추가된 레이어만 Dockerfile 명령으로 변환합니다.

    Args:
        image_name: 대상 이미지 (예: "nginx", "myapp:v1.0", 이미지 ID 접두사)
            - 태그가 없으면 ":latest"가 사용됩니다
        socket_path: 엔진 소켓 경로 (선택사항, 생략 시 자동 탐색)
        api_version: 엔진 API 버전 (선택사항, 예: "1.41")
        timeout: 요청 타임아웃 (초, 기본값: 30초)
        max_concurrency: 동시 이미지 조회 수 (기본값: 8)

    Returns:
        list[str]: 오래된 순서의 Dockerfile 명령 목록 (첫 줄은 FROM)

    Raises:
        ConfigurationError: 소켓을 찾을 수 없는 경우
        ImageNotFoundError: 이미지가 로컬 저장소에 없는 경우
        EngineError: 엔진 통신 실패 시

    Examples:
        # 로컬 이미지의 Dockerfile 재구성
        lines = await dockerfile_from_image("myapp:v1.0")
        for line in lines:
            print(line)

        # 소켓 경로 지정
        lines = await dockerfile_from_image("nginx", socket_path="/var/run/docker.sock")
    """
    config = EngineConfig(
        socket_path=discover_socket(socket_path),
        api_version=api_version,
        timeout=timeout,
        max_concurrency=max_concurrency,
    )
    logger.debug("Using engine socket %s", config.socket_path)

    async with engine_session(config) as session:
        return await _reconstruct(session, config, image_name)


async def write_dockerfile(output_path: str | Path, lines: Iterable[str]) -> None:
    """재구성된 Dockerfile 명령을 파일에 기록합니다.

    명령들은 줄바꿈을 추가하지 않고 그대로 이어서 기록되며, 기존 파일은 덮어씁니다.

    Args:
        output_path: 출력 파일 경로 (예: "Dockerfile", "./out/Dockerfile")
        lines: dockerfile_from_image()가 반환한 명령 목록

    Examples:
        lines = await dockerfile_from_image("myapp:v1.0")
        await write_dockerfile("Dockerfile", lines)
    """
    async with aiofiles.open(output_path, "w") as f:
        for line in lines:
            await f.write(line)


async def check_engine_connectivity(socket_path: str | None = None) -> bool:
    """엔진 연결 상태를 확인합니다.

    Args:
        socket_path: 엔진 소켓 경로 (선택사항, 생략 시 자동 탐색)

    Returns:
        bool: 엔진이 응답하면 True

    Raises:
        ConfigurationError: 소켓을 찾을 수 없는 경우

    Examples:
        accessible = await check_engine_connectivity("/var/run/docker.sock")
    """
    config = EngineConfig(socket_path=discover_socket(socket_path))
    return await check_connectivity(config)
