"""Output path validation utilities."""

import os
from pathlib import Path

from ..exceptions import ValidationError


def is_path_exists(path: Path) -> bool:
    """Check if path exists."""
    return path.exists()


def is_writable_dir(path: Path) -> bool:
    """Check if path is a directory the current user can write to."""
    return path.is_dir() and os.access(path, os.W_OK)


def get_output_dir(output_path: Path) -> Path:
    """Directory the output file will be created in."""
    if output_path.parent == Path("."):
        return Path.cwd()
    return output_path.parent


def validate_output_path(output_path: Path) -> Path:
    """출력 파일 경로의 상위 디렉토리가 존재하고 쓰기 가능한지 검증합니다.

    엔진에 연결하기 전에 호출하여 잘못된 경로로 인한 작업 낭비를 방지합니다.

    Args:
        output_path: 출력 파일 경로
            - 파일명만: Path("Dockerfile") (현재 작업 디렉토리 검사)
            - 경로 포함: Path("./out/Dockerfile"), Path("/tmp/Dockerfile")

    Returns:
        Path: 검증된 상위 디렉토리

    Raises:
        ValidationError: 디렉토리가 없거나 쓰기 권한이 없는 경우

    Examples:
        # 출력 경로 검증
        from pathlib import Path

        validate_output_path(Path("/tmp/Dockerfile"))
    """
    directory = get_output_dir(output_path)

    if not is_path_exists(directory):
        raise ValidationError(
            f"The path {directory} does not exist - please choose another path"
        )

    if not is_writable_dir(directory):
        raise ValidationError(
            f"The path {directory} is not writable - please choose another path"
        )

    return directory
