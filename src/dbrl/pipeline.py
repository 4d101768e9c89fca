"""Async image-to-layer import pipeline."""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .core.context import RunContext
from .core.process import CommandRunner, run_command
from .core.types import ImporterConfig
from .exceptions import MetadataError, PipelineStepError
from .layer.archive import export_container, pack_directory, unpack_archive
from .layer.metadata import write_layer_metadata
from .layer.models import LayerPaths
from .utils.dependencies import check_dependencies
from .utils.naming import sanitize_layer_name

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of a successful import."""

    image: str
    layer_name: str
    layer_tarball: Path  # Removed together with the working directory


def _check_step(step: str, returncode: int, message: str) -> None:
    """Raise PipelineStepError when a command exited non-zero."""
    if returncode != 0:
        logger.debug(f"Step '{step}' exited with status {returncode}")
        raise PipelineStepError(step, message, returncode)


async def _make_directory(path: Path, message: str) -> None:
    """Create a single directory, raising MetadataError on failure."""
    loop = asyncio.get_event_loop()
    try:
        await loop.run_in_executor(None, path.mkdir)
    except OSError as e:
        raise MetadataError(f"{message}: {e}") from e


async def _run_steps(
    image: str, ctx: RunContext, runner: CommandRunner
) -> ImportResult:
    """Execute pull through import inside an allocated run context."""
    config = ctx.config
    paths = LayerPaths.under(ctx.temp_dir)

    logger.info(f"Downloading image {image}")
    _check_step(
        "pull",
        await runner([config.engine, "pull", image]),
        "Failed to pull image",
    )

    logger.info("Creating temporary container")
    _check_step(
        "create",
        await runner([config.engine, "create", "--name", ctx.container, image]),
        "Failed to create container",
    )

    logger.info("Exporting container filesystem")
    _check_step(
        "export",
        await export_container(runner, config, ctx.container, paths.export_tar),
        "Export failed",
    )

    logger.info("Preparing Bedrock Linux layer")
    await _make_directory(paths.layer_root, "Failed to create layer directory")
    _check_step(
        "unpack",
        await unpack_archive(runner, config, paths.export_tar, paths.layer_root),
        "Failed to unpack filesystem",
    )

    layer_name = sanitize_layer_name(image)
    logger.info(f"Using layer name: {layer_name}")
    await _make_directory(paths.metadata_dir, "Failed to create bedrock directory")
    await write_layer_metadata(paths.metadata_dir, layer_name)

    _check_step(
        "pack",
        await pack_directory(runner, config, paths.layer_root, paths.layer_tar),
        "Failed to create layer tarball",
    )

    logger.info("Importing into Bedrock Linux")
    _check_step(
        "import",
        await runner(config.import_command(layer_name, str(paths.layer_tar))),
        f"{config.brl} import failed",
    )

    return ImportResult(image=image, layer_name=layer_name, layer_tarball=paths.layer_tar)


async def import_image(
    image: str,
    config: Optional[ImporterConfig] = None,
    runner: Optional[CommandRunner] = None,
) -> ImportResult:
    """컨테이너 이미지를 Bedrock Linux 레이어로 가져옵니다.

    의존성을 확인한 뒤 임시 컨테이너와 작업 디렉토리를 할당하고,
    pull → create → export → unpack → metadata → pack → import 순서로
    실행합니다. 첫 번째 실패에서 중단하며, 성공 여부와 관계없이 임시
    컨테이너와 디렉토리는 정리됩니다.

    Args:
        image: 이미지 참조 (예: "quay.io/fedora:42", "alpine@sha256:...")
        config: 가져오기 설정 (기본값: 환경 변수에서 로드)
        runner: 외부 명령 실행기 (기본값: run_command)

    Returns:
        ImportResult: 이미지, 레이어 이름, 가져온 tar 경로

    Raises:
        DependencyError: podman 또는 brl을 찾을 수 없는 경우
        ResourceError: 임시 디렉토리를 만들 수 없는 경우
        PipelineStepError: 외부 명령이 실패한 경우 (step 속성에 단계 이름)
        MetadataError: 레이어 디렉토리나 메타데이터를 쓸 수 없는 경우

    Examples:
        result = await import_image("quay.io/fedora:42")
        print(f"레이어: {result.layer_name}")
        # 출력: 레이어: fedora_42
    """
    config = config or ImporterConfig.from_env()
    runner = runner or run_command

    check_dependencies(config)

    async with RunContext(config, runner) as ctx:
        return await _run_steps(image, ctx, runner)
