"""Container filesystem export and tar packaging commands."""

from pathlib import Path

from ..core.process import CommandRunner
from ..core.types import ImporterConfig


async def export_container(
    runner: CommandRunner, config: ImporterConfig, container: str, archive: Path
) -> int:
    """Write the container's filesystem to ``archive``.

    Returns:
        Exit status of the engine's export command
    """
    return await runner([config.engine, "export", container], stdout_path=archive)


async def unpack_archive(
    runner: CommandRunner, config: ImporterConfig, archive: Path, target: Path
) -> int:
    """Extract ``archive`` into the existing directory ``target``."""
    return await runner([config.tar, "-xf", str(archive), "-C", str(target)])


async def pack_directory(
    runner: CommandRunner, config: ImporterConfig, source: Path, archive: Path
) -> int:
    """Archive the contents of ``source`` (not the directory itself)."""
    return await runner([config.tar, "-C", str(source), "-cf", str(archive), "."])
