"""Structured subprocess invocation.

Commands are always passed as argument lists and never through a shell, so
image references and generated paths stay discrete arguments.
"""

import asyncio
import logging
import subprocess
from pathlib import Path
from typing import Awaitable, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

# Exit status reported when the executable cannot be started, as a shell would.
COMMAND_NOT_FOUND = 127


class CommandRunner(Protocol):
    """Callable that runs one external command and returns its exit status."""

    def __call__(
        self,
        argv: Sequence[str],
        stdout_path: Optional[Path] = None,
        quiet: bool = False,
    ) -> Awaitable[int]: ...


async def run_command(
    argv: Sequence[str],
    stdout_path: Optional[Path] = None,
    quiet: bool = False,
) -> int:
    """Run an external command and wait for it to exit.

    Args:
        argv: Program and arguments
        stdout_path: File that receives the command's standard output
        quiet: Discard stdout and stderr (ignored for stdout when
            ``stdout_path`` is given)

    Returns:
        Exit status of the command, or 127 if it could not be started
    """
    logger.debug(f"Running command: {' '.join(argv)}")
    stderr = subprocess.DEVNULL if quiet else None

    try:
        if stdout_path is not None:
            with open(stdout_path, "wb") as out:
                process = await asyncio.create_subprocess_exec(
                    *argv, stdout=out, stderr=stderr
                )
                return await process.wait()

        stdout = subprocess.DEVNULL if quiet else None
        process = await asyncio.create_subprocess_exec(
            *argv, stdout=stdout, stderr=stderr
        )
        return await process.wait()
    except OSError as e:
        logger.debug(f"Cannot start {argv[0]}: {e}")
        return COMMAND_NOT_FOUND
