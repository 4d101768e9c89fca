"""Scoped ownership of the temporary container and working directory."""

import logging
import os
import shutil
import tempfile
import time
from pathlib import Path
from typing import Optional

from ..exceptions import ResourceError
from .process import CommandRunner, run_command
from .types import CONTAINER_PREFIX, TEMP_DIR_PREFIX, ImporterConfig

logger = logging.getLogger(__name__)


def make_container_handle(now: Optional[float] = None) -> str:
    """Generate a container name unique to this run.

    The handle embeds the current unix time and the process id so runs
    started in the same second do not collide.
    """
    timestamp = int(time.time() if now is None else now)
    return f"{CONTAINER_PREFIX}{timestamp}_{os.getpid()}"


class RunContext:
    """Async context manager owning one run's temporary resources.

    Entering allocates a container handle and a private working directory;
    leaving removes the container (if the engine created it) and the
    directory, whatever the outcome of the body.

    Examples:
        async with RunContext(config) as ctx:
            await runner([config.engine, "create", "--name", ctx.container, image])
    """

    def __init__(
        self,
        config: ImporterConfig,
        runner: Optional[CommandRunner] = None,
    ) -> None:
        self.config = config
        self.runner = runner or run_command
        self.container: Optional[str] = None
        self.temp_dir: Optional[Path] = None

    async def __aenter__(self) -> "RunContext":
        """Enter async context manager."""
        self.allocate()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.cleanup()

    def allocate(self) -> None:
        """Record the container handle and create the working directory.

        Raises:
            ResourceError: If resources were already allocated or the
                directory cannot be created
        """
        if self.container is not None or self.temp_dir is not None:
            raise ResourceError("Run resources are already allocated")

        self.container = make_container_handle()
        try:
            self.temp_dir = Path(
                tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX, dir=self.config.temp_root)
            )
        except OSError as e:
            self.container = None
            raise ResourceError(
                f"Failed to create temp directory: {e.strerror or e}"
            ) from e
        logger.debug(f"Allocated container {self.container} and {self.temp_dir}")

    async def cleanup(self) -> None:
        """Remove the container and working directory, ignoring failures.

        Safe to call more than once and after a partial allocation.
        """
        container, self.container = self.container, None
        temp_dir, self.temp_dir = self.temp_dir, None

        if container:
            logger.debug(f"Removing container {container}")
            try:
                await self.runner(
                    [self.config.engine, "rm", "-f", container], quiet=True
                )
            except Exception as e:
                logger.debug(f"Ignoring container cleanup failure: {e!r}")

        if temp_dir:
            logger.debug(f"Removing {temp_dir}")
            shutil.rmtree(temp_dir, ignore_errors=True)
