"""External executable availability checks."""

import logging
import shutil

from ..core.types import ImporterConfig
from ..exceptions import DependencyError

logger = logging.getLogger(__name__)


def command_exists(name: str) -> bool:
    """Check if an executable resolves on the search path."""
    return shutil.which(name) is not None


def required_commands(config: ImporterConfig) -> list[str]:
    """Executables that must be present before the pipeline starts."""
    return [config.engine, config.brl]


def check_dependencies(config: ImporterConfig) -> None:
    """Fail fast when the container engine or import tool is missing.

    Args:
        config: Importer configuration naming the executables

    Raises:
        DependencyError: For the first executable that is not found
    """
    for name in required_commands(config):
        if not command_exists(name):
            raise DependencyError(f"{name} not found")
        logger.debug(f"Found dependency: {name}")
