"""Configuration types for the importer."""

import os
from dataclasses import dataclass

TEMP_DIR_PREFIX = "dbrl_import_"
CONTAINER_PREFIX = "dbrl_temp_container_"
METADATA_DIR_NAME = "bedrock"
UNKNOWN_VERSION = "unknown"


@dataclass
class ImporterConfig:
    """Importer configuration.

    Defaults target podman and Bedrock Linux's ``brl``. Every value can be
    overridden from the environment with :meth:`from_env`.

    Environment Variables:
        DBRL_ENGINE: Container engine CLI. Default: podman
        DBRL_BRL: Bedrock Linux CLI. Default: brl
        DBRL_SUDO: Privilege elevation command for the import step;
            an empty value runs ``brl`` directly. Default: sudo
        DBRL_TAR: Archive tool. Default: tar
        DBRL_TMPDIR: Directory the working directory is created in.
            Default: the system temp area
        DBRL_LOG_LEVEL: Logging level. Default: INFO
    """

    engine: str = "podman"
    brl: str = "brl"
    elevate: str = "sudo"
    tar: str = "tar"
    temp_root: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ImporterConfig":
        """Build a config from ``DBRL_*`` environment variables."""
        return cls(
            engine=os.getenv("DBRL_ENGINE", "podman"),
            brl=os.getenv("DBRL_BRL", "brl"),
            elevate=os.getenv("DBRL_SUDO", "sudo"),
            tar=os.getenv("DBRL_TAR", "tar"),
            temp_root=os.getenv("DBRL_TMPDIR") or None,
            log_level=os.getenv("DBRL_LOG_LEVEL", "INFO").upper(),
        )

    def import_command(self, layer_name: str, tarball: str) -> list[str]:
        """Build the argv for importing ``tarball`` as ``layer_name``."""
        argv = [self.brl, "import", layer_name, tarball]
        if self.elevate:
            argv = [self.elevate, *argv]
        return argv
