"""Data models for the layer working directory."""

from dataclasses import dataclass
from pathlib import Path

from ..core.types import METADATA_DIR_NAME


@dataclass
class LayerPaths:
    """Files and directories inside one run's working directory."""

    export_tar: Path  # Filesystem exported from the container
    layer_root: Path  # Unpacked tree handed to brl
    metadata_dir: Path  # Bedrock Linux metadata inside the tree
    layer_tar: Path  # Repackaged tree

    @classmethod
    def under(cls, temp_dir: Path) -> "LayerPaths":
        """Lay out the standard paths below ``temp_dir``."""
        layer_root = temp_dir / "layer_root"
        return cls(
            export_tar=temp_dir / "export.tar",
            layer_root=layer_root,
            metadata_dir=layer_root / METADATA_DIR_NAME,
            layer_tar=temp_dir / "layer.tar",
        )
