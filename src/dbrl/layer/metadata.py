"""Bedrock Linux layer metadata writer."""

from pathlib import Path

import aiofiles

from ..core.types import UNKNOWN_VERSION
from ..exceptions import MetadataError
from ..utils.naming import is_valid_layer_name

LAYER_FILE = "layer"
VERSION_FILE = "version"


async def _write_line(path: Path, value: str) -> None:
    """Write ``value`` as a single newline-terminated UTF-8 line."""
    async with aiofiles.open(path, "w", encoding="utf-8") as f:
        await f.write(f"{value}\n")


async def write_layer_metadata(
    metadata_dir: Path, layer_name: str, version: str = UNKNOWN_VERSION
) -> None:
    """Write the ``layer`` and ``version`` files into ``metadata_dir``.

    Args:
        metadata_dir: Existing metadata directory inside the layer root
        layer_name: Sanitized layer name
        version: Version marker

    Raises:
        ValueError: If layer_name is not a sanitized name
        MetadataError: If either file cannot be written
    """
    if not is_valid_layer_name(layer_name):
        raise ValueError(f"Invalid layer name: {layer_name!r}")

    try:
        await _write_line(metadata_dir / LAYER_FILE, layer_name)
    except OSError as e:
        raise MetadataError(f"Failed to write layer name: {e}") from e

    try:
        await _write_line(metadata_dir / VERSION_FILE, version)
    except OSError as e:
        raise MetadataError(f"Failed to write version: {e}") from e
