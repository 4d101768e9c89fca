"""Utility functions for the dbrl layer importer."""

from .dependencies import check_dependencies, command_exists
from .naming import sanitize_layer_name

__all__ = ["check_dependencies", "command_exists", "sanitize_layer_name"]
