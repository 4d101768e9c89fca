"""Layer tree preparation: archives and Bedrock Linux metadata."""

from .metadata import write_layer_metadata
from .models import LayerPaths

__all__ = ["LayerPaths", "write_layer_metadata"]
