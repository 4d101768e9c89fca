"""dbrl - Import container images as Bedrock Linux layers."""

__version__ = "0.1.0"

from .core.context import RunContext
from .core.types import ImporterConfig
from .exceptions import (
    DbrlError,
    DependencyError,
    MetadataError,
    PipelineStepError,
    ResourceError,
    UsageError,
)
from .pipeline import ImportResult, import_image
from .utils.naming import sanitize_layer_name

__all__ = [
    "import_image",
    "sanitize_layer_name",
    "ImportResult",
    "ImporterConfig",
    "RunContext",
    "DbrlError",
    "UsageError",
    "DependencyError",
    "ResourceError",
    "PipelineStepError",
    "MetadataError",
]
