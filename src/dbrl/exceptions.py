"""Custom exceptions for the dbrl layer importer."""


class DbrlError(Exception):
    """Base exception for all importer errors."""

    pass


class UsageError(DbrlError):
    """Raised when the command line is malformed."""

    pass


class DependencyError(DbrlError):
    """Raised when a required executable is not on the search path."""

    pass


class ResourceError(DbrlError):
    """Raised when temporary resources cannot be allocated."""

    pass


class PipelineStepError(DbrlError):
    """Raised when an external command in the pipeline exits non-zero."""

    def __init__(self, step: str, message: str, returncode: int | None = None):
        super().__init__(message)
        self.step = step
        self.returncode = returncode


class MetadataError(DbrlError):
    """Raised when layer directories or metadata files cannot be written."""

    pass
