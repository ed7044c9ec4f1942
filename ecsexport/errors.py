"""
Error types raised while exporting a cluster.
"""

from typing import Optional


class ExportError(Exception):
    """Base class for every error the exporter raises."""


class ProviderError(ExportError):
    """A call to the ECS API failed."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class NotFoundError(ProviderError):
    """describe_services returned no matching service."""


class OutputError(ExportError):
    """A directory or file could not be created or written."""


class SerializationError(ExportError):
    """A record could not be encoded as YAML."""
