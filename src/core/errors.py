"""basegraph exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class BaseGraphError(Exception):
    """Base exception for all basegraph failures."""


class BaseGraphConfigError(BaseGraphError):
    """Raised for invalid runtime configuration."""


class SerializationError(BaseGraphError):
    """Raised when a value or stored record cannot be represented as JSON."""


class StorageError(BaseGraphError):
    """Raised for transport save and read failures."""


class BaseGraphDependencyError(BaseGraphError):
    """Raised when an optional runtime dependency is missing."""


class SourceDocumentError(BaseGraphError):
    """Raised when a source document cannot be read or parsed."""
