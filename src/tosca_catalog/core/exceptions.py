from __future__ import annotations

from typing import Any, Dict, Mapping


class CatalogError(Exception):
    """Base exception for the node-type catalog engine."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class DocumentDecodeError(CatalogError, ValueError):
    """Raised when a service template cannot be decoded into an attribute tree."""

    def __init__(self, path: str, reason: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ctx = dict(context or {})
        ctx["path"] = path
        message = f"Cannot decode template document '{path}'"
        if reason:
            message = f"{message}: {reason}"
        CatalogError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)
        self.path = path


class DocumentShapeError(CatalogError, TypeError):
    """Raised when a decoded element does not have the shape the engine needs."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        CatalogError.__init__(self, message, context=context)
        TypeError.__init__(self, message)


class ArchiveEntryNotFoundError(CatalogError, KeyError):
    """Raised when an archive lookup targets a path that does not exist."""

    def __init__(self, path: str, *, context: Mapping[str, Any] | None = None) -> None:
        ctx = dict(context or {})
        ctx["path"] = path
        message = f"Archive entry not found: {path}"
        CatalogError.__init__(self, message, context=ctx)
        self.path = path

    def __str__(self) -> str:
        # KeyError.__str__ would quote the message
        return self.args[0] if self.args else ""


class ArchiveReadError(CatalogError):
    """Raised when an archive container cannot be opened or read."""


class NestingCycleError(CatalogError):
    """Raised when a nested component is queued for expansion while already pending."""

    def __init__(self, component: str | None, name: str, *, context: Mapping[str, Any] | None = None) -> None:
        ctx = dict(context or {})
        ctx["component"] = component
        ctx["name"] = name
        message = f"Nesting loop detected in component '{component}': '{name}' is already pending expansion"
        super().__init__(message, context=ctx)
        self.component = component
        self.name = name


class EmptyQueueError(CatalogError, IndexError):
    """Raised when dequeuing from an empty composition queue."""

    def __init__(self, message: str = "Composition queue is empty", *, context: Mapping[str, Any] | None = None) -> None:
        CatalogError.__init__(self, message, context=context)
        IndexError.__init__(self, message)


class ConfigurationError(CatalogError, ValueError):
    """Raised when configuration cannot be loaded or fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        CatalogError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "CatalogError",
    "DocumentDecodeError",
    "DocumentShapeError",
    "ArchiveEntryNotFoundError",
    "ArchiveReadError",
    "NestingCycleError",
    "EmptyQueueError",
    "ConfigurationError",
]
