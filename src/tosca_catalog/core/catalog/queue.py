"""Cycle-detecting queue of nested components awaiting expansion.

A caller expanding nested composite components enqueues each component type
before descending into it and dequeues it once done. A name may be pending at
most once; enqueueing it again means the component nests into itself,
directly or through an intermediate, and raises :class:`NestingCycleError`.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from tosca_catalog.core.exceptions import EmptyQueueError, NestingCycleError

logger = logging.getLogger(__name__)


class CompositionQueue:
    """FIFO of pending type names with uniqueness enforced.

    Args:
        component: Name of the top-level component being expanded, reported
            in cycle errors.
    """

    def __init__(self, component: Optional[str] = None) -> None:
        self.component = component
        # dict keeps insertion order and gives O(1) membership
        self._pending: Dict[str, None] = {}

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, name: object) -> bool:
        return name in self._pending

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._pending))

    def pending(self) -> List[str]:
        return list(self._pending)

    def enqueue(self, name: str) -> None:
        if name in self._pending:
            logger.debug(
                "Failed to validate nested component %s. Loop detected, component %s",
                name,
                self.component,
            )
            raise NestingCycleError(
                self.component,
                name,
                context={"pending": list(self._pending)},
            )
        self._pending[name] = None

    def dequeue(self) -> str:
        if not self._pending:
            raise EmptyQueueError(context={"component": self.component})
        name = next(iter(self._pending))
        del self._pending[name]
        return name


__all__ = ["CompositionQueue"]
