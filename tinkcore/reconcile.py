"""Reconciliation results, retry handling and the controller interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Result", "Controller", "retry_if_error"]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    """Outcome of one reconciliation pass."""

    requeue: bool = False
    requeue_after: float = 0.0


def _flatten(err: BaseException) -> Iterator[BaseException]:
    if isinstance(err, BaseExceptionGroup):
        for inner in err.exceptions:
            yield from _flatten(inner)
    else:
        yield err


def retry_if_error(err: BaseException | None, logger: logging.Logger | None = None) -> Result:
    """Log every error (unpacking exception groups) and requeue if there was one."""
    log = logger or _log
    if err is not None:
        for single in _flatten(err):
            log.error("Failed reconciliation, %s", single)
    return Result(requeue=err is not None)


class Controller(ABC):
    """A reconciler of one kind of resource."""

    @abstractmethod
    def reconcile(self, request: Any) -> Result:
        """Bring the named resource towards its desired state."""