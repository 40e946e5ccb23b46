"""BaseService: foundation for result-returning services.

Every service receives a :class:`Tracker` at construction time. The core
components let storage errors propagate; :func:`guard_storage` is the one
place they are logged and turned into a ``STORAGE_FAILURE`` result.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Concatenate, ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from travelctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from travelctl.infrastructure.tracker import Tracker

logger = logging.getLogger(__name__)

STORAGE_FAILURE = "STORAGE_FAILURE"
STORAGE_FAILURE_MESSAGE = "An error occurred, try again"

P = ParamSpec("P")
S = TypeVar("S", bound="BaseService")


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TrackerService(BaseService):
            @guard_storage("add_country")
            def add_country(self, text: str) -> ServiceResult:
                ...
    """

    def __init__(self, tracker: Tracker) -> None:
        self._tracker = tracker

    def _meta(self) -> dict[str, str]:
        return {"backend": str(self._tracker.backend)}


def guard_storage(
    op: str,
) -> Callable[
    [Callable[Concatenate[S, P], ServiceResult]],
    Callable[Concatenate[S, P], ServiceResult],
]:
    """Convert storage collaborator failures into a failed ServiceResult.

    No retry: the failure is logged with traceback and reported once.
    """

    def decorator(
        fn: Callable[Concatenate[S, P], ServiceResult],
    ) -> Callable[Concatenate[S, P], ServiceResult]:
        @functools.wraps(fn)
        def wrapper(self: S, *args: P.args, **kwargs: P.kwargs) -> ServiceResult:
            try:
                return fn(self, *args, **kwargs)
            except (SQLAlchemyError, OSError) as exc:
                logger.error("Storage failure during %s", op, exc_info=True)
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code=STORAGE_FAILURE,
                        message=STORAGE_FAILURE_MESSAGE,
                        detail={"exception": type(exc).__name__},
                    ),
                    meta=self._meta(),
                )

        return wrapper

    return decorator
