"""Request lifecycle for a single catalog view.

One controller belongs to one view. It keeps at most one authoritative
request in flight, skips requests whose canonical key was already
answered, and drops results of requests that were superseded.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

from rona_catalog.domain.errors import TransportError
from rona_catalog.domain.product import CatalogFilter, CatalogPage
from rona_catalog.domain.query_params import canonicalize

logger = logging.getLogger(__name__)

Executor = Callable[[CatalogFilter], Awaitable[CatalogPage]]


class OutcomeKind(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class RequestOutcome:
    kind: OutcomeKind
    catalog_filter: CatalogFilter
    page: CatalogPage | None = None
    error: TransportError | None = None


Deliver = Callable[[RequestOutcome], None]


@dataclass(slots=True)
class _Request:
    token: int
    key: str
    catalog_filter: CatalogFilter
    task: asyncio.Task[CatalogPage] | None = None


def _as_transport_error(exc: BaseException) -> TransportError:
    if isinstance(exc, TransportError):
        return exc
    logger.error(
        "Catalog executor failed unexpectedly",
        exc_info=exc,
        extra={"error_type": type(exc).__name__},
    )
    error = TransportError(str(exc) or "Catalog request failed")
    error.__cause__ = exc
    return error


class RequestLifecycleController:
    """
    Owns the in-flight catalog request of one view.

    submit() is synchronous and must be called from a running event loop;
    the executor runs in its own task. Completion is reported through the
    ``deliver`` callback only while the request is still the active one,
    so a late answer from a superseded request can never reach the view,
    even when its executor ignored cancellation.
    """

    def __init__(self) -> None:
        self._tokens = itertools.count(1)
        self._last_issued_key: str | None = None
        self._delivered = False
        self._active: _Request | None = None

    @property
    def last_issued_key(self) -> str | None:
        return self._last_issued_key

    @property
    def is_pending(self) -> bool:
        return self._active is not None

    @property
    def active_task(self) -> asyncio.Task[CatalogPage] | None:
        return self._active.task if self._active is not None else None

    def submit(
        self,
        catalog_filter: CatalogFilter,
        executor: Executor,
        deliver: Deliver,
        *,
        force: bool = False,
    ) -> asyncio.Task[CatalogPage] | None:
        """
        Issue a request for ``catalog_filter`` unless it is redundant.

        Returns:
            The task running the request, the already running task when the
            same key is in flight, or None when the key was already answered
            and ``force`` is not set.
        """
        loop = asyncio.get_running_loop()
        key = canonicalize(catalog_filter)

        if key == self._last_issued_key:
            if self._active is not None:
                logger.debug("Joining in-flight catalog request", extra={"key": key})
                return self._active.task
            if self._delivered and not force:
                logger.debug("Catalog request skipped, key unchanged", extra={"key": key})
                return None

        self.cancel()

        request = _Request(token=next(self._tokens), key=key, catalog_filter=catalog_filter)
        self._active = request
        self._last_issued_key = key
        self._delivered = False

        request.task = loop.create_task(self._call(executor, catalog_filter))
        request.task.add_done_callback(lambda task: self._on_done(request, deliver, task))

        logger.debug("Catalog request issued", extra={"key": key, "token": request.token})
        return request.task

    def cancel(self) -> None:
        """Abandon the active request; its result will be discarded."""
        request = self._active
        if request is None:
            return
        self._active = None
        if request.task is not None:
            request.task.cancel()
        logger.debug(
            "Catalog request superseded",
            extra={"key": request.key, "token": request.token},
        )

    @staticmethod
    async def _call(executor: Executor, catalog_filter: CatalogFilter) -> CatalogPage:
        return await executor(catalog_filter)

    def _on_done(
        self, request: _Request, deliver: Deliver, task: asyncio.Task[CatalogPage]
    ) -> None:
        if self._active is not request:
            # Retrieve the exception so asyncio does not report it as unhandled
            if not task.cancelled():
                task.exception()
            logger.debug(
                "Discarding result of superseded catalog request",
                extra={"key": request.key, "token": request.token},
            )
            return

        self._active = None

        if task.cancelled():
            deliver(RequestOutcome(OutcomeKind.CANCELLED, request.catalog_filter))
            return

        exc = task.exception()
        self._delivered = True
        if exc is not None:
            deliver(
                RequestOutcome(
                    OutcomeKind.FAILED,
                    request.catalog_filter,
                    error=_as_transport_error(exc),
                )
            )
        else:
            deliver(RequestOutcome(OutcomeKind.COMPLETED, request.catalog_filter, page=task.result()))
