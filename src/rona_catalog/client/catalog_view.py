from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Callable

from rona_catalog.client.request_controller import (
    OutcomeKind,
    RequestLifecycleController,
    RequestOutcome,
)
from rona_catalog.domain.errors import TransportError
from rona_catalog.domain.product import (
    DEFAULT_PAGE_SIZE,
    CatalogFilter,
    CatalogPage,
    SortDirection,
    SortField,
)
from rona_catalog.ports.catalog_query import CatalogQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Pagination:
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @classmethod
    def from_page(cls, page: CatalogPage) -> Pagination:
        return cls(
            page=page.page,
            page_size=page.page_size,
            total_items=page.total_items,
            total_pages=page.total_pages,
        )


Listener = Callable[["CatalogView"], None]


class CatalogView:
    """
    Reactive catalog state for one product listing (grid, category page, offers).

    Callers push a new CatalogFilter on every change (page click, filter
    toggle, debounced search) and read ``items``, ``is_loading``, ``error``
    and ``pagination``. Items already on screen stay in place while the next
    page loads; results of superseded requests are never adopted.

    With ``silent_empty`` enabled, transport failures degrade to an empty
    page instead of populating ``error``.
    """

    def __init__(
        self,
        catalog: CatalogQuery,
        *,
        catalog_filter: CatalogFilter | None = None,
        silent_empty: bool = False,
        user_id: str | None = None,
    ) -> None:
        self._catalog = catalog
        self._filter = catalog_filter or CatalogFilter()
        self._silent_empty = silent_empty
        self._user_id = user_id
        self._controller = RequestLifecycleController()
        self._listeners: list[Listener] = []

        self._items: list[Any] = []
        self._is_loading = False
        self._error: TransportError | None = None
        self._pagination = Pagination(
            page=self._filter.page,
            page_size=self._filter.page_size,
            total_items=0,
            total_pages=0,
        )

    async def __aenter__(self) -> CatalogView:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def items(self) -> list[Any]:
        return list(self._items)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> TransportError | None:
        return self._error

    @property
    def pagination(self) -> Pagination:
        return self._pagination

    @property
    def filter(self) -> CatalogFilter:
        return self._filter

    @property
    def silent_empty(self) -> bool:
        return self._silent_empty

    @property
    def user_actions_enabled(self) -> bool:
        """Wishlist and cart toggles next to catalog items need a signed-in user."""
        return self._user_id is not None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_filter(self, catalog_filter: CatalogFilter) -> asyncio.Task[CatalogPage] | None:
        """Show results for ``catalog_filter``; a no-op when they are already shown."""
        self._filter = catalog_filter
        return self._issue(force=False)

    def refetch(self) -> asyncio.Task[CatalogPage] | None:
        """Re-run the current filter, joining the request already in flight if any."""
        return self._issue(force=True)

    async def wait(self) -> None:
        """Wait until no request is in flight, following any replacements."""
        task = self._controller.active_task
        while task is not None:
            await asyncio.wait({task})
            task = self._controller.active_task

    def close(self) -> None:
        """Abandon the in-flight request, if any."""
        if not self._controller.is_pending:
            return
        self._controller.cancel()
        self._is_loading = False
        self._notify()

    def _issue(self, *, force: bool) -> asyncio.Task[CatalogPage] | None:
        task = self._controller.submit(
            self._filter,
            self._catalog.query,
            self._deliver,
            force=force,
        )
        if task is None:
            return None

        self._is_loading = True
        self._error = None
        self._notify()
        return task

    def _deliver(self, outcome: RequestOutcome) -> None:
        if outcome.kind is OutcomeKind.COMPLETED and outcome.page is not None:
            self._adopt(outcome.page)
        elif outcome.kind is OutcomeKind.FAILED:
            if self._silent_empty:
                logger.info(
                    "Catalog request failed, showing empty results",
                    extra={"error_code": outcome.error.error_code if outcome.error else None},
                )
                self._adopt(
                    CatalogPage.empty(
                        page=outcome.catalog_filter.page,
                        page_size=outcome.catalog_filter.page_size,
                    )
                )
            else:
                self._error = outcome.error

        self._is_loading = False
        self._notify()

    def _adopt(self, page: CatalogPage) -> None:
        self._items = list(page.items)
        self._pagination = Pagination.from_page(page)
        self._error = None

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)


def offers_view(
    catalog: CatalogQuery,
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
    user_id: str | None = None,
) -> CatalogView:
    """
    Catalog view for the offers page.

    Lists discounted products, biggest discount first, and never shows an
    error: both "no offers today" and a failed request render as empty.
    """
    return CatalogView(
        catalog,
        catalog_filter=CatalogFilter(
            page_size=page_size,
            sort_field=SortField.DISCOUNT_PERCENTAGE,
            sort_direction=SortDirection.DESC,
            only_offers=True,
        ),
        silent_empty=True,
        user_id=user_id,
    )
