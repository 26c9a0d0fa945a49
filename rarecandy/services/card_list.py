"""
Card list controller.

Drives a paginated, searchable card list. The controller owns a single
immutable ``CardListState`` snapshot and replaces it through the pure
transition functions below; it never edits a snapshot in place.

Single-flight: at most one fetch runs per controller. Any operation requested
while a fetch is in flight is dropped, not queued, so responses are applied
in the order they were requested.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Protocol

from rarecandy.config import settings
from rarecandy.models.card import Card
from rarecandy.models.failure import CatalogError
from rarecandy.models.page import Page

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Pokédex"
SEARCH_TITLE = "Search Results"


class CardSource(Protocol):
    """Anything that can fetch pages of cards (TCGClient or a test double)."""

    async def fetch_cards(
        self,
        page: int = 1,
        page_size: int = 20,
        name: str | None = None,
    ) -> Page[Card]: ...


class Operation(str, Enum):
    """The fetch currently in flight, if any."""

    IDLE = "idle"
    FETCHING_FIRST_PAGE = "fetching_first_page"
    SEARCHING = "searching"
    FETCHING_MORE = "fetching_more"


@dataclass(frozen=True, slots=True)
class CardListState:
    """
    Snapshot of a card list screen.

    Attributes:
        cards: Accumulated cards in server order across pages (not deduplicated)
        current_page: Last page successfully applied
        total_count: Matching cards across all pages, per the last response
        has_more_pages: True if another page can be requested
        search_text: Current search text, blank for the unfiltered list
        active_filter: Name filter the current cards were fetched with
        has_loaded_page: True once any page has been applied
        operation: Fetch in flight
        error_message: Message of the last failure
        show_error: True while the last failure should be shown
    """

    cards: tuple[Card, ...] = ()
    current_page: int = 1
    total_count: int = 0
    has_more_pages: bool = True
    search_text: str = ""
    active_filter: str | None = None
    has_loaded_page: bool = False
    operation: Operation = Operation.IDLE
    error_message: str | None = None
    show_error: bool = False

    @property
    def is_searching_mode(self) -> bool:
        """True if search text is set, so fetches are name-filtered."""
        return bool(self.search_text.strip())

    @property
    def is_idle(self) -> bool:
        return self.operation is Operation.IDLE

    @property
    def is_loading(self) -> bool:
        return self.operation is Operation.FETCHING_FIRST_PAGE

    @property
    def is_searching(self) -> bool:
        return self.operation is Operation.SEARCHING

    @property
    def is_loading_more(self) -> bool:
        return self.operation is Operation.FETCHING_MORE

    @property
    def is_performing_operation(self) -> bool:
        return not self.is_idle

    @property
    def is_empty(self) -> bool:
        return not self.cards

    @property
    def result_count_text(self) -> str:
        if self.total_count == 0:
            return "No cards found"
        if self.total_count == 1:
            return "1 card"
        return f"{self.total_count} cards"

    @property
    def display_title(self) -> str:
        return SEARCH_TITLE if self.is_searching_mode else DEFAULT_TITLE


# =============================================================================
# TRANSITIONS
# =============================================================================


def begin_fetch(state: CardListState, operation: Operation) -> CardListState:
    """
    Enter a fetch operation.

    First-page fetches (initial load and search) reset paging and clear the
    previous error. Loading more leaves paging alone until the page arrives.
    """
    if operation is Operation.IDLE:
        raise ValueError("begin_fetch requires a fetch operation")
    if not state.is_idle:
        raise ValueError(f"Cannot start {operation.value} while {state.operation.value}")

    if operation is Operation.FETCHING_MORE:
        return replace(state, operation=operation)

    return replace(
        state,
        operation=operation,
        current_page=1,
        has_more_pages=True,
        error_message=None,
        show_error=False,
    )


def apply_page(
    state: CardListState,
    response: Page[Card],
    page: int,
    append: bool,
    name: str | None = None,
) -> CardListState:
    """
    Apply a successful response for ``page`` and return to idle.

    ``name`` is the filter the page was fetched with; ``load_more`` keeps
    using it even if the search text has been edited since.

    ``has_more_pages`` uses the requested page number and the response's page
    size: page 3 of 20 with 45 total is the last page.
    """
    cards = state.cards + response.data if append else response.data
    return replace(
        state,
        cards=cards,
        current_page=page,
        total_count=response.total_count,
        has_more_pages=page * response.page_size < response.total_count,
        active_filter=name,
        has_loaded_page=True,
        operation=Operation.IDLE,
    )


def apply_failure(state: CardListState, message: str) -> CardListState:
    """Record a failure and return to idle; accumulated cards are kept."""
    return replace(
        state,
        operation=Operation.IDLE,
        error_message=message,
        show_error=True,
    )


# =============================================================================
# CONTROLLER
# =============================================================================


class CardListController:
    """
    Sequences card fetches for one list screen.

    Each screen owns its own controller. Call ``close()`` (or use it as an
    async context manager) when the screen goes away; an in-flight fetch is
    cancelled and never touches the state afterwards.

    Example:
        async with CardListController(TCGClient()) as controller:
            await controller.load_initial()
            controller.set_search_text("Pikachu")
            await controller.search()
    """

    def __init__(
        self,
        source: CardSource,
        search_text: str = "",
        page_size: int | None = None,
        on_change: Callable[[CardListState], None] | None = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            source: Where cards are fetched from
            search_text: Initial search text
            page_size: Cards per page. Defaults to settings.page_size.
            on_change: Called with every new state snapshot
        """
        self._source = source
        self.page_size = settings.page_size if page_size is None else page_size
        self._on_change = on_change
        self._state = CardListState(search_text=search_text)
        self._task: asyncio.Task[None] | None = None
        self._closed = False

    @property
    def state(self) -> CardListState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def set_search_text(self, text: str) -> None:
        """Change the search text; takes effect on the next fetch."""
        self._set_state(replace(self._state, search_text=text))

    async def load_initial(self) -> None:
        """Load the first unfiltered page, replacing the current cards."""
        await self._start(Operation.FETCHING_FIRST_PAGE, page=1, append=False, name=None)

    async def search(self) -> None:
        """Load the first page matching the search text, replacing the current cards."""
        if not self._state.is_searching_mode:
            await self.load_initial()
            return
        await self._start(
            Operation.SEARCHING,
            page=1,
            append=False,
            name=self._state.search_text,
        )

    async def refresh(self) -> None:
        """Reload page 1 of whatever the screen is showing."""
        if self._state.is_searching_mode:
            await self.search()
        else:
            await self.load_initial()

    async def load_more(self) -> None:
        """Append the next page in the current mode, if there is one.

        Does nothing until a first page has been loaded.
        """
        if not self._state.has_loaded_page or not self._state.has_more_pages:
            return
        await self._start(
            Operation.FETCHING_MORE,
            page=self._state.current_page + 1,
            append=True,
            name=self._state.active_filter,
        )

    def close(self) -> None:
        """Cancel any in-flight fetch; later requests are ignored."""
        self._closed = True
        if self._task is not None and not self._task.done():
            logger.debug("Cancelling in-flight %s", self._state.operation.value)
            self._task.cancel()

    async def __aenter__(self) -> "CardListController":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close()

    async def _start(
        self,
        operation: Operation,
        page: int,
        append: bool,
        name: str | None,
    ) -> None:
        # The check and the state change run without an await in between,
        # so a concurrent caller always sees the busy state.
        if self._closed or self._task is not None or not self._state.is_idle:
            return
        self._set_state(begin_fetch(self._state, operation))

        task = asyncio.create_task(self._fetch(page, name, append))
        self._task = task
        try:
            await task
        except asyncio.CancelledError:
            if self._closed:
                return
            # Cancelled by the caller (e.g. a timeout): no fetch is left running
            if not self._state.is_idle:
                self._set_state(replace(self._state, operation=Operation.IDLE))
            raise
        finally:
            if self._task is task:
                self._task = None

    async def _fetch(self, page: int, name: str | None, append: bool) -> None:
        logger.debug(
            "%s page %d (name=%r, append=%s)",
            self._state.operation.value,
            page,
            name,
            append,
        )
        try:
            response = await self._source.fetch_cards(
                page=page,
                page_size=self.page_size,
                name=name,
            )
        except CatalogError as e:
            if self._closed:
                return
            logger.warning("%s failed: %s", self._state.operation.value, e)
            self._set_state(apply_failure(self._state, str(e)))
            return
        except Exception:
            if not self._closed:
                self._set_state(replace(self._state, operation=Operation.IDLE))
            raise

        if self._closed:
            return
        self._set_state(apply_page(self._state, response, page=page, append=append, name=name))

    def _set_state(self, state: CardListState) -> None:
        self._state = state
        if self._on_change is not None:
            self._on_change(state)
