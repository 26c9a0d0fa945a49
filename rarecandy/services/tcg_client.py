"""
Pokémon TCG API client.

Read-only access to the card and set endpoints of https://pokemontcg.io.
Every call issues exactly one GET and either returns a decoded record or
raises a CatalogError; there is no retry and no caching.

API docs: https://docs.pokemontcg.io
"""

import logging
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from rarecandy.config import settings
from rarecandy.models.card import Card
from rarecandy.models.card_set import CardSet
from rarecandy.models.failure import (
    ApiError,
    DecodingError,
    InvalidRequestError,
    TransportError,
)
from rarecandy.models.page import Page, Single

logger = logging.getLogger(__name__)

# Raw bodies are truncated to this many characters in log output
_LOG_BODY_LIMIT = 500

M = TypeVar("M", bound=BaseModel)


def _escape_query_value(value: str) -> str:
    """Backslash-escape characters that would end a quoted query term."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def build_name_query(name: str | None) -> str | None:
    """
    Build a prefix-match query for a name filter.

    Args:
        name: Name typed by the user, may be None or blank

    Returns:
        Query such as 'name:"Pikachu*"', or None when there is nothing to filter on
    """
    if name is None or not name.strip():
        return None
    return f'name:"{_escape_query_value(name)}*"'


def build_page_params(page: int, page_size: int, query: str | None = None) -> dict[str, str]:
    """
    Build query parameters for a list endpoint.

    Raises:
        InvalidRequestError: If page or page_size is below 1
    """
    if page < 1:
        raise InvalidRequestError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise InvalidRequestError(f"page_size must be >= 1, got {page_size}")

    params = {"page": str(page), "pageSize": str(page_size)}
    if query is not None:
        params["q"] = query
    return params


class TCGClient:
    """
    Client for the Pokémon TCG API.

    Pass an ``httpx.AsyncClient`` to reuse connections (or to inject a test
    transport); without one, each request opens a short-lived client.
    """

    def __init__(
        self,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API base URL. Defaults to settings.api_base_url.
            http_client: Optional shared httpx client.
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.http_client = http_client
        self.headers = {"User-Agent": settings.user_agent}

    async def fetch_cards(
        self,
        page: int = 1,
        page_size: int = 20,
        name: str | None = None,
    ) -> Page[Card]:
        """
        Fetch one page of cards, optionally filtered by name prefix.

        Args:
            page: 1-based page number
            page_size: Cards per page
            name: Name prefix to search for; blank means no filter

        Returns:
            Page of cards in server order

        Raises:
            CatalogError: On any failure (see rarecandy.models.failure)
        """
        params = build_page_params(page, page_size, build_name_query(name))
        result = await self._get("cards", Page[Card], params)
        logger.info(
            "Fetched %d cards (page %d, %d total)",
            len(result.data),
            result.page,
            result.total_count,
        )
        return result

    async def fetch_card(self, card_id: str) -> Card:
        """Fetch a single card by id."""
        path = self._resource_path("cards", card_id)
        return (await self._get(path, Single[Card])).data

    async def fetch_sets(
        self,
        page: int = 1,
        page_size: int = 20,
        name: str | None = None,
    ) -> Page[CardSet]:
        """Fetch one page of sets, optionally filtered by name prefix."""
        params = build_page_params(page, page_size, build_name_query(name))
        result = await self._get("sets", Page[CardSet], params)
        logger.info(
            "Fetched %d sets (page %d, %d total)",
            len(result.data),
            result.page,
            result.total_count,
        )
        return result

    async def fetch_set(self, set_id: str) -> CardSet:
        """Fetch a single set by id."""
        path = self._resource_path("sets", set_id)
        result = (await self._get(path, Single[CardSet])).data
        logger.info("Fetched set: %s", result.name or "Unknown")
        return result

    async def fetch_cards_by_set(
        self,
        set_id: str,
        page: int = 1,
        page_size: int = 20,
    ) -> Page[Card]:
        """Fetch one page of the cards printed in a set."""
        if not set_id:
            raise InvalidRequestError("set id must not be empty")

        params = {"q": f"set.id:{set_id}", **build_page_params(page, page_size)}
        result = await self._get("cards", Page[Card], params)
        logger.info("Fetched %d cards from set %s", len(result.data), set_id)
        return result

    @staticmethod
    def _resource_path(collection: str, resource_id: str) -> str:
        if not resource_id:
            raise InvalidRequestError(f"{collection} id must not be empty")
        return f"{collection}/{quote(resource_id, safe='')}"

    def _build_url(self, path: str, params: dict[str, str] | None) -> httpx.URL:
        try:
            return httpx.URL(f"{self.base_url}/{path}", params=params)
        except httpx.InvalidURL as e:
            raise InvalidRequestError(str(e)) from e

    async def _get(
        self,
        path: str,
        model: type[M],
        params: dict[str, str] | None = None,
    ) -> M:
        """
        Issue one GET and decode the body into ``model``.

        Raises:
            InvalidRequestError: If the URL cannot be built
            TransportError: If no response was received
            ApiError: If the status is not 200
            DecodingError: If the body does not match ``model``
        """
        url = self._build_url(path, params)
        logger.debug("Fetching %s", url)

        try:
            response = await self._send(url)
        except httpx.RequestError as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise TransportError(e) from e

        logger.debug("Response status %d for %s", response.status_code, url)

        if response.status_code != 200:
            logger.warning(
                "API error (%d) for %s: %s",
                response.status_code,
                url,
                response.text[:_LOG_BODY_LIMIT],
            )
            raise ApiError(response.status_code, response.text)

        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                "Could not decode %s: %s; raw body: %s",
                url,
                e,
                response.text[:_LOG_BODY_LIMIT],
            )
            raise DecodingError(response.text, e) from e

    async def _send(self, url: httpx.URL) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.get(url, headers=self.headers)

        async with httpx.AsyncClient() as client:
            return await client.get(url, headers=self.headers)
