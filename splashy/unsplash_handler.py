"""
Unsplash API Handler

This module is a wrapper around the authenticated Unsplash JSON API (https://api.unsplash.com).
The API requires a developer account and corresponding access key, which is sent with every
request as an "Authorization: Client-ID <key>" header.

Only two endpoints are wrapped: the list of latest photos (GET /photos) and photo search
(GET /search/photos). Responses are returned exactly as decoded from JSON. Nothing here
retries, caches or reshapes a response, and every error raised by httpx (connection
failures, timeouts, non-2xx statuses via raise_for_status, undecodable bodies) propagates
to the caller unchanged.

All requests of a PhotoApiClient are made through a single httpx.AsyncClient that is
configured once when the client is constructed and never modified afterwards, so one client
can serve any number of concurrent calls on its event loop. The module-level list_photos and
search_photos helpers open a fresh client per call and only share the loaded configuration.
"""

import json
import logging
from functools import wraps
from typing import Optional

import httpx

from splashy.config import UNSPLASH_API_URL
from splashy.config import SplashyConfig
from splashy.config import load_config
from splashy.models import Photo
from splashy.models import SearchResponse

logger = logging.getLogger(__name__)


def url_path(url_path: str):
    """
    Use this decorator to inject the correct path component for the intended endpoint. Paths are
    relative to the client's base url.
    """

    def wrapper(func):
        @wraps(func)
        async def inner(*args, **kwargs):
            return await func(url_path=url_path, *args, **kwargs)

        return inner

    return wrapper


def _log_payload(label: str, payload) -> None:
    # payloads carry user names and locations, so they are only ever written at DEBUG
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s: %s", label, json.dumps(payload, indent=2))


class PhotoApiClient:
    """
    Client for the Unsplash photos API.

    :param access_key: Unsplash access key. If empty, requests are sent without an
    Authorization header and Unsplash will reject them.
    :param base_url: root of the API, defaults to https://api.unsplash.com
    :param transport: optional httpx transport, passed straight through to httpx.AsyncClient.
    """

    def __init__(
        self,
        access_key: str,
        base_url: str = UNSPLASH_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):

        headers = {}
        if access_key:
            headers["Authorization"] = f"Client-ID {access_key}"
        else:
            logger.warning(
                "no Unsplash access key configured, requests to %s will be unauthenticated",
                base_url,
            )

        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url, headers=headers, transport=transport
        )

    async def __aenter__(self) -> "PhotoApiClient":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def _get(self, path: str, params: dict):
        response = await self._client.get(path, params=params)
        response.raise_for_status()
        return response.json()

    @url_path("/photos")
    async def list_photos(
        self, page: int = 1, per_page: int = 10, *, url_path: str
    ) -> list[Photo]:
        """
        Return one page of the latest photos, newest first.
        See https://unsplash.com/documentation#list-photos for endpoint documentation.
        """

        photos = await self._get(
            url_path, params={"page": page, "per_page": per_page, "order_by": "latest"}
        )

        _log_payload("list_photos response", photos)
        return photos

    @url_path("/search/photos")
    async def search_photos_page(
        self, query: str, page: int = 1, per_page: int = 10, *, url_path: str
    ) -> SearchResponse:
        """
        Return the full search response, including the 'total' and 'total_pages' counters
        alongside the 'results' list.
        See https://unsplash.com/documentation#search-photos for endpoint documentation.
        """

        return await self._get(
            url_path, params={"query": query, "page": page, "per_page": per_page}
        )

    async def search_photos(
        self, query: str, page: int = 1, per_page: int = 10
    ) -> list[Photo]:
        """
        Return one page of photos matching query, in the relevance order chosen by Unsplash.
        The query is sent as-is, an empty string included.
        """

        body = await self.search_photos_page(query, page=page, per_page=per_page)
        results = body["results"]

        _log_payload("search_photos results", results)
        return results


_default_config: Optional[SplashyConfig] = None


def get_config() -> SplashyConfig:
    """
    Return the process-wide configuration, loading it with load_config() on first use.
    """

    global _default_config

    if _default_config is None:
        _default_config = load_config()

    return _default_config


def default_client() -> PhotoApiClient:
    """
    Build a client from the process-wide configuration. The httpx connection pool belongs to the
    event loop that first uses it, so the module-level helpers open one client per call.
    """

    config = get_config()
    return PhotoApiClient(
        access_key=config.UNSPLASH_ACCESS_KEY, base_url=config.UNSPLASH_API_URL
    )


async def list_photos(page: int = 1, per_page: int = 10) -> list[Photo]:
    async with default_client() as client:
        return await client.list_photos(page=page, per_page=per_page)


async def search_photos(query: str, page: int = 1, per_page: int = 10) -> list[Photo]:
    async with default_client() as client:
        return await client.search_photos(query, page=page, per_page=per_page)
