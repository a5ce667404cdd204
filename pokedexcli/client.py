"""HTTP client for the PokeAPI with a response cache."""

from __future__ import annotations

import urllib.request
from types import TracebackType
from typing import TypeVar
from urllib.parse import quote

from .cache import Cache
from .models import Location, LocationPage, Pokemon, parse_json

BASE_URL = "https://pokeapi.co/api/v2"
DEFAULT_TIMEOUT = 5.0
DEFAULT_CACHE_INTERVAL = 300.0

M = TypeVar("M")


class PokeAPIError(Exception):
    """Raised when a PokeAPI request fails or its response cannot be decoded."""


class Client:
    """Fetches PokeAPI resources, keeping raw responses in a time-expiring cache."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        cache_interval: float = DEFAULT_CACHE_INTERVAL,
        base_url: str = BASE_URL,
    ) -> None:
        self._timeout = timeout
        self._base_url = base_url.rstrip("/")
        self._cache = Cache(cache_interval)

    @property
    def base_url(self) -> str:
        """The API root that resource paths are joined to."""
        return self._base_url

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page when ``page_url`` is None."""
        url = page_url if page_url is not None else f"{self._base_url}/location-area"
        return self._fetch(url, LocationPage)

    def get_location(self, location_name: str) -> Location:
        """Return the location area called ``location_name``."""
        url = f"{self._base_url}/location-area/{quote(location_name, safe='')}"
        return self._fetch(url, Location)

    def get_pokemon(self, pokemon_name: str) -> Pokemon:
        """Return the Pokemon called ``pokemon_name``."""
        url = f"{self._base_url}/pokemon/{quote(pokemon_name, safe='')}"
        return self._fetch(url, Pokemon)

    def close(self) -> None:
        """Stop the cache's background reaper."""
        self._cache.close()

    def _fetch(self, url: str, model: type[M]) -> M:
        cached = self._cache.get(url)
        if cached is not None:
            return self._decode(url, cached, model)
        payload = self._download(url)
        result = self._decode(url, payload, model)
        self._cache.add(url, payload)
        return result

    def _download(self, url: str) -> bytes:
        request = urllib.request.Request(
            url, method="GET", headers={"Accept": "application/json"}
        )
        try:
            with urllib.request.urlopen(request, timeout=self._timeout) as response:
                return response.read()
        except (OSError, ValueError) as exc:
            raise PokeAPIError(f"GET {url}: {exc}") from exc

    @staticmethod
    def _decode(url: str, payload: bytes, model: type[M]) -> M:
        try:
            return parse_json(payload, model)
        except ValueError as exc:
            raise PokeAPIError(f"GET {url}: invalid response: {exc}") from exc

    def __enter__(self) -> Client:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()