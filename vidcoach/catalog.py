"""
vidcoach.catalog - Trending video listing with a shared TTL cache.

Wraps the YouTube Data API "mostPopular" chart. Repeated requests for the
same category are served from a TTLCache until the entry goes stale.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel

from vidcoach.cache import TTLCache
from vidcoach.exceptions import CatalogError
from vidcoach.logging import logger

API_URL = "https://www.googleapis.com/youtube/v3/videos"
WATCH_URL = "https://www.youtube.com/watch?v={id}"


class CatalogCategory(str, Enum):
    """Trending categories; ALL lists across every category."""

    ALL = "all"
    GAMING = "gaming"
    MUSIC = "music"
    ENTERTAINMENT = "entertainment"
    HOWTO = "howto"
    SCIENCE = "science"
    SPORTS = "sports"
    NEWS = "news"
    COMEDY = "comedy"
    EDUCATION = "education"
    TECH = "tech"

    @property
    def provider_id(self) -> str | None:
        return _PROVIDER_IDS.get(self)

    @classmethod
    def parse(cls, name: str | None) -> CatalogCategory:
        """Resolve a category by name; None or empty selects ALL.

        Raises:
            ValueError: If the name is not a known category
        """
        if not name:
            return cls.ALL
        try:
            return cls(name.lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown category '{name}'. Choose from: {valid}") from None


_PROVIDER_IDS: dict[CatalogCategory, str] = {
    CatalogCategory.GAMING: "20",
    CatalogCategory.MUSIC: "10",
    CatalogCategory.ENTERTAINMENT: "24",
    CatalogCategory.HOWTO: "26",
    CatalogCategory.SCIENCE: "28",
    CatalogCategory.SPORTS: "17",
    CatalogCategory.NEWS: "25",
    CatalogCategory.COMEDY: "23",
    CatalogCategory.EDUCATION: "27",
    # The provider has no separate tech category; it shares "Science & Technology".
    CatalogCategory.TECH: "28",
}


class CatalogItem(BaseModel):
    """A trending video as returned to callers."""

    id: str
    title: str
    thumbnail: str | None = None
    channel: str = ""
    views: str = "0"
    view_count: int = 0
    likes: int | None = None
    published_at: str | None = None
    url: str

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> CatalogItem:
        snippet = item.get("snippet", {})
        statistics = item.get("statistics", {})
        thumbnails = snippet.get("thumbnails", {})
        thumbnail = (thumbnails.get("high") or thumbnails.get("medium") or {}).get("url")
        view_count = int(statistics.get("viewCount", 0) or 0)
        likes = statistics.get("likeCount")

        return cls(
            id=item["id"],
            title=snippet.get("title", ""),
            thumbnail=thumbnail,
            channel=snippet.get("channelTitle", ""),
            views=format_views(view_count),
            view_count=view_count,
            likes=int(likes) if likes is not None else None,
            published_at=snippet.get("publishedAt"),
            url=WATCH_URL.format(id=item["id"]),
        )


def format_views(views: int | str) -> str:
    """Abbreviate a view count: 1234567 -> "1.2M", 4321 -> "4.3K"."""
    num = int(views)
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    elif num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(num)


class CatalogClient:
    """Client for the trending-videos listing."""

    def __init__(
        self,
        api_key: str | None,
        http: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.api_key = api_key
        self.http = http or httpx.Client(timeout=timeout)

    def fetch_popular(
        self,
        category: CatalogCategory = CatalogCategory.ALL,
        region: str = "US",
        max_results: int = 12,
    ) -> list[CatalogItem]:
        """Fetch the most popular videos for a category.

        Raises:
            CatalogError: If the API key is missing or the request fails
        """
        if not self.api_key:
            raise CatalogError("No catalog API key configured (set YOUTUBE_API_KEY)")

        params: dict[str, Any] = {
            "part": "snippet,statistics",
            "chart": "mostPopular",
            "regionCode": region,
            "maxResults": max_results,
            "key": self.api_key,
        }
        if category.provider_id:
            params["videoCategoryId"] = category.provider_id

        try:
            response = self.http.get(API_URL, params=params)
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise CatalogError(f"Catalog request failed: {e}") from e

        if not isinstance(data, dict):
            raise CatalogError("Unexpected catalog response: expected a JSON object")
        if data.get("error"):
            error = data["error"]
            message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            raise CatalogError(f"Catalog API error: {message}", status_code=response.status_code)
        if response.status_code >= 400:
            raise CatalogError(
                f"Catalog API returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return [CatalogItem.from_api(item) for item in data.get("items", [])]
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogError(f"Malformed catalog item: {e}") from e

    def close(self) -> None:
        self.http.close()


@dataclass(frozen=True)
class TrendingResult:
    items: list[CatalogItem]
    cached: bool


class TrendingService:
    """Cache-backed trending listing, keyed by category."""

    def __init__(
        self,
        client: CatalogClient,
        cache: TTLCache[list[CatalogItem]],
        region: str = "US",
        max_results: int = 12,
    ) -> None:
        self.client = client
        self.cache = cache
        self.region = region
        self.max_results = max_results
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def get_trending(self, category: CatalogCategory = CatalogCategory.ALL) -> TrendingResult:
        """Return trending items, from cache when fresh.

        Concurrent misses on one category wait for a single fetch and share
        its result; other categories are not blocked.

        Raises:
            CatalogError: If a fresh fetch is needed and fails
        """
        key = category.value
        hit = self.cache.get(key)
        if hit is None:
            with self._key_lock(key):
                hit = self.cache.get(key)
                if hit is None:
                    items = self.client.fetch_popular(
                        category, region=self.region, max_results=self.max_results
                    )
                    self.cache.set(key, items)
                    logger.debug("Fetched %d trending items for '%s'", len(items), key)
                    return TrendingResult(items=items, cached=False)

        logger.debug("Trending '%s' served from cache (age %.0fs)", key, hit.age)
        return TrendingResult(items=hit.payload, cached=True)

    def _key_lock(self, key: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(key, threading.Lock())
