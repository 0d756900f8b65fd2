from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Iterable

from pydantic import BaseModel, ValidationError

from ..db.client import DatabaseError, SupabaseClient
from .models import Genre, Review, StoreWithReviews
from .sample_data import sample_genres, sample_stores

logger = logging.getLogger(__name__)

SOURCE_DATABASE = "database"
SOURCE_SAMPLE = "sample"

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one upstream read: either rows or the reason there are none."""

    items: list[Any] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def order_reviews(reviews: Iterable[Review]) -> list[Review]:
    """Most recently published first; unpublished last, then newest created."""
    return sorted(
        reviews,
        key=lambda r: (
            r.published_at is not None,
            r.published_at or _EPOCH,
            r.created_at or _EPOCH,
            r.id,
        ),
        reverse=True,
    )


def _parse_rows(rows: list[dict[str, Any]], model: type[BaseModel]) -> list[Any]:
    parsed = []
    for row in rows:
        try:
            parsed.append(model.model_validate(row))
        except ValidationError:
            logger.warning("Skipping malformed %s row id=%s", model.__name__, row.get("id"), exc_info=True)
    return parsed


def _fetch(read: Callable[[], list[dict[str, Any]]], model: type[BaseModel]) -> FetchResult:
    try:
        rows = read()
    except DatabaseError as e:
        logger.warning("%s fetch failed", model.__name__, exc_info=True)
        return FetchResult(error=str(e))
    return FetchResult(items=_parse_rows(rows, model))


def fetch_stores(client: SupabaseClient) -> FetchResult:
    """Stores with their reviews, newest store first."""
    result = _fetch(
        lambda: client.select("stores", columns="*,reviews(*)", order="created_at.desc"),
        StoreWithReviews,
    )
    for store in result.items:
        store.reviews = order_reviews(store.reviews)
    return result


def fetch_genres(client: SupabaseClient) -> FetchResult:
    return _fetch(lambda: client.select("genres", order="name"), Genre)


# ── Fallback selection ───────────────────────────────────────────────────


def select_stores(result: FetchResult) -> tuple[list[StoreWithReviews], str]:
    if result.ok and result.items:
        return list(result.items), SOURCE_DATABASE
    logger.info("Using sample stores (%s)", result.error or "no rows")
    return sample_stores(), SOURCE_SAMPLE


def select_genres(result: FetchResult) -> tuple[list[Genre], str]:
    if result.ok and result.items:
        return list(result.items), SOURCE_DATABASE
    logger.info("Using sample genres (%s)", result.error or "no rows")
    return sample_genres(), SOURCE_SAMPLE


def load_stores(client: SupabaseClient) -> tuple[list[StoreWithReviews], str]:
    return select_stores(fetch_stores(client))


def load_genres(client: SupabaseClient) -> tuple[list[Genre], str]:
    return select_genres(fetch_genres(client))
