from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class Rating(str, Enum):
    good = "good"
    neutral = "neutral"
    bad = "bad"
    unknown = "unknown"

    @classmethod
    def parse(cls, value: Any) -> Rating:
        """Read a wire value; anything outside the enum is ``unknown``."""
        if isinstance(value, Rating):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.unknown


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _as_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# ── Records as stored upstream ───────────────────────────────────────────


class Review(BaseModel):
    id: int
    store_id: int
    youtube_video_id: str
    rating: Rating = Rating.unknown
    menu_items: list[str] | None = None
    review_summary: str | None = None
    transcript: str | None = None
    video_title: str | None = None
    thumbnail_url: str | None = None
    published_at: datetime | None = None
    created_at: datetime | None = None

    @field_validator("rating", mode="before")
    @classmethod
    def _coerce_rating(cls, v: Any) -> Rating:
        return Rating.parse(v)

    @field_validator("menu_items", mode="before")
    @classmethod
    def _drop_non_text_items(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return None
        return [item for item in v if isinstance(item, str)]

    @field_validator("published_at", "created_at", mode="before")
    @classmethod
    def _blank_timestamps(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("published_at", "created_at")
    @classmethod
    def _utc_timestamps(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)


class Store(BaseModel):
    id: int
    name: str
    genre: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    phone: str | None = None
    business_hours: str | None = None
    google_rating: float | None = None
    google_place_id: str | None = None
    google_maps_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _blank_timestamps(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _utc_timestamps(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)


class StoreWithReviews(Store):
    reviews: list[Review] = Field(default_factory=list)

    @field_validator("reviews", mode="before")
    @classmethod
    def _valid_reviews(cls, v: Any) -> Any:
        """Malformed reviews are dropped, the store itself is kept."""
        if not isinstance(v, list):
            return []
        reviews = []
        for row in v:
            try:
                reviews.append(Review.model_validate(row))
            except ValidationError:
                logger.warning("Dropping malformed review %r", row, exc_info=True)
        return reviews

    @property
    def primary_review(self) -> Review | None:
        return self.reviews[0] if self.reviews else None


class Genre(BaseModel):
    id: int
    name: str
    icon: str | None = None


# ── Search ───────────────────────────────────────────────────────────────


class FilterSpec(BaseModel):
    keyword: str = ""
    genre: str = ""
    rating: str = ""
    area: str = ""


class MapMarker(BaseModel):
    id: int
    name: str
    latitude: float
    longitude: float
    rating: Rating
    genre: str | None
    color: str
    emoji: str


class StoreListing(BaseModel):
    stores: list[StoreWithReviews]
    markers: list[MapMarker]
    total: int
    result_count: int
    filters: FilterSpec
    filters_active: bool
    source: str


class StoreDetail(BaseModel):
    store: StoreWithReviews
    rating: Rating
    rating_label: str
    primary_review: Review | None
    youtube_url: str | None
    thumbnail_url: str | None
    google_maps_url: str | None


# ── Admin entry forms ────────────────────────────────────────────────────

_VIDEO_ID_PATTERNS = (
    re.compile(r"youtube\.com/shorts/([\w-]+)"),
    re.compile(r"youtube\.com/watch\?(?:.*&)?v=([\w-]+)"),
    re.compile(r"youtu\.be/([\w-]+)"),
    re.compile(r"youtube\.com/embed/([\w-]+)"),
)


def extract_video_id(value: str) -> str:
    """Return the bare video id from a pasted YouTube URL or id."""
    raw = value.strip()
    for pattern in _VIDEO_ID_PATTERNS:
        match = pattern.search(raw)
        if match:
            return match.group(1)
    return raw


class StoreCreate(BaseModel):
    name: str = Field(..., min_length=1)
    genre: str | None = None
    address: str | None = None
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)
    phone: str | None = None
    business_hours: str | None = None
    google_rating: float | None = Field(default=None, ge=0.0, le=5.0)

    @field_validator(
        "genre", "address", "latitude", "longitude",
        "phone", "business_hours", "google_rating",
        mode="before",
    )
    @classmethod
    def _empty_is_none(cls, v: Any) -> Any:
        return _blank_to_none(v)


class ReviewCreate(BaseModel):
    store_id: int
    youtube_video_id: str = Field(..., min_length=1)
    rating: Rating = Rating.unknown
    menu_items: list[str] | None = Field(
        default=None,
        description="Comma-separated string or list of menu item names",
    )
    review_summary: str | None = None
    video_title: str | None = None

    @field_validator("youtube_video_id", mode="before")
    @classmethod
    def _video_id(cls, v: Any) -> Any:
        return extract_video_id(v) if isinstance(v, str) else v

    @field_validator("menu_items", mode="before")
    @classmethod
    def _split_menu_items(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            items = [s.strip() for s in v if isinstance(s, str) and s.strip()]
            return items or None
        return v

    @field_validator("review_summary", "video_title", mode="before")
    @classmethod
    def _empty_is_none(cls, v: Any) -> Any:
        return _blank_to_none(v)
