"""
Store search/filter engine.

Every active criterion of a ``FilterSpec`` must pass for a store to be kept:

- keyword: case-insensitive substring of the name, genre, any menu item or
  any review summary,
- genre: exact match,
- rating: exact match against the primary review's rating (``unknown`` when
  the store has no reviews),
- area: substring of the address.

Empty criteria impose no constraint. Filtering never modifies its input.
"""
from __future__ import annotations

from typing import Iterable

from .models import FilterSpec, Rating, StoreWithReviews


def primary_rating(store: StoreWithReviews) -> Rating:
    """Rating of the store's first review, ``unknown`` without reviews."""
    review = store.primary_review
    if review is None:
        return Rating.unknown
    return Rating.parse(review.rating)


def has_active_filters(spec: FilterSpec) -> bool:
    return bool(spec.keyword or spec.genre or spec.rating or spec.area)


def _contains(text: str | None, needle_lower: str) -> bool:
    return isinstance(text, str) and needle_lower in text.lower()


def _matches_keyword(store: StoreWithReviews, keyword: str) -> bool:
    needle = keyword.lower()
    if _contains(store.name, needle) or _contains(store.genre, needle):
        return True
    for review in store.reviews:
        if any(_contains(item, needle) for item in review.menu_items or []):
            return True
        if _contains(review.review_summary, needle):
            return True
    return False


def matches_filters(store: StoreWithReviews, spec: FilterSpec) -> bool:
    if spec.keyword and not _matches_keyword(store, spec.keyword):
        return False

    if spec.genre and store.genre != spec.genre:
        return False

    if spec.rating and primary_rating(store).value != spec.rating:
        return False

    # A store without an address can never satisfy an area filter
    if spec.area and not (store.address and spec.area in store.address):
        return False

    return True


def apply_filters(
    stores: Iterable[StoreWithReviews],
    spec: FilterSpec,
) -> list[StoreWithReviews]:
    """Return the stores matching ``spec``, in their original order."""
    return [store for store in stores if matches_filters(store, spec)]
