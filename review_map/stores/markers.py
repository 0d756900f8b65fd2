from __future__ import annotations

from typing import Iterable

from .filters import primary_rating
from .models import MapMarker, Rating, StoreWithReviews

RATING_STYLES: dict[Rating, dict[str, str]] = {
    Rating.good: {"color": "#48BB78", "emoji": "👍", "label": "良い"},
    Rating.neutral: {"color": "#ECC94B", "emoji": "👌", "label": "普通"},
    Rating.bad: {"color": "#F56565", "emoji": "👎", "label": "悪い"},
    Rating.unknown: {"color": "#A0AEC0", "emoji": "❓", "label": "不明"},
}


def rating_style(rating: Rating) -> dict[str, str]:
    return RATING_STYLES.get(rating, RATING_STYLES[Rating.unknown])


def to_markers(stores: Iterable[StoreWithReviews]) -> list[MapMarker]:
    """Project stores onto map markers, skipping any without coordinates."""
    markers: list[MapMarker] = []
    for store in stores:
        if store.latitude is None or store.longitude is None:
            continue
        rating = primary_rating(store)
        style = rating_style(rating)
        markers.append(MapMarker(
            id=store.id,
            name=store.name,
            latitude=store.latitude,
            longitude=store.longitude,
            rating=rating,
            genre=store.genre,
            color=style["color"],
            emoji=style["emoji"],
        ))
    return markers
