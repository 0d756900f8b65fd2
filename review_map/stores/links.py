from __future__ import annotations

from .models import Review, Store

YOUTUBE_SHORTS_URL = "https://www.youtube.com/shorts/{video_id}"
YOUTUBE_THUMBNAIL_URL = "https://i.ytimg.com/vi/{video_id}/{size}.jpg"


def youtube_url(review: Review | None) -> str | None:
    if review is None or not review.youtube_video_id:
        return None
    return YOUTUBE_SHORTS_URL.format(video_id=review.youtube_video_id)


def thumbnail_url(review: Review | None, size: str = "hqdefault") -> str | None:
    """Explicit thumbnail if stored, otherwise YouTube's generated one.

    List cards use ``hqdefault``; the detail panel asks for ``maxresdefault``.
    """
    if review is None:
        return None
    if review.thumbnail_url:
        return review.thumbnail_url
    if review.youtube_video_id:
        return YOUTUBE_THUMBNAIL_URL.format(video_id=review.youtube_video_id, size=size)
    return None


def google_maps_url(store: Store) -> str | None:
    if store.google_maps_url:
        return store.google_maps_url
    if store.google_place_id:
        return f"https://www.google.com/maps/place/?q=place_id:{store.google_place_id}"
    if store.latitude is not None and store.longitude is not None:
        return f"https://www.google.com/maps?q={store.latitude},{store.longitude}"
    return None
