from __future__ import annotations

import logging

from ..db.client import DatabaseError, SupabaseClient
from .models import Review, ReviewCreate, StoreCreate, StoreWithReviews
from .repository import order_reviews

logger = logging.getLogger(__name__)


def list_stores(client: SupabaseClient) -> list[StoreWithReviews]:
    """Admin listing: database rows only, errors propagate."""
    rows = client.select("stores", columns="*,reviews(*)", order="created_at.desc")
    stores = [StoreWithReviews.model_validate(row) for row in rows]
    for store in stores:
        store.reviews = order_reviews(store.reviews)
    return stores


def create_store(client: SupabaseClient, form: StoreCreate) -> StoreWithReviews:
    created = client.insert("stores", [form.model_dump()])
    if not created:
        raise DatabaseError("insert into stores returned no row")
    logger.info("Added store %r", form.name)
    return StoreWithReviews.model_validate(created[0])


def create_review(client: SupabaseClient, form: ReviewCreate) -> Review:
    created = client.insert("reviews", [form.model_dump(mode="json")])
    if not created:
        raise DatabaseError("insert into reviews returned no row")
    logger.info("Added review %s for store %s", form.youtube_video_id, form.store_id)
    return Review.model_validate(created[0])


def delete_store(client: SupabaseClient, store_id: int) -> None:
    """Delete a store together with its reviews."""
    client.delete("reviews", store_id=store_id)
    client.delete("stores", id=store_id)
    logger.info("Deleted store %s", store_id)
