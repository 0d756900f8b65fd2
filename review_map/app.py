from __future__ import annotations

import os
import time
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_search
from .auth.dependencies import require_admin, require_user
from .auth.models import LoginRequest
from .auth.users import authenticate
from .db.client import DatabaseError, DatabaseNotConfigured, SupabaseClient
from .stores import admin
from .stores.filters import apply_filters, has_active_filters, primary_rating
from .stores.links import google_maps_url, thumbnail_url, youtube_url
from .stores.markers import RATING_STYLES, rating_style, to_markers
from .stores.models import (
    FilterSpec,
    Review,
    ReviewCreate,
    StoreCreate,
    StoreDetail,
    StoreListing,
    StoreWithReviews,
)
from .stores.repository import load_genres, load_stores

AREA_OPTIONS = ["東京", "大阪", "京都", "神奈川", "愛知", "福岡", "北海道", "沖縄"]

app = FastAPI(title="Honest Review Store Map", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "review-map-secret-change-in-production"),
)

_STATIC_DIR = Path(__file__).resolve().parent / "static"


def get_client() -> SupabaseClient:
    return SupabaseClient()


def filter_params(
    keyword: str = Query(default="", description="Name, genre, menu item or summary"),
    genre: str = Query(default=""),
    rating: str = Query(default="", description="good | neutral | bad | unknown"),
    area: str = Query(default="", description="Substring of the address, e.g. 東京"),
) -> FilterSpec:
    return FilterSpec(keyword=keyword, genre=genre, rating=rating, area=area)


def _database_error(e: DatabaseError) -> HTTPException:
    if isinstance(e, DatabaseNotConfigured):
        return HTTPException(status_code=503, detail=str(e))
    return HTTPException(status_code=502, detail=f"Database error: {e}")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata(client: SupabaseClient = Depends(get_client)) -> dict:
    genres, source = load_genres(client)
    return {
        "genres": [g.model_dump() for g in genres],
        "genre_source": source,
        "areas": AREA_OPTIONS,
        "ratings": [
            {"value": rating.value, **style}
            for rating, style in RATING_STYLES.items()
        ],
    }


@app.get("/stores", response_model=StoreListing)
def list_stores(
    spec: FilterSpec = Depends(filter_params),
    client: SupabaseClient = Depends(get_client),
) -> StoreListing:
    start_time = time.time()
    stores, source = load_stores(client)
    filtered = apply_filters(stores, spec)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_search(spec, len(filtered), len(stores), source, elapsed_ms)

    return StoreListing(
        stores=filtered,
        markers=to_markers(filtered),
        total=len(stores),
        result_count=len(filtered),
        filters=spec,
        filters_active=has_active_filters(spec),
        source=source,
    )


@app.get("/stores/{store_id}", response_model=StoreDetail)
def store_detail(
    store_id: int,
    client: SupabaseClient = Depends(get_client),
) -> StoreDetail:
    stores, _ = load_stores(client)
    store = next((s for s in stores if s.id == store_id), None)
    if store is None:
        raise HTTPException(status_code=404, detail="Store not found")

    rating = primary_rating(store)
    review = store.primary_review
    return StoreDetail(
        store=store,
        rating=rating,
        rating_label=rating_style(rating)["label"],
        primary_review=review,
        youtube_url=youtube_url(review),
        thumbnail_url=thumbnail_url(review, size="maxresdefault"),
        google_maps_url=google_maps_url(store),
    )


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/admin/stores", response_model=list[StoreWithReviews])
def admin_list_stores(
    user: dict = Depends(require_admin),
    client: SupabaseClient = Depends(get_client),
) -> list[StoreWithReviews]:
    try:
        return admin.list_stores(client)
    except DatabaseError as e:
        raise _database_error(e) from e


@app.post("/admin/stores", status_code=201, response_model=StoreWithReviews)
def admin_add_store(
    body: StoreCreate,
    user: dict = Depends(require_admin),
    client: SupabaseClient = Depends(get_client),
) -> StoreWithReviews:
    try:
        return admin.create_store(client, body)
    except DatabaseError as e:
        raise _database_error(e) from e


@app.post("/admin/reviews", status_code=201, response_model=Review)
def admin_add_review(
    body: ReviewCreate,
    user: dict = Depends(require_admin),
    client: SupabaseClient = Depends(get_client),
) -> Review:
    try:
        return admin.create_review(client, body)
    except DatabaseError as e:
        raise _database_error(e) from e


@app.delete("/admin/stores/{store_id}")
def admin_delete_store(
    store_id: int,
    user: dict = Depends(require_admin),
    client: SupabaseClient = Depends(get_client),
) -> dict:
    try:
        admin.delete_store(client, store_id)
    except DatabaseError as e:
        raise _database_error(e) from e
    return {"status": "deleted", "id": store_id}


@app.get("/analytics")
def analytics(user: dict = Depends(require_admin)) -> dict:
    return compute_analytics(get_events())


# ── Static page ──────────────────────────────────────────────────────────


app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")


@app.get("/")
def root():
    return FileResponse(str(_STATIC_DIR / "index.html"))


@app.get("/admin")
def admin_page():
    return FileResponse(str(_STATIC_DIR / "admin.html"))
