from __future__ import annotations

from typing import Any

import pytest

from review_map.app import app, get_client
from review_map.db.client import DatabaseError

STORE_ROWS: list[dict[str, Any]] = [
    {
        "id": 10,
        "name": "麺屋 こはく",
        "genre": "ラーメン",
        "address": "大阪府大阪市北区梅田1-1",
        "latitude": 34.7025,
        "longitude": 135.4959,
        "created_at": "2024-06-01T09:00:00+00:00",
        "reviews": [
            {
                "id": 21,
                "store_id": 10,
                "youtube_video_id": "OLD_VIDEO",
                "rating": "bad",
                "menu_items": ["醤油ラーメン"],
                "review_summary": "スープがぬるい。",
                "published_at": "2024-01-10T00:00:00+00:00",
            },
            {
                "id": 22,
                "store_id": 10,
                "youtube_video_id": "NEW_VIDEO",
                "rating": "good",
                "menu_items": ["特製つけ麺"],
                "review_summary": "再訪したら大幅に改善していた。",
                "published_at": "2024-05-20T00:00:00+00:00",
            },
        ],
    },
    {
        "id": 11,
        "name": "喫茶 ひだまり",
        "genre": "カフェ",
        "address": None,
        "latitude": None,
        "longitude": None,
        "created_at": "2024-05-01T09:00:00+00:00",
        "reviews": [],
    },
]


class FakeClient:
    """Stands in for ``SupabaseClient``; records writes."""

    enabled = True

    def __init__(self, tables: dict[str, list[dict]] | None = None, fail: bool = False):
        self.tables = tables if tables is not None else {}
        self.fail = fail
        self.selects: list[tuple[str, dict]] = []
        self.inserted: list[tuple[str, list[dict]]] = []
        self.deleted: list[tuple[str, dict]] = []

    def _check(self) -> None:
        if self.fail:
            raise DatabaseError("connection refused")

    def select(self, table, columns="*", order=None, **filters):
        self._check()
        self.selects.append((table, {"columns": columns, "order": order, **filters}))
        return [dict(row) for row in self.tables.get(table, [])]

    def insert(self, table, rows):
        self._check()
        self.inserted.append((table, rows))
        return [{"id": 100 + i, **row} for i, row in enumerate(rows)]

    def delete(self, table, **filters):
        self._check()
        self.deleted.append((table, filters))


@pytest.fixture
def fake_client():
    client = FakeClient({"stores": STORE_ROWS, "genres": [{"id": 1, "name": "ラーメン", "icon": "🍜"}]})
    app.dependency_overrides[get_client] = lambda: client
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    client = FakeClient(fail=True)
    app.dependency_overrides[get_client] = lambda: client
    yield client
    app.dependency_overrides.clear()
