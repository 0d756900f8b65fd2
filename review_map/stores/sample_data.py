"""
Built-in sample dataset.

Served whenever the hosted database is unreachable, unconfigured or empty, so
the map and the list are never blank.
"""
from __future__ import annotations

from .models import Genre, StoreWithReviews

_SAMPLE_STORE_ROWS: list[dict] = [
    {
        "id": 1,
        "name": "パティスリー SATSUKI",
        "genre": "スイーツ",
        "address": "東京都千代田区紀尾井町4-1 ホテルニューオータニ",
        "latitude": 35.6812,
        "longitude": 139.7344,
        "phone": "03-3221-2245",
        "business_hours": "11:00〜20:00",
        "google_rating": 4.2,
        "reviews": [
            {
                "id": 1,
                "store_id": 1,
                "youtube_video_id": "SAMPLE_VIDEO_ID",
                "rating": "good",
                "menu_items": ["スーパーエクストラメロンショートケーキ"],
                "review_summary": "高いけど、高いなりの美味しさ。特別な日に行く価値あり。",
                "video_title": "ホテルニューオータニのメロンショートケーキを正直レビュー",
            },
        ],
    },
    {
        "id": 2,
        "name": "リラックマ茶房 嵐山店",
        "genre": "カフェ",
        "address": "京都府京都市右京区嵯峨天龍寺造路町",
        "latitude": 35.0145,
        "longitude": 135.6722,
        "business_hours": "10:00〜18:00",
        "google_rating": 4.0,
        "reviews": [
            {
                "id": 2,
                "store_id": 2,
                "youtube_video_id": "SAMPLE_VIDEO_ID_2",
                "rating": "neutral",
                "menu_items": ["リラックマパフェ", "抹茶ラテ"],
                "review_summary": "キャラクターは可愛いけど、味は普通。インスタ映え目的なら◎",
                "video_title": "京都嵐山の食べ歩きスイーツを正直レビュー",
            },
        ],
    },
    {
        "id": 3,
        "name": "某チェーン店",
        "genre": "スイーツ",
        "address": "東京都渋谷区",
        "latitude": 35.6595,
        "longitude": 139.7004,
        "google_rating": 3.5,
        "reviews": [
            {
                "id": 3,
                "store_id": 3,
                "youtube_video_id": "SAMPLE_VIDEO_ID_3",
                "rating": "bad",
                "menu_items": ["季節限定パフェ"],
                "review_summary": "値段の割にボリュームが少ない。正直おすすめしない。",
                "video_title": "話題の季節限定スイーツを正直レビュー",
            },
        ],
    },
]

_SAMPLE_GENRE_ROWS: list[dict] = [
    {"id": 1, "name": "スイーツ", "icon": "🍰"},
    {"id": 2, "name": "カフェ", "icon": "☕"},
    {"id": 3, "name": "ラーメン", "icon": "🍜"},
    {"id": 4, "name": "焼肉", "icon": "🥩"},
    {"id": 5, "name": "寿司", "icon": "🍣"},
]


def sample_stores() -> list[StoreWithReviews]:
    """Fresh copies of the sample stores."""
    return [StoreWithReviews.model_validate(row) for row in _SAMPLE_STORE_ROWS]


def sample_genres() -> list[Genre]:
    return [Genre.model_validate(row) for row in _SAMPLE_GENRE_ROWS]
