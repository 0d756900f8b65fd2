from __future__ import annotations

from review_map.stores.filters import apply_filters, has_active_filters, matches_filters, primary_rating
from review_map.stores.models import FilterSpec, Rating, StoreWithReviews
from review_map.stores.sample_data import sample_stores


def _store(store_id: int = 1, reviews: list[dict] | None = None, **fields) -> StoreWithReviews:
    return StoreWithReviews.model_validate({
        "id": store_id,
        "name": fields.pop("name", f"store {store_id}"),
        "reviews": reviews or [],
        **fields,
    })


def _review(rating: str = "good", **fields) -> dict:
    return {"id": 1, "store_id": 1, "youtube_video_id": "vid", "rating": rating, **fields}


SATSUKI = _store(
    name="パティスリー SATSUKI",
    genre="スイーツ",
    address="東京都千代田区紀尾井町4-1",
    reviews=[_review("good", menu_items=["メロンショートケーキ"])],
)

FILTER_SPECS = [
    FilterSpec(),
    FilterSpec(keyword="satsuki"),
    FilterSpec(keyword="パフェ"),
    FilterSpec(genre="スイーツ"),
    FilterSpec(rating="bad"),
    FilterSpec(area="東京"),
    FilterSpec(genre="スイーツ", area="東京"),
    FilterSpec(keyword="存在しない"),
]


# ── Laws ─────────────────────────────────────────────────────────────────


def test_empty_spec_returns_input_unchanged():
    stores = sample_stores()
    assert apply_filters(stores, FilterSpec()) == stores


def test_single_store_is_kept_or_dropped():
    for store in sample_stores():
        for spec in FILTER_SPECS:
            assert apply_filters([store], spec) in ([store], [])


def test_filtering_is_idempotent():
    stores = sample_stores()
    for spec in FILTER_SPECS:
        once = apply_filters(stores, spec)
        assert apply_filters(once, spec) == once


def test_filtering_preserves_order_and_input():
    stores = sample_stores()
    snapshot = [s.model_copy(deep=True) for s in stores]
    result = apply_filters(stores, FilterSpec(genre="スイーツ"))
    assert [s.id for s in result] == [1, 3]
    assert stores == snapshot


def test_keyword_is_case_insensitive():
    stores = sample_stores()
    upper = apply_filters(stores, FilterSpec(keyword="SATSUKI"))
    lower = apply_filters(stores, FilterSpec(keyword="satsuki"))
    assert upper == lower
    assert [s.id for s in upper] == [1]


# ── Keyword ──────────────────────────────────────────────────────────────


def test_keyword_matches_menu_item():
    assert matches_filters(SATSUKI, FilterSpec(keyword="メロン"))


def test_keyword_matches_genre_and_summary():
    store = _store(genre="カフェ", reviews=[_review(review_summary="抹茶ラテが濃い")])
    assert matches_filters(store, FilterSpec(keyword="カフェ"))
    assert matches_filters(store, FilterSpec(keyword="抹茶"))


def test_keyword_searches_every_review():
    store = _store(reviews=[
        _review("good", menu_items=["かき氷"]),
        _review("bad", menu_items=None, review_summary="あんみつは甘すぎ"),
    ])
    assert matches_filters(store, FilterSpec(keyword="あんみつ"))


def test_keyword_without_match_excludes():
    assert not matches_filters(SATSUKI, FilterSpec(keyword="ラーメン"))


def test_keyword_tolerates_missing_optional_fields():
    store = _store(genre=None, reviews=[_review(menu_items=None, review_summary=None)])
    assert not matches_filters(store, FilterSpec(keyword="x"))


# ── Genre / rating / area ────────────────────────────────────────────────


def test_genre_is_exact_match():
    assert matches_filters(SATSUKI, FilterSpec(genre="スイーツ"))
    assert not matches_filters(SATSUKI, FilterSpec(genre="スイー"))
    assert not matches_filters(_store(genre=None), FilterSpec(genre="スイーツ"))


def test_rating_uses_first_review():
    store = _store(reviews=[_review("neutral"), _review("good")])
    assert primary_rating(store) == Rating.neutral
    assert matches_filters(store, FilterSpec(rating="neutral"))
    assert not matches_filters(store, FilterSpec(rating="good"))


def test_rating_excludes_other_verdicts():
    assert not matches_filters(SATSUKI, FilterSpec(rating="bad"))


def test_store_without_reviews_is_unknown():
    store = _store(reviews=[])
    assert matches_filters(store, FilterSpec(rating="unknown"))
    assert not matches_filters(store, FilterSpec(rating="good"))


def test_unrecognised_wire_rating_is_unknown():
    store = _store(reviews=[_review("excellent")])
    assert primary_rating(store) == Rating.unknown
    assert matches_filters(store, FilterSpec(rating="unknown"))


def test_area_is_substring_of_address():
    assert matches_filters(SATSUKI, FilterSpec(area="千代田"))
    assert not matches_filters(SATSUKI, FilterSpec(area="京都"))


def test_area_excludes_store_without_address():
    assert not matches_filters(_store(address=None), FilterSpec(area="東京"))


def test_combined_filters_are_conjunctive():
    stores = [
        _store(1, genre="カフェ", reviews=[_review("neutral")]),
        _store(2, genre="カフェ", reviews=[_review("good")]),
        _store(3, genre="スイーツ", reviews=[_review("neutral")]),
    ]
    result = apply_filters(stores, FilterSpec(genre="カフェ", rating="neutral"))
    assert [s.id for s in result] == [1]


def test_has_active_filters():
    assert not has_active_filters(FilterSpec())
    assert has_active_filters(FilterSpec(area="東京"))


def test_off_enum_casing_counts_as_unknown():
    store = _store(reviews=[_review("GOOD")])
    assert apply_filters([store], FilterSpec(rating="unknown")) == [store]
    assert apply_filters([store], FilterSpec(rating="good")) == []
