from __future__ import annotations

from collections import Counter
from typing import Any

FILTER_KEYS = ("keyword", "genre", "rating", "area")


def _top(searches: list[dict[str, Any]], key: str, n: int = 10) -> list[dict[str, Any]]:
    counter: Counter[str] = Counter(s[key] for s in searches if s.get(key))
    return [{"name": name, "count": count} for name, count in counter.most_common(n)]


def _rate(count: int, total: int) -> float:
    return round(count / total * 100, 1) if total else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    total = len(searches)

    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    filter_usage = {
        key: _rate(sum(1 for s in searches if s.get(key)), total)
        for key in FILTER_KEYS
    }

    # Searches that matched nothing, and ones served from the sample dataset
    empty_results = sum(1 for s in searches if s.get("result_count") == 0)
    fallback = sum(1 for s in searches if s.get("source") == "sample")

    return {
        "total_searches": total,
        "avg_response_time_ms": avg_time,
        "top_keywords": _top(searches, "keyword"),
        "top_genres": _top(searches, "genre"),
        "top_areas": _top(searches, "area"),
        "rating_usage": dict(Counter(s["rating"] for s in searches if s.get("rating"))),
        "filter_usage": filter_usage,
        "empty_result_rate": _rate(empty_results, total),
        "fallback_rate": _rate(fallback, total),
    }
