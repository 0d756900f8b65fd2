from __future__ import annotations

import time
from typing import Any

from ..stores.filters import has_active_filters
from ..stores.models import FilterSpec

_events: list[dict[str, Any]] = []


def record_search(
    spec: FilterSpec,
    result_count: int,
    total: int,
    source: str,
    response_time_ms: float,
) -> None:
    """Log one store listing request with the filters it used."""
    _events.append({
        "type": "search",
        "timestamp": time.time(),
        **spec.model_dump(),
        "filters_active": has_active_filters(spec),
        "result_count": result_count,
        "total": total,
        "source": source,
        "response_time_ms": response_time_ms,
    })


def get_events() -> list[dict[str, Any]]:
    return list(_events)


def clear_events() -> None:
    _events.clear()
