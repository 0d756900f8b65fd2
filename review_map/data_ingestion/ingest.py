from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, List

import pandas as pd
from pydantic import ValidationError

from ..db.client import SupabaseClient
from ..stores.models import StoreCreate
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)

# Accepted spellings per store column, first match wins
COLUMN_ALIASES: dict[str, List[str]] = {
    "name": ["name", "store_name", "店舗名", "店名"],
    "genre": ["genre", "category", "ジャンル"],
    "address": ["address", "住所"],
    "latitude": ["latitude", "lat", "緯度"],
    "longitude": ["longitude", "lng", "lon", "経度"],
    "phone": ["phone", "tel", "電話番号"],
    "business_hours": ["business_hours", "hours", "営業時間"],
    "google_rating": ["google_rating", "google評価"],
}


def _normalize_rating(rating: Any) -> float | None:
    if rating is None or pd.isna(rating):
        return None
    raw = str(rating).strip()
    # Handle "X/5" format (e.g. "4.1/5")
    if "/" in raw:
        raw = raw.split("/")[0].strip()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return max(0.0, min(5.0, value))


def _normalize_coordinate(value: Any) -> str | None:
    if value is None or pd.isna(value):
        return None
    # Full-width digits and separators from Japanese spreadsheets
    return str(value).translate(str.maketrans("０１２３４５６７８９．－", "0123456789.-")).strip() or None


def load_store_frame(path: Path | str) -> pd.DataFrame:
    """Read the CSV and map its columns onto the store entry schema."""
    raw = pd.read_csv(path, dtype=str)
    raw.columns = [str(c).strip() for c in raw.columns]

    def _first_present(columns: List[str]) -> str | None:
        for col in columns:
            if col in raw.columns:
                return col
        return None

    canonical = pd.DataFrame(index=raw.index)
    for field, aliases in COLUMN_ALIASES.items():
        col = _first_present(aliases)
        canonical[field] = raw[col].str.strip() if col else None

    canonical["google_rating"] = canonical["google_rating"].apply(_normalize_rating)
    canonical["latitude"] = canonical["latitude"].apply(_normalize_coordinate)
    canonical["longitude"] = canonical["longitude"].apply(_normalize_coordinate)
    canonical = canonical.astype(object).where(canonical.notna(), None)

    # Rows without a name cannot become stores
    canonical = canonical[canonical["name"].notna() & (canonical["name"] != "")]
    return canonical.reset_index(drop=True)


def build_store_rows(frame: pd.DataFrame) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for record in frame.to_dict(orient="records"):
        try:
            rows.append(StoreCreate.model_validate(record).model_dump())
        except ValidationError as e:
            logger.warning("Skipping store %r: %s", record.get("name"), e)
    return rows


def run_ingestion(
    client: SupabaseClient,
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> int:
    """
    Import stores from CSV.

    Steps:
    - Read and normalize the CSV.
    - Validate each row as a store entry, skipping invalid ones.
    - Insert in batches; returns the number of stores inserted.
    """
    frame = load_store_frame(config.input_path)
    rows = build_store_rows(frame)

    inserted = 0
    for start in range(0, len(rows), config.batch_size):
        batch = rows[start:start + config.batch_size]
        inserted += len(client.insert("stores", batch))

    logger.info("Imported %d of %d stores from %s", inserted, len(frame), config.input_path)
    return inserted


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    cfg = DEFAULT_INGESTION_CONFIG
    if len(sys.argv) > 1:
        path = Path(sys.argv[1])
        cfg = IngestionConfig(input_dir=path.parent, input_filename=path.name)
    count = run_ingestion(SupabaseClient(), cfg)
    print(f"Ingestion complete. {count} stores inserted from: {cfg.input_path}")
