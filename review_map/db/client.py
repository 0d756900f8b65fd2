from __future__ import annotations

import logging
from typing import Any

import requests

from .config import DEFAULT_DATABASE_CONFIG, DatabaseConfig

logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Any failure talking to the hosted database."""


class DatabaseNotConfigured(DatabaseError):
    pass


class SupabaseClient:
    """Minimal table client for a Supabase project's PostgREST endpoint."""

    def __init__(self, config: DatabaseConfig = DEFAULT_DATABASE_CONFIG):
        self.config = config

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def _headers(self, prefer: str | None = None) -> dict[str, str]:
        headers = {
            "apikey": self.config.api_key,
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    def _request(
        self,
        method: str,
        table: str,
        *,
        params: dict[str, str] | None = None,
        payload: Any = None,
        prefer: str | None = None,
    ) -> Any:
        if not self.enabled:
            raise DatabaseNotConfigured("SUPABASE_URL / SUPABASE_ANON_KEY are not set")

        url = f"{self.config.rest_url}/{table}"
        try:
            response = requests.request(
                method,
                url,
                params=params,
                json=payload,
                headers=self._headers(prefer),
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning("%s %s failed: %s", method, table, e)
            raise DatabaseError(f"{method} {table} failed: {e}") from e

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DatabaseError(f"{method} {table} returned invalid JSON") from e

    @staticmethod
    def _eq_filters(filters: dict[str, Any]) -> dict[str, str]:
        return {column: f"eq.{value}" for column, value in filters.items()}

    def select(
        self,
        table: str,
        columns: str = "*",
        order: str | None = None,
        **filters: Any,
    ) -> list[dict[str, Any]]:
        """Read rows. ``order`` uses PostgREST syntax, e.g. ``created_at.desc``."""
        params = {"select": columns, **self._eq_filters(filters)}
        if order:
            params["order"] = order
        rows = self._request("GET", table, params=params)
        return rows or []

    def insert(self, table: str, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Insert rows and return them as stored (ids and timestamps filled in)."""
        created = self._request(
            "POST", table, payload=rows, prefer="return=representation",
        )
        return created or []

    def delete(self, table: str, **filters: Any) -> None:
        if not filters:
            # PostgREST rejects unfiltered deletes
            raise DatabaseError(f"refusing to delete from {table} without a filter")
        self._request("DELETE", table, params=self._eq_filters(filters))
