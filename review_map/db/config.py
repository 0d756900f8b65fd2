from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class DatabaseConfig:
    url: str = os.getenv("SUPABASE_URL", "")
    api_key: str = os.getenv("SUPABASE_ANON_KEY", "")
    rest_path: str = "/rest/v1"
    timeout: float = 10.0

    @property
    def enabled(self) -> bool:
        return bool(self.url and self.api_key)

    @property
    def rest_url(self) -> str:
        return self.url.rstrip("/") + self.rest_path


DEFAULT_DATABASE_CONFIG = DatabaseConfig()
