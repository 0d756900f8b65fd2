"""
Configuration for the CSV store import.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IngestionConfig:
    """
    Where the import reads from and how much it sends per insert call.
    """

    input_dir: Path = Path("data/import")
    input_filename: str = "stores.csv"
    batch_size: int = 100

    @property
    def input_path(self) -> Path:
        return self.input_dir / self.input_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
