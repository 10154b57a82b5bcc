"""Configuration for the Flashwords API server."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger("flashwords.config")


@dataclass
class Settings:
    """
    Database, data paths and evaluator thresholds the server needs.

    Defaults resolve relative to the project root.
    Every field is overridable at construction for testing.
    """
    database_url: Optional[str] = None
    synonyms_path: Optional[Path] = None
    cors_origins: List[str] = field(default_factory=list)
    log_level: Optional[str] = None
    near_miss_max_distance: int = 2

    def __post_init__(self):
        project_root = Path(__file__).resolve().parent.parent

        if self.database_url is None:
            self.database_url = os.environ.get("DATABASE_URL", "sqlite:///./flashwords.db")

        if self.synonyms_path is None:
            env_syn = os.environ.get("SYNONYMS_PATH")
            self.synonyms_path = Path(env_syn) if env_syn else project_root / "data" / "synonyms.json"
        self.synonyms_path = Path(self.synonyms_path)

        if not self.cors_origins:
            env_origins = os.environ.get("CORS_ORIGINS", "")
            origins = [o.strip() for o in env_origins.split(",") if o.strip()]
            self.cors_origins = origins or ["http://localhost:3000"]

        if self.log_level is None:
            self.log_level = os.environ.get("LOG_LEVEL", "INFO")
        self.log_level = self.log_level.upper()

        env_distance = os.environ.get("NEAR_MISS_MAX_DISTANCE")
        if env_distance is not None:
            try:
                self.near_miss_max_distance = int(env_distance)
            except ValueError:
                logger.warning("Ignoring NEAR_MISS_MAX_DISTANCE=%r: not an integer", env_distance)
