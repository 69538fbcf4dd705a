"""Central config loaded from environment variables."""
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import Optional

BASE_DIR = Path(__file__).parent.parent  # repo root


class Settings(BaseSettings):
    # Paths
    storage_dir: Path = BASE_DIR / "data" / "storage"  # per-device records
    static_dir: Path = BASE_DIR / "static"  # prebuilt UI, optional

    # Simulated latency before an analysis run returns
    analysis_delay: float = 2.0

    # Ranking parameters
    top_n_predictions: int = 3
    max_confidence: int = 95
    confidence_jitter: float = 20.0  # upper bound (exclusive) of uniform jitter
    fallback_confidence: int = 65
    random_seed: Optional[int] = None  # pin to reproduce confidence values

    # Lookup parameters
    min_query_length: int = 2
    max_suggestions: int = 10
    max_relevant_doctors: int = 2
    top_symptoms: int = 8

    log_level: str = "INFO"

    class Config:
        env_prefix = "MEDPREDICT_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

# Fixed storage keys
PROFILE_KEY = "medapp_user"
HEALTH_CHECKS_KEY = "medapp_health_checks"
