# backend/config.py
from __future__ import annotations
from pathlib import Path
import os
from dotenv import load_dotenv

# Load exactly backend/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)


def get_settings():
    return Settings


class Settings:
    # Instances at or below this size are solved exhaustively
    EXACT_THRESHOLD: int = int(os.getenv("EXACT_THRESHOLD", "9"))

    # Heuristic tuning
    TWO_OPT_MAX_PASSES: int = int(os.getenv("TWO_OPT_MAX_PASSES", "24"))
    MAX_START_CANDIDATES: int = int(os.getenv("MAX_START_CANDIDATES", "5"))

    # Exact runtime estimate (0.5 ms per permutation baseline)
    EXACT_SECONDS_PER_PERMUTATION: float = float(
        os.getenv("EXACT_SECONDS_PER_PERMUTATION", "0.0005")
    )
    EXACT_PERMUTATION_CAP: float = float(os.getenv("EXACT_PERMUTATION_CAP", "1e9"))

    ENABLE_HAVERSINE: str = os.getenv("ENABLE_HAVERSINE", "1")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000")


settings = Settings
