"""Configuration helpers for credentials and defaults."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

LOGGER = logging.getLogger(__name__)

TOKEN_VARIABLES = ("WAQI_API_KEY", "VITE_WAQI_API_KEY")
DEMO_TOKEN = "demo"
FAVORITES_KEY = "aqi_favorites_v1"


def load_waqi_token(env_path: Optional[Path] = None) -> str:
    """Load the WAQI API token from environment variables or a .env file.

    Falls back to WAQI's public ``demo`` token, which only serves a handful
    of stations, so a warning is logged when it is used.
    """
    for name in TOKEN_VARIABLES:
        token = os.environ.get(name)
        if token:
            return token

    env_path = env_path or Path(".env")
    if env_path.exists():
        values = dotenv_values(str(env_path))
        for name in TOKEN_VARIABLES:
            token = values.get(name)
            if token:
                return token

    LOGGER.warning("No WAQI token configured; using the public demo token")
    return DEMO_TOKEN


def get_data_root() -> Path:
    """Return the directory where favorites and other local state live."""
    root = Path(os.environ.get("AIRDASH_DATA_ROOT", "airdash_data"))
    root.mkdir(parents=True, exist_ok=True)
    return root
