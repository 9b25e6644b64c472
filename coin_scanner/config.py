"""Application configuration and logging setup."""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)


class Config:
    """Configuration values sourced from the environment."""

    API_BASE_URL: str = os.getenv("API_BASE_URL", "https://api.coingecko.com/api/v3")
    API_KEY: Optional[str] = os.getenv("API_KEY")
    CURRENCY: str = os.getenv("CURRENCY", "usd")
    PER_PAGE: int = int(os.getenv("PER_PAGE", "250"))
    REQUEST_TIMEOUT: int | float = float(os.getenv("REQUEST_TIMEOUT", "10"))
    SEARCH_DEBOUNCE_MS: int = int(os.getenv("SEARCH_DEBOUNCE_MS", "500"))
    REDIS_HOST: str = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT: int = int(os.getenv("REDIS_PORT", "6379"))
    REDIS_DB: int = int(os.getenv("REDIS_DB", "0"))
    REDIS_PASSWORD: Optional[str] = os.getenv("REDIS_PASSWORD")
    REDIS_SSL: bool = os.getenv("REDIS_SSL", "False").lower() == "true"
    REDIS_KEY_PREFIX: str = os.getenv("REDIS_KEY_PREFIX", "coins:")


HEADERS: Dict[str, str] = {
    "Accept": "application/json",
    "User-Agent": "coin-scanner/0.1",
}
