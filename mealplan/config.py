from __future__ import annotations

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Centralized configuration for the meal plan backend."""

    def __init__(self) -> None:
        self.openai_api_url: str = os.environ.get(
            "OPENAI_API_URL", "https://api.openai.com/v1/chat/completions"
        )
        self.openai_model: str = os.environ.get("OPENAI_MODEL", "gpt-4o")
        self.openai_timeout: float = float(os.environ.get("OPENAI_TIMEOUT", "60"))
        temperature = (os.environ.get("OPENAI_TEMPERATURE") or "").strip()
        self.openai_temperature: Optional[float] = float(temperature) if temperature else None

        self.meal_plan_max_attempts: int = int(
            os.environ.get("MEAL_PLAN_MAX_ATTEMPTS") or "5"
        )
        # Swaps are answered from a single completion, no corrective retries.
        self.swap_meal_max_attempts: int = int(
            os.environ.get("SWAP_MEAL_MAX_ATTEMPTS") or "1"
        )
        if self.meal_plan_max_attempts < 1:
            raise ValueError("MEAL_PLAN_MAX_ATTEMPTS must be >= 1")
        if self.swap_meal_max_attempts < 1:
            raise ValueError("SWAP_MEAL_MAX_ATTEMPTS must be >= 1")
        self.delimiter: str = os.environ.get("MEAL_PLAN_DELIMITER") or ";"
        if len(self.delimiter) != 1:
            raise ValueError("MEAL_PLAN_DELIMITER must be a single character")

        self.host: str = os.environ.get("MEALPLAN_HOST") or os.environ.get("HOST") or "127.0.0.1"
        self.port_raw: str = os.environ.get("MEALPLAN_PORT") or os.environ.get("PORT") or "8080"
        self.log_level: str = (os.environ.get("MEALPLAN_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("CORS_ORIGIN", "http://localhost:3000")
        self.cors_origins: List[str] = [
            origin.strip() for origin in cors.split(",") if origin.strip()
        ]

    @property
    def openai_api_key(self) -> Optional[str]:
        # Looked up per request so a rotated key is picked up without a restart.
        key = (os.environ.get("OPENAI_API_KEY") or "").strip()
        return key or None


settings = Settings()
