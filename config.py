from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = "http://localhost:8080/registrations"


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    return float(raw)


@dataclass(frozen=True)
class AppConfig:

    api_base_url: str = DEFAULT_API_URL
    # None means requests waits indefinitely
    request_timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Build the application configuration from environment variables so the
        front-end can point at another backend without changing code.
        """
        return cls(
            api_base_url=os.getenv("REGISTRATIONS_API_URL", DEFAULT_API_URL).rstrip("/"),
            request_timeout=_optional_float(os.getenv("REGISTRATIONS_API_TIMEOUT")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
