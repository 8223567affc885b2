"""Card service configuration from environment variables."""

from __future__ import annotations

import os


class Settings:
    """Card service settings, read from environment variables with defaults.

    Built once at startup and handed to :func:`bizbuz.server.app.create_app`;
    handlers read it from ``app.state.settings``.
    """

    def __init__(self) -> None:
        self.host: str = os.getenv("BIZBUZ_HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "3013"))
        self.prof_base_url: str = os.getenv("PROF_BASE_URL", "http://localhost:3012").rstrip("/")
        # Upper bound on a single profile service lookup (seconds)
        self.profile_timeout: float = float(os.getenv("BIZBUZ_PROFILE_TIMEOUT", "10.0"))
        self.log_level: str = os.getenv("BIZBUZ_LOG_LEVEL", "INFO").upper()
        self.debug: bool = os.getenv("BIZBUZ_DEBUG", "").lower() in ("1", "true", "yes")
