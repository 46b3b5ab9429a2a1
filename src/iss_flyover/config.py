"""Application configuration loaded from environment variables."""

import os
from dataclasses import dataclass

DEFAULT_IP_SERVICE_URL = "https://api.ipify.org/?format=json"
DEFAULT_GEO_SERVICE_URL = "https://freegeoip.app/json/{ip}"
DEFAULT_FLYOVER_SERVICE_URL = (
    "http://api.open-notify.org/iss-pass.json?lat={latitude}&lon={longitude}"
)


@dataclass(frozen=True, slots=True)
class Settings:
    """Application settings populated from environment variables."""

    ip_service_url: str = DEFAULT_IP_SERVICE_URL
    geo_service_url: str = DEFAULT_GEO_SERVICE_URL
    flyover_service_url: str = DEFAULT_FLYOVER_SERVICE_URL
    request_timeout: float | None = None
    max_workers: int = 4
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables.

        ``REQUEST_TIMEOUT_SECONDS`` is optional; when unset, requests wait
        indefinitely, which is the underlying HTTP client's default.

        Returns:
            A frozen Settings instance with values from the environment.
        """
        timeout = os.getenv("REQUEST_TIMEOUT_SECONDS")
        return cls(
            ip_service_url=os.getenv("IP_SERVICE_URL", DEFAULT_IP_SERVICE_URL),
            geo_service_url=os.getenv("GEO_SERVICE_URL", DEFAULT_GEO_SERVICE_URL),
            flyover_service_url=os.getenv("FLYOVER_SERVICE_URL", DEFAULT_FLYOVER_SERVICE_URL),
            request_timeout=float(timeout) if timeout else None,
            max_workers=int(os.getenv("MAX_WORKERS", "4")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
