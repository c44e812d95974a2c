import os

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://geoip.maxmind.com/geoip/v2.0"


class Settings(BaseModel):
    """Runtime settings for the lookup service, read from the environment."""

    user_id: int = 0
    license_key: str = ""
    languages: list[str] = Field(default_factory=lambda: ["en"])
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 5.0
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        languages = [lang.strip() for lang in os.getenv("GEOIP2_LANGUAGES", "en").split(",") if lang.strip()]
        return cls(
            user_id=int(os.getenv("GEOIP2_USER_ID", "0")),
            license_key=os.getenv("GEOIP2_LICENSE_KEY", ""),
            languages=languages or ["en"],
            base_url=os.getenv("GEOIP2_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=float(os.getenv("GEOIP2_TIMEOUT_SECONDS", "5.0")),
            host=os.getenv("APP_HOST", "127.0.0.1"),
            port=int(os.getenv("APP_PORT", "8000")),
        )
