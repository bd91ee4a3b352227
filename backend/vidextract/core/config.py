"""Application configuration."""
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent.parent.parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    app_name: str = "Product Video Extractor"
    api_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    static_root: str = str(Path(__file__).parent.parent.parent.parent / "public")

    # CORS - accepts comma-separated string from env
    cors_origins: str = "*"

    # Outbound HTTP (seconds)
    static_fetch_timeout: float = 15.0
    download_timeout: float = 60.0
    connect_timeout: float = 10.0
    block_private_networks: bool = False
    user_agent: str = DEFAULT_USER_AGENT

    # Browser simulation (delays in seconds)
    headless: bool = True
    viewport_width: int = 1280
    viewport_height: int = 900
    locale: str = "en-GB"
    navigation_timeout: float = 60.0
    settle_delay: float = 2.5
    tab_delay: float = 3.0
    scroll_steps: int = 3
    scroll_distance: int = 1600
    scroll_delay: float = 2.0
    final_delay: float = 5.0

    @property
    def cors_origins_list(self) -> list[str]:
        """Return CORS origins as a list."""
        origins = [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        return origins or ["*"]

    @property
    def static_path(self) -> Path:
        return Path(self.static_root)


settings = Settings()


def get_settings() -> Settings:
    """Dependency returning the process-wide settings."""
    return settings
