from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment mode: dev or prod
    ENV: Literal["dev", "prod"] = "dev"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True

    # Working directory for clones, generated artifacts and the release
    APP_DIR: Path = Path.home() / ".binance-icons-toolkit"

    # Published icons repository
    REPOSITORY_URL: str = "https://github.com/VadimMalykhin/binance-icons.git"
    ICONS_BASE_URL: str = "https://raw.githubusercontent.com/VadimMalykhin/binance-icons/main"
    CLONE_DEPTH: int = 1
    GIT_CMD: str = "git"

    # Exchange API
    BINANCE_BASE_URL: str = "https://api.binance.com"
    HTTP_TIMEOUT_SECONDS: float = 30.0
    RECV_WINDOW_MS: int = 60000

    # Max parallel icon existence checks
    ICON_CHECK_CONCURRENCY: int = 16

    model_config = SettingsConfigDict(
        env_prefix="ICONS_TOOLKIT_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENV == "prod"

    @property
    def effective_log_level(self) -> str:
        """Return appropriate log level based on environment."""
        if self.is_production:
            # In production, minimum INFO level (ignore DEBUG)
            return self.LOG_LEVEL if self.LOG_LEVEL.upper() != "DEBUG" else "INFO"
        return self.LOG_LEVEL

    @property
    def generated_dir(self) -> Path:
        return self.APP_DIR / "generated"

    @property
    def release_dir(self) -> Path:
        return self.APP_DIR / "release"

    @property
    def config_path(self) -> Path:
        return self.APP_DIR / "bit.json"

    @property
    def log_dir(self) -> Path:
        return self.APP_DIR / "logs"

    def branch_dir(self, branch: str) -> Path:
        """Checkout directory of a cloned repository branch."""
        return self.APP_DIR / "git" / branch


@lru_cache
def get_settings() -> Settings:
    return Settings()
