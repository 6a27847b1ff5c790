from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "./content"
    PUBLIC_DIR: str = "./public"
    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")

    # Site
    SITE_TITLE: str = "DevDaze Blog"

    # Markdown
    MARKDOWN_EXTENSIONS: List[str] = ["extra"]

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def public_path(self) -> Path:
        return Path(self.PUBLIC_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
