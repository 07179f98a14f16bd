"""Application configuration management."""

import logging
import sys
from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings

SUPPORTED_FORMATS = ("svg", "png")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Keys
    figma_access_token: str = ""

    # Export target
    figma_file_key: str = "7PlNcJ5BjWztGqYNYfsH2D"
    figma_node_ids: str = "111:4293"
    figma_output_dir: str = "public/assets/figma-by-name"
    figma_format: str = "svg"

    # Figma API
    figma_api_base_url: str = "https://api.figma.com/v1"
    figma_node_depth: int = 10
    figma_max_attempts: int = 3
    request_timeout: float = 30.0

    # Application
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("figma_format")
    @classmethod
    def normalize_format(cls, value: str) -> str:
        value = (value or "svg").strip().lower()
        if value not in SUPPORTED_FORMATS:
            raise ValueError(f"FIGMA_FORMAT must be one of {', '.join(SUPPORTED_FORMATS)}, got {value!r}")
        return value

    @property
    def node_id_list(self) -> List[str]:
        """Configured root node IDs, in order."""
        return [node_id.strip() for node_id in self.figma_node_ids.split(",") if node_id.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Send progress and warnings to stderr."""
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )
