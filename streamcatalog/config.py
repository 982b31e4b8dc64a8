"""
Application Configuration

Load settings from environment variables with validation.
"""

from functools import lru_cache
from typing import List, Optional
from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""
    
    # Environment
    environment: str = "development"
    debug: bool = True
    
    # Logging
    log_level: Optional[str] = None  # defaults to DEBUG when debug is on
    log_colors: bool = True
    
    # Rate Limiting
    rate_limit_per_minute: int = 60
    
    # Streaming defaults
    default_stream_quality: float = 1080
    default_subtitles: List[str] = Field(
        default_factory=lambda: ["English", "French", "Spanish"]
    )
    
    # Downloads
    download_quality: str = "1080p"
    episode_download_mib: int = 500  # per episode
    
    # Profiles
    default_avatar: str = "default-avatar.png"
    
    # Load The Matrix / Stranger Things / Planet Earth on startup
    seed_sample_data: bool = True
    
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
