"""
AssetScan Engine Configuration
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Matching
    match_threshold: float = Field(default=60.0, ge=0.0, le=100.0)
    digest_bytes: int = Field(default=8, ge=1, le=32)

    # Catalogs
    asset_catalog_path: str = "data/asset_classification_patterns.json"
    equipment_catalog_path: str = "data/model_man_pattern.json"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "info"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
