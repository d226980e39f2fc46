"""
Configuration management for the Ghibli GraphQL facade
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream REST API
    api_base_url: str = "https://ghibliapi.vercel.app"
    http_timeout: float = 10.0  # seconds, applied to every upstream GET

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "GHIBLI_"
        case_sensitive = False


# Global settings instance
settings = Settings()

