"""
Configuration management for Carhub services
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CARHUB_",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8080  # car service
    reviews_port: int = 8081  # reviews subgraph
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    # Car service
    cars_default_limit: int = 10

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()


def get_service_port(service: str) -> int:
    """Get the default port for a service name."""
    if service == "reviews":
        return settings.reviews_port
    return settings.api_port
