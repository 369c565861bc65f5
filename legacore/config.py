from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be configured via .env file or environment variables.
    One deployment serves one tenant, selected by TENANT_SLUG.
    """

    # Database
    DATABASE_URL: str
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # Application
    APP_NAME: str = "LegaCore Platform API"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "production"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Tenant served by this deployment
    TENANT_SLUG: str = "admin-portal"

    # Credentials
    PASSWORD_HASH_ROUNDS: int = 25000

    # AI
    AI_PROVIDER: str = "mock"
    OPPORTUNITY_KEYWORDS: str = "AI,ML,cloud,cybersecurity,data,analytics"

    # CORS
    CORS_ORIGINS: str = ""
    CORS_ALLOW_CREDENTIALS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS from comma-separated string"""
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def opportunity_keywords_list(self) -> list[str]:
        return [kw.strip() for kw in self.OPPORTUNITY_KEYWORDS.split(",") if kw.strip()]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"


# Global settings instance
settings = Settings()
