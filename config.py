from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Using pydantic_settings so a local `.env` file can override defaults.
    """
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    # MongoDB Settings
    MONGO_DB_URL: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "crm"

    # JWT Settings for application tokens
    JWT_SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256" # Default algorithm
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Comma separated list of allowed browser origins
    CORS_ORIGINS: str = "http://localhost:3000"

    # List views
    LIST_PAGE_SIZE: int = 10

    # Custom field schemas are re-read from MongoDB after this many seconds
    SCHEMA_CACHE_TTL_SECONDS: int = 30

    # Allowed difference between a submitted total and the recomputed one
    TOTAL_TOLERANCE: float = 0.01

    # Printed on exported quotations
    COMPANY_NAME: str = "CRM"

    LOG_LEVEL: str = "INFO"

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

settings = Settings()
