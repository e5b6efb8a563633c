from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Safe defaults; override via environment or .env file
    APP_NAME: str = "Job Portal API"
    APP_ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: str = "http://localhost:5173"  # comma-separated

    # MongoDB; MONGODB_URI wins over the individual parts when set
    MONGODB_URI: Optional[str] = None
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_CLUSTER_HOST: str = "cluster0.kvlax.mongodb.net"
    DB_NAME: str = "jobPortal"
    DB_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # Auth cookie
    ACCESS_TOKEN_SECRET: str = "change-me"
    TOKEN_TTL_SECONDS: int = 3600
    COOKIE_SECURE: bool = False  # must be True behind https in production

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    @property
    def mongo_uri(self) -> str:
        if self.MONGODB_URI:
            return self.MONGODB_URI
        return (
            f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASSWORD)}"
            f"@{self.DB_CLUSTER_HOST}/?retryWrites=true&w=majority&appName=Cluster0"
        )

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(',') if o.strip()]


settings = Settings()
