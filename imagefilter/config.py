from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List

class Settings(BaseSettings):
    APP_NAME: str = "Image Filter API"
    HOST: str = "0.0.0.0"
    PORT: int = 8082
    CORS_ALLOW_ORIGINS: str = "*"
    JWT_SECRET: str = ""
    JWT_ALGORITHMS: str = "HS256"
    REQUIRE_AUTH: bool = True
    TMP_DIR: str = "imagefilter/tmp"
    FETCH_TIMEOUT: float = 20.0
    MAX_DOWNLOAD_BYTES: int = 20 * 1024 * 1024
    FILTER_SIZE: int = 256
    FILTER_QUALITY: int = 60
    FILTER_MAX_CONCURRENCY: int = 4

    model_config = SettingsConfigDict(env_file=".env", frozen=True, extra="ignore")

    @property
    def jwt_algorithms(self) -> List[str]:
        return [a.strip() for a in self.JWT_ALGORITHMS.split(",") if a.strip()]

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",")] if self.CORS_ALLOW_ORIGINS else ["*"]

@lru_cache
def get_settings() -> Settings:
    return Settings()
