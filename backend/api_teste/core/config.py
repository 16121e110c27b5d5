from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "API Teste"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "API simples com rotas interessantes para testes e desenvolvimento"
    API_PREFIX: str = "/api"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Health check
    HEALTH_MIN_FREE_MEMORY_PCT: float = 10.0

    class Config:
        env_file = ".env"

settings = Settings()
