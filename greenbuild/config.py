from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./greenbuild.db"
    APP_NAME: str = "GreenBuild Ledger"
    LOG_LEVEL: str = "INFO"

    # Sync badge flips back to "synced" this long after a successful insert
    SYNC_RESET_SECONDS: float = 0.8

    # Net-zero gauge target for the whole project (kg CO2e)
    NET_ZERO_TARGET_KG: float = 50000.0

    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
