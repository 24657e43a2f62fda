# classdivider/config/settings.py

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "development"
    DEVIATION_DEFAULT: int = 1
    GROUP_SIZE_DEFAULT: int = 4
    SIMULATION_CLASS_SIZE: int = 30
    RANDOM_SEED: Optional[int] = None
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CLASSDIVIDER_", extra="ignore")


settings = Settings()
