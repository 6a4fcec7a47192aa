from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Pyme Normalization API", alias="APP_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    sku_prefix: str = Field(default="PROD", alias="SKU_PREFIX")
    cash_rounding_unit: int = Field(default=10, gt=0, alias="CASH_ROUNDING_UNIT")
    pii_log_redaction_enabled: bool = Field(default=True, alias="PII_LOG_REDACTION_ENABLED")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
