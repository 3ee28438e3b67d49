from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite+pysqlite:///./carwash.db"
    debug: bool = False
    log_level: str = "INFO"
    tax_rate: Decimal = Decimal("0.10")
    timbrado_warning_days: int = 30
    currency: str = "PYG"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="")


settings = Settings()
