from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
import os


class Config(BaseSettings):
    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Invoice display
    currency_symbol: str = Field(default="₹", alias="CURRENCY_SYMBOL")
    default_invoice_title: str = Field(
        default="GST Invoice", alias="DEFAULT_INVOICE_TITLE"
    )

    # CORS (comma-separated list of allowed origins)
    cors_origins: str = Field(
        default="http://localhost,http://localhost:5173", alias="CORS_ORIGINS"
    )

    is_production: bool = (
        os.getenv("ENVIRONMENT", "development").lower() == "production"
    )

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


# Instantiate the settings
config = Config()
