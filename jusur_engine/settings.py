"""Application settings"""
from functools import lru_cache
from typing import Optional
import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .deal import SharingModel


class Settings(BaseSettings):
    """Environment settings, read from JUSUR_* variables or a .env file"""

    model_config = SettingsConfigDict(
        env_prefix="JUSUR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Jusur Calc"
    currency_label: str = "EGP"

    # Form defaults
    default_model: SharingModel = SharingModel.SLIDING
    default_transaction_tax_pct: float = Field(default=2.5, ge=0)

    # Paths
    data_dir: str = "./data"

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Cached settings"""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Basic logging setup for the app entry points"""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
