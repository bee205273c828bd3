"""
Seeder configuration loaded from environment variables.

Every Firebase key falls back to a development literal so the seeder can be
pointed at the local emulator without any setup.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Firebase / Firestore settings loaded from .env and environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="FIREBASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    API_KEY: str = "demo-api-key"
    AUTH_DOMAIN: str = "emotodo-dev.firebaseapp.com"
    PROJECT_ID: str = "emotodo-dev"
    STORAGE_BUCKET: str = "emotodo-dev.appspot.com"
    MESSAGING_SENDER_ID: str = "123456789"
    APP_ID: str = "1:123456789:web:abcdef"

    # Read without the FIREBASE_ prefix, same variable the Google client uses
    EMULATOR_HOST: str = Field(
        default="",
        validation_alias=AliasChoices("FIRESTORE_EMULATOR_HOST", "FIREBASE_EMULATOR_HOST"),
    )
    EMOTIONS_COLLECTION: str = "emotions"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @property
    def firebase_options(self) -> dict[str, str]:
        """Web-app style config mapping (``apiKey``, ``authDomain``, ...)."""
        return {
            "apiKey": self.API_KEY,
            "authDomain": self.AUTH_DOMAIN,
            "projectId": self.PROJECT_ID,
            "storageBucket": self.STORAGE_BUCKET,
            "messagingSenderId": self.MESSAGING_SENDER_ID,
            "appId": self.APP_ID,
        }

    @property
    def uses_emulator(self) -> bool:
        return bool(self.EMULATOR_HOST)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    """
    Return cached seeder settings. Uses LRU cache to avoid re-loading from env.
    """
    return Settings()
