"""Settings for the document validation adapter.

Environment variables use the ``DOCUMENT_VALIDATION_`` prefix (e.g.,
``DOCUMENT_VALIDATION_ALLOW_ALPHANUMERIC_CNPJ=false``).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidationSettings(BaseSettings):
    """Policy knobs for document constraints.

    Attributes:
        allow_alphanumeric_cnpj: Accept CNPJs whose root contains letters.
            Set to False to run in legacy (all-decimal) mode. Default: True
        allow_null: Default for constraints that are not given an explicit
            ``allow_null``: whether None or blank strings pass. Default: True
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCUMENT_VALIDATION_",
        extra="ignore",
    )

    allow_alphanumeric_cnpj: bool = Field(
        default=True,
        description="Accept alphanumeric CNPJ roots in addition to legacy decimal ones",
    )
    allow_null: bool = Field(
        default=True,
        description="Whether None or blank input passes optional document constraints",
    )


@lru_cache(maxsize=1)
def get_validation_settings() -> ValidationSettings:
    """Get cached ValidationSettings instance.

    Clear cache with ``get_validation_settings.cache_clear()`` for testing.
    """
    return ValidationSettings()
