"""Structured logging configuration using structlog.

This module provides environment-aware structured logging with:
- JSON output for production environments
- Console output with colors for development
- Sensitive data redaction for secrets
- Redaction of Brazilian personal documents (CPF, CNPJ, phone numbers)

Usage:
    # During application startup
    from fundamenta.infra.observability.logging import configure_logging
    configure_logging()

    # In application code
    from fundamenta.infra.observability import get_logger
    logger = get_logger(__name__)
    logger.info("customer_registered", cpf=customer.cpf, phone=customer.phone)
    # cpf='***.982.247-25' phone='+55******4321'
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fundamenta.domain.documents import Cnpj, Cpf, DocumentFormat, Phone

if TYPE_CHECKING:
    from collections.abc import MutableMapping

# Type alias for structlog processor
Processor = structlog.types.Processor

# Sensitive field names for redaction
SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "password",
        "token",
        "authorization",
        "api_key",
        "apikey",
        "secret",
        "credit_card",
        "bearer",
        "credential",
    }
)

# Field names that carry tax identifiers (CPF or CNPJ)
TAX_ID_FIELDS: frozenset[str] = frozenset({"cpf", "cnpj", "document", "tax_id"})

# Field names that carry phone numbers
PHONE_FIELDS: frozenset[str] = frozenset({"phone", "mobile", "telefone", "celular"})

REDACTED_VALUE: str = "***REDACTED***"

LIBRARY_LOGGER_NAME = "fundamenta"


class LoggingSettings(BaseSettings):
    """Logging configuration settings from environment variables.

    Loads configuration from environment variables:
    - LOG_LEVEL: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment name (development, staging, production, test)

    Attributes:
        log_level: Minimum log level to output. Default: INFO
        environment: Environment name for format selection. Default: development

    Example:
        >>> settings = LoggingSettings()
        >>> settings.use_json_logs
        False  # development uses console format

        >>> settings = LoggingSettings(log_level="DEBUG", environment="production")
        >>> settings.use_json_logs
        True  # production uses JSON format
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Minimum log level to output",
    )
    environment: str = Field(
        default="development",
        alias="ENVIRONMENT",
        description="Environment name for format selection",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return str(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level.

        Raises:
            ValueError: If log level is not a valid Python logging level.
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid_levels:
            msg = f"log_level must be one of {valid_levels}"
            raise ValueError(msg)
        return v

    @property
    def use_json_logs(self) -> bool:
        """True for production environment, False otherwise."""
        return self.environment == "production"

    @property
    def log_level_int(self) -> int:
        """Convert log level string to logging module constant."""
        return getattr(logging, self.log_level, logging.INFO)


class SensitiveDataProcessor:
    """Structlog processor to redact sensitive fields from log context.

    Redacts values for fields matching:
    1. Exact field names in SENSITIVE_FIELDS (case-insensitive)
    2. Field names containing "password" or "token" as substrings

    Example:
        >>> processor = SensitiveDataProcessor()
        >>> event_dict = {"event": "login", "password": "secret123"}
        >>> result = processor(None, "info", event_dict)
        >>> result["password"]
        '***REDACTED***'
    """

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        """Redact sensitive fields in event_dict."""
        for key in list(event_dict.keys()):
            if self._is_sensitive(key):
                event_dict[key] = REDACTED_VALUE
        return event_dict

    def _is_sensitive(self, key: str) -> bool:
        key_lower = key.lower()
        # Exact match against known sensitive field names
        if key_lower in SENSITIVE_FIELDS:
            return True
        # Substring match for compound names (e.g., user_password, auth_token)
        return "password" in key_lower or "token" in key_lower


class DocumentRedactionProcessor:
    """Structlog processor that keeps personal documents out of log output.

    - Cpf and Cnpj values are rendered in their SAFE format.
    - Phone values are rendered masked (last four digits only).
    - Strings under document-like keys are parsed and redacted the same
      way. The key picks the parser: phone keys (``phone``,
      ``customer_mobile``...) are read as phones only, tax id keys
      (``cpf``, ``tax_id``...) as CPF or CNPJ only. Strings that do not
      parse are replaced with REDACTED_VALUE, since a typo.d document is
      still personal data.

    Example:
        >>> processor = DocumentRedactionProcessor()
        >>> processor(None, "info", {"event": "x", "cpf": "529.982.247-25"})["cpf"]
        '***.982.247-25'
    """

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        """Redact document values in event_dict."""
        for key, value in list(event_dict.items()):
            if isinstance(value, Cpf | Cnpj):
                event_dict[key] = value.format(DocumentFormat.SAFE)
            elif isinstance(value, Phone):
                event_dict[key] = value.masked
            elif isinstance(value, str):
                if self._matches(key, PHONE_FIELDS):
                    event_dict[key] = self._redact_phone(value)
                elif self._matches(key, TAX_ID_FIELDS):
                    event_dict[key] = self._redact_tax_id(value)
        return event_dict

    def _matches(self, key: str, names: frozenset[str]) -> bool:
        key_lower = key.lower()
        if key_lower in names:
            return True
        return any(key_lower.endswith(f"_{name}") for name in names)

    def _redact_tax_id(self, value: str) -> str:
        document = Cpf.try_parse(value) or Cnpj.try_parse(value)
        if document is None:
            return REDACTED_VALUE
        return document.format(DocumentFormat.SAFE)

    def _redact_phone(self, value: str) -> str:
        phone = Phone.try_parse(value)
        if phone is None:
            return REDACTED_VALUE
        return phone.masked


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance.

    Returns singleton LoggingSettings instance, cached for efficiency.
    Clear cache with ``get_logging_settings.cache_clear()`` for testing.
    """
    return LoggingSettings()


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog for structured logging.

    Configures structlog with:
    - Context variable merging
    - Log level filtering
    - ISO 8601 timestamps (UTC)
    - Sensitive data and document redaction
    - Environment-aware rendering (JSON for production, console for development)

    Records from the stdlib ``fundamenta`` logger used by the library
    modules (``cpf_rejected``, ``phone_rejected``...) are rendered through
    the same processors by a ``ProcessorFormatter`` handler, at the same
    level. Calling this again replaces that handler.

    Should be called once during application startup.

    Args:
        settings: Optional LoggingSettings instance. If not provided,
            settings are loaded from environment variables.
    """
    if settings is None:
        settings = get_logging_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        SensitiveDataProcessor(),
        DocumentRedactionProcessor(),
    ]

    renderer: Processor
    if settings.use_json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            *shared_processors,
            # Add format_exc_info before renderer for exception formatting
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_int),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(),
            *shared_processors,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = _LibraryHandler(sys.stdout)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    for existing in [h for h in library_logger.handlers if isinstance(h, _LibraryHandler)]:
        library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(settings.log_level_int)


class _LibraryHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler installed by configure_logging on the library logger."""


def get_logger(name: str | None = None) -> structlog.typing.WrappedLogger:
    """Get a structlog logger bound to the given name.

    Args:
        name: Logger name (typically __name__ from calling module).
            If None, returns unbound logger.

    Returns:
        Bound structlog logger with name context.

    Example:
        >>> from fundamenta.infra.observability import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("company_linked", cnpj="11.444.777/0001-61")
    """
    logger = structlog.get_logger()
    if name is not None:
        logger = logger.bind(logger=name)
    return logger
