"""Fundamenta Infra Observability -- structlog logging with document redaction."""

from __future__ import annotations

from fundamenta.infra.observability.logging import (
    DocumentRedactionProcessor,
    LoggingSettings,
    SensitiveDataProcessor,
    configure_logging,
    get_logger,
)

__all__ = [
    "DocumentRedactionProcessor",
    "LoggingSettings",
    "SensitiveDataProcessor",
    "configure_logging",
    "get_logger",
]
