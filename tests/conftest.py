"""Shared fixtures for integration tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from examples.customer_registry import CustomerRegistry

from fundamenta.infra.validation import get_validation_settings


@pytest.fixture()
def registry() -> CustomerRegistry:
    """Fresh in-memory Customer Registry for each test."""
    return CustomerRegistry()


@pytest.fixture(autouse=True)
def _isolated_config() -> Iterator[None]:
    get_validation_settings.cache_clear()
    yield
    get_validation_settings.cache_clear()
    structlog.reset_defaults()
    library_logger = logging.getLogger("fundamenta")
    library_logger.handlers.clear()
    library_logger.setLevel(logging.NOTSET)
