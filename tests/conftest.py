# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator

import pytest

import secid
from secid.application.services.identifier_service import IdentifierService
from secid.config.settings import get_settings
from secid.domain.services.identifier_registry import IdentifierRegistry, build_default_registry


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop SECID_* env and cached singletons so tests never bleed into each other."""
    for key in ("SECID_ENVIRONMENT", "SECID_LOG_LEVEL", "SECID_DEFAULT_ON_AMBIGUOUS"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    secid.default_service.cache_clear()
    yield
    get_settings.cache_clear()
    secid.default_service.cache_clear()


@pytest.fixture
def registry() -> IdentifierRegistry:
    """Fresh registry holding the built-in families."""
    return build_default_registry()


@pytest.fixture
def service(registry: IdentifierRegistry) -> IdentifierService:
    """Facade over a fresh default registry."""
    return IdentifierService(registry)
