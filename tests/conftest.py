"""Shared pytest fixtures for the LingoProxy test suite.

Provides:
  - MockTranslationProvider: records calls, returns or raises on demand
  - mock_provider: default provider returning "Hola"
  - gateway: TranslationGateway wired to mock_provider
  - client: FastAPI TestClient with the gateway dependency overridden

No test talks to the real MyMemory API.
"""

from __future__ import annotations

from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient

from lingoproxy.api.deps import get_translation_gateway
from lingoproxy.main import app
from lingoproxy.services.language.catalog import LanguageCatalog
from lingoproxy.services.language.detector import LanguageDetector
from lingoproxy.services.translation.base import TranslationProvider
from lingoproxy.services.translation.gateway import TranslationGateway


# ---------------------------------------------------------------------------
# Mock Translation Provider
# ---------------------------------------------------------------------------


class MockTranslationProvider(TranslationProvider):
    """Mock provider for testing. Returns a fixed text or raises ``error``."""

    def __init__(
        self,
        translated_text: str = "Hola",
        error: Exception | None = None,
    ) -> None:
        self._translated_text = translated_text
        self._error = error
        self.translate_calls: list[dict[str, Any]] = []

    async def translate(self, text: str, source_code: str, target_code: str) -> str:
        self.translate_calls.append(
            {
                "text": text,
                "source_code": source_code,
                "target_code": target_code,
            }
        )
        if self._error is not None:
            raise self._error
        return self._translated_text


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def catalog() -> LanguageCatalog:
    return LanguageCatalog()


@pytest.fixture
def detector() -> LanguageDetector:
    return LanguageDetector()


@pytest.fixture
def mock_provider() -> MockTranslationProvider:
    """Mock provider fixture returning "Hola"."""
    return MockTranslationProvider()


@pytest.fixture
def gateway(
    mock_provider: MockTranslationProvider, catalog: LanguageCatalog
) -> TranslationGateway:
    return TranslationGateway(provider=mock_provider, catalog=catalog)


@pytest.fixture
def client(gateway: TranslationGateway) -> Iterator[TestClient]:
    """TestClient whose /api/translate uses the mock-backed gateway.

    The lifespan is not entered, so no real provider is built.
    """
    app.dependency_overrides[get_translation_gateway] = lambda: gateway
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
