"""Unit tests for TranslationGateway.translate().

Tests cover:
  - Validation: any missing/blank field -> ValidationError, provider untouched
  - Code resolution: names mapped through the catalog, unknown names pass through
  - Result: translated text + ORIGINAL language strings echoed
  - Provider failure: ProviderError propagates, exactly one call, no retry
  - No caching: repeated requests hit the provider every time
"""

from __future__ import annotations

import pytest

from lingoproxy.core.exceptions import ProviderError, ValidationError
from lingoproxy.services.language.catalog import LanguageCatalog
from lingoproxy.services.translation.base import TranslationResult
from lingoproxy.services.translation.gateway import TranslationGateway
from tests.conftest import MockTranslationProvider


class TestValidation:
    """Missing fields are rejected before the provider is contacted."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("text", "from_lang", "to_lang", "missing"),
        [
            (None, "English", "Spanish", ["text"]),
            ("hello", None, "Spanish", ["fromLang"]),
            ("hello", "English", None, ["toLang"]),
            ("", "English", "Spanish", ["text"]),
            ("   ", "English", "Spanish", ["text"]),
            (None, "English", None, ["text", "toLang"]),
            (None, None, None, ["text", "fromLang", "toLang"]),
        ],
    )
    async def test_missing_fields_raise(
        self,
        gateway: TranslationGateway,
        mock_provider: MockTranslationProvider,
        text: str | None,
        from_lang: str | None,
        to_lang: str | None,
        missing: list[str],
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await gateway.translate(text, from_lang, to_lang)

        assert exc_info.value.missing == missing
        assert exc_info.value.status_code == 400
        assert mock_provider.translate_calls == []

    @pytest.mark.asyncio
    async def test_error_message_names_fields(self, gateway: TranslationGateway) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await gateway.translate(None, "English", None)
        assert exc_info.value.message == "Missing required fields: text, toLang"


class TestTranslate:
    @pytest.mark.asyncio
    async def test_success_echoes_original_names(
        self, gateway: TranslationGateway
    ) -> None:
        result = await gateway.translate("Hello", "English", "Spanish")
        assert result == TranslationResult(
            translated_text="Hola", from_lang="English", to_lang="Spanish"
        )

    @pytest.mark.asyncio
    async def test_names_resolved_to_codes(
        self, gateway: TranslationGateway, mock_provider: MockTranslationProvider
    ) -> None:
        await gateway.translate("Hello", "English", "Spanish")
        assert mock_provider.translate_calls == [
            {"text": "Hello", "source_code": "en", "target_code": "es"}
        ]

    @pytest.mark.asyncio
    async def test_unknown_names_pass_through_as_codes(
        self, gateway: TranslationGateway, mock_provider: MockTranslationProvider
    ) -> None:
        result = await gateway.translate("Hello", "en", "pt-BR")
        call = mock_provider.translate_calls[0]
        assert call["source_code"] == "en"
        assert call["target_code"] == "pt-BR"
        assert result.from_lang == "en"
        assert result.to_lang == "pt-BR"

    @pytest.mark.asyncio
    async def test_no_caching(
        self, gateway: TranslationGateway, mock_provider: MockTranslationProvider
    ) -> None:
        for _ in range(3):
            await gateway.translate("Hello", "English", "Spanish")
        assert len(mock_provider.translate_calls) == 3


class TestProviderFailure:
    @pytest.mark.asyncio
    async def test_provider_error_propagates_without_retry(
        self, catalog: LanguageCatalog
    ) -> None:
        provider = MockTranslationProvider(error=ProviderError())
        gateway = TranslationGateway(provider=provider, catalog=catalog)

        with pytest.raises(ProviderError):
            await gateway.translate("Hello", "English", "Spanish")

        assert len(provider.translate_calls) == 1
