"""Translation gateway — validation, code resolution, one provider call.

TranslationGateway.translate() does exactly these things in order:
1. Reject the request if text, from_lang or to_lang is missing or blank.
   The provider is not contacted.
2. Resolve both language names to provider codes via the catalog.
3. Call the provider once. No retry, no cache.
4. Return the translation with the caller's original language strings.
"""

from __future__ import annotations

import structlog

from lingoproxy.core.exceptions import ValidationError
from lingoproxy.services.language.catalog import LanguageCatalog
from lingoproxy.services.translation.base import TranslationProvider, TranslationResult

logger = structlog.get_logger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class TranslationGateway:
    """Fronts a TranslationProvider with the service's request contract."""

    def __init__(self, provider: TranslationProvider, catalog: LanguageCatalog) -> None:
        self._provider = provider
        self._catalog = catalog

    async def translate(
        self,
        text: str | None,
        from_lang: str | None,
        to_lang: str | None,
    ) -> TranslationResult:
        """Translate text from one language to another.

        Args:
            text: Text to translate.
            from_lang: Source language name ("English") or raw code ("en").
            to_lang: Target language name or raw code.

        Returns:
            TranslationResult echoing from_lang and to_lang as given.

        Raises:
            ValidationError: A required field is missing or blank.
            ProviderError: The provider failed or replied with an unusable body.
        """
        # Wire names, so the 400 message matches what the client sent.
        missing = [
            field
            for field, value in (("text", text), ("fromLang", from_lang), ("toLang", to_lang))
            if _is_blank(value)
        ]
        if missing:
            logger.info("translate_rejected", missing=missing)
            raise ValidationError(missing=missing)

        source_code = self._catalog.code_for(from_lang)
        target_code = self._catalog.code_for(to_lang)

        translated = await self._provider.translate(text, source_code, target_code)

        logger.info(
            "translate_ok",
            source_code=source_code,
            target_code=target_code,
            text_len=len(text),
        )
        return TranslationResult(
            translated_text=translated,
            from_lang=from_lang,
            to_lang=to_lang,
        )
