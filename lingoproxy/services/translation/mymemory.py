"""MyMemory translation provider.

Free public API, no key required:
    GET https://api.mymemory.translated.net/get?q=<text>&langpair=<src>|<tgt>

A usable reply is a JSON object with responseData.translatedText. MyMemory
reports some rejections (bad language pair, quota) with HTTP 200 and a
non-200 responseStatus; those are failures too.

All calls have a bounded timeout. Provider details are logged here and
never placed in the ProviderError message.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from lingoproxy.core.exceptions import ProviderError
from lingoproxy.services.translation.base import TranslationProvider

logger = structlog.get_logger(__name__)

UNAVAILABLE_MESSAGE = "Translation service unavailable"
FAILED_MESSAGE = "Translation failed"

_SNIPPET_CHARS = 200


def _extract_translation(payload: Any) -> str | None:
    """Pull responseData.translatedText out of a MyMemory reply, or None."""
    if not isinstance(payload, dict):
        return None
    status = payload.get("responseStatus")
    if status is not None and str(status) != "200":
        return None
    data = payload.get("responseData")
    if not isinstance(data, dict):
        return None
    translated = data.get("translatedText")
    if not isinstance(translated, str):
        return None
    return translated


class MyMemoryProvider(TranslationProvider):
    """MyMemory REST API over httpx."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout_seconds
        self._transport = transport
        logger.info(
            "mymemory_provider_initialized",
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )

    async def translate(self, text: str, source_code: str, target_code: str) -> str:
        langpair = f"{source_code}|{target_code}"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(
                    self._base_url,
                    params={"q": text, "langpair": langpair},
                )
                response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(
                "translation_provider_timeout",
                langpair=langpair,
                timeout_seconds=self._timeout,
                text_len=len(text),
            )
            raise ProviderError(UNAVAILABLE_MESSAGE) from e
        except httpx.HTTPStatusError as e:
            logger.error(
                "translation_provider_http_error",
                langpair=langpair,
                status_code=e.response.status_code,
                body=e.response.text[:_SNIPPET_CHARS],
            )
            raise ProviderError(UNAVAILABLE_MESSAGE) from e
        except httpx.HTTPError as e:
            logger.error(
                "translation_provider_request_failed",
                langpair=langpair,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ProviderError(UNAVAILABLE_MESSAGE) from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(
                "translation_provider_invalid_json",
                langpair=langpair,
                body=response.text[:_SNIPPET_CHARS],
            )
            raise ProviderError(FAILED_MESSAGE) from e

        translated = _extract_translation(payload)
        if translated is None:
            logger.error(
                "translation_provider_malformed_response",
                langpair=langpair,
                response_status=payload.get("responseStatus")
                if isinstance(payload, dict)
                else None,
                response_details=payload.get("responseDetails")
                if isinstance(payload, dict)
                else None,
            )
            raise ProviderError(FAILED_MESSAGE)

        logger.debug(
            "translation_provider_ok",
            langpair=langpair,
            text_len=len(text),
            translated_len=len(translated),
        )
        return translated
