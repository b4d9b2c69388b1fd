"""Translation, language listing and detection endpoints."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from lingoproxy.api.deps import (
    get_language_catalog,
    get_language_detector,
    get_translation_gateway,
)
from lingoproxy.schemas.translate import (
    DetectRequest,
    DetectResponse,
    TranslateRequest,
    TranslateResponse,
)
from lingoproxy.services.language.catalog import LanguageCatalog
from lingoproxy.services.language.detector import LanguageDetector
from lingoproxy.services.translation.gateway import TranslationGateway

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["translation"])


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    body: TranslateRequest | None = None,
    gateway: TranslationGateway = Depends(get_translation_gateway),
) -> TranslateResponse:
    """Translate text through the external provider.

    400 when text, fromLang or toLang is missing. 500 when the provider
    fails; the provider's own error detail is logged, not returned.
    """
    body = body or TranslateRequest()
    result = await gateway.translate(body.text, body.from_lang, body.to_lang)
    return TranslateResponse(
        translated_text=result.translated_text,
        from_lang=result.from_lang,
        to_lang=result.to_lang,
    )


@router.get("/languages", response_model=list[str])
async def list_languages(
    catalog: LanguageCatalog = Depends(get_language_catalog),
) -> list[str]:
    """Supported language names, in catalog order."""
    return catalog.language_names()


@router.post("/detect", response_model=DetectResponse)
async def detect(
    body: DetectRequest | None = None,
    detector: LanguageDetector = Depends(get_language_detector),
) -> DetectResponse:
    """Best-effort language guess. Never fails; defaults to English."""
    text = body.text if body is not None else None
    detected = detector.detect(text)
    logger.debug("detect_ok", text_len=len(text or ""), detected=detected)
    return DetectResponse(detected_language=detected)
