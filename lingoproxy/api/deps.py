"""Shared FastAPI dependencies — service injection.

The TranslationGateway (wrapping the MyMemory provider) is created once
during the FastAPI lifespan and stored on app.state. Route handlers
retrieve it via Depends(), never by direct import. The catalog and
detector are stateless module singletons.
"""

from fastapi import Request

from lingoproxy.services.language.catalog import LanguageCatalog, catalog
from lingoproxy.services.language.detector import LanguageDetector, detector
from lingoproxy.services.translation.gateway import TranslationGateway


def get_translation_gateway(request: Request) -> TranslationGateway:
    """Return the singleton gateway from app state."""
    return request.app.state.translation_gateway


def get_language_catalog() -> LanguageCatalog:
    """Return the process-wide language catalog."""
    return catalog


def get_language_detector() -> LanguageDetector:
    """Return the shared heuristic detector."""
    return detector
