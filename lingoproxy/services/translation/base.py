"""Abstract translation provider interface.

The gateway never imports a concrete provider directly. The concrete
provider is instantiated once in the FastAPI lifespan and injected via
Depends().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationResult:
    """Normalised translation outcome returned to API callers.

    from_lang/to_lang echo the caller's input, not the resolved codes.
    """

    translated_text: str
    from_lang: str
    to_lang: str


class TranslationProvider(ABC):
    """Abstract base class for external translation services."""

    @abstractmethod
    async def translate(self, text: str, source_code: str, target_code: str) -> str:
        """Translate text between two provider language codes.

        Args:
            text: Text to translate.
            source_code: Provider code of the source language (e.g. "en").
            target_code: Provider code of the target language (e.g. "es").

        Returns:
            The translated text.

        Raises:
            ProviderError: On transport failure, timeout, or an unusable reply.
        """
        ...
