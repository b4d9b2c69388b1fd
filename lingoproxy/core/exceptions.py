"""Custom exception classes for structured error handling."""

from typing import Any, Iterable


class LingoProxyError(Exception):
    """Base exception for all LingoProxy errors."""

    def __init__(self, code: str, message: str, status_code: int = 500) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class ValidationError(LingoProxyError):
    """Caller omitted a required field. Client error, never a server fault."""

    def __init__(
        self,
        message: str = "Missing required fields",
        missing: Iterable[str] = (),
    ) -> None:
        self.missing = list(missing)
        if self.missing:
            message = f"{message}: {', '.join(self.missing)}"
        super().__init__(code="VALIDATION_ERROR", message=message, status_code=400)


class ProviderError(LingoProxyError):
    """The translation provider failed. Message is safe to show callers."""

    def __init__(self, message: str = "Translation service unavailable") -> None:
        super().__init__(code="PROVIDER_ERROR", message=message, status_code=500)


class InternalServerError(LingoProxyError):
    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(code="INTERNAL_ERROR", message=message, status_code=500)
