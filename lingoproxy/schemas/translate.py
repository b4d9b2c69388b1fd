"""Translation and detection request/response schemas.

Wire format is camelCase (fromLang, translatedText, ...). Snake_case field
names are accepted on input too.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TranslateRequest(_CamelModel):
    """POST /api/translate request body.

    Fields are optional here so that a missing one reaches the gateway and
    comes back as a 400 with the field names, not a schema error.
    """

    text: str | None = None
    from_lang: str | None = None
    to_lang: str | None = None


class TranslateResponse(_CamelModel):
    """POST /api/translate response body."""

    translated_text: str
    from_lang: str
    to_lang: str


class DetectRequest(_CamelModel):
    """POST /api/detect request body."""

    text: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _non_object_is_empty(cls, data: Any) -> Any:
        # A JSON array, string or number carries no text field.
        if isinstance(data, (dict, BaseModel)):
            return data
        return {}

    @field_validator("text", mode="before")
    @classmethod
    def _non_string_is_absent(cls, value: Any) -> Any:
        # Detection is failure-soft: anything but a string counts as no text.
        if isinstance(value, str):
            return value
        return None


class DetectResponse(_CamelModel):
    """POST /api/detect response body."""

    detected_language: str


class HealthResponse(BaseModel):
    """GET /api/health response body."""

    status: str
    version: str
    environment: str
