from pydantic import BaseModel, ConfigDict, Field, field_validator

from replypilot.services.language_policy import normalize_language
from replypilot.services.tone_policy import DEFAULT_RATING, coerce_rating

DEFAULT_MARKETPLACE = "Shopee"
DEFAULT_PRODUCT_NAME = "the product"


def _text_or_default(value: object, default: str) -> str:
    if value is None:
        return default
    text = value if isinstance(value, str) else str(value)
    return text if text.strip() else default


class ReviewRequest(BaseModel):
    """Inbound review plus marketplace context. Every field except reviewText has a default."""

    model_config = ConfigDict(populate_by_name=True)

    marketplace: str = DEFAULT_MARKETPLACE
    rating: float = DEFAULT_RATING
    product_name: str = Field(default=DEFAULT_PRODUCT_NAME, alias="productName")
    language: str = "english"
    review_text: str = Field(default="", alias="reviewText")

    @field_validator("marketplace", mode="before")
    @classmethod
    def _default_marketplace(cls, value: object) -> str:
        return _text_or_default(value, DEFAULT_MARKETPLACE)

    @field_validator("product_name", mode="before")
    @classmethod
    def _default_product_name(cls, value: object) -> str:
        return _text_or_default(value, DEFAULT_PRODUCT_NAME)

    @field_validator("rating", mode="before")
    @classmethod
    def _coerce_rating(cls, value: object) -> float:
        return coerce_rating(value)

    @field_validator("language", mode="before")
    @classmethod
    def _normalize_language(cls, value: object) -> str:
        return normalize_language(value)

    @field_validator("review_text", mode="before")
    @classmethod
    def _review_text(cls, value: object) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class ReplyResponse(BaseModel):
    reply: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class LanguageInfo(BaseModel):
    code: str
    label: str
