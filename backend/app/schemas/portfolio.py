"""Portfolio Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - title: 1-150 chars, content_format: 4-10 chars, content: 10-100000 chars
    - title and content_format are stripped BEFORE the length checks, so the
      stored value always satisfies the limits; whitespace-only values are rejected
    - main_state is not a request field anywhere: unknown keys are ignored, so a
      client-supplied main flag never reaches the service
    - PortfolioUpdate requires at least one field

Design Decisions:
    - mode="before" strip: pydantic applies Field(min_length/max_length) to the
      value the before-validator returns, never to the padded input
    - content is not stripped: leading whitespace is significant in Markdown
"""

from pydantic import BaseModel, Field, field_validator, model_validator


def _strip(value: object) -> object:
    return value.strip() if isinstance(value, str) else value


class PortfolioCreate(BaseModel):
    """Portfolio creation — all content fields required."""
    title: str = Field(min_length=1, max_length=150)
    content_format: str = Field(min_length=4, max_length=10)
    content: str = Field(min_length=10, max_length=100_000)

    @field_validator("title", "content_format", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        return _strip(v)


class PortfolioUpdate(BaseModel):
    """Portfolio update — any subset of content fields."""
    title: str | None = Field(None, min_length=1, max_length=150)
    content_format: str | None = Field(None, min_length=4, max_length=10)
    content: str | None = Field(None, min_length=10, max_length=100_000)

    @field_validator("title", "content_format", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        return _strip(v)

    @model_validator(mode="after")
    def require_any_field(self):
        if self.title is None and self.content_format is None and self.content is None:
            raise ValueError(
                "update requires at least one of title, content_format, content",
            )
        return self
