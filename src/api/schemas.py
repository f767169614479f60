"""Request/response Pydantic models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ScrapeOptionsIn(BaseModel):
    timeout: int | None = Field(default=None, gt=0, description="Per-request timeout in milliseconds")
    retries: int | None = Field(default=None, ge=1, le=10)
    user_agent: str | None = None
    headers: dict[str, str] | None = None

    def overrides(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ScrapeRequest(BaseModel):
    # Plain str: malformed URLs are reported in the result envelope, not as 422.
    url: str
    options: ScrapeOptionsIn | None = None


class SummarizeRequest(BaseModel):
    url: str


class MetadataOut(BaseModel):
    title: str = ""
    description: str = ""
    url: str


class ScrapeResponse(BaseModel):
    success: bool
    content: str | None = None
    error: str | None = None
    metadata: MetadataOut | None = None


class SummarizeResponse(BaseModel):
    success: bool
    url: str
    title: str = ""
    content: str | None = None
    summary: str | None = None
    translation: str | None = None
    error: str | None = None
