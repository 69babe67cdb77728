"""Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SummarizeRequest(BaseModel):
    """Request schema for generating a summary.

    transcript is optional here so a missing value reaches the service and
    is reported as a 400 rather than a schema error.
    """

    transcript: str | None = None
    prompt: str | None = None


class SummarizeResponse(BaseModel):
    """Response schema for a generated summary."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str
    id: str = Field(alias="_id")


class SummaryResponse(BaseModel):
    """Response schema for a stored summary record."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(alias="_id")
    original_transcript: str
    custom_prompt: str
    generated_summary: str
    created_at: datetime


class SummaryUpdateRequest(BaseModel):
    """Request schema for editing a summary's generated text."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    generated_summary: str


class ShareRequest(BaseModel):
    """Request schema for emailing a summary."""

    to: str | None = None
    subject: str | None = None
    body: str = ""


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
