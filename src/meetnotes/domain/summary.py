"""Summary domain entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Summary:
    """Represents a generated meeting summary."""

    id: str | None
    original_transcript: str
    custom_prompt: str
    generated_summary: str
    created_at: datetime | None = None
