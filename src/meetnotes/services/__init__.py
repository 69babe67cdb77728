"""Application services for the summary lifecycle."""

from meetnotes.services.summaries import SummaryService, build_instruction

__all__ = [
    "SummaryService",
    "build_instruction",
]
