"""Summary lifecycle service: generation, persistence, editing and sharing."""

import logging
import re
from email.utils import getaddresses

from meetnotes.domain.errors import GenerationError, NotFoundError, ValidationError
from meetnotes.domain.summary import Summary
from meetnotes.infrastructure.gemini_client import GeminiClient
from meetnotes.infrastructure.mailer import EmailClient
from meetnotes.infrastructure.models import SummaryModel
from meetnotes.repositories.summary_repo import SummaryRepository

logger = logging.getLogger(__name__)

SUMMARIZATION_PROMPT = (
    'Summarize the following text based on this prompt: "{prompt}".'
    "\n\nText to summarize:\n{transcript}"
)

EMPTY_RESPONSE_MESSAGE = (
    "Failed to generate a summary. The AI model returned an empty response."
)

_EMAIL_PATTERN = re.compile(r'^[^@\s,;<>"]+@[^@\s,;<>"]+\.[^@\s,;<>"]+$')


def is_single_address(value: str) -> bool:
    """True when value is exactly one bare address of the form local@domain.tld."""
    addresses = getaddresses([value])
    if len(addresses) != 1 or addresses[0][1] != value:
        return False
    return bool(_EMAIL_PATTERN.match(value))


def build_instruction(transcript: str, prompt: str) -> str:
    """Embed the caller's prompt and transcript into one generation instruction."""
    return SUMMARIZATION_PROMPT.format(prompt=prompt, transcript=transcript)


class SummaryService:
    """Coordinates the text generator, the summary store and the mailer."""

    def __init__(
        self,
        repository: SummaryRepository,
        generator: GeminiClient,
        notifier: EmailClient,
        default_subject: str = "AI-Generated Meeting Summary",
    ) -> None:
        self.repository = repository
        self.generator = generator
        self.notifier = notifier
        self.default_subject = default_subject

    async def summarize(self, transcript: str | None, prompt: str | None) -> SummaryModel:
        """Generate a summary for a transcript and persist it.

        The store is written only after the provider returns usable text, so a
        failed generation leaves no record behind.

        Args:
            transcript: Meeting transcript, must be non-empty
            prompt: Free-text instruction; None is treated as empty

        Returns:
            The stored summary record

        Raises:
            ValidationError: If the transcript is missing or empty
            GenerationError: If the provider fails or returns no text
            StoreError: If the summary cannot be saved
        """
        if not transcript:
            raise ValidationError("Transcript is required.")
        prompt = prompt or ""

        generated_text = await self.generator.generate(build_instruction(transcript, prompt))
        if not generated_text:
            raise GenerationError(EMPTY_RESPONSE_MESSAGE)

        record = await self.repository.create(
            Summary(
                id=None,
                original_transcript=transcript,
                custom_prompt=prompt,
                generated_summary=generated_text,
            )
        )
        logger.info(f"Created summary {record.id} ({len(generated_text)} chars)")
        return record

    async def list_summaries(self) -> list[SummaryModel]:
        """List every stored summary, newest first."""
        return await self.repository.list_newest_first()

    async def get_summary(self, summary_id: str) -> SummaryModel:
        """Get one stored summary."""
        record = await self.repository.get_by_id(summary_id)
        if record is None:
            raise NotFoundError("Summary not found.")
        return record

    async def update_summary(self, summary_id: str, generated_summary: str) -> SummaryModel:
        """Replace the generated text of a stored summary.

        Empty text is accepted; no other field changes.
        """
        record = await self.repository.update_generated_summary(summary_id, generated_summary)
        if record is None:
            raise NotFoundError("Summary not found.")
        logger.info(f"Updated summary {summary_id}")
        return record

    async def delete_summary(self, summary_id: str) -> None:
        """Permanently delete a stored summary."""
        record = await self.repository.delete_by_id(summary_id)
        if record is None:
            raise NotFoundError("Summary not found.")
        logger.info(f"Deleted summary {summary_id}")

    async def share(self, recipient: str | None, subject: str | None, body_html: str) -> str:
        """Email summary text to a recipient. Nothing is looked up or stored.

        Returns:
            Confirmation message from the mailer
        """
        recipient = (recipient or "").strip()
        if not is_single_address(recipient):
            raise ValidationError("A valid recipient email address is required.")
        if subject and ("\r" in subject or "\n" in subject):
            raise ValidationError("Subject must be a single line.")

        return await self.notifier.send(recipient, subject or self.default_subject, body_html)
