"""Google Gemini generateContent API client."""

import logging
import time
from typing import Any

import aiohttp
from aiohttp import ClientTimeout

from meetnotes.config import Settings
from meetnotes.domain.errors import ProviderError

logger = logging.getLogger(__name__)


def extract_generated_text(data: Any) -> str:
    """Pull the first candidate's first text part out of a response envelope.

    Returns an empty string for any other shape.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


def _token_count(data: Any) -> int:
    if not isinstance(data, dict):
        return 0
    usage = data.get("usageMetadata")
    if not isinstance(usage, dict):
        return 0
    return usage.get("totalTokenCount", 0) or 0


class GeminiClient:
    """Async client for the Gemini generateContent endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        model: str,
        timeout_seconds: int = 60,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> None:
        """Initialize Gemini client.

        Args:
            api_key: Gemini API key
            base_url: API base URL, e.g. https://generativelanguage.googleapis.com/v1beta
            model: Model name used in the request path
            timeout_seconds: Total request timeout in seconds
            temperature: Optional sampling temperature
            max_output_tokens: Optional cap on generated tokens
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = ClientTimeout(total=timeout_seconds)
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._session: aiohttp.ClientSession | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        """Build a client from application settings."""
        return cls(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_api_base_url,
            model=settings.gemini_model,
            timeout_seconds=settings.gemini_timeout_seconds,
            temperature=settings.gemini_temperature,
            max_output_tokens=settings.gemini_max_output_tokens,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    def build_payload(self, instruction: str) -> dict[str, Any]:
        """Build the request body for a single-turn text prompt."""
        generation_config: dict[str, Any] = {}
        if self.temperature is not None:
            generation_config["temperature"] = self.temperature
        if self.max_output_tokens is not None:
            generation_config["maxOutputTokens"] = self.max_output_tokens

        return {
            "contents": [{"parts": [{"text": instruction}]}],
            "generationConfig": generation_config,
        }

    async def generate(self, instruction: str) -> str:
        """Send one generation request and return the generated text.

        Args:
            instruction: Full prompt text

        Returns:
            Generated text, or an empty string if the response had no text part

        Raises:
            ProviderError: On missing API key, non-2xx status, timeout or transport error
        """
        if not self.api_key:
            raise ProviderError("Gemini API key is not configured.")

        session = await self._get_session()
        headers = {"x-goog-api-key": self.api_key}
        start_time = time.perf_counter()

        try:
            async with session.post(
                self.endpoint, json=self.build_payload(instruction), headers=headers
            ) as response:
                if not 200 <= response.status < 300:
                    body = await response.text()
                    logger.error(f"Gemini API HTTP {response.status}: {body[:500]}")
                    raise ProviderError(
                        f"Gemini API responded with status: {response.status}"
                    )
                try:
                    data = await response.json(content_type=None)
                except ValueError:
                    logger.warning("Gemini API returned a non-JSON body")
                    data = None
        except TimeoutError as e:
            raise ProviderError("Gemini API request timed out.", e) from e
        except aiohttp.ClientError as e:
            raise ProviderError("Gemini API request failed.", e) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Gemini generation with {self.model} took {duration_ms:.0f}ms "
            f"({_token_count(data)} tokens)"
        )
        return extract_generated_text(data)
