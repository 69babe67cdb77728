"""Error taxonomy for summary operations."""


class SummaryError(Exception):
    """Base exception for summary lifecycle failures."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    @property
    def details(self) -> str | None:
        """Lower-level error message, if any."""
        if self.original_error is None:
            return None
        return str(self.original_error) or self.original_error.__class__.__name__


class ValidationError(SummaryError):
    """Raised when caller input is missing or malformed."""


class NotFoundError(SummaryError):
    """Raised when a summary id does not match any stored record."""


class GenerationError(SummaryError):
    """Raised when the provider returns nothing usable."""


class ProviderError(GenerationError):
    """Raised when the provider HTTP call itself fails."""


class StoreError(SummaryError):
    """Raised when the persistence layer is unavailable or a query fails."""


class NotificationError(SummaryError):
    """Raised when an email share cannot be delivered."""
