"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from meetnotes.config import Settings
from meetnotes.infrastructure.database import get_session
from meetnotes.infrastructure.gemini_client import GeminiClient
from meetnotes.infrastructure.mailer import EmailClient
from meetnotes.repositories.summary_repo import SummaryRepository
from meetnotes.services.summaries import SummaryService

# Type alias for database session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_app_settings(request: Request) -> Settings:
    """Provide the settings the application was started with."""
    return request.app.state.settings


def get_generation_client(request: Request) -> GeminiClient:
    """Provide the shared Gemini client."""
    return request.app.state.gemini_client


def get_email_client(request: Request) -> EmailClient:
    """Provide the shared email client."""
    return request.app.state.email_client


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
GeneratorDep = Annotated[GeminiClient, Depends(get_generation_client)]
EmailClientDep = Annotated[EmailClient, Depends(get_email_client)]


async def get_summary_repository(
    session: SessionDep,
) -> AsyncGenerator[SummaryRepository, None]:
    """Provide SummaryRepository instance."""
    yield SummaryRepository(session)


SummaryRepoDep = Annotated[SummaryRepository, Depends(get_summary_repository)]


def get_summary_service(
    repository: SummaryRepoDep,
    generator: GeneratorDep,
    notifier: EmailClientDep,
    settings: SettingsDep,
) -> SummaryService:
    """Provide SummaryService instance."""
    return SummaryService(
        repository,
        generator,
        notifier,
        default_subject=settings.share_default_subject,
    )


SummaryServiceDep = Annotated[SummaryService, Depends(get_summary_service)]
