"""Summary API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Body

from meetnotes.api.dependencies import SummaryServiceDep
from meetnotes.api.schemas import (
    MessageResponse,
    SummarizeRequest,
    SummarizeResponse,
    SummaryResponse,
    SummaryUpdateRequest,
)

router = APIRouter(tags=["summaries"])


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize(
    service: SummaryServiceDep,
    request: Annotated[SummarizeRequest | None, Body()] = None,
) -> SummarizeResponse:
    """Generate a summary for a transcript and store it.

    A missing or null body is treated like a missing transcript.
    """
    request = request or SummarizeRequest()
    record = await service.summarize(request.transcript, request.prompt)
    return SummarizeResponse(summary=record.generated_summary, id=record.id)


@router.get("/summaries", response_model=list[SummaryResponse])
async def list_summaries(service: SummaryServiceDep) -> list[SummaryResponse]:
    """List stored summaries, newest first."""
    records = await service.list_summaries()
    return [SummaryResponse.model_validate(r) for r in records]


@router.get("/summaries/{summary_id}", response_model=SummaryResponse)
async def get_summary(summary_id: str, service: SummaryServiceDep) -> SummaryResponse:
    """Get a single summary by ID."""
    record = await service.get_summary(summary_id)
    return SummaryResponse.model_validate(record)


@router.put("/summaries/{summary_id}", response_model=SummaryResponse)
async def update_summary(
    summary_id: str,
    request: SummaryUpdateRequest,
    service: SummaryServiceDep,
) -> SummaryResponse:
    """Replace the generated text of a summary."""
    record = await service.update_summary(summary_id, request.generated_summary)
    return SummaryResponse.model_validate(record)


@router.delete("/summaries/{summary_id}", response_model=MessageResponse)
async def delete_summary(summary_id: str, service: SummaryServiceDep) -> MessageResponse:
    """Delete a summary."""
    await service.delete_summary(summary_id)
    return MessageResponse(message="Summary deleted successfully.")
