"""Email sharing endpoint."""

from fastapi import APIRouter

from meetnotes.api.dependencies import SummaryServiceDep
from meetnotes.api.schemas import MessageResponse, ShareRequest

router = APIRouter(tags=["share"])


@router.post("/share", response_model=MessageResponse)
async def share_summary(
    request: ShareRequest,
    service: SummaryServiceDep,
) -> MessageResponse:
    """Email the current summary text. The text is sent as given, not looked up."""
    message = await service.share(request.to, request.subject, request.body)
    return MessageResponse(message=message)
