"""Server-rendered single-page client."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from meetnotes.api.dependencies import SettingsDep, SummaryServiceDep

WEB_DIR = Path(__file__).parent
STATIC_DIR = WEB_DIR / "static"

router = APIRouter(tags=["web"])

# Templates configuration
templates = Jinja2Templates(directory=WEB_DIR / "templates")


def preview(text: str, limit: int = 160) -> str:
    """Shorten text for the history list, cutting on a word boundary."""
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    cut = text[:limit].rsplit(" ", 1)[0] or text[:limit]
    return cut + "…"


templates.env.filters["preview"] = preview


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    service: SummaryServiceDep,
    settings: SettingsDep,
) -> HTMLResponse:
    """Render the summarizer form with previously stored summaries."""
    summaries = await service.list_summaries()

    return templates.TemplateResponse(
        request=request,
        name="index.html",
        context={
            "summaries": summaries,
            "default_prompt": settings.default_prompt,
            "default_subject": settings.share_default_subject,
        },
    )
