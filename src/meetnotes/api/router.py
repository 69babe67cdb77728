"""API router aggregator."""

from fastapi import APIRouter

from meetnotes.api.sharing import router as sharing_router
from meetnotes.api.summaries import router as summaries_router

router = APIRouter(prefix="/api")
router.include_router(summaries_router)
router.include_router(sharing_router)
