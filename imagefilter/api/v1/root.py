from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from imagefilter.errors import FILTER_USAGE
from imagefilter.schemas import HealthResponse

router = APIRouter(tags=["root"])

@router.get("/", response_class=PlainTextResponse)
async def root():
    return f"try {FILTER_USAGE}"

@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    return HealthResponse(status="ok", auth=request.app.state.settings.REQUIRE_AUTH)
