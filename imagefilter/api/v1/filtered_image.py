"""
Filtered Image API Endpoint
"""
from typing import Optional

from fastapi import APIRouter, Request

from imagefilter.errors import ImageProcessingFailed
from imagefilter.responses import TemporaryFileResponse
from imagefilter.services.image_filter import FilterService
from imagefilter.utils.validation import parse_image_url

router = APIRouter(tags=["image-filter"])

@router.get("/filteredimage")
async def filtered_image(request: Request, image_url: Optional[str] = None):
    """
    Filter an image from a public url.

    Query parameters:
        image_url: URL of a publicly accessible image
    Returns the filtered image file.
    """
    url = parse_image_url(image_url)
    service: FilterService = request.app.state.filter_service

    try:
        filtered_path = await service.filter(url)
    except Exception as e:
        print(f"[filter] Failed to process {url}: {e}")
        raise ImageProcessingFailed(e) from e

    return TemporaryFileResponse(filtered_path, release=service.cleanup)
