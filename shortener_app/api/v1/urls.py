from fastapi import APIRouter, Depends, Request, status

from shortener_app.schemas.url import URLCreate, ShortLinkResponse, URLStats, format_rfc3339
from shortener_app.services.url_service import URLService, build_short_link
from shortener_app.dependencies import get_url_service

router = APIRouter(prefix="/shorturls", tags=["shorturls"])


@router.post("", response_model=ShortLinkResponse, status_code=status.HTTP_201_CREATED)
async def create_short_url(
    url_data: URLCreate,
    request: Request,
    url_service: URLService = Depends(get_url_service)
):
    """Create a new short URL"""
    url = await url_service.create_short_url(url_data)
    return ShortLinkResponse(
        short_link=build_short_link(
            request.url.scheme, request.headers.get("host", ""), url.short_code
        ),
        expiry=format_rfc3339(url.expires_at),
    )


@router.get("/{short_code}", response_model=URLStats)
async def get_url_stats(
    short_code: str,
    url_service: URLService = Depends(get_url_service)
):
    """Get statistics and click details for a short URL"""
    return await url_service.get_url_stats(short_code)
