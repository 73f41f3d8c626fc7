from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from shortener_app.dependencies import get_url_service
from shortener_app.middleware.request_logging import remote_address
from shortener_app.services.url_service import URLService

router = APIRouter(tags=["redirect"])


@router.get("/{short_code}")
async def redirect_to_long_url(
    short_code: str,
    request: Request,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the original URL.

    The click (referrer, user agent, client address) is stored
    before the redirect is returned.
    """
    long_url = await url_service.resolve_redirect(
        short_code,
        referrer=request.headers.get("referer", ""),
        user_agent=request.headers.get("user-agent", ""),
        remote_addr=remote_address(request),
    )
    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)
