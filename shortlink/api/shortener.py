from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import RedirectResponse
import logging

from shortlink.core.config import settings
from shortlink.schemas.URLCreateRequest import URLCreateRequest
from shortlink.schemas.URLInfoResponse import URLInfoResponse
from shortlink.schemas.URLResolveResponse import URLResolveResponse
from shortlink.services.dependencies import get_url_service
from shortlink.services.shortener import URLService
from shortlink.utils.encoding import encode_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/v1/shorten", response_model=URLInfoResponse, status_code=status.HTTP_201_CREATED)
def shorten_url_endpoint(url_request: URLCreateRequest, service: URLService = Depends(get_url_service)):
    try:
        identifier, short_url = service.shorten(url_request.original_url, **url_request.option_overrides())
    except ValueError as e:
        logger.error(f"Failed to create short URL for {url_request.original_url[:50]}... due to: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    return URLInfoResponse(
        original_url=url_request.original_url,
        short_url=short_url,
        short_code=encode_id(identifier),
        identifier=identifier,
    )


@router.get("/v1/resolve", response_model=URLResolveResponse)
def resolve_url_endpoint(
    short_url: str = Query(..., min_length=1),
    path_separator: str = Query("/", min_length=1),
    service: URLService = Depends(get_url_service),
):
    original_url = service.decode_url(short_url, path_separator)
    if original_url is None:
        logger.warning(f"Resolve 404: {short_url}")
        raise HTTPException(status_code=404, detail="URL not found")
    return URLResolveResponse(original_url=original_url, short_url=short_url)


def _redirect(short_code: str, service: URLService):
    original_url = service.resolve_short_code(short_code)
    if original_url is None:
        logger.warning(f"Redirect 404: Short code not found: {short_code}")
        raise HTTPException(status_code=404, detail="URL not found")
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)


@router.get(f"/{settings.SHORT_URL_REDIRECT_PATH_SEGMENT}/{{short_code}}", tags=["redirect"])
def redirect_with_segment_endpoint(short_code: str, service: URLService = Depends(get_url_service)):
    return _redirect(short_code, service)


@router.get("/{short_code}", tags=["redirect"])
def redirect_to_url_endpoint(short_code: str, service: URLService = Depends(get_url_service)):
    return _redirect(short_code, service)
