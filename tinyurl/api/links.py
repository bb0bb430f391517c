from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session
import logging

from tinyurl.core.exceptions import LinkNotFound, LinkValidationError
from tinyurl.db import database
from tinyurl.db.models import Link
from tinyurl.schemas import LinkCreateRequest, LinkInfoResponse
from tinyurl.services.shortener import LinkService
from tinyurl.utils import presentation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/links", tags=["links"])


def _to_response(request: Request, link: Link) -> LinkInfoResponse:
    return LinkInfoResponse(
        code=link.code,
        short_url=presentation.short_url(presentation.root_url(request), link.code),
        url=link.url,
        view_count=link.view_count,
        created_at=link.created_at,
    )


@router.post("", response_model=LinkInfoResponse, status_code=status.HTTP_201_CREATED)
def shorten_url_endpoint(
    link_request: LinkCreateRequest,
    request: Request,
    response: Response,
    db: Session = Depends(database.get_db),
):
    try:
        link, created = LinkService.shorten(db, link_request.url)
    except LinkValidationError as e:
        logger.error(f"Failed to create link for {link_request.url[:50]} due to: {e}")
        raise HTTPException(status_code=422, detail=e.errors)

    if not created:
        response.status_code = status.HTTP_200_OK
    return _to_response(request, link)


@router.get("/{code}", response_model=LinkInfoResponse)
def link_info_endpoint(code: str, request: Request, db: Session = Depends(database.get_db)):
    """Retrieve metadata for a short code without counting a view."""
    try:
        link = LinkService.resolve(db, code)
    except LinkNotFound:
        logger.warning(f"Stats 404: Short code not found: {code}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="URL not found")
    return _to_response(request, link)
