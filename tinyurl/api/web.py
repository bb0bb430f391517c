import logging
import os
from datetime import datetime

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from tinyurl.core.exceptions import LinkNotFound, LinkValidationError
from tinyurl.db import database
from tinyurl.services.shortener import LinkService
from tinyurl.utils import presentation

logger = logging.getLogger(__name__)

router = APIRouter(tags=["web"])

PACKAGE_DIR = os.path.dirname(os.path.dirname(__file__))
STYLESHEET = os.path.join(PACKAGE_DIR, "static", "stylesheet.css")

templates = Jinja2Templates(directory=os.path.join(PACKAGE_DIR, "templates"))
templates.env.filters["pluralize"] = presentation.pluralize
templates.env.filters["truncate_text"] = presentation.truncate_text
templates.env.filters["quote_url"] = presentation.quote_url


def _render(request: Request, name: str, context: dict, status_code: int = status.HTTP_200_OK):
    root = presentation.root_url(request)
    context = dict(
        context,
        root_url=root,
        bookmarklet=presentation.bookmarklet(root),
        year=datetime.now().year,
    )
    return templates.TemplateResponse(request, name, context, status_code=status_code)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def new_link_form(request: Request):
    return _render(request, "new.html", {"url": "", "errors": []})


@router.post("/", response_class=HTMLResponse, include_in_schema=False)
def create_link_from_form(request: Request, url: str = Form(""), db: Session = Depends(database.get_db)):
    try:
        link, _ = LinkService.shorten(db, url)
    except LinkValidationError as e:
        logger.info("Rejected form submission for %s: %s", url[:50], e)
        return _render(
            request,
            "new.html",
            {"url": url, "errors": e.errors},
            status_code=422,
        )

    root = presentation.root_url(request)
    return _render(request, "show.html", {
        "link": link,
        "short_url": presentation.short_url(root, link.code),
    })


@router.get("/stylesheet.css", include_in_schema=False)
def stylesheet():
    return FileResponse(STYLESHEET, media_type="text/css; charset=utf-8")


@router.get("/{code}", tags=["redirect"])
def redirect_to_url(code: str, db: Session = Depends(database.get_db)):
    try:
        link = LinkService.follow(db, code)
    except LinkNotFound:
        logger.warning(f"Redirect 404: Short code not found: {code}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="URL not found")

    logger.info(f"Redirect {code} -> {link.url[:50]} (views={link.view_count})")
    return RedirectResponse(url=link.url, status_code=status.HTTP_302_FOUND)
