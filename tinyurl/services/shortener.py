from sqlalchemy.orm import Session
from typing import Tuple
import logging

from tinyurl.core.exceptions import LinkNotFound
from tinyurl.db import repository
from tinyurl.db.models import Link


logger = logging.getLogger(__name__)


class LinkService:

    @staticmethod
    def shorten(db: Session, url: str) -> Tuple[Link, bool]:
        """Return the link for ``url`` and whether it was created just now.

        Raises LinkValidationError when the url is rejected.
        """
        existing = repository.get_link_by_url(db, url)
        if existing:
            logger.info("Link already existed: '%s' for URL: %s", existing.code, url[:50])
            return existing, False

        link = repository.create_link(db, url)
        logger.info("Created link '%s' for URL: %s", link.code, url[:50])
        return link, True

    @staticmethod
    def resolve(db: Session, code: str) -> Link:
        link = repository.get_link_by_code(db, code)
        if link is None:
            raise LinkNotFound(code)
        return link

    @staticmethod
    def follow(db: Session, code: str) -> Link:
        link = LinkService.resolve(db, code)
        return repository.record_view(db, link)
