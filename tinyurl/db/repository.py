from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from tinyurl.core.exceptions import LinkValidationError
from tinyurl.db.models import Link
from tinyurl.utils.encoding import decode_base36
from tinyurl.utils.validation import validate_url

logger = logging.getLogger(__name__)

# Largest value a BIGINT / SQLite INTEGER primary key can hold
MAX_IDENTIFIER = 2 ** 63 - 1


def get_link_by_url(db: Session, url: str) -> Optional[Link]:
    return db.query(Link).filter(Link.url == url).first()


def get_link_by_id(db: Session, identifier: int) -> Optional[Link]:
    if identifier < 1 or identifier > MAX_IDENTIFIER:
        return None
    return db.query(Link).filter(Link.id == identifier).first()


def get_link_by_code(db: Session, code: str) -> Optional[Link]:
    try:
        identifier = decode_base36(code)
    except ValueError:
        logger.debug("Malformed short code %r", code)
        return None
    return get_link_by_id(db, identifier)


def create_link(db: Session, url: str) -> Link:
    errors = validate_url(url)
    if errors:
        raise LinkValidationError(errors)

    link = Link(url)
    try:
        db.add(link)
        db.commit()
        db.refresh(link)
        return link
    except IntegrityError as e:
        db.rollback()
        # Another request stored the same url between our lookup and insert
        existing = get_link_by_url(db, url)
        if existing:
            logger.info("Link for %s created concurrently, reusing %s", url[:50], existing.code)
            return existing
        logger.warning("IntegrityError creating Link url=%s: %s", url[:50], str(e))
        raise


def record_view(db: Session, link: Link) -> Link:
    db.query(Link).filter(Link.id == link.id).update(
        {Link.view_count: Link.view_count + 1},
        synchronize_session=False,
    )
    db.commit()
    db.refresh(link)
    return link
