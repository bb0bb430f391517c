from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base, validates

from tinyurl.utils.encoding import encode_base36
from tinyurl.utils.validation import MAX_URL_LENGTH

Base = declarative_base()


def _utcnow():
    return datetime.now(timezone.utc)


class Link(Base):
    __tablename__ = "links"
    # AUTOINCREMENT keeps SQLite from handing out an identifier twice
    __table_args__ = {"sqlite_autoincrement": True}

    # The id is the short code, rendered in base36
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Unique so a concurrent duplicate insert fails instead of creating twice
    url = Column(String(MAX_URL_LENGTH), nullable=False, unique=True, index=True)

    view_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=_utcnow)

    def __init__(self, url: str):
        super().__init__(url=url)

    @validates("url")
    def _url_is_read_only(self, key, value):
        if self.url is not None and value != self.url:
            raise AttributeError("Link.url cannot be changed once set")
        return value

    @property
    def code(self):
        return encode_base36(self.id) if self.id is not None else None

    def __repr__(self):
        return f"<Link {self.code} -> {self.url}>"
