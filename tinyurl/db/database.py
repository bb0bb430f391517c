import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from tinyurl.core.config import settings

logger = logging.getLogger(__name__)

SQLALCHEMY_DATABASE_URL = settings.sqlalchemy_database_url


def _engine_options(url: str) -> dict:
    options = {"pool_pre_ping": True, "echo": settings.DB_ECHO}
    if url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.DB_POOL_SIZE
    return options


engine = create_engine(SQLALCHEMY_DATABASE_URL, **_engine_options(SQLALCHEMY_DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """
    FastAPI dependency: yield a SQLAlchemy session and ensure it's closed.
    The session goes back to the pool on every exit path, including errors
    raised by the endpoint.
    Usage: db: Session = Depends(database.get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def verify_database_connection():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection verified")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
