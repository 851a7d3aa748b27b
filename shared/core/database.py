from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from shared.core.config import AUTH_DATABASE_URL, HOTEL_DATABASE_URL

# Separate bases
AuthBase = declarative_base()
Base = declarative_base()

POOL_SIZE = 2
MAX_OVERFLOW = 2


def build_engine(url: str):
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=POOL_SIZE,          # max idle connections
        max_overflow=MAX_OVERFLOW,      # max temporary extra connections
        pool_timeout=30       # wait time before failing
    )


# Auth DB
auth_engine = build_engine(AUTH_DATABASE_URL)
AuthSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=auth_engine)

# Hotel DB
hotel_engine = build_engine(HOTEL_DATABASE_URL)
HotelSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=hotel_engine)


# Dependency


def get_auth_db():
    db = AuthSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_hotel_db():
    db = HotelSessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """Commit everything done in the block, or roll all of it back.

    Multi-row mutations (booking + room + guest, bill + items) go through
    this.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
