from contextlib import contextmanager
from datetime import datetime, timezone

from sqlalchemy.orm import Session


@contextmanager
def transaction(db: Session):
    """Commit once on success, roll everything back on any error."""
    try:
        yield
        db.commit()
    except Exception:
        db.rollback()
        raise


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    # SQLite hands timezone-aware columns back naive
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)
