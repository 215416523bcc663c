from typing import Generator

from sqlalchemy.orm import Session

from webstore.core.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that provides a read-only reporting session.

    The session never commits. Whatever transaction the reports opened is
    rolled back before the session is closed so the read snapshot is released.

    Yields:
        Session: SQLAlchemy database session
    """
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()
