from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from webstore.core.config import get_settings

settings = get_settings()


def _engine_options(database_url: str) -> dict:
    """Build backend-specific engine options."""
    if database_url.startswith("sqlite"):
        # Sessions are handed across threads by FastAPI's threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 20,
        "connect_args": {"connect_timeout": 10},
    }


engine = create_engine(
    settings.database_url,
    echo=settings.DEBUG,
    **_engine_options(settings.database_url),
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()
