"""Database engine and session factory for the SQL storage backend."""

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from stockroom.core.config import settings


def make_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for url; SQLite connections are shared across FastAPI worker threads."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(
        url,
        pool_pre_ping=True,
        echo=echo,
        connect_args=connect_args,
    )


engine = make_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


def create_tables() -> None:
    """Create missing tables from the ORM metadata. Dev convenience; prod schemas come from Alembic."""
    from stockroom.models import Base

    Base.metadata.create_all(bind=engine)
