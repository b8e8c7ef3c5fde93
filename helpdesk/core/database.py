# helpdesk/core/database.py
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from helpdesk.core.config import get_settings

settings = get_settings()


def create_db_engine(url: str, **kwargs) -> Engine:
    """Build an engine; SQLite connections get foreign keys switched on so
    ON DELETE CASCADE is honoured by the database itself."""
    is_sqlite = url.startswith("sqlite")
    connect_args = {"check_same_thread": False} if is_sqlite else {}
    db_engine = create_engine(url, connect_args=connect_args, **kwargs)

    if is_sqlite:
        @event.listens_for(db_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


engine = create_db_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db(bind: Engine = engine) -> None:
    # Both mappers must be registered before Ticket.comments is configured
    from helpdesk.ticket import models as ticket_models  # noqa: F401
    from helpdesk.comment import models as comment_models  # noqa: F401

    Base.metadata.create_all(bind=bind)


# Common DB dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit_or_rollback(db: Session) -> None:
    """Commit the unit of work; on failure roll it back so nothing partial is
    left in the session, then let the storage error propagate."""
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
