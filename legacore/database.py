from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from legacore.config import settings

_engine_kwargs: dict = dict(
    echo=settings.DEBUG,  # Log SQL queries in debug mode
)
if "sqlite" in settings.DATABASE_URL:
    _engine_kwargs.update(connect_args={"check_same_thread": False})
else:
    _engine_kwargs.update(
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )

# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """
    FastAPI dependency for database sessions.

    Yields a database session and ensures it's closed after use.

    Usage:
        @app.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def dispose_engine() -> None:
    """Release pooled connections (called at application shutdown)."""
    engine.dispose()
