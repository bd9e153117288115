from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .settings import get_settings

settings = get_settings()

# SQLite needs cross-thread access for the TestClient worker thread
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

# Create the SQLAlchemy engine
engine = create_engine(settings.database_url, pool_pre_ping=True, connect_args=connect_args)

# Define the base class that all models should inherit from
class Base(DeclarativeBase):
    pass

# Session factory
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Dependency for FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
