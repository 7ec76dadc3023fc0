from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from showcase.config import settings

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """One session per request, closed when the response is done"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
