from sqlalchemy import create_engine, Column, String, Float, Text
from sqlalchemy.orm import declarative_base, sessionmaker
import logging

from geocoding_service.config.settings import DATABASE_URL

# Get logger
logger = logging.getLogger(__name__)

Base = declarative_base()

# Define the cache table structure
class CacheEntryDB(Base):
    __tablename__ = "cache_entries"
    namespace = Column(String, primary_key=True)
    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    expires_at = Column(Float, nullable=True)  # Seconds since epoch, None = never


def make_engine(url):
    # SQLite connections are shared between FastAPI worker threads
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def create_tables(bind=None):
    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database tables created (if they didn't exist previously).")
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise
