import logging
from typing import Optional

from sqlalchemy.engine import Engine
from tenacity import retry, stop_after_attempt, wait_fixed

from database.database import get_engine
from database.models import Base

logger = logging.getLogger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2), reraise=True)
def init_db(engine: Optional[Engine] = None) -> None:
    """Create all tables that do not exist yet, retrying while the database comes up."""
    engine = engine or get_engine()
    logger.info("Initializing database...")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise
    logger.info(f"Tables created or verified ({len(Base.metadata.tables)} tables)")
