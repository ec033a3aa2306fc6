import contextlib
import logging
from typing import Callable, Optional

from sqlalchemy.orm import Session

from database.database import get_session_factory
from database.repositories import ProfileRepository, JobRepository, MatchRepository

logger = logging.getLogger(__name__)


class MatchUnitOfWork:
    """Repositories sharing one Session (and so one transaction)."""

    def __init__(self, session: Session):
        self.session = session
        self.profiles = ProfileRepository(session)
        self.jobs = JobRepository(session)
        self.matches = MatchRepository(session)

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


@contextlib.contextmanager
def match_uow(session_factory: Optional[Callable[[], Session]] = None):
    """Per-unit-of-work transaction scope.

    Yields a MatchUnitOfWork bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with match_uow() as uow:
            profile = uow.profiles.get_profile(candidate_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = (session_factory or get_session_factory())()
    uow = MatchUnitOfWork(session)
    try:
        yield uow
        uow.commit()
    except Exception:
        uow.rollback()
        raise
    finally:
        session.close()
