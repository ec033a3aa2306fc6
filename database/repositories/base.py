import contextlib

from sqlalchemy.orm import Session


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    @contextlib.contextmanager
    def savepoint(self):
        """Nested transaction: an error rolls back only the work inside the block."""
        with self.db.begin_nested():
            yield
