import logging
from typing import List, Optional
from sqlalchemy import select

from database.models import Job
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class JobRepository(BaseRepository):
    def get_by_id(self, job_id: str) -> Optional[Job]:
        stmt = select(Job).where(Job.id == job_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_active_jobs(
        self,
        job_id: Optional[str] = None,
        experience_level: Optional[str] = None,
        location: Optional[str] = None,
        job_category: Optional[str] = None
    ) -> List[Job]:
        """
        Fetch active jobs, optionally restricted to one job and filtered.

        Args:
            job_id: Restrict to this job
            experience_level: Exact match on experience_level
            location: Case-insensitive substring of location
            job_category: Exact match on job_category

        Returns:
            Matching jobs ordered by id
        """
        stmt = select(Job).where(Job.status == 'active')

        if job_id:
            stmt = stmt.where(Job.id == job_id)

        if experience_level:
            stmt = stmt.where(Job.experience_level == experience_level)

        if location:
            stmt = stmt.where(Job.location.ilike(f"%{location}%"))

        if job_category:
            stmt = stmt.where(Job.job_category == job_category)

        stmt = stmt.order_by(Job.id)
        return self.db.execute(stmt).scalars().all()
