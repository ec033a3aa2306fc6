import logging
from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy import select, func
from sqlalchemy.dialects import postgresql, sqlite

from database.models import JobMatch, Job
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    'postgresql': postgresql.insert,
    'sqlite': sqlite.insert,
}

_SCORE_FIELDS = (
    'match_score',
    'hard_skills_score',
    'soft_skills_score',
    'experience_score',
    'communication_score',
    'role_alignment_score',
    'score_breakdown',
)


class MatchRepository(BaseRepository):
    def _insert(self):
        dialect = self.db.get_bind().dialect.name
        try:
            return _UPSERT_DIALECTS[dialect]
        except KeyError:
            raise NotImplementedError(f"Match cache upsert is not supported on {dialect}")

    def upsert_match(
        self,
        candidate_id: str,
        job_id: str,
        scores: Dict[str, Any]
    ) -> None:
        """
        Write the latest match for a (candidate, job) pair.

        INSERT ... ON CONFLICT (candidate_id, job_id) DO UPDATE, so a pair
        never has more than one row and the last write wins.
        """
        values = {name: scores.get(name) for name in _SCORE_FIELDS}
        values['score_breakdown'] = values['score_breakdown'] or {}

        insert = self._insert()
        stmt = insert(JobMatch).values(
            candidate_id=candidate_id,
            job_id=job_id,
            **values
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=['candidate_id', 'job_id'],
            set_={
                **{name: getattr(stmt.excluded, name) for name in _SCORE_FIELDS},
                'calculated_at': func.now(),
            }
        )
        self.db.execute(stmt)

    def get_match(self, candidate_id: str, job_id: str) -> Optional[JobMatch]:
        stmt = select(JobMatch).where(
            JobMatch.candidate_id == candidate_id,
            JobMatch.job_id == job_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_cached_matches(
        self,
        candidate_id: str,
        limit: int = 10
    ) -> List[Tuple[JobMatch, Job]]:
        """Last known matches for a candidate with their jobs, best first."""
        stmt = select(JobMatch, Job).join(
            Job, Job.id == JobMatch.job_id
        ).where(
            JobMatch.candidate_id == candidate_id
        ).order_by(
            JobMatch.match_score.desc(),
            JobMatch.job_id
        ).limit(limit)

        return [(row[0], row[1]) for row in self.db.execute(stmt).all()]

    def count_matches_for_candidate(self, candidate_id: str) -> int:
        stmt = select(func.count()).select_from(JobMatch).where(
            JobMatch.candidate_id == candidate_id
        )
        return self.db.execute(stmt).scalar_one()
