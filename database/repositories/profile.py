import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence
from sqlalchemy import select

from database.models import Profile, CandidateSkill, CandidateSoftSkill
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ProfileRepository(BaseRepository):
    def get_profile(self, user_id: str) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_candidate_profiles(self) -> List[Profile]:
        stmt = select(Profile).where(
            Profile.role == 'candidate'
        ).order_by(Profile.user_id)
        return self.db.execute(stmt).scalars().all()

    def get_hard_skills(self, candidate_id: str) -> List[CandidateSkill]:
        stmt = select(CandidateSkill).where(
            CandidateSkill.candidate_id == candidate_id
        ).order_by(CandidateSkill.created_at, CandidateSkill.id)
        return self.db.execute(stmt).scalars().all()

    def get_soft_skills(self, candidate_id: str) -> List[CandidateSoftSkill]:
        stmt = select(CandidateSoftSkill).where(
            CandidateSoftSkill.candidate_id == candidate_id
        ).order_by(CandidateSoftSkill.created_at, CandidateSoftSkill.id)
        return self.db.execute(stmt).scalars().all()

    def get_hard_skills_for_candidates(
        self,
        candidate_ids: Sequence[str]
    ) -> Dict[str, List[CandidateSkill]]:
        """Batch fetch hard skills with a single WHERE ... IN (...) query."""
        if not candidate_ids:
            return {}

        stmt = select(CandidateSkill).where(
            CandidateSkill.candidate_id.in_(candidate_ids)
        ).order_by(CandidateSkill.created_at, CandidateSkill.id)

        result: Dict[str, List[CandidateSkill]] = defaultdict(list)
        for row in self.db.execute(stmt).scalars().all():
            result[row.candidate_id].append(row)
        return dict(result)

    def get_soft_skills_for_candidates(
        self,
        candidate_ids: Sequence[str]
    ) -> Dict[str, List[CandidateSoftSkill]]:
        """Batch fetch soft skills with a single WHERE ... IN (...) query."""
        if not candidate_ids:
            return {}

        stmt = select(CandidateSoftSkill).where(
            CandidateSoftSkill.candidate_id.in_(candidate_ids)
        ).order_by(CandidateSoftSkill.created_at, CandidateSoftSkill.id)

        result: Dict[str, List[CandidateSoftSkill]] = defaultdict(list)
        for row in self.db.execute(stmt).scalars().all():
            result[row.candidate_id].append(row)
        return dict(result)
