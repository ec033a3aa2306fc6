import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Numeric, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType


class JobMatch(Base):
    """
    Last known match result between a candidate and a job.

    One row per (candidate_id, job_id); every computation overwrites the
    previous row (last write wins, no history). Readers must treat it as a
    best-effort hint, never as the source of truth.
    """
    __tablename__ = 'job_matches'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = Column(Text, ForeignKey('profiles.user_id', ondelete='CASCADE'), nullable=False)
    job_id = Column(Text, ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False)

    match_score = Column(Numeric(5, 2, asdecimal=False), nullable=False)
    hard_skills_score = Column(Numeric(6, 2, asdecimal=False))
    soft_skills_score = Column(Numeric(6, 2, asdecimal=False))
    experience_score = Column(Numeric(6, 2, asdecimal=False))
    communication_score = Column(Numeric(6, 2, asdecimal=False))
    role_alignment_score = Column(Numeric(6, 2, asdecimal=False))

    score_breakdown = Column(JSONType, default=dict)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    calculated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    job = relationship("Job", back_populates="matches")

    __table_args__ = (
        UniqueConstraint('candidate_id', 'job_id', name='uq_job_matches_candidate_job'),
        Index('idx_job_matches_candidate', 'candidate_id'),
        Index('idx_job_matches_score', 'match_score'),
    )
