import uuid

from sqlalchemy import Column, Integer, Text, TIMESTAMP, Numeric, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType


class Job(Base):
    __tablename__ = 'jobs'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    employer_id = Column(Text, nullable=False)

    # Core Identity
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    location = Column(Text)
    description = Column(Text)

    # === Structural Fields (Metadata) ===
    employment_type = Column(Text)
    experience_level = Column(Text)
    job_category = Column(Text)
    status = Column(Text, nullable=False, default='active')  # active|draft|closed
    salary_min = Column(Numeric(asdecimal=False))
    salary_max = Column(Numeric(asdecimal=False))
    minimum_years_experience = Column(Integer, default=0)

    # === Skill Requirements ===
    skills = Column(JSONType, default=list)  # legacy flat list of names
    required_hard_skills = Column(JSONType, default=list)  # [{skill, weight, mandatory}]
    required_soft_skills = Column(JSONType, default=list)  # [{skill, weight, mandatory}]
    preferred_skills = Column(JSONType, default=list)  # bonus-only names

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    matches = relationship("JobMatch", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_jobs_status', 'status'),
        Index('idx_jobs_employer', 'employer_id'),
        Index('idx_jobs_category', 'job_category'),
    )
