import uuid

from sqlalchemy import Column, Text, Integer, Numeric, TIMESTAMP, ForeignKey, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class Profile(Base):
    """
    User profile for candidates and employers.

    Owned by the profile-management subsystem; the matching engine only
    reads it. The three evaluation scores are written by the video
    evaluation pipeline.
    """
    __tablename__ = 'profiles'

    user_id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    role = Column(Text, nullable=False, default='candidate')  # candidate|employer|admin

    full_name = Column(Text)
    email = Column(Text)
    location = Column(Text)
    designation = Column(Text)
    avatar_url = Column(Text)
    overall_candidate_score = Column(Numeric(5, 2, asdecimal=False))

    # Experience
    years_of_experience = Column(Integer, default=0)
    number_of_companies = Column(Integer, default=0)
    projects_handled = Column(Integer, default=0)

    # Preferences
    desired_role = Column(Text)
    preferred_domain = Column(Text)

    # Evaluation scores (0-100)
    knowledge_score = Column(Numeric(5, 2, asdecimal=False), default=0)
    communication_score = Column(Numeric(5, 2, asdecimal=False), default=0)
    behavioral_score = Column(Numeric(5, 2, asdecimal=False), default=0)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    hard_skills = relationship("CandidateSkill", back_populates="candidate", cascade="all, delete-orphan")
    soft_skills = relationship("CandidateSoftSkill", back_populates="candidate", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_profiles_role', 'role'),
    )


class CandidateSkill(Base):
    """Hard skill held by a candidate."""
    __tablename__ = 'candidate_skills'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = Column(Text, ForeignKey('profiles.user_id', ondelete='CASCADE'), nullable=False)
    skill_name = Column(Text, nullable=False)
    proficiency_level = Column(Text)  # beginner|intermediate|advanced|expert (free text at source)
    years_experience = Column(Numeric(4, 1, asdecimal=False), default=0)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    candidate = relationship("Profile", back_populates="hard_skills")

    __table_args__ = (
        Index('idx_candidate_skills_candidate', 'candidate_id'),
    )


class CandidateSoftSkill(Base):
    """Soft skill held by a candidate."""
    __tablename__ = 'candidate_soft_skills'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = Column(Text, ForeignKey('profiles.user_id', ondelete='CASCADE'), nullable=False)
    skill_name = Column(Text, nullable=False)
    proficiency_level = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    candidate = relationship("Profile", back_populates="soft_skills")

    __table_args__ = (
        Index('idx_candidate_soft_skills_candidate', 'candidate_id'),
    )
