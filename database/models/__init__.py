from .base import Base, JSONType
from .profile import Profile, CandidateSkill, CandidateSoftSkill
from .job import Job
from .match import JobMatch

__all__ = [
    'Base',
    'JSONType',
    'Profile',
    'CandidateSkill',
    'CandidateSoftSkill',
    'Job',
    'JobMatch',
]
