#!/usr/bin/env python3
"""
Scoring Module - Deterministic candidate/job match scoring.

Public API:
- ScoringService: Combines component scores into a 0-100 match score
- MatchScore / ScoreBreakdown: Scored match result and its diagnostics
- CandidateProfile / JobPosting: Immutable scorer inputs

The scoring module is split into focused, single-responsibility modules:

- models.py: Data structures (inputs, MatchScore, ScoreBreakdown)
- proficiency.py: Proficiency label -> multiplier
- skill_matching.py: Pluggable skill name matching strategies
- skills.py: Hard skills, soft skills and preferred-skills bonus
- experience.py: Years, companies and projects
- alignment.py: Communication/behavioral blend and role alignment
- service.py: ScoringService aggregator
"""

from core.scorer.models import (
    CandidateProfile,
    HardSkill,
    JobPosting,
    MatchScore,
    ScoreBreakdown,
    SkillRequirement,
    SoftSkill,
)
from core.scorer.service import ScoringService

__all__ = [
    'ScoringService',
    'MatchScore',
    'ScoreBreakdown',
    'CandidateProfile',
    'JobPosting',
    'HardSkill',
    'SoftSkill',
    'SkillRequirement',
]
