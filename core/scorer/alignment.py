#!/usr/bin/env python3
"""
Alignment Scores - Communication/behavioral blend and role alignment.
"""

from typing import List, Dict, Any, Tuple

from core.config_loader import ScorerConfig
from core.scorer.models import CandidateProfile, JobPosting

ROLE_TITLE_BONUS_TEXT = 'Desired role matches job title'
DOMAIN_BONUS_TEXT = 'Preferred domain matches job domain'


def calculate_communication_behavioral_score(
    candidate: CandidateProfile,
    config: ScorerConfig
) -> Tuple[float, Dict[str, Any]]:
    """
    Weighted average of the externally evaluated scores.

    Inputs are expected in [0, 100] but are not validated or clamped; an
    out-of-range evaluation flows through to the aggregate unchanged.
    """
    communication = candidate.communication_score or 0.0
    behavioral = candidate.behavioral_score or 0.0
    knowledge = candidate.knowledge_score or 0.0

    score = (
        communication * config.communication_weight +
        behavioral * config.behavioral_weight +
        knowledge * config.knowledge_weight
    )

    return score, {
        'communication_score': communication,
        'behavioral_score': behavioral,
        'knowledge_score': knowledge,
    }


def calculate_role_alignment_score(
    candidate: CandidateProfile,
    job: JobPosting,
    config: ScorerConfig
) -> Tuple[float, Dict[str, Any]]:
    """
    Role/preference alignment.

    Starts from a base and adds a bonus when the desired role and job title
    contain one another, and another when the preferred domain appears in
    the job description.

    Returns: (score, breakdown)
    """
    score = config.role_alignment_base
    bonuses: List[str] = []

    desired_role = (candidate.desired_role or '').lower()
    job_title = (job.title or '').lower()
    # An empty title is contained in every desired role
    if desired_role:
        if desired_role in job_title or job_title in desired_role:
            score += config.role_title_bonus
            bonuses.append(ROLE_TITLE_BONUS_TEXT)

    preferred_domain = (candidate.preferred_domain or '').lower()
    description = (job.description or '').lower()
    if preferred_domain and description and preferred_domain in description:
        score += config.role_domain_bonus
        bonuses.append(DOMAIN_BONUS_TEXT)

    return min(100.0, score), {'bonuses_applied': bonuses}
