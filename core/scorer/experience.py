#!/usr/bin/env python3
"""
Experience Score - Years against the job minimum, plus breadth bonuses.
"""

from typing import Dict, Any, Tuple
import logging

from core.config_loader import ScorerConfig
from core.scorer.models import CandidateProfile, JobPosting

logger = logging.getLogger(__name__)


def calculate_experience_score(
    candidate: CandidateProfile,
    job: JobPosting,
    config: ScorerConfig
) -> Tuple[float, Dict[str, Any]]:
    """
    Calculate experience match score.

    Meeting the minimum scores 100 plus an overqualification bonus (capped);
    falling short scales linearly up to experience_underqualified_max. Company
    and project bonuses apply in both cases and the result is capped at 100.

    Returns: (score, breakdown)
    """
    min_years = max(0, job.minimum_years_experience or 0)
    candidate_years = max(0, candidate.years_of_experience or 0)

    experience_gap = max(0, min_years - candidate_years)
    overqualification_bonus = 0.0

    if candidate_years >= min_years:
        # No meaningful ratio against a zero minimum
        if min_years > 0:
            overqualification_bonus = min(
                config.overqualification_bonus_cap,
                (candidate_years - min_years) / min_years * config.overqualification_bonus_cap
            )
        base = min(100.0 + config.overqualification_bonus_cap, 100.0 + overqualification_bonus)
    else:
        base = candidate_years / min_years * config.experience_underqualified_max

    company_bonus = min(
        config.company_bonus_cap,
        (candidate.number_of_companies or 0) * config.company_bonus_per_company
    )
    project_bonus = min(
        config.project_bonus_cap,
        (candidate.projects_handled or 0) * config.project_bonus_per_project
    )

    final_score = min(100.0, base + company_bonus + project_bonus)
    if experience_gap:
        logger.debug(f"Experience gap of {experience_gap} years against a minimum of {min_years}")

    return final_score, {
        'experience_gap': experience_gap,
        'base_score': base,
        'overqualification_bonus': overqualification_bonus,
        'company_bonus': company_bonus,
        'project_bonus': project_bonus,
    }
