#!/usr/bin/env python3
"""
Skill Scores - Hard skills, soft skills and the preferred-skills bonus.

Hard and soft skills are scored the same way: every required skill adds its
weight to the total, a matched skill contributes weight * proficiency (plus
a years-of-experience bonus for hard skills), and a missing mandatory skill
subtracts a flat penalty from the final percentage.

The hard-skills score is intentionally not capped at 100: an expert with
many years can reach 120. Only the aggregate match score is clamped.
"""

from typing import List, Dict, Any, Sequence, Tuple
import logging

from core.config_loader import ScorerConfig
from core.scorer.models import HardSkill, SoftSkill, SkillRequirement
from core.scorer.proficiency import SkillKind, proficiency_weight
from core.scorer.skill_matching import SkillMatcher

logger = logging.getLogger(__name__)


def _years_bonus(years: float, config: ScorerConfig) -> float:
    """Per-skill experience bonus, linear up to skill_years_bonus_cap."""
    years = max(0.0, float(years or 0))
    return min(
        config.skill_years_bonus_cap,
        years / config.skill_years_full_bonus * config.skill_years_bonus_cap
    )


def calculate_legacy_skills_score(
    candidate_skills: Sequence[HardSkill],
    legacy_skills: Sequence[str],
    matcher: SkillMatcher
) -> Tuple[float, Dict[str, Any]]:
    """
    Score against the unweighted legacy skill list.

    Returns 100 when the list is empty (no requirements to satisfy).
    """
    if not legacy_skills:
        return 100.0, {'matched_hard_skills': [], 'missing_mandatory_hard_skills': [], 'penalty_applied': 0.0}

    names = [s.skill_name for s in candidate_skills]
    matched = [skill for skill in legacy_skills if matcher.any_match(names, skill)]

    score = min(100.0, len(matched) / len(legacy_skills) * 100)

    return score, {
        'matched_hard_skills': matched,
        'missing_mandatory_hard_skills': [],
        'penalty_applied': 0.0,
        'matched_skills': len(matched),
        'total_required': len(legacy_skills),
    }


def calculate_hard_skills_score(
    candidate_skills: Sequence[HardSkill],
    required_skills: Sequence[SkillRequirement],
    legacy_skills: Sequence[str],
    config: ScorerConfig,
    matcher: SkillMatcher
) -> Tuple[float, Dict[str, Any]]:
    """
    Calculate the hard skills score.

    Weighted requirements take precedence; the legacy flat list is only
    consulted when no weighted requirement exists.

    Returns: (score, breakdown)
    """
    if not required_skills:
        return calculate_legacy_skills_score(candidate_skills, legacy_skills, matcher)

    total_weight = 0.0
    achieved_weight = 0.0
    penalty = 0.0
    matched: List[str] = []
    missing_mandatory: List[str] = []

    for required in required_skills:
        weight = required.weight or 1.0
        total_weight += weight

        candidate_skill = matcher.find(candidate_skills, required.skill)

        if candidate_skill is not None:
            multiplier = proficiency_weight(
                candidate_skill.proficiency_level, SkillKind.HARD, config.proficiency
            )
            achieved_weight += weight * (multiplier + _years_bonus(candidate_skill.years_experience, config))
            matched.append(required.skill)
        elif required.mandatory:
            penalty += config.penalty_missing_mandatory_hard
            missing_mandatory.append(required.skill)

    base_score = (achieved_weight / total_weight) * 100 if total_weight > 0 else 0.0
    final_score = max(0.0, base_score - penalty)
    if penalty:
        logger.debug(f"Hard skills penalty {penalty} for missing mandatory skills: {missing_mandatory}")

    return final_score, {
        'matched_hard_skills': matched,
        'missing_mandatory_hard_skills': missing_mandatory,
        'penalty_applied': penalty,
    }


def calculate_soft_skills_score(
    candidate_skills: Sequence[SoftSkill],
    required_skills: Sequence[SkillRequirement],
    config: ScorerConfig,
    matcher: SkillMatcher
) -> Tuple[float, Dict[str, Any]]:
    """
    Calculate the soft skills score. No legacy list and no years bonus.

    Returns: (score, breakdown)
    """
    if not required_skills:
        return 100.0, {'matched_soft_skills': [], 'missing_mandatory_soft_skills': [], 'penalty_applied': 0.0}

    total_weight = 0.0
    achieved_weight = 0.0
    penalty = 0.0
    matched: List[str] = []
    missing_mandatory: List[str] = []

    for required in required_skills:
        weight = required.weight or 1.0
        total_weight += weight

        candidate_skill = matcher.find(candidate_skills, required.skill)

        if candidate_skill is not None:
            achieved_weight += weight * proficiency_weight(
                candidate_skill.proficiency_level, SkillKind.SOFT, config.proficiency
            )
            matched.append(required.skill)
        elif required.mandatory:
            penalty += config.penalty_missing_mandatory_soft
            missing_mandatory.append(required.skill)

    base_score = (achieved_weight / total_weight) * 100 if total_weight > 0 else 0.0
    final_score = max(0.0, base_score - penalty)
    if penalty:
        logger.debug(f"Soft skills penalty {penalty} for missing mandatory skills: {missing_mandatory}")

    return final_score, {
        'matched_soft_skills': matched,
        'missing_mandatory_soft_skills': missing_mandatory,
        'penalty_applied': penalty,
    }


def calculate_preferred_skills_bonus(
    candidate_skills: Sequence[HardSkill],
    preferred_skills: Sequence[str],
    config: ScorerConfig,
    matcher: SkillMatcher
) -> Tuple[float, List[str]]:
    """
    Bonus points for preferred (nice-to-have) skills the candidate has.

    Returns: (bonus, matched_preferred_skills)
    """
    if not preferred_skills:
        return 0.0, []

    names = [s.skill_name for s in candidate_skills]
    matched = [skill for skill in preferred_skills if matcher.any_match(names, skill)]

    bonus = min(config.preferred_skill_bonus_cap, len(matched) * config.preferred_skill_bonus)

    return bonus, matched
