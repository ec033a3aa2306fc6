#!/usr/bin/env python3
"""
Scoring Service - Combine the component scores into one 0-100 match score.

    weighted = hard * 0.40 + soft * 0.20 + experience * 0.20
             + communication/behavioral * 0.15 + role alignment * 0.05
    match_score = clamp(weighted + preferred_skills_bonus, 0, 100)

Component scores are reported as computed (the hard-skills score may exceed
100); only the aggregate is clamped. All reported values are rounded to two
decimals.

Scoring is pure and stateless: one ScoringService can be shared across
worker threads.
"""

from typing import List, Optional
import logging

from core.config_loader import ScorerConfig
from core.scorer.models import CandidateProfile, JobPosting, MatchScore, ScoreBreakdown
from core.scorer.skill_matching import SkillMatcher, get_skill_matcher
from core.scorer import skills, experience, alignment

logger = logging.getLogger(__name__)


def clamp_score(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    return max(lower, min(upper, value))


class ScoringService:
    """
    Service for scoring a single candidate against a single job.

    The weight tables live in the (immutable) ScorerConfig and the skill
    matching policy is a SkillMatcher, both injected here.
    """

    def __init__(
        self,
        config: Optional[ScorerConfig] = None,
        skill_matcher: Optional[SkillMatcher] = None
    ):
        self.config = config or ScorerConfig()
        self.skill_matcher = skill_matcher or get_skill_matcher(self.config.skill_matching)

    def score_match(self, candidate: CandidateProfile, job: JobPosting) -> MatchScore:
        """Calculate the match score and its breakdown.

        Args:
            candidate: Candidate snapshot with hard and soft skills
            job: Job posting snapshot

        Returns:
            MatchScore with clamped total, rounded sub-scores and breakdown
        """
        config = self.config
        weights = config.weights

        hard_score, hard_details = skills.calculate_hard_skills_score(
            candidate.hard_skills,
            job.required_hard_skills,
            job.skills,
            config,
            self.skill_matcher
        )
        soft_score, soft_details = skills.calculate_soft_skills_score(
            candidate.soft_skills,
            job.required_soft_skills,
            config,
            self.skill_matcher
        )
        experience_score, experience_details = experience.calculate_experience_score(
            candidate, job, config
        )
        communication_score, _ = alignment.calculate_communication_behavioral_score(candidate, config)
        role_score, role_details = alignment.calculate_role_alignment_score(candidate, job, config)

        preferred_bonus, matched_preferred = skills.calculate_preferred_skills_bonus(
            candidate.hard_skills,
            job.preferred_skills,
            config,
            self.skill_matcher
        )

        weighted = (
            hard_score * weights.hard_skills +
            soft_score * weights.soft_skills +
            experience_score * weights.experience +
            communication_score * weights.communication_behavioral +
            role_score * weights.role_alignment
        )
        raw_total = weighted + preferred_bonus
        match_score = clamp_score(raw_total)

        breakdown = self._build_breakdown(
            hard_details, soft_details, experience_details, role_details, matched_preferred
        )

        logger.debug(
            f"Candidate {candidate.candidate_id} vs job {job.job_id}: "
            f"hard={hard_score:.1f}, soft={soft_score:.1f}, exp={experience_score:.1f}, "
            f"comm={communication_score:.1f}, role={role_score:.1f}, "
            f"bonus={preferred_bonus:.1f}, raw={raw_total:.1f}, final={match_score:.1f}"
        )

        return MatchScore(
            job_id=job.job_id,
            candidate_id=candidate.candidate_id,
            match_score=round(match_score, 2),
            hard_skills_score=round(hard_score, 2),
            soft_skills_score=round(soft_score, 2),
            experience_score=round(experience_score, 2),
            communication_score=round(communication_score, 2),
            role_alignment_score=round(role_score, 2),
            score_breakdown=breakdown,
            job_title=job.title,
            company=job.company,
            location=job.location,
        )

    @staticmethod
    def _build_breakdown(
        hard_details: dict,
        soft_details: dict,
        experience_details: dict,
        role_details: dict,
        matched_preferred: List[str]
    ) -> ScoreBreakdown:
        missing_hard = hard_details.get('missing_mandatory_hard_skills', [])
        missing_soft = soft_details.get('missing_mandatory_soft_skills', [])
        experience_gap = experience_details.get('experience_gap', 0)
        role_bonuses = role_details.get('bonuses_applied', [])

        penalties: List[str] = []
        bonuses: List[str] = []

        if missing_hard:
            penalties.append(f"Missing {len(missing_hard)} mandatory hard skills")
        if missing_soft:
            penalties.append(f"Missing {len(missing_soft)} mandatory soft skills")
        if experience_gap > 0:
            penalties.append(f"{experience_gap} years experience gap")
        if matched_preferred:
            bonuses.append(f"{len(matched_preferred)} preferred skills matched")
        bonuses.extend(role_bonuses)

        return ScoreBreakdown(
            matched_hard_skills=list(hard_details.get('matched_hard_skills', [])),
            missing_mandatory_hard_skills=list(missing_hard),
            matched_soft_skills=list(soft_details.get('matched_soft_skills', [])),
            missing_mandatory_soft_skills=list(missing_soft),
            matched_preferred_skills=list(matched_preferred),
            experience_gap=experience_gap,
            penalties_applied=penalties,
            bonuses_applied=bonuses,
        )
