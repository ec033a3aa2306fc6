#!/usr/bin/env python3
"""
Proficiency Model - Map a skill proficiency label to a score multiplier.

Labels arrive as free text and are matched case-insensitively. Unknown or
missing labels fall back to a per-kind default (hard: 0.5, soft: 0.7); this
is part of the contract, not an error.
"""

from enum import Enum
from typing import Optional

from core.config_loader import ProficiencyWeights

_DEFAULT_WEIGHTS = ProficiencyWeights()


class ProficiencyLevel(str, Enum):
    BEGINNER = 'beginner'
    INTERMEDIATE = 'intermediate'
    ADVANCED = 'advanced'
    EXPERT = 'expert'


class SkillKind(str, Enum):
    HARD = 'hard'
    SOFT = 'soft'


def parse_proficiency(level: Optional[str]) -> Optional[ProficiencyLevel]:
    """Return the enum member for a free-text label, or None if unrecognised."""
    if not level:
        return None
    try:
        return ProficiencyLevel(level.strip().lower())
    except ValueError:
        return None


def proficiency_weight(
    level: Optional[str],
    kind: SkillKind = SkillKind.HARD,
    weights: Optional[ProficiencyWeights] = None
) -> float:
    weights = weights or _DEFAULT_WEIGHTS

    parsed = parse_proficiency(level)
    if parsed is None:
        return weights.hard_default if kind == SkillKind.HARD else weights.soft_default

    return weights.as_table()[parsed.value]
