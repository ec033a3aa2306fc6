#!/usr/bin/env python3
"""
Skill Matching Strategies - Decide whether a candidate skill satisfies a required skill.

The scorers never compare skill names directly; they go through a
SkillMatcher so the matching policy can be swapped without touching scoring
logic. The default is the fuzzy, case-insensitive substring match in both
directions ("React" satisfies "react", "ReactJS" satisfies "React" and
"Java" satisfies "JavaScript").
"""

import re
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, Optional, Set, TypeVar

T = TypeVar('T')

_TOKEN_PATTERN = re.compile(r"[a-z0-9+#]+")


def _normalize(name: Optional[str]) -> str:
    return (name or '').strip().lower()


class SkillMatcher(ABC):
    """
    Abstract strategy for skill name matching.
    """

    @abstractmethod
    def matches(self, candidate_skill: str, required_skill: str) -> bool:
        """
        Determine if a candidate skill satisfies a required skill.

        Args:
            candidate_skill: Skill name from the candidate profile
            required_skill: Skill name from the job posting

        Returns:
            True if the skills match
        """
        pass

    def find(
        self,
        candidate_skills: Iterable[T],
        required_skill: str,
        key: Callable[[T], str] = lambda s: s.skill_name
    ) -> Optional[T]:
        """Return the first candidate skill that matches, in profile order."""
        for skill in candidate_skills:
            if self.matches(key(skill), required_skill):
                return skill
        return None

    def any_match(self, candidate_skill_names: Iterable[str], required_skill: str) -> bool:
        return any(self.matches(name, required_skill) for name in candidate_skill_names)


class SubstringSkillMatcher(SkillMatcher):
    """
    Case-insensitive substring match where either string contains the other.

    Names are lower-cased but not trimmed, so "Java " does not satisfy
    "JavaScript".
    """

    def matches(self, candidate_skill: str, required_skill: str) -> bool:
        candidate = (candidate_skill or '').lower()
        required = (required_skill or '').lower()
        # Blank names would otherwise be a substring of everything
        if not candidate.strip() or not required.strip():
            return False
        return candidate in required or required in candidate


class ExactSkillMatcher(SkillMatcher):
    """Case-insensitive equality after trimming whitespace."""

    def matches(self, candidate_skill: str, required_skill: str) -> bool:
        candidate = _normalize(candidate_skill)
        return bool(candidate) and candidate == _normalize(required_skill)


class TokenSkillMatcher(SkillMatcher):
    """
    Normalized-token match.

    Both names are split into alphanumeric tokens ('+' and '#' are kept so
    C++ and C# survive); the skills match when one token set contains the
    other. "React Native" satisfies "react" but "JavaScript" does not
    satisfy "Java".
    """

    @staticmethod
    def tokens(name: str) -> Set[str]:
        return set(_TOKEN_PATTERN.findall(_normalize(name)))

    def matches(self, candidate_skill: str, required_skill: str) -> bool:
        candidate = self.tokens(candidate_skill)
        required = self.tokens(required_skill)
        if not candidate or not required:
            return False
        return candidate <= required or required <= candidate


_MATCHERS: Dict[str, type] = {
    'substring': SubstringSkillMatcher,
    'exact': ExactSkillMatcher,
    'token': TokenSkillMatcher,
}


def get_skill_matcher(name: str = 'substring') -> SkillMatcher:
    """Build a matcher by its configured name."""
    try:
        return _MATCHERS[name]()
    except KeyError:
        raise ValueError(f"Unknown skill matching strategy: {name}. Available: {', '.join(_MATCHERS)}")
