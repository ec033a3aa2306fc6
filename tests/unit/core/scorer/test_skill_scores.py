#!/usr/bin/env python3
"""
Unit tests for hard skill, soft skill and preferred-skill scoring.
"""

import unittest

from core.config_loader import ScorerConfig
from core.scorer import skills
from core.scorer.models import HardSkill, SoftSkill, SkillRequirement
from core.scorer.skill_matching import SubstringSkillMatcher


def req(skill, weight=1.0, mandatory=False):
    return SkillRequirement(skill=skill, weight=weight, mandatory=mandatory)


class TestHardSkillsScore(unittest.TestCase):
    """Weighted hard skill requirements and the legacy fallback."""

    def setUp(self):
        self.config = ScorerConfig()
        self.matcher = SubstringSkillMatcher()

    def score(self, candidate_skills, required, legacy=()):
        return skills.calculate_hard_skills_score(
            candidate_skills, required, legacy, self.config, self.matcher
        )

    def test_01_expert_with_years_exceeds_100(self):
        """Expert proficiency plus the full years bonus scores 120; no component cap."""
        score, details = self.score([HardSkill('React', 'expert', 10)], [req('react', mandatory=True)])
        self.assertAlmostEqual(score, 120.0)
        self.assertEqual(details['matched_hard_skills'], ['react'])
        self.assertEqual(details['missing_mandatory_hard_skills'], [])

    def test_02_partial_years_bonus(self):
        """5 years earns half of the 20% bonus."""
        score, _ = self.score([HardSkill('React', 'expert', 5)], [req('react', mandatory=True)])
        self.assertAlmostEqual(score, 110.0)

    def test_03_missing_mandatory_costs_15_points(self):
        """The penalty is the same regardless of the other requirements' weights."""
        candidate = [HardSkill('Python', 'expert', 0)]

        optional_go, _ = self.score(candidate, [req('python', weight=3), req('go', weight=1)])
        mandatory_go, details = self.score(
            candidate, [req('python', weight=3), req('go', weight=1, mandatory=True)]
        )

        self.assertAlmostEqual(optional_go, 75.0)
        self.assertAlmostEqual(mandatory_go, 60.0)
        self.assertAlmostEqual(optional_go - mandatory_go, 15.0)
        self.assertEqual(details['missing_mandatory_hard_skills'], ['go'])
        self.assertEqual(details['penalty_applied'], 15.0)

    def test_04_each_missing_mandatory_adds_penalty(self):
        candidate = [HardSkill('Python', 'expert', 0)]
        score, details = self.score(
            candidate,
            [req('python', weight=8), req('go', mandatory=True), req('rust', mandatory=True)]
        )
        # 8 / 10 * 100 - 2 * 15
        self.assertAlmostEqual(score, 50.0)
        self.assertEqual(details['missing_mandatory_hard_skills'], ['go', 'rust'])

    def test_05_score_floors_at_zero(self):
        score, _ = self.score([], [req('rust', mandatory=True)])
        self.assertEqual(score, 0.0)

    def test_06_optional_miss_has_no_penalty(self):
        score, details = self.score([], [req('rust')])
        self.assertEqual(score, 0.0)
        self.assertEqual(details['penalty_applied'], 0.0)
        self.assertEqual(details['missing_mandatory_hard_skills'], [])

    def test_07_unknown_proficiency_uses_default(self):
        score, _ = self.score([HardSkill('Python', 'guru', 0)], [req('python')])
        self.assertAlmostEqual(score, 50.0)

    def test_08_no_requirements_at_all_scores_100(self):
        score, _ = self.score([HardSkill('Python', 'expert', 4)], [], [])
        self.assertEqual(score, 100.0)

    def test_09_legacy_fallback(self):
        """Without weighted requirements the flat list is scored by coverage."""
        candidate = [HardSkill('Python', 'beginner', 0), HardSkill('docker', None, 0)]
        score, details = self.score(candidate, [], ['python', 'Docker', 'aws'])
        self.assertAlmostEqual(score, 200.0 / 3)
        self.assertEqual(details['matched_hard_skills'], ['python', 'Docker'])

    def test_10_weighted_list_ignores_legacy(self):
        score, details = self.score(
            [HardSkill('Python', 'intermediate', 0)], [req('python')], ['go', 'rust']
        )
        self.assertAlmostEqual(score, 70.0)
        self.assertEqual(details['matched_hard_skills'], ['python'])

    def test_11_requirement_from_dict_defaults_weight(self):
        self.assertEqual(SkillRequirement.from_dict({'skill': 'sql'}).weight, 1.0)
        self.assertEqual(SkillRequirement.from_dict({'skill': 'sql', 'weight': None}).weight, 1.0)
        requirement = SkillRequirement.from_dict({'skill': 'sql', 'weight': 2, 'mandatory': True})
        self.assertEqual(requirement.weight, 2.0)
        self.assertTrue(requirement.mandatory)

    def test_12_trailing_space_does_not_widen_match(self):
        score, details = self.score([HardSkill('Java ', 'expert', 0)], [req('JavaScript', mandatory=True)])
        self.assertEqual(score, 0.0)
        self.assertEqual(details['missing_mandatory_hard_skills'], ['JavaScript'])

    def test_13_missing_mandatory_penalty_is_logged(self):
        with self.assertLogs('core.scorer.skills', level='DEBUG') as captured:
            self.score([], [req('rust', mandatory=True)])
        self.assertIn('rust', captured.output[0])


class TestSoftSkillsScore(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()
        self.matcher = SubstringSkillMatcher()

    def score(self, candidate_skills, required):
        return skills.calculate_soft_skills_score(candidate_skills, required, self.config, self.matcher)

    def test_01_empty_requirements_score_100(self):
        score, _ = self.score([], [])
        self.assertEqual(score, 100.0)

    def test_02_missing_mandatory_costs_10_points(self):
        score, details = self.score(
            [SoftSkill('Communication', 'intermediate')],
            [req('communication', mandatory=True), req('leadership', mandatory=True)]
        )
        # 0.7 / 2 * 100 - 10
        self.assertAlmostEqual(score, 25.0)
        self.assertEqual(details['matched_soft_skills'], ['communication'])
        self.assertEqual(details['missing_mandatory_soft_skills'], ['leadership'])

    def test_03_unknown_proficiency_uses_soft_default(self):
        score, _ = self.score([SoftSkill('Teamwork', None)], [req('teamwork')])
        self.assertAlmostEqual(score, 70.0)


class TestPreferredSkillsBonus(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()
        self.matcher = SubstringSkillMatcher()

    def test_01_two_points_per_match(self):
        bonus, matched = skills.calculate_preferred_skills_bonus(
            [HardSkill('Docker'), HardSkill('Kubernetes'), HardSkill('AWS')],
            ['docker', 'aws', 'gcp'],
            self.config,
            self.matcher
        )
        self.assertEqual(bonus, 4.0)
        self.assertEqual(matched, ['docker', 'aws'])

    def test_02_bonus_capped_at_10(self):
        names = ['a1', 'b2', 'c3', 'd4', 'e5', 'f6']
        bonus, matched = skills.calculate_preferred_skills_bonus(
            [HardSkill(n) for n in names], names, self.config, self.matcher
        )
        self.assertEqual(bonus, 10.0)
        self.assertEqual(len(matched), 6)

    def test_03_no_preferred_skills(self):
        bonus, matched = skills.calculate_preferred_skills_bonus(
            [HardSkill('Docker')], [], self.config, self.matcher
        )
        self.assertEqual(bonus, 0.0)
        self.assertEqual(matched, [])


if __name__ == '__main__':
    unittest.main()
