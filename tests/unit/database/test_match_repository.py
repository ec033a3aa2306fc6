#!/usr/bin/env python3
"""
Unit tests for the repositories and the unit of work, on in-memory SQLite.
"""

import unittest
from unittest.mock import patch

import pytest

from database.models import JobMatch
from database.repositories import JobRepository, MatchRepository, ProfileRepository
from database.uow import MatchUnitOfWork, match_uow
from tests import add_candidate, add_job, create_test_session_factory


def scores(match_score, **extra):
    data = {
        'match_score': match_score,
        'hard_skills_score': 80.0,
        'soft_skills_score': 70.0,
        'experience_score': 60.0,
        'communication_score': 50.0,
        'role_alignment_score': 50.0,
        'score_breakdown': {'experience_gap': 0, 'matched_hard_skills': ['python']},
    }
    data.update(extra)
    return data


@pytest.mark.db
class TestMatchRepository(unittest.TestCase):
    """Upsert semantics of the match cache."""

    def setUp(self):
        self.engine, self.Session = create_test_session_factory()
        self.session = self.Session()
        add_candidate(self.session, 'cand-1')
        add_job(self.session, 'job-1', title='Backend Engineer', company='Acme', location='Berlin')
        add_job(self.session, 'job-2')
        add_job(self.session, 'job-3')
        self.session.commit()
        self.repo = MatchRepository(self.session)

    def tearDown(self):
        self.session.close()
        self.engine.dispose()

    def test_01_insert(self):
        self.repo.upsert_match('cand-1', 'job-1', scores(72.5))
        self.session.commit()

        row = self.repo.get_match('cand-1', 'job-1')
        self.assertEqual(row.match_score, 72.5)
        self.assertEqual(row.score_breakdown['matched_hard_skills'], ['python'])
        self.assertIsNotNone(row.id)

    def test_02_rewrite_replaces_row(self):
        """Writing a pair twice leaves one row holding the last write."""
        self.repo.upsert_match('cand-1', 'job-1', scores(72.5))
        self.repo.upsert_match('cand-1', 'job-1', scores(64.0, hard_skills_score=55.0))
        self.session.commit()
        self.session.expire_all()

        self.assertEqual(self.repo.count_matches_for_candidate('cand-1'), 1)
        row = self.repo.get_match('cand-1', 'job-1')
        self.assertEqual(row.match_score, 64.0)
        self.assertEqual(row.hard_skills_score, 55.0)

    def test_03_cached_matches_ordered_with_job(self):
        self.repo.upsert_match('cand-1', 'job-3', scores(40.0))
        self.repo.upsert_match('cand-1', 'job-2', scores(90.0))
        self.repo.upsert_match('cand-1', 'job-1', scores(90.0))
        self.session.commit()

        rows = self.repo.get_cached_matches('cand-1', limit=2)

        self.assertEqual([m.job_id for m, _ in rows], ['job-1', 'job-2'])
        match, job = rows[0]
        self.assertEqual(job.title, 'Backend Engineer')

    def test_04_savepoint_rolls_back_only_its_block(self):
        self.repo.upsert_match('cand-1', 'job-1', scores(50.0))
        with self.assertRaises(RuntimeError):
            with self.repo.savepoint():
                self.repo.upsert_match('cand-1', 'job-2', scores(60.0))
                raise RuntimeError("cache write failed")
        self.session.commit()

        self.assertIsNotNone(self.repo.get_match('cand-1', 'job-1'))
        self.assertIsNone(self.repo.get_match('cand-1', 'job-2'))


@pytest.mark.db
class TestProfileAndJobRepositories(unittest.TestCase):

    def setUp(self):
        self.engine, self.Session = create_test_session_factory()
        self.session = self.Session()
        add_candidate(self.session, 'cand-2', hard_skills=[('Go', 'expert', 3)], soft_skills=[('Teamwork', None)])
        add_candidate(self.session, 'cand-1', hard_skills=[('Python', 'advanced', 4), ('SQL', None, 1)])
        add_candidate(self.session, 'emp-1', role='employer')
        add_job(self.session, 'job-1', location='Berlin, Germany', experience_level='senior', job_category='engineering')
        add_job(self.session, 'job-2', location='Remote', experience_level='junior', job_category='engineering')
        add_job(self.session, 'job-3', status='closed', location='Berlin')
        self.session.commit()

    def tearDown(self):
        self.session.close()
        self.engine.dispose()

    def test_01_candidate_pool_excludes_other_roles(self):
        profiles = ProfileRepository(self.session).get_candidate_profiles()
        self.assertEqual([p.user_id for p in profiles], ['cand-1', 'cand-2'])

    def test_02_batch_skill_fetch(self):
        repo = ProfileRepository(self.session)
        hard = repo.get_hard_skills_for_candidates(['cand-1', 'cand-2'])
        soft = repo.get_soft_skills_for_candidates(['cand-1', 'cand-2'])

        self.assertEqual(sorted(s.skill_name for s in hard['cand-1']), ['Python', 'SQL'])
        self.assertEqual([s.skill_name for s in hard['cand-2']], ['Go'])
        self.assertNotIn('cand-1', soft)
        self.assertEqual(repo.get_hard_skills_for_candidates([]), {})

    def test_03_active_jobs_only(self):
        jobs = JobRepository(self.session).get_active_jobs()
        self.assertEqual([j.id for j in jobs], ['job-1', 'job-2'])

    def test_04_location_filter_is_case_insensitive_substring(self):
        jobs = JobRepository(self.session).get_active_jobs(location='berlin')
        self.assertEqual([j.id for j in jobs], ['job-1'])

    def test_05_exact_filters(self):
        repo = JobRepository(self.session)
        self.assertEqual([j.id for j in repo.get_active_jobs(experience_level='junior')], ['job-2'])
        self.assertEqual(len(repo.get_active_jobs(job_category='engineering')), 2)
        self.assertEqual(repo.get_active_jobs(job_category='Engineering'), [])

    def test_06_single_job(self):
        repo = JobRepository(self.session)
        self.assertEqual([j.id for j in repo.get_active_jobs(job_id='job-2')], ['job-2'])
        self.assertEqual(repo.get_active_jobs(job_id='job-3'), [])


@pytest.mark.db
class TestMatchUnitOfWork(unittest.TestCase):

    def setUp(self):
        self.engine, self.Session = create_test_session_factory()
        with self.Session() as session:
            add_candidate(session, 'cand-1')
            add_job(session, 'job-1')
            session.commit()

    def tearDown(self):
        self.engine.dispose()

    def test_01_commits_on_success(self):
        with match_uow(self.Session) as uow:
            uow.matches.upsert_match('cand-1', 'job-1', scores(80.0))

        with self.Session() as session:
            self.assertEqual(session.query(JobMatch).count(), 1)

    def test_02_rolls_back_on_error(self):
        with self.assertRaises(ValueError):
            with match_uow(self.Session) as uow:
                uow.matches.upsert_match('cand-1', 'job-1', scores(80.0))
                raise ValueError("abort")

        with self.Session() as session:
            self.assertEqual(session.query(JobMatch).count(), 0)

    def test_03_transaction_ends_through_the_unit_of_work(self):
        with patch.object(MatchUnitOfWork, 'commit', autospec=True) as commit:
            with match_uow(self.Session):
                pass
        commit.assert_called_once()

        with patch.object(MatchUnitOfWork, 'rollback', autospec=True) as rollback:
            with self.assertRaises(ValueError):
                with match_uow(self.Session):
                    raise ValueError("abort")
        rollback.assert_called_once()


if __name__ == '__main__':
    unittest.main()
