#!/usr/bin/env python3
"""
Tests for the command-line entry point.
"""

import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

import pytest
from sqlalchemy import inspect

import main
from tests import add_candidate, add_job, create_test_session_factory


class TestArgumentParser(unittest.TestCase):

    def test_01_compute_matches_arguments(self):
        args = main.build_parser().parse_args([
            'compute-matches', 'cand-1', '--limit', '5', '--location', 'berlin'
        ])
        self.assertEqual(args.candidate_id, 'cand-1')
        self.assertEqual(args.limit, 5)
        self.assertEqual(args.location, 'berlin')
        self.assertIsNone(args.job_id)
        self.assertIs(args.handler, main.run_compute_matches)

    def test_02_rank_candidates_requires_employer(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.build_parser().parse_args(['rank-candidates', 'job-1'])

    def test_03_command_required(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.build_parser().parse_args([])


@pytest.mark.db
class TestCommands(unittest.TestCase):

    def setUp(self):
        self.engine, self.Session = create_test_session_factory()
        with self.Session() as session:
            add_candidate(session, 'cand-1', hard_skills=[('Python', 'expert', 2)])
            add_job(session, 'job-1', employer_id='emp-1', skills=['python'])
            session.commit()

        patcher = patch.object(main, 'get_session_factory', return_value=self.Session)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        self.engine.dispose()

    def run_main(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out), redirect_stderr(io.StringIO()):
            code = main.main(list(argv))
        return code, out.getvalue()

    def test_01_compute_matches(self):
        code, output = self.run_main('compute-matches', 'cand-1')

        self.assertEqual(code, 0)
        data = json.loads(output)
        self.assertEqual(data['candidate_id'], 'cand-1')
        self.assertEqual([m['job_id'] for m in data['matches']], ['job-1'])

    def test_02_rank_candidates(self):
        code, output = self.run_main('rank-candidates', 'job-1', '--employer-id', 'emp-1', '--min-score', '0')

        self.assertEqual(code, 0)
        data = json.loads(output)
        self.assertEqual(data['total_analyzed'], 1)
        self.assertEqual(data['candidates'][0]['candidate_id'], 'cand-1')

    def test_03_service_error_exit_code(self):
        code, output = self.run_main('compute-matches', 'ghost')
        self.assertEqual(code, 1)
        self.assertEqual(output, '')

    def test_04_forbidden_exit_code(self):
        code, _ = self.run_main('rank-candidates', 'job-1', '--employer-id', 'emp-9')
        self.assertEqual(code, 1)

    def test_05_init_db(self):
        with patch.object(main, 'get_engine', return_value=self.engine):
            code, _ = self.run_main('init-db')

        self.assertEqual(code, 0)
        self.assertIn('job_matches', inspect(self.engine).get_table_names())


if __name__ == '__main__':
    unittest.main()
