#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only pure unit tests (no database layer)
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Database Setup:
    Tests that touch the database layer use an in-memory SQLite engine
    built from the declarative metadata; no server is required.
"""

from typing import Any, Dict, Iterable, Optional, Tuple

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base, Profile, CandidateSkill, CandidateSoftSkill, Job


def create_test_engine() -> Engine:
    """
    In-memory SQLite engine shared by every session of one test.

    pysqlite's own transaction handling breaks SAVEPOINT; the listeners
    hand BEGIN back to SQLAlchemy so begin_nested() behaves like PostgreSQL.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(engine)
    return engine


def create_test_session_factory() -> Tuple[Engine, sessionmaker]:
    engine = create_test_engine()
    return engine, sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def add_candidate(
    session: Session,
    user_id: str,
    hard_skills: Iterable[Tuple[str, Optional[str], float]] = (),
    soft_skills: Iterable[Tuple[str, Optional[str]]] = (),
    **fields: Any
) -> Profile:
    """Insert a candidate profile with its skills. Does not commit."""
    defaults: Dict[str, Any] = {
        'role': 'candidate',
        'full_name': f"Candidate {user_id}",
        'email': f"{user_id}@example.com",
        'years_of_experience': 0,
        'number_of_companies': 0,
        'projects_handled': 0,
        'knowledge_score': 0,
        'communication_score': 0,
        'behavioral_score': 0,
    }
    defaults.update(fields)
    profile = Profile(user_id=user_id, **defaults)
    session.add(profile)

    for name, level, years in hard_skills:
        session.add(CandidateSkill(
            candidate_id=user_id, skill_name=name, proficiency_level=level, years_experience=years
        ))
    for name, level in soft_skills:
        session.add(CandidateSoftSkill(candidate_id=user_id, skill_name=name, proficiency_level=level))

    return profile


def add_job(session: Session, job_id: str, employer_id: str = 'employer-1', **fields: Any) -> Job:
    """Insert a job posting. Does not commit."""
    defaults: Dict[str, Any] = {
        'title': f"Job {job_id}",
        'company': 'Acme',
        'location': 'Remote',
        'description': '',
        'status': 'active',
        'minimum_years_experience': 0,
        'skills': [],
        'required_hard_skills': [],
        'required_soft_skills': [],
        'preferred_skills': [],
    }
    defaults.update(fields)
    job = Job(id=job_id, employer_id=employer_id, **defaults)
    session.add(job)
    return job
