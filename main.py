import argparse
import json
import logging
import os
import sys

from core.config_loader import load_config
from core.exceptions import ServiceException
from core.matcher import CandidateRankingService, JobFilters, JobMatchService
from database.database import get_engine, get_session_factory
from database.init_db import init_db
from database.uow import match_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_init_db(config, args):
    init_db(get_engine(config.database.url))


def run_compute_matches(config, args):
    filters = JobFilters.from_dict({
        'location': args.location,
        'experience_level': args.experience_level,
        'job_category': args.job_category,
    })

    with match_uow(get_session_factory(config.database.url)) as uow:
        service = JobMatchService(uow, config=config.matching)
        result = service.compute_matches(
            args.candidate_id,
            job_id=args.job_id,
            limit=args.limit,
            filters=filters
        )

    print(json.dumps({
        'candidate_id': result.candidate_id,
        'candidate_name': result.candidate_name,
        'total_jobs_analyzed': result.total_jobs_analyzed,
        'failed': result.failed,
        'matches': [m.to_dict() for m in result.matches],
    }, indent=2))


def run_rank_candidates(config, args):
    with match_uow(get_session_factory(config.database.url)) as uow:
        service = CandidateRankingService(uow, config=config.matching)
        result = service.rank_candidates(
            args.job_id,
            employer_id=args.employer_id,
            limit=args.limit,
            min_score=args.min_score
        )

    print(json.dumps({
        'job_id': result.job_id,
        'job_title': result.job_title,
        'min_score_threshold': result.min_score_threshold,
        'total_analyzed': result.total_analyzed,
        'total_qualified': result.total_qualified,
        'failed': result.failed,
        'candidates': [c.to_dict() for c in result.candidates],
    }, indent=2))


def run_serve(config, args):
    import uvicorn

    os.environ["TALENTMATCH_CONFIG"] = args.config
    logger.info(f"Starting TalentMatch API on {config.web.host}:{config.web.port}")
    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TalentMatch scoring engine")
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to the YAML configuration file')
    subparsers = parser.add_subparsers(dest='command', required=True)

    init_parser = subparsers.add_parser('init-db', help='Create database tables')
    init_parser.set_defaults(handler=run_init_db)

    compute_parser = subparsers.add_parser('compute-matches', help='Rank active jobs for a candidate')
    compute_parser.add_argument('candidate_id')
    compute_parser.add_argument('--job-id', default=None, help='Restrict matching to one job')
    compute_parser.add_argument('--limit', type=int, default=None)
    compute_parser.add_argument('--location', default=None)
    compute_parser.add_argument('--experience-level', default=None)
    compute_parser.add_argument('--job-category', default=None)
    compute_parser.set_defaults(handler=run_compute_matches)

    rank_parser = subparsers.add_parser('rank-candidates', help='Rank candidates for a job')
    rank_parser.add_argument('job_id')
    rank_parser.add_argument('--employer-id', required=True, help='Employer that owns the job')
    rank_parser.add_argument('--limit', type=int, default=None)
    rank_parser.add_argument('--min-score', type=int, default=None)
    rank_parser.set_defaults(handler=run_rank_candidates)

    serve_parser = subparsers.add_parser('serve', help='Run the HTTP API')
    serve_parser.set_defaults(handler=run_serve)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    try:
        args.handler(config, args)
    except ServiceException as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
