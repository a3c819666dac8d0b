import logging
import argparse
import sys

from core.config_loader import load_config
from core.matching_service import MatchingService
from database.uow import matchmaking_uow
from database.init_db import init_db

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_generate(user_id: int, mode=None) -> int:
    """Generate and save matches for one user; returns a process exit code."""
    config = load_config()
    logging.getLogger().setLevel(config.log_level.upper())

    with matchmaking_uow() as repo:
        service = MatchingService(repo, config=config.matching)
        matches = service.generate_matches(user_id, mode=mode)

        if matches is None:
            logger.error(f"User {user_id} not found")
            return 1

        if not matches:
            logger.info(f"No eligible matches for user {user_id}")
            return 0

        for rank, match in enumerate(matches, start=1):
            logger.info(
                f"#{rank} user={match.matched_user_id} activity={match.activity_id} "
                f"score={match.compatibility_score} [{match.ranking_mode}] {match.match_reason}"
            )
    return 0


def main():
    parser = argparse.ArgumentParser(description="Activity Matchmaker Driver")
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('init-db', help='Create tables (retries while the database starts up)')

    generate = subparsers.add_parser('generate', help='Generate and save matches for a user')
    generate.add_argument('--user-id', type=int, required=True, help='User to generate matches for')
    generate.add_argument('--mode', type=str, choices=['strict', 'discovery'], default=None,
                          help='Ranking mode (default: matching.mode from config.yaml)')

    subparsers.add_parser('serve', help='Run the HTTP API with uvicorn')

    args = parser.parse_args()
    logger.info(f"Matchmaker driver starting: {args.command}")

    if args.command == 'init-db':
        init_db()
        return 0

    if args.command == 'generate':
        return run_generate(args.user_id, mode=args.mode)

    from web.backend.app import main as serve
    serve()
    return 0


if __name__ == "__main__":
    sys.exit(main())
