"""
Dream Matching maintenance entry point.

    python -m services.matching.main recalculate     # rebuild every match edge
    python -m services.matching.main ensure-models   # download missing spaCy models
"""

import argparse
import logging
import sys
import time

logger = logging.getLogger(__name__)


def run_recalculate() -> int:
    from services.matching.matching_service import MatchingService

    service = MatchingService()
    start_time = time.time()
    total = service.recalculate_all_matches()
    duration = time.time() - start_time
    logger.info(f"Recalculated matches in {duration:.1f}s: {total} pairs, stats={service.stats}")
    return 0


def run_ensure_models() -> int:
    from shared.utils.spacy_setup import ensure_spacy_models

    if not ensure_spacy_models():
        logger.error("Failed to ensure spaCy models. Tagging falls back to blank pipelines.")
        return 1
    return 0


COMMANDS = {
    "recalculate": run_recalculate,
    "ensure-models": run_ensure_models,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dream tagging & matching maintenance")
    parser.add_argument("command", choices=sorted(COMMANDS))
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        return COMMANDS[args.command]()
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
        return 130
    finally:
        from shared.models.database import close_database
        close_database()


if __name__ == "__main__":
    sys.exit(main())
