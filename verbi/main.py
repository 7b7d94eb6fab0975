# main.py
import argparse
import logging
import os
import sys

from verbi.app.config import DATASET_ENV, DEFAULT_LOG_LEVEL, ERROR_PREFIX, LOG_FORMAT, LOG_LEVEL_ENV
from verbi.app.errors import DatasetError
from verbi.app.filters import find_verbs
from verbi.app.loader import load_verbs
from verbi.app.presenter import display_verbs, handle_output_messages
from verbi.app.sources import DatasetSource, select_source

logger = logging.getLogger("verbi")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="verbi",
        description="Coniugazioni dei verbi italiani con le forme tedesche corrispondenti.",
        allow_abbrev=False,
    )
    # -verb is the single-dash spelling older scripts use
    parser.add_argument("--verb", "-verb", dest="verb", default="", metavar="VERBO",
                        help="Verbo italiano da cercare (es. Essere)")
    parser.add_argument("-v", dest="short_verb", default="", metavar="VERBO",
                        help="Verbo italiano da cercare (abbreviazione di -verb)")
    return parser


def parse_flags(argv=None) -> str:
    """Return the verb to search for; the long flag wins when it is non-empty."""
    args = build_parser().parse_args(argv)
    if args.verb:
        return args.verb
    return args.short_verb


def setup_logging():
    level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, level, logging.WARNING), stream=sys.stderr)


def run(query: str, source: DatasetSource) -> int:
    try:
        verbs = load_verbs(source)
    except DatasetError as e:
        logger.debug("Loading %s failed", source, exc_info=True)
        print(ERROR_PREFIX, e)
        return 1

    matches, found = find_verbs(verbs, query)
    display_verbs(matches)
    handle_output_messages(query, found, len(verbs), source.name)
    return 0


def main(argv=None) -> int:
    query = parse_flags(argv)
    setup_logging()

    source = select_source(os.getenv(DATASET_ENV))
    logger.debug("Using dataset source %s", source)
    return run(query, source)


if __name__ == "__main__":
    sys.exit(main())
