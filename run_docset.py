#!/usr/bin/env python3
"""
Command-line script to build a Dash docset from a javadoc API folder.

Usage:
    python run_docset.py "Java SE 8" ~/Downloads/docs/api
    python run_docset.py Guava guava-javadoc/ --parser lxml -v
    python run_docset.py MyLib build/docs/javadoc --log-file docset.log

Settings can also come from JAVADOCSET_* environment variables or a .env
file (JAVADOCSET_PARSER, JAVADOCSET_WALK_LIMIT, JAVADOCSET_LOG_LEVEL,
JAVADOCSET_LOG_FILE).  Command-line flags win.
"""

import argparse
import logging
import sys
from pathlib import Path

# Load .env file automatically
from dotenv import load_dotenv
load_dotenv()

from pydantic import ValidationError

from javadocset.config import IndexerConfig
from javadocset.exceptions import DocsetError, JavadocsetError
from javadocset.logger import setup_logger
from javadocset.main import DocsetBuilder

USAGE_LINES = [
    "Usage: javadocset <docset name> <javadoc API folder>",
    "<docset name> - anything you want",
    "<javadoc API folder> - the path of the javadoc API folder you want to index",
]


def print_usage(logger: logging.Logger) -> None:
    for line in USAGE_LINES:
        logger.info(line)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="javadocset",
        description="Build a Dash docset with a searchable index from a javadoc API folder"
    )
    parser.add_argument("docset_name", help="Docset name (anything you want)")
    parser.add_argument("javadoc_path", help="Path of the javadoc API folder to index")
    parser.add_argument(
        "--parser",
        choices=["html5lib", "lxml"],
        help="BeautifulSoup tree builder for index pages (default: html5lib)"
    )
    parser.add_argument(
        "--output-dir", "-o",
        default=".",
        help="Directory to create the .docset in (default: current directory)"
    )
    parser.add_argument(
        "--log-file",
        help="Also write log output to this file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging"
    )
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    # Flags left unset fall through to JAVADOCSET_* variables and defaults
    flags = {
        "parser": args.parser,
        "log_file": args.log_file,
        "log_level": logging.DEBUG if args.verbose else None,
    }
    try:
        config = IndexerConfig(**{k: v for k, v in flags.items() if v is not None})
    except ValidationError as e:
        logger = setup_logger()
        logger.error(f"Invalid configuration: {e}")
        print_usage(logger)
        return 1
    logger = setup_logger(level=config.log_level, log_file=config.log_file)

    javadoc_path = Path(args.javadoc_path)
    if not javadoc_path.is_dir():
        logger.error(f"Invalid argument(s) provided: {javadoc_path} is not a directory")
        print_usage(logger)
        return 1

    builder = DocsetBuilder(config=config, output_dir=args.output_dir)

    try:
        result = builder.build(args.docset_name, javadoc_path)
    except DocsetError as e:
        # Also covers EmptyIndexError: nothing indexed means a wrong folder
        logger.error(e.message)
        print_usage(logger)
        return 1
    except JavadocsetError as e:
        logger.error(e.message)
        return 1

    print(f"✓ {result.docset_dir}: {result.entries_stored} entries "
          f"from {len(result.index_files)} index file(s)")
    if result.skipped_files:
        print(f"  ✗ Skipped {len(result.skipped_files)} unreadable file(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
