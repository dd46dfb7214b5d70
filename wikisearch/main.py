"""
WikiSearch demo - two-term boolean search over a directory of pages.

Usage:
    python -m wikisearch.main java programming

Indexes every .txt file in WIKISEARCH_DOCS_PATH, then prints ranked results
for each term, for both terms together (AND), either term (OR), and the first
term without the second (MINUS).
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

from dotenv import load_dotenv

from .logging_config import setup_logging
from .indexing import InMemoryIndex
from .search import Index, QueryResult, search

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def load_environment(project_root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local (highest priority) or .env from the project root.

    Returns:
        Path of the loaded file, or None if only the system environment is used
    """
    for candidate in (project_root / ".env.local", project_root / ".env"):
        if candidate.exists():
            print(f"Loading environment from: {candidate}", file=sys.stderr)
            load_dotenv(candidate, override=True)
            return candidate
    return None


def print_query(label: str, result: QueryResult, out: TextIO) -> None:
    print(f"Query: {label}", file=out)
    result.print_ranked(file=out)


def run_demo(term1: str, term2: str, index: Index, out: Optional[TextIO] = None) -> QueryResult:
    """
    Search both terms and print every combination.

    Args:
        term1: First search term
        term2: Second search term
        index: Index to search
        out: Output stream (default: stdout)

    Returns:
        The AND result
    """
    out = out if out is not None else sys.stdout

    search1 = search(term1, index)
    print_query(term1, search1, out)

    search2 = search(term2, index)
    print_query(term2, search2, out)

    intersection = search1.intersect(search2)
    print_query(f"{term1} AND {term2}", intersection, out)
    print_query(f"{term1} OR {term2}", search1.union(search2), out)
    print_query(f"{term1} MINUS {term2}", search1.difference(search2), out)

    return intersection


def main(argv=None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if len(args) < 2:
        print("Usage:", file=sys.stderr)
        print("  python -m wikisearch.main TERM1 TERM2", file=sys.stderr)
        print("\nExample:", file=sys.stderr)
        print("  WIKISEARCH_DOCS_PATH=docs python -m wikisearch.main java programming", file=sys.stderr)
        return 1

    load_environment()

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    setup_logging(
        log_file=os.getenv("LOG_FILE", "logs/wikisearch.log"),
        console_level=getattr(logging, log_level, logging.INFO),
        file_level=logging.DEBUG
    )

    docs_path = os.getenv("WIKISEARCH_DOCS_PATH", "docs")
    try:
        index = InMemoryIndex.from_directory(docs_path)
    except NotADirectoryError as e:
        logger.error(f"Cannot build index: {e}")
        return 1

    run_demo(args[0], args[1], index)
    return 0


if __name__ == "__main__":
    sys.exit(main())
