"""Command-line demo: build a small store, run one query, print the matches.

Usage:
    python -m flatvec
    python -m flatvec --top-k 3
    python -m flatvec --query 0.0,0.7,1.0
"""

import argparse
from collections.abc import Sequence

from flatvec.config import get_settings
from flatvec.config.settings import Settings
from flatvec.observability.logging import configure_from_settings, get_logger
from flatvec.vector import SearchResult, Vector, create_vector_store

logger = get_logger(__name__)

RESULTS_HEADER = "Top Search Results:"

DEMO_VECTORS = (
    Vector(id="1", values=(1.0, 0.1, 0.0), metadata="King"),
    Vector(id="2", values=(0.9, 0.2, 0.0), metadata="Queen"),
    Vector(id="3", values=(0.0, 0.8, 0.9), metadata="Apple"),
)
DEMO_QUERY = (0.95, 0.15, 0.0)
DEMO_TOP_K = 2


def format_result(result: SearchResult) -> str:
    """Render one match as a console line."""
    return (
        f"ID: {result.vector.id} | Name: {result.vector.metadata} "
        f"| Score: {result.score:.4f}"
    )


def format_results(results: Sequence[SearchResult]) -> list[str]:
    """Render the header followed by one line per match."""
    return [RESULTS_HEADER, *(format_result(result) for result in results)]


def parse_vector(text: str) -> list[float]:
    """Parse a comma-separated list of floats."""
    try:
        return [float(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid vector {text!r}: {exc}") from exc


def parse_top_k(text: str) -> int:
    """Parse a non-negative result count."""
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid top-k {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"top-k must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flatvec",
        description="Run an exhaustive cosine similarity search over demo vectors",
    )
    parser.add_argument(
        "--query",
        type=parse_vector,
        default=list(DEMO_QUERY),
        help="Comma-separated query vector (default: %(default)s)",
    )
    parser.add_argument(
        "--top-k",
        type=parse_top_k,
        default=DEMO_TOP_K,
        help="Number of matches to print (default: %(default)s)",
    )
    return parser


def load_settings() -> tuple[Settings, bool]:
    """Load settings, falling back to defaults when no config directory exists.

    Returns:
        The settings and whether configuration files were found
    """
    try:
        return get_settings(), True
    except FileNotFoundError:
        return Settings(), False


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings, config_found = load_settings()
    configure_from_settings(settings.observability.logging)
    if not config_found:
        logger.warning("config_not_found", using="defaults")

    store = create_vector_store(settings.search)
    store.insert_many(DEMO_VECTORS)

    results = store.query(args.query, args.top_k)
    for line in format_results(results):
        print(line)

    return 0
