#!/usr/bin/env python
"""
Movie dataset verification script.

Loads a dataset file the same way the API does and reports:
1. Load status (and the error if the dataset was rejected)
2. Basic statistics (count, year range, average rating)
3. Genre distribution
4. Sample search queries

Usage:
    # Verify the bundled dataset
    python scripts/verify_catalog.py

    # Verify another file, statistics only
    python scripts/verify_catalog.py --data-path other.json --quick
"""

import sys
import argparse
from pathlib import Path
from collections import Counter

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_catalog.api.config import get_movies_data_path
from movie_catalog.core.catalog import MovieService
from movie_catalog.utils.logging_config import setup_logging


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def check_basic_stats(movies):
    """Print catalog size, year range and average rating."""
    print_section("1. Catalog Statistics")

    years = [m.year for m in movies]
    ratings = [m.rating for m in movies]
    print(f"\n  Movies:         {len(movies):,}")
    print(f"  Years:          {min(years)} - {max(years)}")
    print(f"  Average rating: {sum(ratings) / len(ratings):.2f}")


def check_genres(movies):
    """Print how many movies list each genre category."""
    print_section("2. Genre Distribution")

    counts = Counter(
        part.strip()
        for movie in movies
        for part in movie.genre.split("/")
        if part.strip()
    )
    for genre, count in counts.most_common():
        print(f"  {genre:<15} {count:>4}")


def run_sample_queries(service):
    """Run a few representative searches."""
    print_section("3. Sample Queries")

    first = service.get_all_movies()[0]
    word = first.title.split()[-1]
    samples = [
        (f"name={word!r}", service.search_movies(name=word)),
        (f"id={first.id}", service.search_movies(movie_id=first.id)),
        ("genre='drama'", service.search_movies(genre="drama")),
    ]
    for label, results in samples:
        titles = ", ".join(m.title for m in results[:3])
        print(f"  {label:<25} {len(results):>3} result(s)  {titles}")


def main():
    """Main entry point for dataset verification."""
    parser = argparse.ArgumentParser(description="Verify the movie catalog dataset")
    parser.add_argument(
        "--data-path",
        default=get_movies_data_path(),
        help="Path to the movies JSON file (default: MOVIES_DATA_PATH or data/movies.json)",
    )
    parser.add_argument(
        "--quick",
        action="store_true",
        help="Only print basic statistics",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args()

    setup_logging(level=args.log_level)

    print(f"Verifying dataset: {args.data_path}")
    service = MovieService.from_path(args.data_path)

    if not service.load_result.ok:
        print(f"\n❌ Dataset rejected: {service.load_result.error}")
        return 1

    movies = service.get_all_movies()
    if not movies:
        print("\n⚠️  Dataset is valid but contains no movies")
        return 1

    check_basic_stats(movies)
    if not args.quick:
        check_genres(movies)
        run_sample_queries(service)

    print("\n✅ Dataset OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
