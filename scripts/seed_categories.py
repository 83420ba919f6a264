#!/usr/bin/env python3
"""Install the default skill categories into an empty catalog.

Run once after creating a new database. Does nothing when categories
already exist.

Usage:
    python -m scripts.seed_categories [--catalog path/to/categories.yaml]

Environment variables:
    DATABASE_URL: SQLAlchemy connection string (optional)
"""
import argparse
import logging
import sys
from pathlib import Path

from scripts.bootstrap import get_session, init_db, settings
from skillswipe.catalog.category_service import CategoryService
from skillswipe.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main():
    """Seed the catalog and log what happened."""
    parser = argparse.ArgumentParser(description="Seed default skill categories.")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help=f"Catalog YAML (default: {settings.default_categories_path})",
    )
    args = parser.parse_args()

    setup_logging(level=settings.log_level)
    init_db()

    with get_session() as session:
        service = CategoryService(session)
        written = service.seed_defaults_if_empty(args.catalog)
        if written:
            logger.info("Seeded %d categories", written)
        else:
            logger.info("Catalog already populated, nothing to do")

        for category in service.get_categories():
            logger.info("  %2d. %s (%d keywords)", category.order, category.name, len(category.keywords))


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        logger.error("Error: %s", e)
        sys.exit(1)
