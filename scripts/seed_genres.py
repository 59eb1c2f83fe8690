"""
seed_genres.py - Insert sample genres for one tenant.

Genres that already exist are skipped, so the script is safe to re-run.

Usage:
    python scripts/seed_genres.py --tenant <tenant-id>

Falls back to DEFAULT_TENANT_ID when --tenant is omitted.
"""

from __future__ import annotations

import argparse
import logging

from catalog_api.config import get_settings
from catalog_api.errors import ApiError
from catalog_api.genres.schemas import GenreCreate
from catalog_api.genres.service import GenreService, default_genre_service

logger = logging.getLogger("seed_genres")
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

SEED_LOCALE = "en-US"

SAMPLE_GENRES: tuple[dict, ...] = (
    {"id": "drama", "texts": {"en": "Drama", "tr": "Dram"}, "displayOrder": 1},
    {"id": "action", "texts": {"en": "Action", "tr": "Aksiyon"}, "displayOrder": 2},
    {"id": "comedy", "texts": {"en": "Comedy", "tr": "Komedi"}, "displayOrder": 3},
)


def seed(service: GenreService, tenant_id: str) -> list[str]:
    """Create the sample genres; returns the ids actually inserted."""
    logger.info("Seeding %d genres for tenant %s", len(SAMPLE_GENRES), tenant_id)
    inserted: list[str] = []
    for sample in SAMPLE_GENRES:
        payload = GenreCreate.model_validate(sample)
        try:
            genre = service.create_genre(tenant_id, payload, SEED_LOCALE)
        except ApiError as exc:
            if exc.status_code != 409:
                raise
            logger.warning("Genre %s already exists, skipping", payload.id)
            continue
        logger.info("Inserted genre %s", genre.genre_id)
        inserted.append(genre.genre_id)
    logger.info("Genre seeding completed")
    return inserted


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed sample genres")
    parser.add_argument("--tenant", default=None, help="Tenant id (default: DEFAULT_TENANT_ID)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    tenant_id = (args.tenant or get_settings().default_tenant_id or "").strip()
    if not tenant_id:
        logger.error("Tenant id is required. Provide --tenant or set DEFAULT_TENANT_ID")
        return 1
    try:
        seed(default_genre_service(), tenant_id)
    except Exception as exc:
        logger.error("Failed to seed genres: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
