"""
seed_artists.py - Insert sample artists for one tenant.

Artists that already exist are skipped, so the script is safe to re-run.

Usage:
    python scripts/seed_artists.py --tenant <tenant-id>

Falls back to DEFAULT_TENANT_ID when --tenant is omitted.
"""

from __future__ import annotations

import argparse
import logging

from catalog_api.artists.schemas import ArtistCreate
from catalog_api.artists.service import ArtistService, default_artist_service
from catalog_api.config import get_settings
from catalog_api.errors import ApiError

logger = logging.getLogger("seed_artists")
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

SEED_LOCALE = "en-US"

SAMPLE_ARTISTS: tuple[dict, ...] = (
    {"id": "artist-al-pacino", "firstName": "Al", "lastName": "Pacino", "isActive": True},
    {"id": "artist-robert-de-niro", "firstName": "Robert", "lastName": "De Niro", "isActive": True},
    {"id": "artist-emma-stone", "firstName": "Emma", "lastName": "Stone", "isActive": True},
)


def seed(service: ArtistService, tenant_id: str) -> list[str]:
    """Create the sample artists; returns the ids actually inserted."""
    logger.info("Seeding %d artists for tenant %s", len(SAMPLE_ARTISTS), tenant_id)
    inserted: list[str] = []
    for sample in SAMPLE_ARTISTS:
        payload = ArtistCreate.model_validate(sample)
        try:
            artist = service.create_artist(tenant_id, payload, SEED_LOCALE)
        except ApiError as exc:
            if exc.status_code != 409:
                raise
            logger.warning("Artist %s already exists, skipping", payload.id)
            continue
        logger.info("Inserted artist %s", artist.artist_id)
        inserted.append(artist.artist_id)
    logger.info("Artist seeding completed")
    return inserted


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed sample artists")
    parser.add_argument("--tenant", default=None, help="Tenant id (default: DEFAULT_TENANT_ID)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    tenant_id = (args.tenant or get_settings().default_tenant_id or "").strip()
    if not tenant_id:
        logger.error("Tenant id is required. Provide --tenant or set DEFAULT_TENANT_ID")
        return 1
    try:
        seed(default_artist_service(), tenant_id)
    except Exception as exc:
        logger.error("Failed to seed artists: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
