"""
Destination catalogue and tour packages.

Destinations are static content shipped as a JSON file and loaded once per
process. Packages live in the store and are filtered by destination.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional

from fastapi import HTTPException, status

from tripbook.core.config import get_settings
from tripbook.core.logging import get_logger
from tripbook.db.storage import Storage
from tripbook.schemas import Destination, PackageRecord

logger = get_logger(__name__)

BUNDLED_DESTINATIONS = Path(__file__).resolve().parent.parent / "data" / "destinations.json"


def load_destinations(path: Path) -> list[Destination]:
    with path.open(encoding="utf-8") as f:
        rows = json.load(f)
    destinations = [Destination.model_validate(row) for row in rows]
    logger.info("destinations_loaded", path=str(path), count=len(destinations))
    return destinations


@lru_cache()
def get_destinations() -> list[Destination]:
    configured = get_settings().DESTINATIONS_FILE
    return load_destinations(Path(configured) if configured else BUNDLED_DESTINATIONS)


def find_destination(destinations: list[Destination], destination_id: str) -> Destination:
    for destination in destinations:
        if destination.id == destination_id:
            return destination
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Destination not found",
    )


async def list_packages(storage: Storage, destination_id: Optional[str]) -> list[PackageRecord]:
    if not destination_id:
        return []
    return await storage.packages.list(destination_id=destination_id)
