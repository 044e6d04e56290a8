"""
Destination and package endpoints. Public and read-only.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from tripbook.api.dependencies import get_storage
from tripbook.db.storage import Storage
from tripbook.schemas import Destination, PackageRecord
from tripbook.services.catalog_service import find_destination, get_destinations, list_packages

router = APIRouter(tags=["Catalog"])


@router.get("/destinations", response_model=list[Destination])
async def list_destinations_endpoint(
    destinations: list[Destination] = Depends(get_destinations),
):
    return destinations


@router.get("/destinations/{destination_id}", response_model=Destination)
async def get_destination_endpoint(
    destination_id: str,
    destinations: list[Destination] = Depends(get_destinations),
):
    return find_destination(destinations, destination_id)


@router.get("/packages", response_model=list[PackageRecord])
async def list_packages_endpoint(
    destination_id: Optional[str] = Query(None, alias="destinationId"),
    storage: Storage = Depends(get_storage),
):
    """Packages for one destination. Without destinationId the list is empty."""
    return await list_packages(storage, destination_id)
