"""
Read-only catalogue schemas: destinations and their packages.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tripbook.schemas.base import CamelModel


class Destination(CamelModel):
    id: str
    name: str
    description: str
    image: str
    highlights: list[str] = Field(default_factory=list)
    best_time_to_visit: str = ""
    average_price: str = ""


class PackageRecord(CamelModel):
    id: int
    destination_id: str
    name: str
    description: str
    duration: str
    price: str
    inclusions: str
    exclusions: str
    created_at: Optional[datetime] = None
