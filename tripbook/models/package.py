"""
Tour package offered for a destination. Seeded outside the API.
"""

from sqlalchemy import Column, Integer, String, Text

from tripbook.db.base import Base, TimestampMixin


class Package(Base, TimestampMixin):
    __tablename__ = "packages"

    id = Column(Integer, primary_key=True, index=True)
    destination_id = Column(String(100), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    duration = Column(String(100), nullable=False)
    price = Column(String(32), nullable=False)
    inclusions = Column(Text, nullable=False)
    exclusions = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Package(id={self.id}, destination={self.destination_id}, name={self.name})>"
