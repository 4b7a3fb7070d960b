"""
Travel Diary Backend — Location SQLAlchemy Model
=================================================

What:  ORM model representing the `locations` table.

Latitude/longitude are stored as SQLite REAL (IEEE 754 double), so any
float sent by a client comes back bit-for-bit identical.
"""

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from travel_diary.database import Base


class Location(Base):
    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Location(id={self.id}, name='{self.name}')>"
