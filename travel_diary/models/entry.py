"""
Travel Diary Backend — Entry SQLAlchemy Model
==============================================

What:  ORM model representing the `entries` table: a travel diary record
       linking a title/content pair to an author (users.id) and a location
       (locations.id).

Referential integrity:
    Both references are declared as FOREIGN KEYs. EntryService checks that
    the referenced rows exist before inserting; with `PRAGMA foreign_keys=ON`
    SQLite also rejects the insert if a referenced row is missing at that
    moment. There is no ON DELETE action because nothing deletes rows.
"""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from travel_diary.database import Base


class Entry(Base):
    __tablename__ = "entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
    )
    location_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("locations.id"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<Entry(id={self.id}, author_id={self.author_id}, "
            f"location_id={self.location_id})>"
        )
