"""
Travel Diary Backend — User SQLAlchemy Model
=============================================

What:  ORM model representing the `users` table.
Who:   Used by UserService for reads/inserts and by EntryService for the
       author existence check.

Table Design:
    - id: INTEGER PRIMARY KEY (SQLite rowid alias, assigned on insert)
    - username / email: TEXT NOT NULL, no uniqueness constraint
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from travel_diary.database import Base


class User(Base):
    """A diary author. Created and read only; never updated or deleted."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
