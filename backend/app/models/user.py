"""
TourGuide Backend — User SQLAlchemy Model
===========================================

What:  ORM model representing the `users` table.
Who:   Used by UserService for registration and lookups, and as the target
       of the Tour.created_by_id foreign key.

Table Design Rationale:
    - username carries a UNIQUE constraint: the service pre-checks for a
      friendly error, but only the database can make uniqueness race-free.
    - password holds a bcrypt hash, never the plaintext.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class User(Base):
    """
    A registered user. Created at registration, never updated or deleted.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Login name, unique across all users",
    )

    # bcrypt output is 60 chars; 255 leaves room for a future algorithm
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Salted one-way password hash",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
