"""User ORM model. Table: users."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from userapi.infrastructure.persistence.database import Base


class User(Base):
    """User model. Unique email; created_at/updated_at written by the database.

    updated_at is refreshed by the update_users_updated_at trigger (see
    schema.py), not by the ORM.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), server_default=text("CURRENT_TIMESTAMP")
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), server_default=text("CURRENT_TIMESTAMP")
    )

    __table_args__ = (UniqueConstraint("email", name="users_email_key"),)
