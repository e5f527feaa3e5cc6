from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String
from app.core.base import Base, TimestampedSoftDeleteMixin

class User(Base, TimestampedSoftDeleteMixin):
    first_name: Mapped[str] = mapped_column(String(255))
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # unique across all rows, soft-deleted ones included
    username: Mapped[str] = mapped_column(String(255), unique=True)
    password_hash: Mapped[str] = mapped_column(String(255))
