from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text
from app.core.base import Base, TimestampedSoftDeleteMixin

class Template(Base, TimestampedSoftDeleteMixin):
    name: Mapped[str] = mapped_column(String(255))
    content: Mapped[str] = mapped_column(Text)
