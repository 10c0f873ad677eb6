"""Peer feedback between two employees."""
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Feedback(Base):
    __tablename__ = "feedbacks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    from_employee: Mapped[int | None] = mapped_column(ForeignKey("employees.id"))
    to_employee: Mapped[int | None] = mapped_column(ForeignKey("employees.id"))
    message: Mapped[str | None] = mapped_column(Text)
    submitted_on: Mapped[datetime | None] = mapped_column(DateTime, server_default=func.current_timestamp())
