"""Daily attendance log."""
import datetime as dt

from sqlalchemy import Date, ForeignKey, Integer, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class AttendanceLog(Base):
    __tablename__ = "attendance_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employee_id: Mapped[int | None] = mapped_column(ForeignKey("employees.id"), index=True)
    date: Mapped[dt.date | None] = mapped_column(Date, index=True)
    check_in: Mapped[dt.time | None] = mapped_column(Time)
    check_out: Mapped[dt.time | None] = mapped_column(Time)
    status: Mapped[str | None] = mapped_column(String(20))
