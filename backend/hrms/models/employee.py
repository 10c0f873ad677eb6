"""Employee model."""
from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Float, ForeignKey, Integer, String, func, true
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Employee(Base):
    """Employee master record; status starts out as 'Active'."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20))
    doj: Mapped[date | None] = mapped_column(Date)
    department_id: Mapped[int | None] = mapped_column(ForeignKey("departments.id"))
    designation: Mapped[str | None] = mapped_column(String(100))
    basic_salary: Mapped[float | None] = mapped_column(Float)
    pf_applicable: Mapped[bool | None] = mapped_column(Boolean, server_default=true())
    esi_applicable: Mapped[bool | None] = mapped_column(Boolean, server_default=true())
    pan_number: Mapped[str | None] = mapped_column(String(20))
    aadhaar_number: Mapped[str | None] = mapped_column(String(20))
    status: Mapped[str | None] = mapped_column(String(20), server_default="Active")
    created_at: Mapped[datetime | None] = mapped_column(DateTime, server_default=func.current_timestamp())
