"""Leave policies, leave requests and per-employee leave balances."""
from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Float, ForeignKey, Integer, String, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class LeavePolicy(Base):
    __tablename__ = "leave_policies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    policy_name: Mapped[str | None] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(Text)
    max_leaves: Mapped[int | None] = mapped_column(Integer)
    carry_forward: Mapped[bool | None] = mapped_column(Boolean, server_default=false())


class Leave(Base):
    """A leave request. New rows are 'Pending' until approved or rejected."""

    __tablename__ = "leaves"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employee_id: Mapped[int | None] = mapped_column(ForeignKey("employees.id"), index=True)
    type: Mapped[str | None] = mapped_column(String(50))
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)
    status: Mapped[str | None] = mapped_column(String(20), server_default="Pending")
    applied_on: Mapped[datetime | None] = mapped_column(DateTime, server_default=func.current_timestamp())


class LeaveBalance(Base):
    __tablename__ = "leave_balances"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employee_id: Mapped[int | None] = mapped_column(ForeignKey("employees.id"), index=True)
    leave_type: Mapped[str | None] = mapped_column(String(50))
    balance: Mapped[float | None] = mapped_column(Float)
