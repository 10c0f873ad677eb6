"""Pydantic schemas used across the backend API.

Write payloads declare every field as optional: the handlers do not check
for required values and leave NOT NULL enforcement to the database. Fields
not declared on a payload are dropped when the body is parsed.
"""
import datetime as dt
from datetime import date, datetime

from pydantic import BaseModel, field_validator


class MessageRead(BaseModel):
    message: str


class ErrorRead(BaseModel):
    error: str


class DepartmentWrite(BaseModel):
    """Department payload for creation and update."""

    name: str | None = None


class DepartmentRead(BaseModel):
    id: int
    name: str


class EmployeeCreate(BaseModel):
    """Employee payload for creation."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    doj: date | None = None
    department_id: int | None = None
    designation: str | None = None
    basic_salary: float | None = None
    pf_applicable: bool | None = None
    esi_applicable: bool | None = None
    pan_number: str | None = None
    aadhaar_number: str | None = None


class EmployeeUpdate(BaseModel):
    """Only the contact details of an employee can be edited."""

    name: str | None = None
    phone: str | None = None


class EmployeeRead(BaseModel):
    """Employee representation returned by the API."""

    id: int
    name: str
    email: str
    phone: str | None = None
    doj: date | None = None
    department_id: int | None = None
    designation: str | None = None
    basic_salary: float | None = None
    pf_applicable: bool | None = None
    esi_applicable: bool | None = None
    pan_number: str | None = None
    aadhaar_number: str | None = None
    status: str | None = None
    created_at: datetime | None = None


class LeavePolicyWrite(BaseModel):
    policy_name: str | None = None
    description: str | None = None
    max_leaves: int | None = None
    carry_forward: bool | None = None


class LeavePolicyRead(LeavePolicyWrite):
    id: int


class LeaveCreate(BaseModel):
    employee_id: int | None = None
    type: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    status: str | None = None

    @field_validator("status")
    @classmethod
    def blank_status_means_default(cls, value: str | None) -> str | None:
        """An empty status is treated like an absent one, so the leave starts Pending."""

        return value or None


class LeaveUpdate(BaseModel):
    type: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    status: str | None = None


class LeaveRead(BaseModel):
    id: int
    employee_id: int | None = None
    type: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    status: str | None = None
    applied_on: datetime | None = None


class LeaveBalanceCreate(BaseModel):
    employee_id: int | None = None
    leave_type: str | None = None
    balance: float | None = None


class LeaveBalanceUpdate(BaseModel):
    leave_type: str | None = None
    balance: float | None = None


class LeaveBalanceRead(LeaveBalanceCreate):
    id: int


class AttendanceLogCreate(BaseModel):
    employee_id: int | None = None
    date: dt.date | None = None
    check_in: dt.time | None = None
    check_out: dt.time | None = None
    status: str | None = None


class AttendanceLogUpdate(BaseModel):
    check_in: dt.time | None = None
    check_out: dt.time | None = None
    status: str | None = None


class AttendanceLogRead(AttendanceLogCreate):
    id: int


class FeedbackWrite(BaseModel):
    from_employee: int | None = None
    to_employee: int | None = None
    message: str | None = None


class FeedbackRead(FeedbackWrite):
    id: int
    submitted_on: datetime | None = None


class ProjectWrite(BaseModel):
    name: str | None = None
    client: str | None = None


class ProjectRead(ProjectWrite):
    id: int


class TimesheetWrite(BaseModel):
    employee_id: int | None = None
    project_id: int | None = None
    log_date: date | None = None
    hours: float | None = None
    notes: str | None = None


class TimesheetRead(TimesheetWrite):
    id: int
