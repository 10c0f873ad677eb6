"""SQLAlchemy models exposed by the backend."""
from .attendance import AttendanceLog
from .base import Base
from .department import Department
from .employee import Employee
from .feedback import Feedback
from .leave import Leave, LeaveBalance, LeavePolicy
from .project import Project, ProjectAssignment
from .timesheet import Timesheet

__all__ = [
    "AttendanceLog",
    "Base",
    "Department",
    "Employee",
    "Feedback",
    "Leave",
    "LeaveBalance",
    "LeavePolicy",
    "Project",
    "ProjectAssignment",
    "Timesheet",
]
