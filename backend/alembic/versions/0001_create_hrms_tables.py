"""create hrms tables"""
from alembic import op
import sqlalchemy as sa

revision = "0001_create_hrms_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "departments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
    )

    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(100), nullable=False, unique=True),
        sa.Column("phone", sa.String(20)),
        sa.Column("doj", sa.Date()),
        sa.Column("department_id", sa.Integer(), sa.ForeignKey("departments.id")),
        sa.Column("designation", sa.String(100)),
        sa.Column("basic_salary", sa.Float()),
        sa.Column("pf_applicable", sa.Boolean(), server_default=sa.true()),
        sa.Column("esi_applicable", sa.Boolean(), server_default=sa.true()),
        sa.Column("pan_number", sa.String(20)),
        sa.Column("aadhaar_number", sa.String(20)),
        sa.Column("status", sa.String(20), server_default="Active"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.current_timestamp()),
    )

    op.create_table(
        "leave_policies",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("policy_name", sa.String(100)),
        sa.Column("description", sa.Text()),
        sa.Column("max_leaves", sa.Integer()),
        sa.Column("carry_forward", sa.Boolean(), server_default=sa.false()),
    )

    op.create_table(
        "leaves",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("employees.id")),
        sa.Column("type", sa.String(50)),
        sa.Column("start_date", sa.Date()),
        sa.Column("end_date", sa.Date()),
        sa.Column("status", sa.String(20), server_default="Pending"),
        sa.Column("applied_on", sa.DateTime(), server_default=sa.func.current_timestamp()),
    )
    op.create_index("ix_leaves_employee_id", "leaves", ["employee_id"])

    op.create_table(
        "leave_balances",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("employees.id")),
        sa.Column("leave_type", sa.String(50)),
        sa.Column("balance", sa.Float()),
    )
    op.create_index("ix_leave_balances_employee_id", "leave_balances", ["employee_id"])

    op.create_table(
        "attendance_logs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("employees.id")),
        sa.Column("date", sa.Date()),
        sa.Column("check_in", sa.Time()),
        sa.Column("check_out", sa.Time()),
        sa.Column("status", sa.String(20)),
    )
    op.create_index("ix_attendance_logs_employee_id", "attendance_logs", ["employee_id"])
    op.create_index("ix_attendance_logs_date", "attendance_logs", ["date"])

    op.create_table(
        "feedbacks",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("from_employee", sa.Integer(), sa.ForeignKey("employees.id")),
        sa.Column("to_employee", sa.Integer(), sa.ForeignKey("employees.id")),
        sa.Column("message", sa.Text()),
        sa.Column("submitted_on", sa.DateTime(), server_default=sa.func.current_timestamp()),
    )

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(100)),
        sa.Column("client", sa.String(100)),
    )

    op.create_table(
        "project_assignments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("project_id", sa.Integer(), sa.ForeignKey("projects.id"), nullable=False),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("employees.id"), nullable=False),
    )
    op.create_index("ix_project_assignments_project_id", "project_assignments", ["project_id"])
    op.create_index("ix_project_assignments_employee_id", "project_assignments", ["employee_id"])

    op.create_table(
        "timesheets",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("employees.id")),
        sa.Column("project_id", sa.Integer(), sa.ForeignKey("projects.id")),
        sa.Column("log_date", sa.Date()),
        sa.Column("hours", sa.Float()),
        sa.Column("notes", sa.Text()),
    )
    op.create_index("ix_timesheets_employee_id", "timesheets", ["employee_id"])
    op.create_index("ix_timesheets_log_date", "timesheets", ["log_date"])


def downgrade() -> None:
    op.drop_index("ix_timesheets_log_date", table_name="timesheets")
    op.drop_index("ix_timesheets_employee_id", table_name="timesheets")
    op.drop_table("timesheets")
    op.drop_index("ix_project_assignments_employee_id", table_name="project_assignments")
    op.drop_index("ix_project_assignments_project_id", table_name="project_assignments")
    op.drop_table("project_assignments")
    op.drop_table("projects")
    op.drop_table("feedbacks")
    op.drop_index("ix_attendance_logs_date", table_name="attendance_logs")
    op.drop_index("ix_attendance_logs_employee_id", table_name="attendance_logs")
    op.drop_table("attendance_logs")
    op.drop_index("ix_leave_balances_employee_id", table_name="leave_balances")
    op.drop_table("leave_balances")
    op.drop_index("ix_leaves_employee_id", table_name="leaves")
    op.drop_table("leaves")
    op.drop_table("leave_policies")
    op.drop_table("employees")
    op.drop_table("departments")
