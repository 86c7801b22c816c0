"""Initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    user_role = sa.Enum("admin", "coach", "member", name="userrole")

    op.create_table(
        "users",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=255)),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", user_role),
        sa.Column("auth_provider", sa.String(length=32)),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true()),
        *_timestamps(),
        sa.Column("last_login_at", sa.DateTime(timezone=True)),
    )

    op.create_table(
        "coaches",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255)),
        sa.Column("phone", sa.String(length=32)),
        sa.Column("specialization", sa.String(length=255)),
        sa.Column("experience", sa.Integer()),
        sa.Column("image", sa.Text()),
        sa.Column("bio", sa.Text()),
        sa.Column("certifications", sa.JSON()),
        sa.Column("teaching_preferences", sa.JSON()),
        sa.Column("status", sa.String(length=32), server_default="active"),
        sa.Column("salary", sa.Numeric(12, 2)),
        *_timestamps(),
    )

    op.create_table(
        "members",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), index=True),
        sa.Column("phone", sa.String(length=32)),
        sa.Column("membership_type", sa.String(length=64)),
        sa.Column("join_date", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("status", sa.String(length=32), server_default="active"),
        sa.Column("address", sa.Text()),
        sa.Column("emergency_contact", sa.String(length=255)),
        sa.Column("expiration_date", sa.DateTime(timezone=True), index=True),
        sa.Column("is_trial", sa.Boolean(), server_default=sa.false()),
        sa.Column("coach_id", sa.String(length=32)),
        sa.Column("coach_name", sa.String(length=255)),
        *_timestamps(),
    )

    op.create_table(
        "payments",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("member_id", sa.String(length=64), index=True),
        sa.Column("member_name", sa.String(length=255)),
        sa.Column("membership_type", sa.String(length=64)),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("original_amount", sa.Numeric(12, 2)),
        sa.Column("payment_date", sa.DateTime(timezone=True), server_default=sa.func.now(), index=True),
        sa.Column("payment_method", sa.String(length=64)),
        sa.Column("status", sa.String(length=32), server_default="completed"),
        sa.Column("description", sa.Text()),
        sa.Column("notes", sa.Text()),
        sa.Column("is_student", sa.Boolean(), server_default=sa.false()),
        *_timestamps(),
    )

    op.create_table(
        "schedules",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("class_name", sa.String(length=255), nullable=False),
        sa.Column("coach_id", sa.String(length=32), sa.ForeignKey("coaches.id", ondelete="SET NULL")),
        sa.Column("day", sa.String(length=16)),
        sa.Column("date", sa.Date(), index=True),
        sa.Column("start_time", sa.Time()),
        sa.Column("end_time", sa.Time()),
        sa.Column("capacity", sa.Integer()),
        sa.Column("description", sa.Text()),
        *_timestamps(),
        sa.CheckConstraint("capacity IS NULL OR capacity > 0", name="ck_schedule_capacity_positive"),
    )

    op.create_table(
        "schedule_enrollments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "schedule_id",
            sa.String(length=32),
            sa.ForeignKey("schedules.id", ondelete="CASCADE"),
        ),
        sa.Column("member_id", sa.String(length=64), index=True),
        sa.Column("enrolled_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("schedule_id", "member_id", name="uq_enrollment_schedule_member"),
    )


def downgrade() -> None:
    op.drop_table("schedule_enrollments")
    op.drop_table("schedules")
    op.drop_table("payments")
    op.drop_table("members")
    op.drop_table("coaches")
    op.drop_table("users")
    sa.Enum(name="userrole").drop(op.get_bind(), checkfirst=True)
