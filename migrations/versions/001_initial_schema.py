"""Initial schema: users, treatments, treatment_slots, bookings, payments, doctors.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("role", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "treatments",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_treatments_name"), "treatments", ["name"], unique=True)

    op.create_table(
        "treatment_slots",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("treatment_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("label", sa.String(), nullable=False),
        sa.ForeignKeyConstraint(["treatment_id"], ["treatments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("treatment_id", "position", name="uq_treatment_slot_position"),
        sa.UniqueConstraint("treatment_id", "label", name="uq_treatment_slot_label"),
    )
    op.create_index(op.f("ix_treatment_slots_treatment_id"), "treatment_slots", ["treatment_id"], unique=False)

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("treatment", sa.String(), nullable=False),
        sa.Column("appointment_date", sa.String(), nullable=False),
        sa.Column("slot", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("patient_name", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("appointment_date", "email", "treatment", name="uq_booking_patient_treatment_date"),
    )
    op.create_index(op.f("ix_bookings_treatment"), "bookings", ["treatment"], unique=False)
    op.create_index(op.f("ix_bookings_appointment_date"), "bookings", ["appointment_date"], unique=False)
    op.create_index(op.f("ix_bookings_email"), "bookings", ["email"], unique=False)

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("booking_id", sa.Integer(), nullable=True),
        sa.Column("transaction_id", sa.String(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_payments_booking_id"), "payments", ["booking_id"], unique=False)

    op.create_table(
        "doctors",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("specialty", sa.String(), nullable=False),
        sa.Column("image", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_doctors_email"), "doctors", ["email"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_doctors_email"), table_name="doctors")
    op.drop_table("doctors")
    op.drop_index(op.f("ix_payments_booking_id"), table_name="payments")
    op.drop_table("payments")
    op.drop_index(op.f("ix_bookings_email"), table_name="bookings")
    op.drop_index(op.f("ix_bookings_appointment_date"), table_name="bookings")
    op.drop_index(op.f("ix_bookings_treatment"), table_name="bookings")
    op.drop_table("bookings")
    op.drop_index(op.f("ix_treatment_slots_treatment_id"), table_name="treatment_slots")
    op.drop_table("treatment_slots")
    op.drop_index(op.f("ix_treatments_name"), table_name="treatments")
    op.drop_table("treatments")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
