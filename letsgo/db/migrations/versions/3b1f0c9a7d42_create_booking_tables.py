"""Create users, rooms, customers, drinks, bookings and drink orders

Revision ID: 3b1f0c9a7d42
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


revision = "3b1f0c9a7d42"
down_revision = None
branch_labels = None
depends_on = None


def money():
    return sa.Numeric(14, 6)


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False, server_default="employee"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "rooms",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("hourly_rate", money(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(), nullable=False, server_default="available"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("hourly_rate >= 0", name="check_room_hourly_rate_non_negative"),
        sa.CheckConstraint("status IN ('available', 'occupied')", name="check_room_status"),
    )
    op.create_index("ix_rooms_id", "rooms", ["id"])
    op.create_index("ix_rooms_status", "rooms", ["status"])

    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_customers_id", "customers", ["id"])

    op.create_table(
        "drinks",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("price", money(), nullable=False),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.CheckConstraint("price >= 0", name="check_drink_price_non_negative"),
    )
    op.create_index("ix_drinks_id", "drinks", ["id"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("end_time", sa.DateTime(), nullable=True),
        sa.Column("room_cost", money(), nullable=False, server_default="0"),
        sa.Column("drinks_cost", money(), nullable=False, server_default="0"),
        sa.Column("total_cost", money(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("room_id", sa.Integer(), sa.ForeignKey("rooms.id"), nullable=False),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.CheckConstraint("type IN ('open', 'fixed')", name="check_booking_type"),
        sa.CheckConstraint("status IN ('active', 'completed')", name="check_booking_status"),
    )
    op.create_index("ix_bookings_id", "bookings", ["id"])
    op.create_index("ix_bookings_status", "bookings", ["status"])
    op.create_index("ix_bookings_room_id", "bookings", ["room_id"])
    op.create_index("ix_bookings_customer_id", "bookings", ["customer_id"])

    op.create_table(
        "drink_orders",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("total_price", money(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column(
            "booking_id",
            sa.Integer(),
            sa.ForeignKey("bookings.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("drink_id", sa.Integer(), sa.ForeignKey("drinks.id"), nullable=False),
        sa.CheckConstraint("quantity > 0", name="check_drink_order_quantity_positive"),
    )
    op.create_index("ix_drink_orders_id", "drink_orders", ["id"])
    op.create_index("ix_drink_orders_booking_id", "drink_orders", ["booking_id"])


def downgrade():
    op.drop_table("drink_orders")
    op.drop_table("bookings")
    op.drop_table("drinks")
    op.drop_table("customers")
    op.drop_table("rooms")
    op.drop_table("users")
