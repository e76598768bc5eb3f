"""Initial dashboard schema.

- factories
- users
- production_lines
- inventory
- workforce
- alerts

Factory-scoped tables reference factories by name through an indexed factory_id
text column.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3c5d1e7a9b20"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCOPED_TABLES = ["production_lines", "inventory", "workforce", "alerts"]


def upgrade() -> None:
    # Factories
    op.create_table(
        "factories",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("location", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_factories"),
        sa.UniqueConstraint("name", name="uq_factories_name"),
    )

    # Users
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("role", sa.Text(), nullable=False),
        sa.Column("factory", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # Production lines
    op.create_table(
        "production_lines",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("factory_id", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("product", sa.Text(), nullable=False),
        sa.Column("target", sa.Integer(), nullable=False),
        sa.Column("completed", sa.Integer(), server_default="0", nullable=False),
        sa.Column("efficiency", sa.Float(), server_default="0", nullable=False),
        sa.Column("status", sa.Text(), server_default="Active", nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_production_lines"),
    )

    # Inventory
    op.create_table(
        "inventory",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("factory_id", sa.Text(), nullable=False),
        sa.Column("material", sa.Text(), nullable=False),
        sa.Column("current_stock", sa.Float(), nullable=False),
        sa.Column("unit", sa.Text(), nullable=False),
        sa.Column("min_required", sa.Float(), nullable=False),
        sa.Column("status", sa.Text(), nullable=False),
        sa.Column("next_delivery", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_inventory"),
    )

    # Workforce departments
    op.create_table(
        "workforce",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("factory_id", sa.Text(), nullable=False),
        sa.Column("department", sa.Text(), nullable=False),
        sa.Column("total", sa.Integer(), nullable=False),
        sa.Column("present", sa.Integer(), nullable=False),
        sa.Column("on_leave", sa.Integer(), nullable=False),
        sa.Column("absent", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_workforce"),
    )

    # Alerts
    op.create_table(
        "alerts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("factory_id", sa.Text(), nullable=False),
        sa.Column("type", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("time", sa.Text(), nullable=False),
        sa.Column("read", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_alerts"),
    )

    for tbl in SCOPED_TABLES:
        op.create_index(f"ix_{tbl}_factory_id", tbl, ["factory_id"])


def downgrade() -> None:
    for tbl in SCOPED_TABLES:
        op.drop_index(f"ix_{tbl}_factory_id", table_name=tbl)
    for tbl in reversed(["factories", "users"] + SCOPED_TABLES):
        op.drop_table(tbl)
