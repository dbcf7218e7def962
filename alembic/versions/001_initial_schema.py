"""Initial schema - company, role, app_user.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "company",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("company_type", sa.String(50), nullable=False, server_default="mine"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )

    op.create_table(
        "role",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column(
            "permission_keys",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "hidden_for_companies",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
    )
    op.create_index("ix_role_name", "role", ["name"], unique=True)

    op.create_table(
        "app_user",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column("role_id", sa.String(64), sa.ForeignKey("role.id"), nullable=False),
        sa.Column("is_global", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "permission_overrides",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "company_id",
            sa.String(64),
            sa.ForeignKey("company.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_app_user_company_id", "app_user", ["company_id"])
    op.create_index("ix_app_user_role_id", "app_user", ["role_id"])

    op.execute("""
        INSERT INTO role (id, name, description, permission_keys) VALUES
        ('r_newton_admin', 'Newton Admin', 'Full platform access', '["*"]'),
        ('r_site_admin', 'Site Admin', 'Site administration',
            '["admin.users", "admin.roles", "admin.sites", "admin.products", "admin.clients",
              "assets.view", "orders.view", "orders.viewAll"]'),
        ('r_allocation_officer', 'Allocation Officer', 'Order allocation',
            '["orders.view", "orders.create", "orders.allocate", "orders.cancel",
              "admin.clients.view", "admin.products.view", "admin.sites.view"]'),
        ('r_logistics_coordinator', 'Logistics Coordinator', 'Order coordination',
            '["assets.view", "orders.view", "orders.create", "orders.allocate",
              "preBooking.view", "preBooking.create", "preBooking.edit"]'),
        ('r_transporter', 'Transporter', 'Fleet owner',
            '["assets.view", "assets.add", "assets.edit", "orders.view",
              "preBooking.view", "preBooking.create"]'),
        ('r_induction_officer', 'Induction Officer', 'Asset induction',
            '["assets.view", "assets.add", "assets.edit"]'),
        ('r_weighbridge_supervisor', 'Weighbridge Supervisor', 'Weighbridge oversight',
            '["weighbridge.tare", "weighbridge.gross", "weighbridge.calibrate",
              "weighbridge.override", "reports.daily"]'),
        ('r_weighbridge_operator', 'Weighbridge Operator', 'Weighbridge capture',
            '["weighbridge.tare", "weighbridge.gross"]'),
        ('r_security', 'Security', 'Gate checks',
            '["security.in", "security.out"]'),
        ('r_contact', 'Contact', 'Contact-only user without login', '[]')
    """)


def downgrade() -> None:
    op.drop_table("app_user")
    op.drop_table("role")
    op.drop_table("company")
