"""initial_schema

Create the foundational schema for ledger:
- Accounting firms
- Accountants (members of a firm)
- Client invitations (extended by a firm to a client or team member)
- Client invitation versions (change history)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-03-02 10:14:07.512940

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE invitation_type AS ENUM (
                'unknown', 'email_invite', 'in_app_add', 'prospect_email'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE version_event AS ENUM ('create', 'update', 'destroy');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # ACCOUNTING_FIRMS table
    # ========================================================================
    op.create_table(
        "accounting_firms",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # ACCOUNTANTS table
    # ========================================================================
    op.create_table(
        "accountants",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("accounting_firm_id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["accounting_firm_id"], ["accounting_firms.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_accountants_firm_id", "accountants", ["accounting_firm_id"])

    # ========================================================================
    # CLIENT_INVITATIONS table
    # ========================================================================
    op.create_table(
        "client_invitations",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("accounting_firm_id", sa.UUID(), nullable=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("invited_by_user_id", sa.String(255), nullable=True),
        sa.Column("client_email", sa.String(255), nullable=True),
        sa.Column(
            "invitation_type",
            postgresql.ENUM(
                "unknown",
                "email_invite",
                "in_app_add",
                "prospect_email",
                name="invitation_type",
                create_type=False,
            ),
            nullable=True,
        ),
        sa.Column("invitation_trigger", sa.String(50), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["accounting_firm_id"], ["accounting_firms.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_client_invitations_firm_created",
        "client_invitations",
        ["accounting_firm_id", "created_at"],
    )

    # ========================================================================
    # CLIENT_INVITATION_VERSIONS table (change history)
    # ========================================================================
    op.create_table(
        "client_invitation_versions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("item_id", sa.UUID(), nullable=False),
        sa.Column(
            "event",
            postgresql.ENUM(
                "create", "update", "destroy", name="version_event", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("whodunnit", sa.String(255), nullable=True),
        sa.Column("snapshot", postgresql.JSONB(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_client_invitation_versions_item",
        "client_invitation_versions",
        ["item_id", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("client_invitation_versions")
    op.drop_table("client_invitations")
    op.drop_table("accountants")
    op.drop_table("accounting_firms")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS version_event")
    op.execute("DROP TYPE IF EXISTS invitation_type")
