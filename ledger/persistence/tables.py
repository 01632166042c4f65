"""SQLAlchemy table definitions for ledger.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTING FIRMS TABLE
# ============================================================================
accounting_firms_table = Table(
    "accounting_firms",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# ACCOUNTANTS TABLE
# ============================================================================
accountants_table = Table(
    "accountants",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "accounting_firm_id",
        UUID,
        ForeignKey("accounting_firms.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("email", String(255), nullable=False),
    Column("name", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_accountants_firm_id", accountants_table.c.accounting_firm_id)

# ============================================================================
# CLIENT INVITATIONS TABLE
# ============================================================================
client_invitations_table = Table(
    "client_invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    # Nullable until the backfill completes; unique is the authoritative guard
    Column("uuid", String(36), nullable=True, unique=True),
    # Optional at storage level, required by validation
    Column(
        "accounting_firm_id",
        UUID,
        ForeignKey("accounting_firms.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("name", String(255), nullable=True),
    Column("invited_by_user_id", String(255), nullable=True),
    Column("client_email", String(255), nullable=True),
    Column(
        "invitation_type",
        Enum(
            "unknown",
            "email_invite",
            "in_app_add",
            "prospect_email",
            name="invitation_type",
            create_type=False,
        ),
        nullable=True,
    ),
    Column("invitation_trigger", String(50), nullable=True),  # 'Immediate', 'Onboarded'
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_client_invitations_firm_created",
    client_invitations_table.c.accounting_firm_id,
    client_invitations_table.c.created_at,
)

# ============================================================================
# CLIENT INVITATION VERSIONS TABLE (change history)
# ============================================================================
client_invitation_versions_table = Table(
    "client_invitation_versions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    # No foreign key: history outlives the deleted invitation
    Column("item_id", UUID, nullable=False),
    Column(
        "event",
        Enum(
            "create", "update", "destroy", name="version_event", create_type=False
        ),
        nullable=False,
    ),
    Column("whodunnit", String(255), nullable=True),
    Column("snapshot", JSONB, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_client_invitation_versions_item",
    client_invitation_versions_table.c.item_id,
    client_invitation_versions_table.c.created_at,
)
