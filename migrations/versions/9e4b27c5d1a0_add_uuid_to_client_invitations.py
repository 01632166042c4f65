"""add_uuid_to_client_invitations

Add the universally unique identifier to client invitations.

The column stays nullable: existing rows are given a uuid by
scripts/backfill_uuids.py, after which client_invitation is listed in
IDENTIFIERS__BACKFILLED_ENTITIES and validation requires it.

Revision ID: 9e4b27c5d1a0
Revises: 3c1f0a9d2b7e
Create Date: 2026-04-15 16:42:51.208311

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9e4b27c5d1a0"
down_revision: Union[str, Sequence[str], None] = "3c1f0a9d2b7e"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "client_invitations", sa.Column("uuid", sa.String(36), nullable=True)
    )
    # Case-sensitive unique constraint, the authoritative guard against races
    op.create_unique_constraint(
        "client_invitations_uuid_key", "client_invitations", ["uuid"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_constraint(
        "client_invitations_uuid_key", "client_invitations", type_="unique"
    )
    op.drop_column("client_invitations", "uuid")
