"""flash_identifications

Create the flash_identifications table read by the identification routes
and the unified flash view.

Revision ID: 8d2e4a6c1b90
Revises: 3f1c9b2d7a41
Create Date: 2026-10-19 16:40:02.118342

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "8d2e4a6c1b90"
down_revision: Union[str, Sequence[str], None] = "3f1c9b2d7a41"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # The matching pipeline may have created the table already
    op.execute("""
        CREATE TABLE IF NOT EXISTS flash_identifications (
            id SERIAL PRIMARY KEY,
            source_ipfs_cid TEXT NOT NULL,
            matched_flash_id BIGINT NOT NULL REFERENCES flashes (flash_id),
            matched_flash_name TEXT,
            similarity DOUBLE PRECISION NOT NULL,
            confidence DOUBLE PRECISION NOT NULL,
            created_at TIMESTAMP(3) NOT NULL DEFAULT NOW()
        )
    """)
    op.execute(
        "CREATE INDEX IF NOT EXISTS idx_flash_identifications_source "
        "ON flash_identifications (source_ipfs_cid)"
    )
    op.execute(
        "CREATE INDEX IF NOT EXISTS idx_flash_identifications_matched "
        "ON flash_identifications (matched_flash_id)"
    )


def downgrade() -> None:
    """Downgrade schema.

    The table is left in place; it belongs to the matching pipeline.
    """
    pass
