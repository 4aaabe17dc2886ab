"""initial_schema

Create the Flashcastr schema:
- flashes (raw flash catalog, filled by the ingester)
- flashcastr_users (Farcaster accounts linked to a player name)
- flashcastr_flashes (flashes attributed to linked users)

Revision ID: 3f1c9b2d7a41
Revises:
Create Date: 2026-10-19 10:12:44.501237

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9b2d7a41"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # The catalog may already exist when the ingester created it first
    op.execute("""
        CREATE TABLE IF NOT EXISTS flashes (
            flash_id BIGINT PRIMARY KEY,
            city VARCHAR(255),
            player VARCHAR(255),
            img TEXT,
            ipfs_cid VARCHAR(255),
            text TEXT,
            timestamp BIGINT
        )
    """)
    op.execute("CREATE INDEX IF NOT EXISTS idx_flashes_player ON flashes (player)")
    op.execute(
        "CREATE INDEX IF NOT EXISTS idx_flashes_timestamp ON flashes (timestamp)"
    )

    op.create_table(
        "flashcastr_users",
        sa.Column("fid", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("signer_uuid", sa.Text(), nullable=False),
        sa.Column(
            "auto_cast", sa.Boolean(), server_default=sa.text("true"), nullable=False
        ),
        sa.Column(
            "deleted", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("fid"),
    )
    op.create_index(
        "idx_flashcastr_users_username", "flashcastr_users", ["username"]
    )

    op.create_table(
        "flashcastr_flashes",
        sa.Column("flash_id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("user_fid", sa.BigInteger(), nullable=False),
        sa.Column("user_username", sa.String(length=255), nullable=False),
        sa.Column("user_pfp_url", sa.Text(), nullable=True),
        sa.Column("cast_hash", sa.String(length=255), nullable=True),
        sa.Column(
            "deleted", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("flash_id"),
    )
    op.create_index(
        "idx_flashcastr_flashes_user_fid", "flashcastr_flashes", ["user_fid"]
    )


def downgrade() -> None:
    """Downgrade schema.

    The flashes catalog is left in place; it belongs to the ingester.
    """
    op.drop_index("idx_flashcastr_flashes_user_fid", table_name="flashcastr_flashes")
    op.drop_table("flashcastr_flashes")
    op.drop_index("idx_flashcastr_users_username", table_name="flashcastr_users")
    op.drop_table("flashcastr_users")
