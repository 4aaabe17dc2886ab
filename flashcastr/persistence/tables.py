"""SQLAlchemy table definitions for Flashcastr.

Kept in step with the Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

metadata = MetaData()

# ============================================================================
# LINKED USERS
# ============================================================================
flashcastr_users_table = Table(
    "flashcastr_users",
    metadata,
    Column("fid", BigInteger, primary_key=True, autoincrement=False),
    Column("username", String(255), nullable=False),  # Player name
    Column("signer_uuid", Text, nullable=False),  # Encrypted, iv:tag:ciphertext
    Column("auto_cast", Boolean, nullable=False, server_default="true"),
    Column("deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_flashcastr_users_username", flashcastr_users_table.c.username)

# ============================================================================
# ACTIVITY RECORDS (flashes attributed to linked users)
# ============================================================================
flashcastr_flashes_table = Table(
    "flashcastr_flashes",
    metadata,
    # Refers to flashes.flash_id without a constraint; the catalog may lag
    Column("flash_id", BigInteger, primary_key=True, autoincrement=False),
    Column("user_fid", BigInteger, nullable=False),
    Column("user_username", String(255), nullable=False),
    Column("user_pfp_url", Text, nullable=True),
    Column("cast_hash", String(255), nullable=True),
    Column("deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_flashcastr_flashes_user_fid", flashcastr_flashes_table.c.user_fid)

# ============================================================================
# FLASH CATALOG (written by the ingester, read-only here)
# ============================================================================
flashes_table = Table(
    "flashes",
    metadata,
    Column("flash_id", BigInteger, primary_key=True, autoincrement=False),
    Column("city", String(255), nullable=True),
    Column("player", String(255), nullable=True),
    Column("img", Text, nullable=True),
    Column("ipfs_cid", String(255), nullable=True),
    Column("text", Text, nullable=True),
    Column("timestamp", BigInteger, nullable=True),  # Epoch milliseconds
)

Index("idx_flashes_player", flashes_table.c.player)
Index("idx_flashes_timestamp", flashes_table.c.timestamp)

# ============================================================================
# FLASH IDENTIFICATIONS (written by the matching pipeline, read-only here)
# ============================================================================
flash_identifications_table = Table(
    "flash_identifications",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("source_ipfs_cid", Text, nullable=False),
    Column(
        "matched_flash_id",
        BigInteger,
        ForeignKey("flashes.flash_id"),
        nullable=False,
    ),
    Column("matched_flash_name", Text, nullable=True),
    Column("similarity", Float, nullable=False),
    Column("confidence", Float, nullable=False),
    Column(
        "created_at", TIMESTAMP(precision=3), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_flash_identifications_source",
    flash_identifications_table.c.source_ipfs_cid,
)
Index(
    "idx_flash_identifications_matched",
    flash_identifications_table.c.matched_flash_id,
)
