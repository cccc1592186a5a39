"""SQLAlchemy table definitions for Tally.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("slack_id", String(255), nullable=False),
    Column("hashed_slackid", String(255), nullable=False),
    Column("username", String(255), nullable=False),
    Column("vote_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("slack_id", name="uq_users_slack_id"),
    CheckConstraint("vote_count >= 0", name="vote_count_non_negative"),
)

# ============================================================================
# SUBMISSIONS TABLE
# ============================================================================
submissions_table = Table(
    "submissions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("submission_id", String(255), nullable=False),
    Column("category", String(255), nullable=False),
    Column("votes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("submission_id", "category", name="uq_submission_category"),
    CheckConstraint("votes >= 0", name="votes_non_negative"),
)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "submission_id",
        UUID(as_uuid=True),
        ForeignKey("submissions.id"),
        nullable=False,
    ),
    Column(
        "slack_id", String(255), ForeignKey("users.slack_id"), nullable=False
    ),
    Column("category", String(255), nullable=False),
    Column(
        "timestamp", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "submission_id", "slack_id", "category", name="uq_vote_submission_user_category"
    ),
)
