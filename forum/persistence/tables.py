"""SQLAlchemy table definitions for the forum.

Column names are part of the stable storage contract and keep their
camelCase spelling.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
)

from forum.domain.value import (
    COMMENT_CONTENT_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("userId", Integer, primary_key=True, autoincrement=True),
    Column("email", String(EMAIL_MAX_LENGTH), nullable=False),
    Column("username", String(USERNAME_MAX_LENGTH), nullable=False),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("commentId", Integer, primary_key=True, autoincrement=True),
    Column(
        "userId",
        Integer,
        ForeignKey("users.userId", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("commentContent", String(COMMENT_CONTENT_MAX_LENGTH), nullable=False),
    Column("commentDate", DateTime, nullable=False),
)

Index("idx_comments_user_id", comments_table.c.userId)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column(
        "userId",
        Integer,
        ForeignKey("users.userId", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "commentId",
        Integer,
        ForeignKey("comments.commentId", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("timeRecorded", DateTime, nullable=False),
    Column("vote", Integer, nullable=False),
    PrimaryKeyConstraint("userId", "commentId", name="pk_votes"),
    CheckConstraint("vote IN (-1, 1)", name="vote_is_unit"),
)

Index("idx_votes_comment_id", votes_table.c.commentId)
