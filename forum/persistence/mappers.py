"""Mappers for converting between database rows and domain records.

Rows are turned back into records through the records' own constructors, so
every stored value passes the validation kernel again on the way out.
"""

from typing import Any, Dict

from forum.domain.model import Comment, User, Vote


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User record.

    Args:
        row: Database row as dict

    Returns:
        User record

    Raises:
        ValidationError: If a column holds a value the record rejects
    """
    return User(id=row["userId"], email=row["email"], username=row["username"])


def user_to_params(user: User) -> Dict[str, Any]:
    """Convert User record to statement parameters (without the id)."""
    return {"user_email": user.email, "user_name": user.username}


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment record.

    Args:
        row: Database row as dict

    Returns:
        Comment record

    Raises:
        ValidationError: If a column holds a value the record rejects
    """
    return Comment(
        id=row["commentId"],
        author_id=row["userId"],
        content=row["commentContent"],
        created_at=row["commentDate"],
    )


def comment_to_params(comment: Comment) -> Dict[str, Any]:
    """Convert Comment record to statement parameters (without the id)."""
    return {
        "author_id": comment.author_id,
        "content": comment.content,
        "created_at": comment.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to a persisted Vote record.

    Args:
        row: Database row as dict

    Returns:
        Vote record marked persisted

    Raises:
        ValidationError: If a column holds a value the record rejects
    """
    return Vote(
        user_id=row["userId"],
        comment_id=row["commentId"],
        recorded_at=row["timeRecorded"],
        value=row["vote"],
        persisted=True,
    )


def vote_identity_params(vote: Vote) -> Dict[str, Any]:
    """Statement parameters selecting the vote's row."""
    return {"user_id": vote.user_id, "comment_id": vote.comment_id}


def vote_to_params(vote: Vote) -> Dict[str, Any]:
    """Convert Vote record to statement parameters."""
    return {
        **vote_identity_params(vote),
        "recorded_at": vote.recorded_at,
        "value": vote.value,
    }
