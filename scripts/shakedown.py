#!/usr/bin/env python3
"""Insert a user, a comment and a vote into the configured database.

Creates the schema when it is missing, then prints the stored records with
their storage-assigned ids. Point DATABASE__URL at the database to use.
"""

import sys

import logfire
from sqlalchemy import Engine

from forum.config import Settings
from forum.domain.model import Comment, User, Vote
from forum.domain.repository import (
    CommentRepository,
    StorageHandle,
    UserRepository,
    VoteRepository,
)
from forum.persistence.database import create_schema
from forum.util.di.container import create_container
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main() -> int:
    """Run the shakedown and log any failure to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    container = create_container()
    try:
        create_schema(container.get(Engine))

        with container() as request_container:
            handle = request_container.get(StorageHandle)
            users = request_container.get(UserRepository)
            comments = request_container.get(CommentRepository)
            votes = request_container.get(VoteRepository)

            user = User(email="jay@example.com", username="jay")
            users.insert(handle, user)

            comment = Comment(author_id=user.id, content="yay! object oriented!")
            comments.insert(handle, comment)

            vote = Vote(user_id=user.id, comment_id=comment.id, value=1)
            votes.insert(handle, vote)

            print(user)
            print(comment)
            print(vote)

        return 0

    except Exception as e:
        logfire.error(
            "Shakedown failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    finally:
        container.close()


if __name__ == "__main__":
    sys.exit(main())
