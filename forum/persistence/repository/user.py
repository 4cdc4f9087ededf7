"""SQL implementation of User repository."""

from typing import Any

import logfire
from sqlalchemy import bindparam, delete, insert, select, update

from forum.domain.model import User
from forum.domain.repository import Found, StorageHandle, UserRepository
from forum.domain.value import (
    EMAIL_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    bounded_text,
    escape_like,
    positive_identifier,
)
from forum.persistence.error import (
    AlreadyExistsError,
    CannotDeleteUnpersistedError,
    CannotUpdateUnpersistedError,
)
from forum.persistence.mappers import row_to_user, user_to_params
from forum.persistence.repository.base import SqlRepository
from forum.persistence.tables import users_table


class SqlUserRepository(SqlRepository, UserRepository):
    """SQL implementation of UserRepository."""

    resource = "user"

    def insert(self, handle: StorageHandle, user: User) -> None:
        """Insert a user and write the assigned id back into it."""
        self._check_handle(handle)
        if user.is_persisted:
            raise AlreadyExistsError("user", str(user.id))

        stmt = insert(users_table).values(
            email=bindparam("user_email"),
            username=bindparam("user_name"),
        )
        with logfire.span("insert user", username=user.username):
            with self._statement(handle, stmt, user_to_params(user)) as statement:
                user_id = handle.inserted_identity(statement)
            user.id = user_id
            logfire.info("User inserted", user_id=user_id)

    def update(self, handle: StorageHandle, user: User) -> None:
        """Update a user's email and username."""
        self._check_handle(handle)
        if not user.is_persisted:
            raise CannotUpdateUnpersistedError("user")

        stmt = (
            update(users_table)
            .where(users_table.c.userId == bindparam("user_id"))
            .values(
                email=bindparam("user_email"),
                username=bindparam("user_name"),
            )
        )
        params = {**user_to_params(user), "user_id": user.id}
        with logfire.span("update user", user_id=user.id):
            with self._statement(handle, stmt, params):
                pass

    def delete(self, handle: StorageHandle, user: User) -> None:
        """Delete a user (the record itself is left untouched)."""
        self._check_handle(handle)
        if not user.is_persisted:
            raise CannotDeleteUnpersistedError("user")

        stmt = delete(users_table).where(users_table.c.userId == bindparam("user_id"))
        with logfire.span("delete user", user_id=user.id):
            with self._statement(handle, stmt, {"user_id": user.id}):
                pass

    def find_by_id(self, handle: StorageHandle, user_id: Any) -> Found[User]:
        """Find a user by id."""
        self._check_handle(handle)
        user_id = positive_identifier(user_id, field="user id")

        stmt = select(users_table).where(users_table.c.userId == bindparam("user_id"))
        return self._find(handle, stmt, {"user_id": user_id}, row_to_user)

    def find_by_username(self, handle: StorageHandle, username: Any) -> Found[User]:
        """Find users whose username contains the search text."""
        self._check_handle(handle)
        username = bounded_text(username, USERNAME_MAX_LENGTH, field="username")

        stmt = select(users_table).where(
            users_table.c.username.like(bindparam("pattern"), escape="\\")
        )
        params = {"pattern": f"%{escape_like(username)}%"}
        return self._find(handle, stmt, params, row_to_user)

    def find_by_email(self, handle: StorageHandle, email: Any) -> Found[User]:
        """Find users whose email contains the search text."""
        self._check_handle(handle)
        email = bounded_text(email, EMAIL_MAX_LENGTH, field="email")

        stmt = select(users_table).where(
            users_table.c.email.like(bindparam("pattern"), escape="\\")
        )
        params = {"pattern": f"%{escape_like(email)}%"}
        return self._find(handle, stmt, params, row_to_user)
