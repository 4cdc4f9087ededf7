"""Strongly typed identifiers for forum records.

Identifiers are positive integers assigned by storage. Using NewType keeps
user and comment ids from being mixed up in signatures.
"""

from typing import NewType

UserId = NewType("UserId", int)
CommentId = NewType("CommentId", int)
