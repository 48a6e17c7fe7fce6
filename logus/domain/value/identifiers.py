"""Strongly typed identifiers for Logus domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting. All identifiers are the integer
serial keys assigned by the store.
"""

from typing import NewType

# Core domain entity identifiers
UserId = NewType("UserId", int)
ArticleId = NewType("ArticleId", int)
CommentId = NewType("CommentId", int)
