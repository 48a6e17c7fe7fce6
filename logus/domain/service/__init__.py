"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentNode, CommentTreeBuilder
from .jwt_service import JWTService
from .user_service import UserService

__all__ = [
    "CommentNode",
    "CommentService",
    "CommentTreeBuilder",
    "JWTService",
    "Service",
    "UserService",
]
