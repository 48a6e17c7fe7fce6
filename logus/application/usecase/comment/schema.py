"""Response models shared by the comment use cases.

Field names are snake_case in Python and camelCase on the wire
(``authorId``, ``createdAt`` ...), matching the Logus web client.
"""

from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from logus.domain.model import AuthorView, Comment
from logus.domain.service import CommentNode


class ApiModel(BaseModel):
    """Base for models serialized to the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthorResponse(ApiModel):
    """Author projection embedded in every comment node."""

    id: int
    username: str
    name: str
    email: str
    role: str
    bio: str | None
    avatar: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, author: AuthorView) -> "AuthorResponse":
        return cls(
            id=author.id,
            username=author.username,
            name=author.name,
            email=author.email,
            role=author.role.value,
            bio=author.bio,
            avatar=author.avatar,
            created_at=author.created_at,
        )


class CommentResponse(ApiModel):
    """Flat comment, as returned after creation."""

    id: int
    content: str
    author_id: int
    article_id: int
    parent_id: int | None
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            content=comment.content,
            author_id=comment.author_id,
            article_id=comment.article_id,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
        )


class CommentWithAuthorResponse(CommentResponse):
    """One thread node without its replies."""

    author: AuthorResponse

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentWithAuthorResponse":
        comment = node.comment
        return cls(
            id=comment.id,
            content=comment.content,
            author_id=comment.author_id,
            article_id=comment.article_id,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
            author=AuthorResponse.from_domain(node.author),
        )


class CommentNodeResponse(CommentWithAuthorResponse):
    """Documented shape of a thread node.

    Only used for the OpenAPI schema; threads are rendered by
    ``render_comment_forest`` so their depth is not bounded by recursion.
    ``replies`` is absent on leaves.
    """

    replies: list["CommentNodeResponse"] | None = None


def _push_array(stack: list, nodes: Sequence[CommentNode]) -> None:
    # Pushed in reverse so nodes pop in display order
    stack.append("]")
    for position, node in enumerate(reversed(nodes)):
        if position:
            stack.append(",")
        stack.append(node)


def render_comment_forest(roots: Sequence[CommentNode]) -> str:
    """Render a reply forest as a JSON array.

    Each node's own fields are serialized by pydantic; nesting is emitted
    in order from an explicit stack of nodes and closing brackets, so
    arbitrarily deep threads render without hitting the recursion limit.

    Args:
        roots: Root nodes in display order

    Returns:
        JSON text of the forest, camelCase keys, no ``replies`` on leaves
    """
    parts = ["["]
    stack: list[CommentNode | str] = []
    _push_array(stack, roots)
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        text = CommentWithAuthorResponse.from_node(item).model_dump_json(by_alias=True)
        if item.replies:
            # Reopen the object to append the nested array
            parts.append(text[:-1] + ',"replies":[')
            stack.append("}")
            _push_array(stack, item.replies)
        else:
            parts.append(text)

    return "".join(parts)
