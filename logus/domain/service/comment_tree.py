"""Comment thread materialization.

Turns the flat, chronologically ordered comments of one article into the
nested reply forest shown under the article, embedding the author of every
comment.
"""

from collections import defaultdict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import logfire

from logus.domain.error import CommentCycleError, IntegrityViolationError
from logus.domain.model import AuthorView, Comment
from logus.domain.value import CommentId, UserId


@dataclass(frozen=True)
class CommentNode:
    """Node in a comment thread.

    ``replies`` is None for a leaf, never an empty tuple, so callers can tell
    "no replies" apart from "replies not loaded".
    """

    comment: Comment
    author: AuthorView
    replies: tuple["CommentNode", ...] | None = None

    def count(self) -> int:
        """Number of comments in this subtree, including this one."""
        total = 0
        stack: list[CommentNode] = [self]
        while stack:
            node = stack.pop()
            total += 1
            if node.replies:
                stack.extend(node.replies)
        return total


class CommentTreeBuilder:
    """Builds reply forests from flat comment lists.

    The input order is taken as chronological (the repository sorts by
    ``created_at`` then ``id``) and is preserved among roots and among the
    replies of each comment.
    """

    def __init__(self, authors: Mapping[UserId, AuthorView]) -> None:
        """Initialize tree builder.

        Args:
            authors: Pre-resolved author projections keyed by user ID
        """
        self.authors = authors

    def build(self, comments: Sequence[Comment]) -> list[CommentNode]:
        """Build the reply forest for one article.

        Algorithm:
        1. Index comments by id and group replies by parent id (input order)
        2. Collect roots (comments without a parent) in input order
        3. Assemble every root's subtree depth-first, replies before parent,
           using an explicit stack so depth is not limited by recursion
        4. Reject any comment not reachable from a root

        Args:
            comments: Comments of a single article, oldest first

        Returns:
            Root nodes with replies populated recursively

        Raises:
            IntegrityViolationError: Mixed articles, duplicate ids, a missing
                author, or a reply whose parent is not in the thread
            CommentCycleError: If parent references form a loop
        """
        if not comments:
            return []

        article_ids = {comment.article_id for comment in comments}
        if len(article_ids) > 1:
            raise IntegrityViolationError(
                f"Comment thread spans multiple articles: {sorted(article_ids)}"
            )

        by_id: dict[CommentId, Comment] = {}
        for comment in comments:
            if comment.id in by_id:
                raise IntegrityViolationError(f"Duplicate comment id: {comment.id}")
            by_id[comment.id] = comment

        replies_by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
        roots: list[Comment] = []
        for comment in comments:
            if comment.is_root:
                roots.append(comment)
            else:
                replies_by_parent[comment.parent_id].append(comment)

        built: dict[CommentId, CommentNode] = {}
        for root in roots:
            # (comment, replies_ready): a comment is pushed twice, first to
            # schedule its replies, then to assemble it once they are built.
            stack: list[tuple[Comment, bool]] = [(root, False)]
            while stack:
                comment, replies_ready = stack.pop()
                children = replies_by_parent.get(comment.id)
                if replies_ready:
                    built[comment.id] = CommentNode(
                        comment=comment,
                        author=self._author_of(comment),
                        replies=tuple(built[child.id] for child in children)
                        if children
                        else None,
                    )
                    continue
                stack.append((comment, True))
                if children:
                    stack.extend((child, False) for child in reversed(children))

        if len(built) != len(by_id):
            unreached = next(c for c in comments if c.id not in built)
            self._raise_unreachable(unreached, by_id)

        return [built[root.id] for root in roots]

    def _author_of(self, comment: Comment) -> AuthorView:
        """Resolve the author of a comment from the pre-fetched projections."""
        author = self.authors.get(comment.author_id)
        if author is None:
            logfire.error(
                "Comment references missing author",
                comment_id=comment.id,
                author_id=comment.author_id,
            )
            raise IntegrityViolationError(
                f"Comment {comment.id} references missing author {comment.author_id}"
            )
        return author

    @staticmethod
    def _raise_unreachable(
        comment: Comment, by_id: Mapping[CommentId, Comment]
    ) -> None:
        """Explain why a comment is not reachable from any root.

        Walks the parent chain: either it loops back on itself, or it ends at
        a parent that is not part of this article's thread.
        """
        path: list[CommentId] = []
        seen: set[CommentId] = set()
        current = comment
        while current.id not in seen:
            seen.add(current.id)
            path.append(current.id)
            if current.is_root:
                # Reached a root, so the comment should have been placed
                raise IntegrityViolationError(
                    f"Comment {comment.id} could not be placed in the thread"
                )
            parent = by_id.get(current.parent_id)
            if parent is None:
                logfire.error(
                    "Comment parent missing from thread",
                    comment_id=current.id,
                    parent_id=current.parent_id,
                    article_id=current.article_id,
                )
                raise IntegrityViolationError(
                    f"Comment {current.id} replies to comment {current.parent_id}, "
                    f"which is not part of article {current.article_id}"
                )
            current = parent

        cycle = path[path.index(current.id) :] + [current.id]
        logfire.error("Comment parent cycle detected", comment_ids=cycle)
        raise CommentCycleError(cycle)
