"""Unit tests for CommentTreeBuilder."""

import pytest

from logus.domain.error import CommentCycleError, IntegrityViolationError
from logus.domain.model import AuthorView
from logus.domain.service import CommentNode, CommentTreeBuilder
from logus.domain.value import UserId
from tests.conftest import make_comment, make_user


def authors_for(*user_ids: int) -> dict[UserId, AuthorView]:
    return {UserId(uid): AuthorView.from_user(make_user(uid)) for uid in user_ids}


def flatten(nodes: list[CommentNode]) -> list[int]:
    """Pre-order list of comment ids in a forest."""
    result: list[int] = []
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        result.append(node.comment.id)
        if node.replies:
            stack.extend(reversed(node.replies))
    return result


@pytest.fixture
def builder() -> CommentTreeBuilder:
    return CommentTreeBuilder(authors_for(1, 2, 3))


class TestBuildShape:
    """Tests for the shape of the materialized forest."""

    def test_empty_input_returns_empty_forest(self, builder):
        """No comments yields no roots."""
        assert builder.build([]) == []

    def test_single_root_is_a_leaf(self, builder):
        """A lone comment becomes a root without replies."""
        roots = builder.build([make_comment(1)])

        assert len(roots) == 1
        assert roots[0].comment.id == 1
        assert roots[0].replies is None

    def test_nested_replies(self, builder):
        """R with replies A, B; B with reply C."""
        comments = [
            make_comment(1),  # R
            make_comment(2, parent_id=1),  # A
            make_comment(3, parent_id=1),  # B
            make_comment(4, parent_id=3),  # C
        ]

        roots = builder.build(comments)

        assert len(roots) == 1
        root = roots[0]
        assert [r.comment.id for r in root.replies] == [2, 3]
        reply_a, reply_b = root.replies
        assert reply_a.replies is None
        assert [r.comment.id for r in reply_b.replies] == [4]
        assert reply_b.replies[0].replies is None

    def test_leaves_never_have_empty_replies(self, builder):
        """Every leaf has replies None, never an empty tuple."""
        comments = [
            make_comment(1),
            make_comment(2, parent_id=1),
            make_comment(3),
            make_comment(4, parent_id=2),
        ]

        stack = list(builder.build(comments))
        while stack:
            node = stack.pop()
            assert node.replies != ()
            if node.replies:
                stack.extend(node.replies)

    def test_roots_keep_input_order(self, builder):
        """Roots appear in chronological input order."""
        comments = [make_comment(5), make_comment(2), make_comment(9)]

        roots = builder.build(comments)

        assert [r.comment.id for r in roots] == [5, 2, 9]

    def test_only_root_comments_become_roots(self, builder):
        """Roots are exactly the comments without a parent."""
        comments = [
            make_comment(1),
            make_comment(2, parent_id=1),
            make_comment(3),
        ]

        roots = builder.build(comments)

        assert all(root.comment.is_root for root in roots)
        assert {root.comment.id for root in roots} == {
            c.id for c in comments if c.is_root
        }
        assert not roots[0].replies[0].comment.is_root

    def test_siblings_keep_input_order_interleaved_with_other_threads(
        self, builder
    ):
        """Replies keep the order they were given, even when interleaved."""
        comments = [
            make_comment(1),
            make_comment(2),
            make_comment(10, parent_id=2),
            make_comment(11, parent_id=1),
            make_comment(12, parent_id=2),
            make_comment(13, parent_id=1),
        ]

        roots = builder.build(comments)

        assert [r.comment.id for r in roots[0].replies] == [11, 13]
        assert [r.comment.id for r in roots[1].replies] == [10, 12]

    def test_every_comment_appears_exactly_once(self, builder):
        """The forest contains each input comment once."""
        comments = [
            make_comment(1),
            make_comment(2, parent_id=1),
            make_comment(3, parent_id=2),
            make_comment(4, parent_id=1),
            make_comment(5),
            make_comment(6, parent_id=5),
        ]

        roots = builder.build(comments)

        ids = flatten(roots)
        assert sorted(ids) == [1, 2, 3, 4, 5, 6]
        assert sum(root.count() for root in roots) == len(comments)

    def test_reply_listed_before_parent_is_still_placed(self, builder):
        """Placement depends on parent_id, not on input position."""
        comments = [make_comment(2, parent_id=1), make_comment(1)]

        roots = builder.build(comments)

        assert [r.comment.id for r in roots] == [1]
        assert [r.comment.id for r in roots[0].replies] == [2]

    def test_very_deep_chain(self, builder):
        """Depth is not limited by the recursion limit."""
        depth = 5000
        comments = [make_comment(1)] + [
            make_comment(i, parent_id=i - 1) for i in range(2, depth + 1)
        ]

        roots = builder.build(comments)

        assert len(roots) == 1
        assert roots[0].count() == depth
        node = roots[0]
        levels = 1
        while node.replies:
            node = node.replies[0]
            levels += 1
        assert levels == depth
        assert node.comment.id == depth


class TestAuthors:
    """Tests for author attachment."""

    def test_each_node_carries_its_author(self, builder):
        """The embedded author matches the comment's author_id."""
        comments = [
            make_comment(1, author_id=1),
            make_comment(2, author_id=2, parent_id=1),
            make_comment(3, author_id=3, parent_id=2),
        ]

        roots = builder.build(comments)

        stack = list(roots)
        while stack:
            node = stack.pop()
            assert node.author.id == node.comment.author_id
            if node.replies:
                stack.extend(node.replies)

    def test_author_projection_has_no_password(self, builder):
        """Authors are projections without the credential hash."""
        roots = builder.build([make_comment(1, author_id=2)])

        dumped = roots[0].author.model_dump()
        assert "password" not in dumped
        assert dumped["username"] == "user2"

    def test_missing_author_fails(self):
        """A comment whose author cannot be resolved is an integrity violation."""
        builder = CommentTreeBuilder(authors_for(1))

        with pytest.raises(IntegrityViolationError, match="missing author 7"):
            builder.build([make_comment(1), make_comment(2, author_id=7, parent_id=1)])


class TestIntegrity:
    """Tests for malformed input."""

    def test_mixed_articles_rejected(self, builder):
        """All comments must belong to one article."""
        comments = [make_comment(1, article_id=1), make_comment(2, article_id=2)]

        with pytest.raises(IntegrityViolationError, match="multiple articles"):
            builder.build(comments)

    def test_duplicate_ids_rejected(self, builder):
        """The same id twice is rejected."""
        with pytest.raises(IntegrityViolationError, match="Duplicate comment id"):
            builder.build([make_comment(1), make_comment(1, minute=5)])

    def test_dangling_parent_rejected(self, builder):
        """A reply to a comment that is not in the thread is rejected."""
        comments = [make_comment(1), make_comment(2, parent_id=99)]

        with pytest.raises(IntegrityViolationError, match="not part of article"):
            builder.build(comments)

    def test_cycle_rejected(self, builder):
        """Two comments replying to each other form a cycle."""
        comments = [
            make_comment(1),
            make_comment(2, parent_id=3),
            make_comment(3, parent_id=2),
        ]

        with pytest.raises(CommentCycleError) as exc_info:
            builder.build(comments)

        assert set(exc_info.value.comment_ids) == {2, 3}

    def test_self_reply_is_a_cycle(self, builder):
        """A comment that is its own parent is a cycle."""
        with pytest.raises(CommentCycleError):
            builder.build([make_comment(1, parent_id=1)])

    def test_cycle_error_is_an_integrity_violation(self):
        """Callers handling integrity violations also catch cycles."""
        assert issubclass(CommentCycleError, IntegrityViolationError)
