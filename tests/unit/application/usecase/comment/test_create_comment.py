"""Unit tests for CreateCommentUseCase."""

import pytest
import pytest_asyncio

from logus.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
)
from logus.domain.error import IntegrityViolationError, NotFoundError
from logus.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from logus.domain.value import ArticleId
from tests.conftest import make_article, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest_asyncio.fixture
async def seeded_env(unit_env):
    """Unit environment with one user and two articles."""
    user_repo = await unit_env.get(UserRepository)
    article_repo = await unit_env.get(ArticleRepository)
    await user_repo.save(make_user(1, "ada"))
    await article_repo.save(make_article(1))
    await article_repo.save(make_article(2))
    return unit_env


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_creates_top_level_comment(self, seeded_env):
        """A valid request returns the flat stored comment."""
        # Arrange
        use_case = await seeded_env.get(CreateCommentUseCase)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(article_id=1, author_id=1, content="Nice post")
        )

        # Assert
        assert isinstance(response, CommentResponse)
        assert response.article_id == 1
        assert response.author_id == 1
        assert response.parent_id is None
        assert response.content == "Nice post"

    @pytest.mark.asyncio
    async def test_creates_reply(self, seeded_env):
        """A reply carries its parent id."""
        # Arrange
        use_case = await seeded_env.get(CreateCommentUseCase)
        parent = await use_case.execute(
            CreateCommentRequest(article_id=1, author_id=1, content="Parent")
        )

        # Act
        reply = await use_case.execute(
            CreateCommentRequest(
                article_id=1, author_id=1, content="Reply", parent_id=parent.id
            )
        )

        # Assert
        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_missing_article(self, seeded_env):
        """Commenting on an unknown article fails."""
        use_case = await seeded_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(article_id=99, author_id=1, content="Hello")
            )

        assert exc_info.value.resource == "Article"

    @pytest.mark.asyncio
    async def test_missing_author(self, seeded_env):
        """An unknown author cannot comment."""
        use_case = await seeded_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(article_id=1, author_id=77, content="Hello")
            )

        assert exc_info.value.resource == "User"

    @pytest.mark.asyncio
    async def test_parent_on_other_article(self, seeded_env):
        """Replying across articles is rejected and nothing is stored."""
        # Arrange
        use_case = await seeded_env.get(CreateCommentUseCase)
        comment_repo = await seeded_env.get(CommentRepository)
        parent = await use_case.execute(
            CreateCommentRequest(article_id=1, author_id=1, content="Parent")
        )

        # Act & Assert
        with pytest.raises(IntegrityViolationError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=2, author_id=1, content="Reply", parent_id=parent.id
                )
            )

        assert await comment_repo.count_by_article(ArticleId(2)) == 0
