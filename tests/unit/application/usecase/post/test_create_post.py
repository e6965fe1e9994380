"""Unit tests for post write use cases."""

from uuid import uuid4

import pytest

from pawprint.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    SharePostRequest,
    SharePostUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from pawprint.domain.error import NotAuthorizedError, NotFoundError
from pawprint.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_created_post_is_hydrated(self, unit_env):
        """The response carries the author profile and canonical hashtags."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        store = await unit_env.get(InMemoryStore)
        author = make_user("bob")
        store.users[author.id] = author

        # Act
        response = await use_case.execute(
            CreatePostRequest(
                author_id=str(author.id),
                content="First post!",
                hashtags=["#Hello", "hello", "World"],
            )
        )

        # Assert
        assert response.author_id == str(author.id)
        assert response.author.username == "bob"
        assert response.hashtags == ["hello", "world"]
        assert response.like_count == 0
        assert response.is_liked is False


class TestGetUpdateDelete:
    """Tests for reading, editing and deleting through use cases."""

    @pytest.mark.asyncio
    async def test_update_then_get(self, unit_env):
        # Arrange
        create = await unit_env.get(CreatePostUseCase)
        update = await unit_env.get(UpdatePostUseCase)
        get = await unit_env.get(GetPostUseCase)
        author_id = str(uuid4())
        created = await create.execute(
            CreatePostRequest(author_id=author_id, content="Draft", hashtags=["a"])
        )

        # Act
        updated = await update.execute(
            UpdatePostRequest(
                post_id=created.post_id,
                user_id=author_id,
                content="Final",
                hashtags=["b", "c"],
            )
        )
        fetched = await get.execute(GetPostRequest(post_id=created.post_id))

        # Assert
        assert updated.content == "Final"
        assert fetched.content == "Final"
        assert fetched.hashtags == ["b", "c"]

    @pytest.mark.asyncio
    async def test_update_by_other_user_fails(self, unit_env):
        # Arrange
        create = await unit_env.get(CreatePostUseCase)
        update = await unit_env.get(UpdatePostUseCase)
        created = await create.execute(
            CreatePostRequest(author_id=str(uuid4()), content="Mine")
        )

        # Act / Assert
        with pytest.raises(NotAuthorizedError):
            await update.execute(
                UpdatePostRequest(
                    post_id=created.post_id, user_id=str(uuid4()), content="Yours"
                )
            )

    @pytest.mark.asyncio
    async def test_deleted_post_is_not_found(self, unit_env):
        # Arrange
        create = await unit_env.get(CreatePostUseCase)
        delete = await unit_env.get(DeletePostUseCase)
        get = await unit_env.get(GetPostUseCase)
        author_id = str(uuid4())
        created = await create.execute(
            CreatePostRequest(author_id=author_id, content="Oops")
        )

        # Act
        await delete.execute(DeletePostRequest(post_id=created.post_id, user_id=author_id))

        # Assert
        with pytest.raises(NotFoundError):
            await get.execute(GetPostRequest(post_id=created.post_id))

    @pytest.mark.asyncio
    async def test_share_counts_up(self, unit_env):
        # Arrange
        create = await unit_env.get(CreatePostUseCase)
        share = await unit_env.get(SharePostUseCase)
        created = await create.execute(
            CreatePostRequest(author_id=str(uuid4()), content="Share me")
        )

        # Act
        await share.execute(SharePostRequest(post_id=created.post_id))
        response = await share.execute(SharePostRequest(post_id=created.post_id))

        # Assert
        assert response.post_id == created.post_id
        assert response.share_count == 2
