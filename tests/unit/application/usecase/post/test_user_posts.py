"""Unit tests for per-user post lists."""

from uuid import uuid4

import pytest

from pawprint.application.usecase.post import (
    ListDraftsUseCase,
    ListFavoritedPostsUseCase,
    ListLikedPostsUseCase,
    ListUserPostsRequest,
)
from pawprint.domain.repository import PostRepository
from pawprint.domain.service import FavoriteService, LikeService
from pawprint.domain.value import UserId
from pawprint.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLikedPosts:
    @pytest.mark.asyncio
    async def test_liked_posts_are_hydrated(self, unit_env):
        """IDs come from likes; author profiles are attached like in the feed."""
        # Arrange
        use_case = await unit_env.get(ListLikedPostsUseCase)
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        store = await unit_env.get(InMemoryStore)
        alice = make_user("alice")
        store.users[alice.id] = alice
        post = await post_repo.save(make_post(author_id=alice.id))
        await post_repo.save(make_post())
        fan_id = UserId(uuid4())
        await like_service.like_post(post.id, fan_id)

        # Act
        response = await use_case.execute(ListUserPostsRequest(user_id=str(fan_id)))

        # Assert
        assert response.total == 1
        assert response.total_pages == 1
        item = response.items[0]
        assert item.post_id == str(post.id)
        assert item.author.username == "alice"
        assert item.like_count == 1
        # No viewer given
        assert item.is_liked is False

    @pytest.mark.asyncio
    async def test_limit_is_clamped(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListLikedPostsUseCase)

        # Act
        response = await use_case.execute(
            ListUserPostsRequest(user_id=str(uuid4()), page="0", limit="500")
        )

        # Assert
        assert response.page == 1
        assert response.limit == 50
        assert response.items == []
        assert response.total_pages == 0


class TestFavoritedPosts:
    @pytest.mark.asyncio
    async def test_viewer_marks_apply(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListFavoritedPostsUseCase)
        favorite_service = await unit_env.get(FavoriteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        fan_id = UserId(uuid4())
        await favorite_service.favorite_post(post.id, fan_id)

        # Act
        response = await use_case.execute(
            ListUserPostsRequest(user_id=str(fan_id), viewer_id=str(fan_id))
        )

        # Assert
        assert [item.post_id for item in response.items] == [str(post.id)]
        assert response.items[0].is_favorited is True


class TestDrafts:
    @pytest.mark.asyncio
    async def test_only_own_drafts(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListDraftsUseCase)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        draft = await post_repo.save(make_post(author_id=author_id, is_draft=True))
        await post_repo.save(make_post(author_id=author_id))
        await post_repo.save(make_post(is_draft=True))

        # Act
        response = await use_case.execute(
            ListUserPostsRequest(user_id=str(author_id), viewer_id=str(author_id))
        )

        # Assert
        assert [item.post_id for item in response.items] == [str(draft.id)]
        assert response.items[0].is_draft is True
