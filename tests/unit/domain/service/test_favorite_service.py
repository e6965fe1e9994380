"""Unit tests for FavoriteService."""

from uuid import uuid4

import pytest

from pawprint.domain.error import AlreadyExistsError, NotFoundError
from pawprint.domain.repository import (
    FavoriteRepository,
    LikeRepository,
    PostRepository,
)
from pawprint.domain.service import FavoriteService, LikeService
from pawprint.domain.value import PostId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestFavoritePost:
    """Tests for favorite_post and unfavorite_post."""

    @pytest.mark.asyncio
    async def test_favorite_increments_count(self, unit_env):
        # Arrange
        favorite_service = await unit_env.get(FavoriteService)
        post_repo = await unit_env.get(PostRepository)
        favorite_repo = await unit_env.get(FavoriteRepository)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        # Act
        favorite = await favorite_service.favorite_post(post.id, user_id)

        # Assert
        assert favorite.user_id == user_id
        assert await favorite_repo.find(post.id, user_id) is not None
        stored = await post_repo.find_by_id(post.id)
        assert stored.favorite_count == 1
        assert stored.like_count == 0

    @pytest.mark.asyncio
    async def test_second_favorite_is_rejected(self, unit_env):
        # Arrange
        favorite_service = await unit_env.get(FavoriteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())
        await favorite_service.favorite_post(post.id, user_id)

        # Act / Assert
        with pytest.raises(AlreadyExistsError):
            await favorite_service.favorite_post(post.id, user_id)
        assert (await post_repo.find_by_id(post.id)).favorite_count == 1

    @pytest.mark.asyncio
    async def test_favorite_missing_post(self, unit_env):
        favorite_service = await unit_env.get(FavoriteService)
        with pytest.raises(NotFoundError):
            await favorite_service.favorite_post(PostId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_someone_elses_draft_is_not_found(self, unit_env):
        # Arrange
        favorite_service = await unit_env.get(FavoriteService)
        post_repo = await unit_env.get(PostRepository)
        draft = await post_repo.save(make_post(is_draft=True))

        # Act / Assert
        with pytest.raises(NotFoundError):
            await favorite_service.favorite_post(draft.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_unfavorite(self, unit_env):
        # Arrange
        favorite_service = await unit_env.get(FavoriteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())
        await favorite_service.favorite_post(post.id, user_id)

        # Act
        await favorite_service.unfavorite_post(post.id, user_id)

        # Assert
        assert (await post_repo.find_by_id(post.id)).favorite_count == 0
        with pytest.raises(NotFoundError):
            await favorite_service.unfavorite_post(post.id, user_id)


class TestFavoritesAreSeparateFromLikes:
    @pytest.mark.asyncio
    async def test_marks_do_not_mix(self, unit_env):
        """Liking a post doesn't favorite it, and the reverse."""
        # Arrange
        favorite_service = await unit_env.get(FavoriteService)
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        post_repo = await unit_env.get(PostRepository)
        liked = await post_repo.save(make_post())
        saved = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        # Act
        await like_service.like_post(liked.id, user_id)
        await favorite_service.favorite_post(saved.id, user_id)

        # Assert
        ids = [liked.id, saved.id]
        assert await like_service.get_liked_post_ids(user_id, ids) == {liked.id}
        assert await favorite_service.get_favorited_post_ids(user_id, ids) == {saved.id}
        assert await like_repo.count_by_user(user_id) == 1

    @pytest.mark.asyncio
    async def test_favorited_posts_page(self, unit_env):
        # Arrange
        favorite_service = await unit_env.get(FavoriteService)
        post_repo = await unit_env.get(PostRepository)
        user_id = UserId(uuid4())
        post = await post_repo.save(make_post())
        await favorite_service.favorite_post(post.id, user_id)

        # Act
        post_ids, total = await favorite_service.favorited_posts_page(
            user_id, limit=20, offset=0
        )
        other_ids, other_total = await favorite_service.favorited_posts_page(
            UserId(uuid4()), limit=20, offset=0
        )

        # Assert
        assert post_ids == [post.id]
        assert total == 1
        assert other_ids == []
        assert other_total == 0
