"""Integration tests for the like and favorite repositories.

Run against a migrated database:

    DATABASE__URL=postgresql+asyncpg://... pytest -m integration
"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pawprint.domain.error import AlreadyExistsError
from pawprint.domain.model import PostFavorite
from pawprint.domain.repository import FavoriteRepository, PostRepository
from pawprint.domain.service import FavoriteService, LikeService
from pawprint.domain.value import PostFavoriteId, UserId
from pawprint.persistence.tables import users_table
from tests.conftest import BASE_TIME, make_post
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def _create_user(session: AsyncSession) -> UserId:
    user_id = UserId(uuid4())
    await session.execute(
        insert(users_table).values(id=user_id, username=f"user_{user_id.hex[:12]}")
    )
    return user_id


class TestReactionRepositoryIntegration:
    """post_likes and post_favorites against PostgreSQL."""

    @pytest.mark.asyncio
    async def test_duplicate_like_is_already_exists(self, integration_env):
        # Arrange
        session = await integration_env.get(AsyncSession)
        post_repo = await integration_env.get(PostRepository)
        like_service = await integration_env.get(LikeService)
        author_id = await _create_user(session)
        fan_id = await _create_user(session)
        post = await post_repo.save(make_post(author_id=author_id))
        await like_service.like_post(post.id, fan_id)

        # Act / Assert
        with pytest.raises(AlreadyExistsError):
            await like_service.like_post(post.id, fan_id)
        assert (await post_repo.find_by_id(post.id)).like_count == 1

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_a_duplicate(self, integration_env):
        """A foreign key violation surfaces as IntegrityError, session intact."""
        # Arrange
        session = await integration_env.get(AsyncSession)
        post_repo = await integration_env.get(PostRepository)
        like_service = await integration_env.get(LikeService)
        author_id = await _create_user(session)
        post = await post_repo.save(make_post(author_id=author_id))

        # Act
        with pytest.raises(IntegrityError):
            await like_service.like_post(post.id, UserId(uuid4()))

        # Assert
        assert (await post_repo.find_by_id(post.id)).like_count == 0

    @pytest.mark.asyncio
    async def test_favorites_listing_order_and_visibility(self, integration_env):
        """Newest favorite first; deleted posts and drafts are skipped."""
        # Arrange
        session = await integration_env.get(AsyncSession)
        post_repo = await integration_env.get(PostRepository)
        favorite_repo = await integration_env.get(FavoriteRepository)
        favorite_service = await integration_env.get(FavoriteService)
        author_id = await _create_user(session)
        fan_id = await _create_user(session)
        older = await post_repo.save(make_post(author_id=author_id))
        newer = await post_repo.save(make_post(author_id=author_id))
        deleted = await post_repo.save(make_post(author_id=author_id))
        draft = await post_repo.save(make_post(author_id=fan_id, is_draft=True))
        for minutes, post in [(1, older), (2, newer), (3, deleted), (4, draft)]:
            await favorite_repo.save(
                PostFavorite(
                    id=PostFavoriteId(uuid4()),
                    post_id=post.id,
                    user_id=fan_id,
                    created_at=BASE_TIME + timedelta(minutes=minutes),
                )
            )
        await post_repo.soft_delete(deleted.id, datetime(2024, 2, 1))

        # Act
        post_ids, total = await favorite_service.favorited_posts_page(
            fan_id, limit=20, offset=0
        )

        # Assert
        assert post_ids == [newer.id, older.id]
        assert total == 2
        marked = await favorite_repo.find_marked_post_ids(
            fan_id, [older.id, newer.id, draft.id]
        )
        assert marked == {older.id, newer.id, draft.id}
