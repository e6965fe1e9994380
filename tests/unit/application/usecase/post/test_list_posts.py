"""Unit tests for ListPostsUseCase and RecommendedFeedUseCase."""

from uuid import uuid4

import pytest

from pawprint.application.usecase.post import (
    ListPostsRequest,
    ListPostsUseCase,
    RecommendedFeedRequest,
    RecommendedFeedUseCase,
)
from pawprint.domain.repository import PostRepository
from pawprint.domain.service import FavoriteService, LikeService
from pawprint.domain.value import MediaType, UserId
from pawprint.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_pet, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPosts:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_response_shape(self, unit_env):
        """Items expose author, pet, tags, counters and page metadata."""
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        store = await unit_env.get(InMemoryStore)
        alice = make_user("alice")
        pet = make_pet(alice.id, "Mochi", species="cat")
        store.users[alice.id] = alice
        store.pets[pet.id] = pet
        post = await post_repo.save(
            make_post(
                author_id=alice.id,
                pet_id=pet.id,
                content="Mochi vs the box",
                tags=["cats", "boxes"],
                media_type=MediaType.IMAGE,
                media_urls=["https://cdn.example.com/mochi.jpg"],
                like_count=2,
            )
        )

        # Act
        response = await use_case.execute(ListPostsRequest(tag="#CATS", limit=10))

        # Assert
        assert response.total == 1
        assert response.page == 1
        assert response.limit == 10
        assert response.total_pages == 1
        item = response.items[0]
        assert item.post_id == str(post.id)
        assert item.author.username == "alice"
        assert item.pet.name == "Mochi"
        assert item.pet.species == "cat"
        assert item.hashtags == ["cats", "boxes"]
        assert item.media_type == MediaType.IMAGE
        assert item.like_count == 2
        assert item.is_liked is False

    @pytest.mark.asyncio
    async def test_is_liked_reflects_viewer(self, unit_env):
        """Posts the viewer liked are flagged."""
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        liked = await post_repo.save(make_post(minutes=2))
        not_liked = await post_repo.save(make_post(minutes=1))
        viewer_id = UserId(uuid4())
        await like_service.like_post(liked.id, viewer_id)

        # Act
        response = await use_case.execute(ListPostsRequest(viewer_id=str(viewer_id)))
        anonymous = await use_case.execute(ListPostsRequest())

        # Assert
        flags = {item.post_id: item.is_liked for item in response.items}
        assert flags == {str(liked.id): True, str(not_liked.id): False}
        assert not any(item.is_liked for item in anonymous.items)

    @pytest.mark.asyncio
    async def test_invalid_sort_and_limit_are_clamped(self, unit_env):
        """Bad pagination input never fails the request."""
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post())

        # Act
        response = await use_case.execute(
            ListPostsRequest(page=-1, limit=1000, sort_by="weird")
        )

        # Assert
        assert response.page == 1
        assert response.limit == 50
        assert response.total == 1


class TestRecommendedFeed:
    """Tests for RecommendedFeedUseCase."""

    @pytest.mark.asyncio
    async def test_hot_first(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RecommendedFeedUseCase)
        post_repo = await unit_env.get(PostRepository)
        quiet = await post_repo.save(make_post(minutes=5))
        busy = await post_repo.save(make_post(minutes=1, comment_count=1))

        # Act
        response = await use_case.execute(RecommendedFeedRequest())

        # Assert
        assert [item.post_id for item in response.items] == [str(busy.id), str(quiet.id)]

    @pytest.mark.asyncio
    async def test_unparsable_page_and_limit(self, unit_env):
        """Strings that aren't numbers fall back to the defaults."""
        # Arrange
        use_case = await unit_env.get(RecommendedFeedUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post())

        # Act
        response = await use_case.execute(RecommendedFeedRequest(page="zz", limit="abc"))

        # Assert
        assert response.page == 1
        assert response.limit == 20
        assert response.total == 1


class TestViewerMarks:
    """is_liked and is_favorited on listed posts."""

    @pytest.mark.asyncio
    async def test_unparsable_list_params(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post())

        # Act
        response = await use_case.execute(ListPostsRequest(page="zz", limit="abc"))

        # Assert
        assert (response.page, response.limit, response.total) == (1, 20, 1)

    @pytest.mark.asyncio
    async def test_is_favorited_reflects_viewer(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        favorite_service = await unit_env.get(FavoriteService)
        post_repo = await unit_env.get(PostRepository)
        saved = await post_repo.save(make_post(minutes=2))
        other = await post_repo.save(make_post(minutes=1))
        viewer_id = UserId(uuid4())
        await favorite_service.favorite_post(saved.id, viewer_id)

        # Act
        response = await use_case.execute(ListPostsRequest(viewer_id=str(viewer_id)))

        # Assert
        flags = {item.post_id: item.is_favorited for item in response.items}
        assert flags == {str(saved.id): True, str(other.id): False}
        assert not any(item.is_liked for item in response.items)
        assert response.items[0].favorite_count == 1
