"""Domain layer DI providers."""

from dishka import Scope, provide

from pawprint.config import FeedSettings, MediaSettings
from pawprint.domain.repository import (
    FavoriteRepository,
    LikeRepository,
    PetRepository,
    PostRepository,
    TagRepository,
    UserRepository,
)
from pawprint.domain.service import (
    FavoriteService,
    FeedService,
    LikeService,
    PostService,
    TagService,
)
from pawprint.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_feed_service(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        pet_repository: PetRepository,
        feed_settings: FeedSettings,
    ) -> FeedService:
        """Provide feed domain service."""
        return FeedService(
            post_repository=post_repository,
            user_repository=user_repository,
            pet_repository=pet_repository,
            feed_settings=feed_settings,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        pet_repository: PetRepository,
        tag_service: TagService,
        media_settings: MediaSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            pet_repository=pet_repository,
            tag_service=tag_service,
            media_settings=media_settings,
        )

    @provide
    def get_like_service(
        self, like_repository: LikeRepository, post_service: PostService
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(like_repository=like_repository, post_service=post_service)

    @provide
    def get_favorite_service(
        self, favorite_repository: FavoriteRepository, post_service: PostService
    ) -> FavoriteService:
        """Provide favorite domain service."""
        return FavoriteService(
            favorite_repository=favorite_repository, post_service=post_service
        )
