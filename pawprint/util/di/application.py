"""Application layer DI providers."""

from dishka import Scope, provide

from pawprint.application.usecase.favorite import (
    FavoritePostUseCase,
    UnfavoritePostUseCase,
)
from pawprint.application.usecase.like import LikePostUseCase, UnlikePostUseCase
from pawprint.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    InteractionStatusUseCase,
    ListDraftsUseCase,
    ListFavoritedPostsUseCase,
    ListLikedPostsUseCase,
    ListPostsUseCase,
    RecommendedFeedUseCase,
    SharePostUseCase,
    UpdatePostUseCase,
)
from pawprint.application.usecase.tag import ListTagsUseCase
from pawprint.domain.service import (
    FavoriteService,
    FeedService,
    LikeService,
    PostService,
    TagService,
)
from pawprint.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    scope = Scope.REQUEST

    # Post use cases
    @provide
    def get_list_posts_use_case(
        self,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            feed_service=feed_service,
            like_service=like_service,
            favorite_service=favorite_service,
        )

    @provide
    def get_recommended_feed_use_case(
        self,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> RecommendedFeedUseCase:
        """Provide recommended feed use case."""
        return RecommendedFeedUseCase(
            feed_service=feed_service,
            like_service=like_service,
            favorite_service=favorite_service,
        )

    @provide
    def get_get_post_use_case(
        self,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            feed_service=feed_service,
            like_service=like_service,
            favorite_service=favorite_service,
        )

    @provide
    def get_create_post_use_case(
        self, post_service: PostService, feed_service: FeedService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, feed_service=feed_service)

    @provide
    def get_update_post_use_case(
        self,
        post_service: PostService,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            feed_service=feed_service,
            like_service=like_service,
            favorite_service=favorite_service,
        )

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_share_post_use_case(self, post_service: PostService) -> SharePostUseCase:
        """Provide share post use case."""
        return SharePostUseCase(post_service=post_service)

    @provide
    def get_interaction_status_use_case(
        self,
        post_service: PostService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> InteractionStatusUseCase:
        """Provide interaction status use case."""
        return InteractionStatusUseCase(
            post_service=post_service,
            like_service=like_service,
            favorite_service=favorite_service,
        )

    # Per-user lists
    @provide
    def get_list_liked_posts_use_case(
        self,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> ListLikedPostsUseCase:
        """Provide liked posts use case."""
        return ListLikedPostsUseCase(feed_service, like_service, favorite_service)

    @provide
    def get_list_favorited_posts_use_case(
        self,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> ListFavoritedPostsUseCase:
        """Provide favorited posts use case."""
        return ListFavoritedPostsUseCase(feed_service, like_service, favorite_service)

    @provide
    def get_list_drafts_use_case(
        self,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> ListDraftsUseCase:
        """Provide drafts use case."""
        return ListDraftsUseCase(feed_service, like_service, favorite_service)

    # Like use cases
    @provide
    def get_like_post_use_case(
        self, like_service: LikeService, post_service: PostService
    ) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(like_service=like_service, post_service=post_service)

    @provide
    def get_unlike_post_use_case(
        self, like_service: LikeService, post_service: PostService
    ) -> UnlikePostUseCase:
        """Provide unlike post use case."""
        return UnlikePostUseCase(like_service=like_service, post_service=post_service)

    # Favorite use cases
    @provide
    def get_favorite_post_use_case(
        self, favorite_service: FavoriteService, post_service: PostService
    ) -> FavoritePostUseCase:
        """Provide favorite post use case."""
        return FavoritePostUseCase(
            favorite_service=favorite_service, post_service=post_service
        )

    @provide
    def get_unfavorite_post_use_case(
        self, favorite_service: FavoriteService, post_service: PostService
    ) -> UnfavoritePostUseCase:
        """Provide unfavorite post use case."""
        return UnfavoritePostUseCase(
            favorite_service=favorite_service, post_service=post_service
        )

    # Tag use cases
    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)
