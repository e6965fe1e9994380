"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .interactions import (
    InteractionStatusRequest,
    InteractionStatusResponse,
    InteractionStatusUseCase,
)
from .item import AuthorSummary, PetSummary, PostItem
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .recommended_feed import RecommendedFeedRequest, RecommendedFeedUseCase
from .share_post import SharePostRequest, SharePostResponse, SharePostUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase
from .user_posts import (
    ListDraftsUseCase,
    ListFavoritedPostsUseCase,
    ListLikedPostsUseCase,
    ListUserPostsRequest,
)

__all__ = [
    "AuthorSummary",
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "InteractionStatusRequest",
    "InteractionStatusResponse",
    "InteractionStatusUseCase",
    "ListDraftsUseCase",
    "ListFavoritedPostsUseCase",
    "ListLikedPostsUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "ListUserPostsRequest",
    "PetSummary",
    "PostItem",
    "RecommendedFeedRequest",
    "RecommendedFeedUseCase",
    "SharePostRequest",
    "SharePostResponse",
    "SharePostUseCase",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
