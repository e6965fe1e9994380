"""add favorites and drafts

- posts.is_draft: drafts are visible to their author only
- posts.favorite_count, covered by the non-negative counters check
- post_favorites: one favorite per user per post

Revision ID: 9d4e27b1c6a8
Revises: 3c1f0d9a7b42
Create Date: 2026-10-17 16:40:08.902114

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9d4e27b1c6a8"
down_revision: Union[str, Sequence[str], None] = "3c1f0d9a7b42"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "posts",
        sa.Column("favorite_count", sa.Integer(), server_default="0", nullable=False),
    )
    op.add_column(
        "posts",
        sa.Column(
            "is_draft", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
    )

    op.drop_constraint("post_counters_non_negative", "posts", type_="check")
    op.create_check_constraint(
        "post_counters_non_negative",
        "posts",
        "like_count >= 0 AND comment_count >= 0 AND share_count >= 0"
        " AND favorite_count >= 0",
    )

    op.create_table(
        "post_favorites",
        sa.Column(
            "id", sa.UUID(), server_default=sa.text("uuid_generate_v4()"), nullable=False
        ),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "user_id", name="uq_post_favorite"),
    )
    op.create_index("idx_post_favorites_user_id", "post_favorites", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("post_favorites")

    op.drop_constraint("post_counters_non_negative", "posts", type_="check")
    op.create_check_constraint(
        "post_counters_non_negative",
        "posts",
        "like_count >= 0 AND comment_count >= 0 AND share_count >= 0",
    )

    op.drop_column("posts", "is_draft")
    op.drop_column("posts", "favorite_count")
