"""Unit tests for FeedQuery parsing."""

from uuid import uuid4

import pytest

from pawprint.domain.model.feed import FeedQuery
from pawprint.domain.repository import FeedSortOrder


class TestFeedQuery:
    """FeedQuery accepts loose input and falls back to defaults."""

    def test_defaults(self):
        """An empty query is the first page of the latest feed."""
        # Act
        query = FeedQuery()

        # Assert
        assert query.page == 1
        assert query.limit is None
        assert query.sort_by == FeedSortOrder.LATEST
        assert query.author_id is None
        assert query.pet_id is None
        assert query.tag is None

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("latest", FeedSortOrder.LATEST),
            ("popular", FeedSortOrder.POPULAR),
            ("hot", FeedSortOrder.HOT),
            (" HOT ", FeedSortOrder.HOT),
            ("trending", FeedSortOrder.LATEST),
            ("", FeedSortOrder.LATEST),
            (None, FeedSortOrder.LATEST),
        ],
    )
    def test_sort_by_falls_back_to_latest(self, raw, expected):
        """Unknown sort values don't raise."""
        assert FeedQuery(sort_by=raw).sort_by == expected

    def test_unparseable_page_and_limit_use_defaults(self):
        """Garbage pagination input is treated as missing."""
        # Act
        query = FeedQuery(page="abc", limit="many")

        # Assert
        assert query.page == 1
        assert query.limit is None

    def test_numeric_strings_are_parsed(self):
        """Query string values arrive as strings."""
        # Act
        query = FeedQuery(page="3", limit="15")

        # Assert
        assert query.page == 3
        assert query.limit == 15

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_blank_tag_means_no_filter(self, raw):
        """A blank tag is dropped."""
        assert FeedQuery(tag=raw).tag is None

    def test_ids_parsed_from_strings(self):
        """Author and pet IDs accept their string form."""
        # Arrange
        author_id = uuid4()
        pet_id = uuid4()

        # Act
        query = FeedQuery(author_id=str(author_id), pet_id=str(pet_id))

        # Assert
        assert query.author_id == author_id
        assert query.pet_id == pet_id
