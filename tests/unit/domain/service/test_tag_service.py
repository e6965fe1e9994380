"""Unit tests for TagService."""

from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from pawprint.domain.error import ValidationError
from pawprint.domain.model.tag import Tag
from pawprint.domain.repository import TagRepository
from pawprint.domain.service import TagService
from pawprint.domain.value import TagId, TagName
from pawprint.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryTagRepository,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class RacingTagRepository(InMemoryTagRepository):
    """Tag repository where another request always wins the insert."""

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__(store)
        self.winners: dict[str, Tag] = {}

    async def create(self, tag: Tag) -> Tag:
        winner = Tag(id=TagId(uuid4()), name=tag.name, created_at=datetime(2024, 1, 1))
        self._store.tags[winner.id] = winner
        self.winners[tag.name.root] = winner
        raise IntegrityError("Duplicate tag name", None, Exception())


class GhostConflictTagRepository(InMemoryTagRepository):
    """Tag repository whose insert fails without leaving a readable row."""

    async def create(self, tag: Tag) -> Tag:
        raise IntegrityError("Duplicate tag name", None, Exception())


class TestCanonicalNames:
    """Tests for canonical_names."""

    def test_variants_deduplicate_in_input_order(self):
        """Spellings of one tag collapse to the first occurrence."""
        # Act
        names = TagService.canonical_names(["Dogs", "Cats", "#cats", " CATS ", "#dogs"])

        # Assert
        assert names == [TagName("dogs"), TagName("cats")]

    def test_blank_entries_are_dropped(self):
        """Entries with nothing left after canonicalization are skipped."""
        assert TagService.canonical_names(["", "  ", "#", "pets"]) == [TagName("pets")]

    def test_too_long_name_is_a_validation_error(self):
        """Over-long hashtags surface as a domain ValidationError."""
        with pytest.raises(ValidationError):
            TagService.canonical_names(["#" + "a" * 51])


class TestNormalizeTags:
    """Tests for normalize_tags."""

    @pytest.mark.asyncio
    async def test_variants_create_exactly_one_tag(self, unit_env):
        """["Cats", "#cats", " CATS "] persists a single tag named cats."""
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)

        # Act
        tags = await tag_service.normalize_tags(["Cats", "#cats", " CATS "])

        # Assert
        assert [t.name for t in tags] == [TagName("cats")]
        all_tags = await tag_repo.find_all()
        assert len(all_tags) == 1
        assert all_tags[0].name == TagName("cats")
        assert all_tags[0].post_count == 0

    @pytest.mark.asyncio
    async def test_existing_tags_are_reused(self, unit_env):
        """A known name resolves to the stored tag."""
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        existing = await tag_repo.create(
            Tag(id=TagId(uuid4()), name=TagName("dogs"), created_at=datetime(2024, 1, 1))
        )

        # Act
        tags = await tag_service.normalize_tags(["#Dogs", "puppies"])

        # Assert
        assert tags[0].id == existing.id
        assert tags[1].name == TagName("puppies")
        assert len(await tag_repo.find_all()) == 2

    @pytest.mark.asyncio
    async def test_empty_input(self, unit_env):
        """No hashtags, no tags."""
        # Arrange
        tag_service = await unit_env.get(TagService)

        # Act
        tags = await tag_service.normalize_tags(["", "#"])

        # Assert
        assert tags == []

    @pytest.mark.asyncio
    async def test_lost_insert_race_returns_winner(self):
        """A unique violation means someone else created the tag; use theirs."""
        # Arrange
        store = InMemoryStore()
        tag_repo = RacingTagRepository(store)
        tag_service = TagService(tag_repository=tag_repo)

        # Act
        tags = await tag_service.normalize_tags(["#Cats"])

        # Assert
        assert len(tags) == 1
        assert tags[0].id == tag_repo.winners["cats"].id
        assert len(store.tags) == 1

    @pytest.mark.asyncio
    async def test_conflict_without_visible_row_propagates(self):
        """If the re-read finds nothing the original error is raised."""
        # Arrange
        tag_service = TagService(tag_repository=GhostConflictTagRepository())

        # Act / Assert
        with pytest.raises(IntegrityError):
            await tag_service.normalize_tags(["cats"])


class TestGetAllTags:
    """Tests for get_all_tags."""

    @pytest.mark.asyncio
    async def test_ordered_by_name(self, unit_env):
        """Default ordering is alphabetical."""
        # Arrange
        tag_service = await unit_env.get(TagService)
        await tag_service.normalize_tags(["zebra", "aardvark", "moose"])

        # Act
        tags = await tag_service.get_all_tags()

        # Assert
        assert [t.name.root for t in tags] == ["aardvark", "moose", "zebra"]

    @pytest.mark.asyncio
    async def test_limit(self, unit_env):
        """limit caps the number returned."""
        # Arrange
        tag_service = await unit_env.get(TagService)
        await tag_service.normalize_tags(["a", "b", "c"])

        # Act
        tags = await tag_service.get_all_tags(limit=2)

        # Assert
        assert len(tags) == 2
