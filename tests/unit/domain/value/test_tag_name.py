"""Unit tests for tag name canonicalization."""

import pytest
from pydantic import ValidationError

from pawprint.domain.value import TagName, canonicalize_tag


class TestCanonicalizeTag:
    """Tests for canonicalize_tag."""

    @pytest.mark.parametrize(
        "raw",
        ["cats", "Cats", "#cats", "#Cats", " CATS ", "  #cats  ", "# cats"],
    )
    def test_variants_collapse_to_one_name(self, raw):
        """Case, surrounding whitespace and one leading '#' are ignored."""
        assert canonicalize_tag(raw) == "cats"

    def test_only_one_marker_is_stripped(self):
        """A second '#' is part of the name."""
        assert canonicalize_tag("##cats") == "#cats"

    @pytest.mark.parametrize("raw", ["", "   ", "#", " # "])
    def test_blank_input_becomes_empty(self, raw):
        """Inputs with no name left become the empty string."""
        assert canonicalize_tag(raw) == ""


class TestTagName:
    """Tests for the TagName value object."""

    def test_parse_returns_canonical_name(self):
        """parse accepts free text."""
        # Act
        name = TagName.parse(" #DogsOfInstagram ")

        # Assert
        assert name == TagName("dogsofinstagram")
        assert str(name) == "dogsofinstagram"

    def test_parse_blank_returns_none(self):
        """Nothing left after canonicalization means no tag."""
        assert TagName.parse("#") is None

    def test_parse_too_long_raises(self):
        """Names are limited to 50 characters."""
        with pytest.raises(ValidationError):
            TagName.parse("#" + "a" * 51)

    def test_fifty_characters_allowed(self):
        """The limit is inclusive."""
        assert TagName.parse("a" * 50).root == "a" * 50

    @pytest.mark.parametrize("raw", ["Cats", " cats", "cats ", ""])
    def test_constructor_requires_canonical_form(self, raw):
        """Direct construction rejects names that aren't canonical."""
        with pytest.raises(ValidationError):
            TagName(raw)

    def test_equal_names_are_equal(self):
        """Value objects compare by value."""
        assert TagName("cats") == TagName("cats")
        assert TagName("cats") != TagName("dogs")
