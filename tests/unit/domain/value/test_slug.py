"""Unit tests for slugify and the tag value objects."""

import pytest
from pydantic import ValidationError

from scribe.domain.value import Slug, TagName, slugify


class TestSlugify:
    """Tests for slugify."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Rust", "rust"),
            ("  Hello, World!  ", "hello-world"),
            ("Machine Learning", "machine-learning"),
            ("snake_case_name", "snake-case-name"),
            ("a -- b", "a-b"),
            ("C++", "c"),
            ("-leading and trailing-", "leading-and-trailing"),
        ],
    )
    def test_slugify(self, text, expected):
        assert slugify(text) == expected

    def test_slugify_is_idempotent(self):
        once = slugify("  Déjà Vu -- Again!  ")
        assert slugify(once) == once

    def test_non_ascii_letters_are_dropped(self):
        assert slugify("Café") == "caf"

    @pytest.mark.parametrize("space", ["\u00a0", "\u2003", "\u3000"])
    def test_unicode_whitespace_separates_words(self, space):
        assert slugify(f"a{space}b") == "a-b"

    def test_symbols_only_give_empty_slug(self):
        assert slugify("!!!") == ""


class TestTagName:
    """Tests for TagName validation."""

    def test_trims_and_keeps_casing(self):
        assert TagName("  Machine Learning ").root == "Machine Learning"

    @pytest.mark.parametrize("raw", ["", "   ", "???"])
    def test_rejects_names_without_slug(self, raw):
        with pytest.raises(ValidationError):
            TagName(raw)

    def test_rejects_overlong_name(self):
        with pytest.raises(ValidationError):
            TagName("a" * 101)


class TestSlug:
    """Tests for Slug."""

    def test_from_name(self):
        assert Slug.from_name(TagName("Web Dev")).root == "web-dev"

    def test_from_plain_string(self):
        assert Slug.from_name("Web Dev").root == "web-dev"

    @pytest.mark.parametrize("raw", ["Rust", "two--hyphens", "-edge", "under_score", ""])
    def test_rejects_malformed(self, raw):
        with pytest.raises(ValidationError):
            Slug(raw)
