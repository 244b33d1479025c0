"""
Tests for readmegen.badges module.
"""

import pytest

from readmegen.badges import BADGE_TEMPLATES, BadgeType, badge_url


class TestBadgeUrl:
    """Tests for badge URL generation."""

    def test_every_type_has_a_template(self):
        """Test that the lookup table covers every badge type."""
        assert set(BADGE_TEMPLATES) == set(BadgeType)

    def test_stars_badge(self):
        """Test a badge keyed off the title."""
        assert badge_url(BadgeType.STARS, "foo") == "https://img.shields.io/github/stars/foo"

    def test_title_is_slugified(self):
        """Test that titles are slugified before interpolation."""
        assert badge_url("npm", "My Package") == "https://img.shields.io/npm/v/my-package"

    def test_camel_case_type_name(self):
        """Test that the lastCommit name resolves."""
        assert badge_url("lastCommit", "foo") == "https://img.shields.io/github/last-commit/foo"

    def test_all_urls_are_shields(self):
        """Test that every template produces a shields.io URL."""
        for badge_type in BadgeType:
            assert badge_url(badge_type, "foo").startswith("https://img.shields.io/")

    def test_unknown_type(self):
        """Test that unknown badge types are rejected."""
        with pytest.raises(ValueError, match="Unknown badge type"):
            badge_url("sponsors", "foo")
