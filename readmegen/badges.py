"""
Badge URL generation.

Each badge type maps to a shields.io URL template keyed off the project
title. The form offers one button per type; the resulting URL is appended to
the project's `badges` list and rendered as `![Badge](url)`.
"""

from enum import Enum
from typing import Callable, Union

from readmegen.export import slugify_title

SHIELDS_BASE_URL = "https://img.shields.io"


class BadgeType(Enum):
    """Badge kinds offered by the form."""
    NPM = "npm"
    BUILD = "build"
    COVERAGE = "coverage"
    DOWNLOADS = "downloads"
    LICENSE = "license"
    STARS = "stars"
    LAST_COMMIT = "lastCommit"
    CONTRIBUTORS = "contributors"

    def __str__(self) -> str:
        return self.value


BADGE_TEMPLATES: dict[BadgeType, Callable[[str], str]] = {
    BadgeType.NPM: lambda slug: f"{SHIELDS_BASE_URL}/npm/v/{slug}",
    BadgeType.BUILD: lambda slug: f"{SHIELDS_BASE_URL}/github/actions/workflow/status/{slug}/ci.yml",
    BadgeType.COVERAGE: lambda slug: f"{SHIELDS_BASE_URL}/codecov/c/github/{slug}",
    BadgeType.DOWNLOADS: lambda slug: f"{SHIELDS_BASE_URL}/npm/dm/{slug}",
    BadgeType.LICENSE: lambda slug: f"{SHIELDS_BASE_URL}/github/license/{slug}",
    BadgeType.STARS: lambda slug: f"{SHIELDS_BASE_URL}/github/stars/{slug}",
    BadgeType.LAST_COMMIT: lambda slug: f"{SHIELDS_BASE_URL}/github/last-commit/{slug}",
    BadgeType.CONTRIBUTORS: lambda slug: f"{SHIELDS_BASE_URL}/github/contributors/{slug}",
}


def parse_badge_type(value: Union[str, BadgeType]) -> BadgeType:
    """
    Resolve a badge type from its name.

    Raises:
        ValueError: If the name is not a known badge type
    """
    if isinstance(value, BadgeType):
        return value
    try:
        return BadgeType(value)
    except ValueError:
        choices = ", ".join(b.value for b in BadgeType)
        raise ValueError(f"Unknown badge type: {value!r} (expected one of: {choices})")


def badge_url(badge_type: Union[str, BadgeType], title: str) -> str:
    """
    Build the badge image URL for a project.

    Args:
        badge_type: A BadgeType or its string value (e.g. "lastCommit")
        title: Project title; slugified before interpolation

    Returns:
        The shields.io image URL

    Raises:
        ValueError: If badge_type is unknown
    """
    template = BADGE_TEMPLATES[parse_badge_type(badge_type)]
    return template(slugify_title(title))
