"""
Download artifact naming for rendered READMEs.

The browser saves the rendered document as `<slugified-title>-README.md`
served as text/markdown; the CLI uses the same name for its default output.
"""

import re

MARKDOWN_MIME_TYPE = "text/markdown"

DEFAULT_FILENAME = "README.md"


def slugify_title(title: str) -> str:
    """
    Turn a project title into a filename-friendly slug.

    Whitespace runs become single hyphens and the result is lowercased.

    Example:
        >>> slugify_title("  My Cool Project ")
        'my-cool-project'
    """
    return re.sub(r"\s+", "-", (title or "").strip()).lower()


def readme_filename(title: str) -> str:
    """Return the download filename for a project's README."""
    slug = slugify_title(title)
    if not slug:
        return DEFAULT_FILENAME
    return f"{slug}-{DEFAULT_FILENAME}"
