"""
readmegen Project Schema

This module defines the data structures the form produces and the renderer
consumes. A ProjectDescription is an immutable value: the form keeps its own
working copy and builds a new record for every edit, so a render always sees
a consistent snapshot.

Design Principles:
    1. Keep what the user typed: blank list entries survive in the record and
       are dropped only when rendering
    2. Never validate content beyond shape; unknown license names pass through
    3. Edits are explicit values (a tagged union) applied by apply_update
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional, Union


class License(Enum):
    """Licenses offered by the form."""
    MIT = "MIT"
    APACHE_2 = "Apache-2.0"
    GPL_3 = "GPL-3.0"
    BSD_3_CLAUSE = "BSD-3-Clause"
    ISC = "ISC"
    NONE = "None"

    def __str__(self) -> str:
        return self.value


class TemplateVariant(Enum):
    """
    Named bundles of section headings applied to the same project data.

    DEFAULT uses plain headings ("Description", "Features", ...), ACADEMIC
    relabels them for research projects.
    """
    DEFAULT = "default"
    ACADEMIC = "academic"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union[str, "TemplateVariant", None]) -> "TemplateVariant":
        """
        Resolve a variant from its name.

        Args:
            value: A TemplateVariant, its string value (case-insensitive),
                or None for the default

        Returns:
            The matching TemplateVariant

        Raises:
            ValueError: If the name is not a known variant
        """
        if value is None:
            return cls.DEFAULT
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(v.value for v in cls)
            raise ValueError(f"Unknown template variant: {value!r} (expected one of: {choices})")


# Display order for the social links line
SOCIAL_PLATFORMS = ("linkedin", "twitter", "website")

SEQUENCE_FIELDS = (
    "features",
    "installation",
    "usage",
    "technologies",
    "screenshots",
    "badges",
)

SCALAR_FIELDS = (
    "title",
    "description",
    "demo",
    "contributing",
    "license",
    "project_type",
    "project_status",
)

# camelCase keys used by the browser form
_DICT_ALIASES = {
    "projectType": "project_type",
    "projectStatus": "project_status",
}


def _empty_social() -> dict[str, str]:
    return {platform: "" for platform in SOCIAL_PLATFORMS}


def _as_text(value: Any) -> str:
    """Coerce a scalar form value to a string ("" for None)."""
    if value is None:
        return ""
    return str(value)


def _as_entries(value: Any) -> tuple[str, ...]:
    """
    Coerce a sequence form value to a tuple of strings.

    A single string is split into lines, which is how textarea input
    arrives. Entries are kept as-is, blanks included.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.splitlines())
    if isinstance(value, (list, tuple)):
        return tuple(_as_text(item) for item in value)
    return (_as_text(value),)


@dataclass(frozen=True)
class ProjectDescription:
    """
    Everything the form knows about a project.

    Attributes:
        title: Project name, used for the H1 heading and download filename
        description: Free-form description paragraph
        features: Feature bullet points
        installation: Shell commands, one per entry
        usage: Usage lines, one per entry
        technologies: Technologies/frameworks used
        screenshots: Image URLs
        badges: Badge image URLs (see readmegen.badges)
        social: Platform name -> profile URL
        demo: Demo URL or text ("" when there is none)
        contributing: Contribution guidelines
        license: License name, normally a License value
        project_type: e.g. "Web App", "Library", "Thesis"
        project_status: e.g. "Active", "Completed"

    Example:
        >>> project = ProjectDescription(title="Foo", features=("A", ""))
        >>> project.features
        ('A', '')
    """
    title: str = ""
    description: str = ""
    features: tuple[str, ...] = ("",)
    installation: tuple[str, ...] = ("",)
    usage: tuple[str, ...] = ("",)
    technologies: tuple[str, ...] = ("",)
    screenshots: tuple[str, ...] = ("",)
    badges: tuple[str, ...] = ()
    social: dict[str, str] = field(default_factory=_empty_social)
    demo: str = ""
    contributing: str = ""
    license: str = License.MIT.value
    project_type: str = ""
    project_status: str = ""

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "ProjectDescription":
        """
        Build a ProjectDescription from a JSON-style mapping.

        Missing keys take their defaults and unknown keys are ignored, so any
        mapping produces a record.

        Args:
            data: Mapping as posted by the form or read from a project file

        Returns:
            A new ProjectDescription
        """
        data = dict(data or {})
        for alias, name in _DICT_ALIASES.items():
            if alias in data:
                data.setdefault(name, data[alias])

        kwargs: dict[str, Any] = {}
        for name in SCALAR_FIELDS:
            if name in data:
                kwargs[name] = _as_text(data[name])
        for name in SEQUENCE_FIELDS:
            if name in data:
                kwargs[name] = _as_entries(data[name])

        social = _empty_social()
        raw_social = data.get("social")
        if isinstance(raw_social, dict):
            for platform, url in raw_social.items():
                key = str(platform).strip().lower()
                if key:
                    social[key] = _as_text(url)
        kwargs["social"] = social

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a JSON-serializable mapping in the form's key style.

        Returns:
            Mapping accepted back by from_dict
        """
        return {
            "title": self.title,
            "description": self.description,
            "features": list(self.features),
            "installation": list(self.installation),
            "usage": list(self.usage),
            "technologies": list(self.technologies),
            "screenshots": list(self.screenshots),
            "badges": list(self.badges),
            "social": dict(self.social),
            "demo": self.demo,
            "contributing": self.contributing,
            "license": self.license,
            "projectType": self.project_type,
            "projectStatus": self.project_status,
        }


# === Field updates ===
# One dataclass per kind of edit the form can make.


@dataclass(frozen=True)
class SetField:
    """Replace a scalar field (title, description, ...)."""
    name: str
    value: str


@dataclass(frozen=True)
class SetItem:
    """Replace one entry of a sequence field."""
    field: str
    index: int
    value: str


@dataclass(frozen=True)
class AddItem:
    """Append an entry (blank by default) to a sequence field."""
    field: str
    value: str = ""


@dataclass(frozen=True)
class RemoveItem:
    """Remove one entry of a sequence field."""
    field: str
    index: int


@dataclass(frozen=True)
class SetSocial:
    """Set the URL for a social platform."""
    platform: str
    url: str


FieldUpdate = Union[SetField, SetItem, AddItem, RemoveItem, SetSocial]


def _check_sequence_field(name: str) -> None:
    if name not in SEQUENCE_FIELDS:
        raise ValueError(f"Not a list field: {name!r}")


def _check_index(entries: tuple[str, ...], index: int, name: str) -> None:
    if not 0 <= index < len(entries):
        raise ValueError(f"Index {index} out of range for {name} ({len(entries)} entries)")


def apply_update(project: ProjectDescription, update: FieldUpdate) -> ProjectDescription:
    """
    Apply a single form edit.

    Args:
        project: The current record (left untouched)
        update: The edit to apply

    Returns:
        A new ProjectDescription with the edit applied

    Raises:
        ValueError: If the update names an unknown field, targets the wrong
            kind of field, or uses an out-of-range index
    """
    if isinstance(update, SetField):
        if update.name not in SCALAR_FIELDS:
            raise ValueError(f"Not a text field: {update.name!r}")
        return replace(project, **{update.name: _as_text(update.value)})

    if isinstance(update, SetItem):
        _check_sequence_field(update.field)
        entries = getattr(project, update.field)
        _check_index(entries, update.index, update.field)
        updated = entries[:update.index] + (_as_text(update.value),) + entries[update.index + 1:]
        return replace(project, **{update.field: updated})

    if isinstance(update, AddItem):
        _check_sequence_field(update.field)
        entries = getattr(project, update.field)
        return replace(project, **{update.field: entries + (_as_text(update.value),)})

    if isinstance(update, RemoveItem):
        _check_sequence_field(update.field)
        entries = getattr(project, update.field)
        _check_index(entries, update.index, update.field)
        return replace(project, **{update.field: entries[:update.index] + entries[update.index + 1:]})

    if isinstance(update, SetSocial):
        platform = update.platform.strip().lower()
        if not platform:
            raise ValueError("Social platform name is required")
        social = dict(project.social)
        social[platform] = _as_text(update.url)
        return replace(project, social=social)

    raise ValueError(f"Unsupported update: {update!r}")


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Update is missing '{key}'")
    return data[key]


def _require_index(data: dict[str, Any]) -> int:
    index = _require(data, "index")
    if isinstance(index, bool):
        raise ValueError(f"Invalid index: {index!r}")
    if isinstance(index, float) and not index.is_integer():
        raise ValueError(f"Invalid index: {index!r}")
    try:
        return int(index)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid index: {index!r}")


def update_from_dict(data: dict[str, Any]) -> FieldUpdate:
    """
    Build a FieldUpdate from its JSON form.

    Supported shapes:
        {"kind": "set", "name": "title", "value": "Foo"}
        {"kind": "set_item", "field": "features", "index": 0, "value": "A"}
        {"kind": "add", "field": "features"}
        {"kind": "remove", "field": "features", "index": 1}
        {"kind": "social", "platform": "twitter", "url": "https://..."}

    Raises:
        ValueError: If the kind is unknown or a required key is missing
    """
    if not isinstance(data, dict):
        raise ValueError("Update must be a JSON object")

    kind = data.get("kind")
    if kind == "set":
        return SetField(name=str(_require(data, "name")), value=_as_text(data.get("value")))
    if kind == "set_item":
        return SetItem(
            field=str(_require(data, "field")),
            index=_require_index(data),
            value=_as_text(data.get("value")),
        )
    if kind == "add":
        return AddItem(field=str(_require(data, "field")), value=_as_text(data.get("value")))
    if kind == "remove":
        return RemoveItem(field=str(_require(data, "field")), index=_require_index(data))
    if kind == "social":
        return SetSocial(platform=str(_require(data, "platform")), url=_as_text(data.get("url")))

    raise ValueError(f"Unknown update kind: {kind!r}")
