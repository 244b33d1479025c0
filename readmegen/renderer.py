"""
readmegen Markdown Renderer

This module turns a ProjectDescription into README.md content. Rendering is
a pure function of the record and the template variant: no I/O, no state
kept between calls, and no project record that makes it fail.

Design Principles:
    1. Deterministic: sections always appear in the same order
    2. Conditional: optional sections are left out when they have no data
    3. Verbatim: user text is inserted as typed, Markdown included

Output Structure:
    1. Badges (no heading)
    2. Title
    3. Description
    4. Project type/status
    5. Technologies
    6. Features
    7. Installation (bash code block)
    8. Usage (plain code block)
    9. Demo
    10. Social links
    11. Screenshots
    12. Contributing
    13. License

Description, Contributing and License headings are always written, even when
their body is blank. Every other section is dropped when empty.
"""

from dataclasses import dataclass
from typing import Optional, Union

from readmegen.schema import (
    SOCIAL_PLATFORMS,
    License,
    ProjectDescription,
    TemplateVariant,
)


@dataclass(frozen=True)
class SectionHeaders:
    """
    Section headings (and the little bits of wording that go with them)
    for one template variant.
    """
    description: str
    project_info: str
    type_label: str
    status_label: str
    technologies: str
    features: str
    installation: str
    usage: str
    demo: str
    social: str
    screenshots: str
    contributing: str
    license: str
    demo_fallback: Optional[str] = None


DEFAULT_HEADERS = SectionHeaders(
    description="Description",
    project_info="Project Info",
    type_label="Type",
    status_label="Status",
    technologies="Technologies",
    features="Features",
    installation="Installation",
    usage="Usage",
    demo="Demo",
    social="Connect",
    screenshots="Screenshots",
    contributing="Contributing",
    license="License",
)

ACADEMIC_HEADERS = SectionHeaders(
    description="Academic Project Overview",
    project_info="Research Context",
    type_label="Research Type",
    status_label="Research Status",
    technologies="Methodologies & Technologies",
    features="Key Contributions",
    installation="Environment Setup",
    usage="Experimental Usage",
    demo="Demonstration",
    social="Academic Profiles",
    screenshots="Figures & Results",
    contributing="Collaboration Guidelines",
    license="License",
    demo_fallback="A live demonstration is not yet available for this project.",
)

TEMPLATE_HEADERS: dict[TemplateVariant, SectionHeaders] = {
    TemplateVariant.DEFAULT: DEFAULT_HEADERS,
    TemplateVariant.ACADEMIC: ACADEMIC_HEADERS,
}


def filter_entries(entries) -> list[str]:
    """Drop empty and whitespace-only entries, keeping order."""
    return [entry for entry in entries or () if entry and entry.strip()]


class ReadmeRenderer:
    """
    Renders a ProjectDescription into Markdown README content.

    Usage:
        renderer = ReadmeRenderer(project)
        readme_content = renderer.render()

        # Research-oriented headings
        renderer = ReadmeRenderer(project, TemplateVariant.ACADEMIC)
        readme_content = renderer.render()
    """

    def __init__(
        self,
        project: ProjectDescription,
        variant: Union[TemplateVariant, str, None] = None,
    ):
        """
        Initialize the renderer.

        Args:
            project: The project to render
            variant: Template variant (default if not provided)

        Raises:
            ValueError: If variant is a string naming no known variant
        """
        self.project = project
        self.variant = TemplateVariant.parse(variant)
        self.headers = TEMPLATE_HEADERS[self.variant]
        self._sections: list[str] = []

    def render(self) -> str:
        """
        Generate the complete README content.

        Returns:
            The rendered README as a Markdown string
        """
        self._sections = []

        self._add_badges_section()
        self._add_title_section()
        self._add_description_section()
        self._add_project_info_section()
        self._add_list_section(self.headers.technologies, self.project.technologies)
        self._add_list_section(self.headers.features, self.project.features)
        self._add_code_section(self.headers.installation, self.project.installation, "bash")
        self._add_code_section(self.headers.usage, self.project.usage, "")
        self._add_demo_section()
        self._add_social_section()
        self._add_screenshots_section()
        self._add_contributing_section()
        self._add_license_section()

        return "\n".join(self._sections)

    def _add_section(self, content: str) -> None:
        """Add a section to the output."""
        self._sections.append(content)

    @staticmethod
    def _format_section(heading: str, body: str) -> str:
        """Format an H2 section; a blank body leaves the bare heading."""
        if not body:
            return f"## {heading}\n"
        return f"## {heading}\n\n{body}\n"

    def _add_badges_section(self) -> None:
        badges = filter_entries(self.project.badges)
        if not badges:
            return
        self._add_section("\n".join(f"![Badge]({url})" for url in badges) + "\n")

    def _add_title_section(self) -> None:
        """Add the project title as an H1 heading."""
        self._add_section(f"# {self.project.title or ''}\n")

    def _add_description_section(self) -> None:
        self._add_section(self._format_section(
            self.headers.description,
            self.project.description or "",
        ))

    def _add_project_info_section(self) -> None:
        """Add project type and status, if either is set."""
        lines = []
        if self.project.project_type and self.project.project_type.strip():
            lines.append(f"- **{self.headers.type_label}:** {self.project.project_type}")
        if self.project.project_status and self.project.project_status.strip():
            lines.append(f"- **{self.headers.status_label}:** {self.project.project_status}")

        if lines:
            self._add_section(self._format_section(self.headers.project_info, "\n".join(lines)))

    def _add_list_section(self, heading: str, entries) -> None:
        """Add a bullet list section, skipped when no entries remain."""
        items = filter_entries(entries)
        if not items:
            return
        self._add_section(self._format_section(heading, "\n".join(f"- {item}" for item in items)))

    def _add_code_section(self, heading: str, entries, language: str) -> None:
        """Add a fenced code block section, one line per entry."""
        lines = filter_entries(entries)
        if not lines:
            return
        body = f"```{language}\n" + "\n".join(lines) + "\n```"
        self._add_section(self._format_section(heading, body))

    def _add_demo_section(self) -> None:
        """
        Add the demo link.

        URLs become a link; anything else is written as-is. With no demo,
        variants that define a fallback sentence still get the section.
        """
        demo = (self.project.demo or "").strip()
        if demo:
            if demo.startswith(("http://", "https://")):
                body = f"[Live Demo]({demo})"
            else:
                body = self.project.demo
        elif self.headers.demo_fallback:
            body = self.headers.demo_fallback
        else:
            return

        self._add_section(self._format_section(self.headers.demo, body))

    def _social_links(self) -> list[str]:
        social = self.project.social or {}
        platforms = [p for p in SOCIAL_PLATFORMS if p in social]
        platforms += [p for p in social if p not in SOCIAL_PLATFORMS]

        links = []
        for platform in platforms:
            url = social.get(platform) or ""
            if url.strip():
                label = platform[:1].upper() + platform[1:]
                links.append(f"[{label}]({url})")
        return links

    def _add_social_section(self) -> None:
        """Add a single pipe-separated line of social links."""
        links = self._social_links()
        if not links:
            return
        self._add_section(self._format_section(self.headers.social, " | ".join(links)))

    def _add_screenshots_section(self) -> None:
        screenshots = filter_entries(self.project.screenshots)
        if not screenshots:
            return
        body = "\n\n".join(
            f"![Screenshot {number}]({url})"
            for number, url in enumerate(screenshots, start=1)
        )
        self._add_section(self._format_section(self.headers.screenshots, body))

    def _add_contributing_section(self) -> None:
        self._add_section(self._format_section(
            self.headers.contributing,
            self.project.contributing or "",
        ))

    def _add_license_section(self) -> None:
        """Add the license section (heading always present)."""
        license_name = (self.project.license or "").strip()

        if not license_name:
            body = ""
        elif license_name == License.NONE.value:
            body = "This project is not licensed."
        else:
            body = f"This project is licensed under the {license_name} License."

        self._add_section(self._format_section(self.headers.license, body))


def render_readme(
    project: ProjectDescription,
    variant: Union[TemplateVariant, str, None] = None,
) -> str:
    """
    Convenience function to render a README.

    Args:
        project: The project to render
        variant: Template variant (default if not provided)

    Returns:
        The rendered README as a Markdown string
    """
    renderer = ReadmeRenderer(project, variant)
    return renderer.render()
