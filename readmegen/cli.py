"""
readmegen Command-Line Interface

Renders a README from a project JSON file (the same shape the web form
posts), so READMEs can be regenerated from a checked-in description.

Usage:
    readmegen project.json
    readmegen project.json --template academic
    readmegen project.json --output README.md --force
    readmegen project.json --dry-run
    cat project.json | readmegen - --dry-run
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from readmegen import __version__
from readmegen.export import readme_filename
from readmegen.renderer import render_readme
from readmegen.schema import ProjectDescription, TemplateVariant


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description=(
            "readmegen: render a README.md from a project description.\n\n"
            "Reads a JSON project file (title, description, features, "
            "installation, usage, badges, social links, license, ...) and "
            "writes a structured Markdown README."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  readmegen project.json                  # Write <title>-README.md next to project.json\n"
            "  readmegen project.json -t academic      # Research-oriented headings\n"
            "  readmegen project.json -o README.md     # Custom output path\n"
            "  readmegen project.json --dry-run        # Print to stdout\n"
        ),
    )

    parser.add_argument(
        "project",
        type=str,
        help="Path to the project JSON file ('-' reads stdin)",
    )

    parser.add_argument(
        "-t", "--template",
        choices=[variant.value for variant in TemplateVariant],
        default=TemplateVariant.DEFAULT.value,
        help="Template variant (default: default)",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file path (default: <slugified-title>-README.md beside the project file)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated README to stdout instead of writing to file",
    )

    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing output file",
    )

    # Verbosity
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed progress information",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress all output except errors",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def log(message: str, quiet: bool = False) -> None:
    """Print a progress/status message to stderr."""
    if quiet:
        return
    print(f"[readmegen] {message}", file=sys.stderr)


def log_verbose(message: str, verbose: bool, quiet: bool) -> None:
    """Print a message only in verbose mode."""
    if verbose and not quiet:
        print(f"  {message}", file=sys.stderr)


def load_project(source: str) -> ProjectDescription:
    """
    Load a project from a JSON file or stdin.

    Args:
        source: File path, or "-" for stdin

    Returns:
        The parsed ProjectDescription

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not a JSON object
    """
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}")

    # Accept the API's {"project": {...}} envelope as well as a bare project
    if isinstance(data, dict) and isinstance(data.get("project"), dict):
        data = data["project"]
    if not isinstance(data, dict):
        raise ValueError("Project file must contain a JSON object")

    return ProjectDescription.from_dict(data)


def run(
    source: str,
    output_path: Optional[Path],
    variant: TemplateVariant,
    dry_run: bool = False,
    force: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> int:
    """
    Load, render and write a README.

    Args:
        source: Project JSON path, or "-" for stdin
        output_path: Where to write the README (None = derived from title)
        variant: Template variant to render with
        dry_run: If True, print to stdout instead of writing
        force: If True, overwrite an existing file
        verbose: If True, show detailed progress
        quiet: If True, suppress non-error output

    Returns:
        Exit code (0 = success, non-zero = error)
    """
    try:
        project = load_project(source)
    except OSError as e:
        print(f"Error reading project file: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log_verbose(f"Title: {project.title or '(none)'}", verbose, quiet)
    log_verbose(f"Template: {variant.value}", verbose, quiet)
    log_verbose(f"License: {project.license or '(none)'}", verbose, quiet)

    if not project.title.strip():
        log("Warning: project has no title; the heading will be empty", quiet=quiet)

    readme_content = render_readme(project, variant)

    if dry_run:
        print(readme_content, end="")
        log("(Dry run - no file written)", quiet=quiet)
        return 0

    if output_path is None:
        base_dir = Path.cwd() if source == "-" else Path(source).resolve().parent
        output_path = base_dir / readme_filename(project.title)

    if output_path.exists() and not force:
        print(f"Error: File already exists: {output_path}", file=sys.stderr)
        print("Use --force to overwrite or --dry-run to preview.", file=sys.stderr)
        return 1

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(readme_content)
    except OSError as e:
        print(f"Error writing file: {e}", file=sys.stderr)
        return 1

    log(f"README written to: {output_path}", quiet=quiet)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 = success, non-zero = error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    output_path = Path(args.output) if args.output else None

    return run(
        source=args.project,
        output_path=output_path,
        variant=TemplateVariant.parse(args.template),
        dry_run=args.dry_run,
        force=args.force,
        verbose=args.verbose,
        quiet=args.quiet,
    )


if __name__ == "__main__":
    sys.exit(main())
