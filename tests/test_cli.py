"""
Tests for readmegen.cli module.
"""

import io
import json

import pytest

from readmegen.cli import create_parser, load_project, main


@pytest.fixture
def project_file(tmp_path):
    """Write a project JSON file."""
    path = tmp_path / "project.json"
    path.write_text(json.dumps({
        "title": "Foo Bar",
        "description": "Bar",
        "features": ["A", ""],
        "installation": ["npm i"],
        "usage": ["run"],
        "contributing": "PRs welcome",
        "license": "MIT",
    }))
    return path


class TestParser:
    """Tests for the argument parser."""

    def test_defaults(self):
        """Test default arguments."""
        args = create_parser().parse_args(["project.json"])

        assert args.project == "project.json"
        assert args.template == "default"
        assert args.output is None
        assert args.dry_run is False

    def test_rejects_unknown_template(self):
        """Test that argparse rejects unknown templates."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["project.json", "--template", "fancy"])


class TestLoadProject:
    """Tests for load_project."""

    def test_load_file(self, project_file):
        """Test loading a project file."""
        project = load_project(str(project_file))

        assert project.title == "Foo Bar"
        assert project.features == ("A", "")

    def test_load_envelope(self, tmp_path):
        """Test that the API's request envelope is accepted."""
        path = tmp_path / "request.json"
        path.write_text(json.dumps({"project": {"title": "Wrapped"}, "template": "academic"}))

        assert load_project(str(path)).title == "Wrapped"

    def test_load_stdin(self, monkeypatch):
        """Test reading from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO('{"title": "Piped"}'))

        assert load_project("-").title == "Piped"

    def test_invalid_json(self, tmp_path):
        """Test that invalid JSON is reported as ValueError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_project(str(path))

    def test_not_an_object(self, tmp_path):
        """Test that non-object JSON is rejected."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")

        with pytest.raises(ValueError, match="JSON object"):
            load_project(str(path))


class TestMain:
    """Tests for the CLI entry point."""

    def test_dry_run(self, project_file, capsys):
        """Test printing the README to stdout."""
        exit_code = main([str(project_file), "--dry-run", "--quiet"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert out.startswith("# Foo Bar\n")
        assert "- A\n" in out
        assert not (project_file.parent / "foo-bar-README.md").exists()

    def test_academic_template(self, project_file, capsys):
        """Test rendering with the academic template."""
        exit_code = main([str(project_file), "-t", "academic", "--dry-run", "-q"])

        assert exit_code == 0
        assert "## Academic Project Overview" in capsys.readouterr().out

    def test_writes_default_filename(self, project_file):
        """Test that the output is named after the title."""
        exit_code = main([str(project_file), "-q"])

        output = project_file.parent / "foo-bar-README.md"
        assert exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("# Foo Bar\n")

    def test_custom_output(self, project_file, tmp_path):
        """Test writing to a custom path, creating parent directories."""
        output = tmp_path / "docs" / "README.md"

        exit_code = main([str(project_file), "-o", str(output), "-q"])

        assert exit_code == 0
        assert "## License" in output.read_text(encoding="utf-8")

    def test_refuses_overwrite(self, project_file, tmp_path, capsys):
        """Test that existing files are kept without --force."""
        output = tmp_path / "README.md"
        output.write_text("keep me")

        exit_code = main([str(project_file), "-o", str(output)])

        assert exit_code == 1
        assert output.read_text() == "keep me"
        assert "already exists" in capsys.readouterr().err

    def test_force_overwrite(self, project_file, tmp_path):
        """Test that --force overwrites."""
        output = tmp_path / "README.md"
        output.write_text("old")

        exit_code = main([str(project_file), "-o", str(output), "--force", "-q"])

        assert exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("# Foo Bar")

    def test_missing_file(self, tmp_path, capsys):
        """Test error for a missing project file."""
        exit_code = main([str(tmp_path / "missing.json")])

        assert exit_code == 1
        assert "Error" in capsys.readouterr().err

    def test_verbose_logging(self, project_file, capsys):
        """Test progress output on stderr."""
        main([str(project_file), "--dry-run", "--verbose"])

        err = capsys.readouterr().err
        assert "Title: Foo Bar" in err
        assert "[readmegen]" in err
