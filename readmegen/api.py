"""
Flask-based Web API for readmegen.

Serves the README generator form and the JSON endpoints behind it.

Endpoints:
    GET  /              - The generator form
    GET  /api/health    - Health check endpoint
    GET  /api/options   - Licenses, templates, badge types and form defaults
    POST /api/render    - Render a README from a project
    POST /api/download  - Render and return the README as a file download
    POST /api/badges    - Build a badge URL for a project title
    POST /api/update    - Apply a form edit (add/remove entry, social link, ...)

Environment Variables:
    - READMEGEN_HOST: Dev server bind address (default: 127.0.0.1)
    - READMEGEN_PORT: Dev server port (default: 5001)
    - READMEGEN_DEBUG: Enable Flask debug mode when "1" or "true"
"""

import io
import os
from pathlib import Path
from typing import Any

from flask import Flask, Response, jsonify, render_template, request, send_file

from readmegen import __version__
from readmegen.badges import BadgeType, badge_url
from readmegen.export import MARKDOWN_MIME_TYPE, readme_filename
from readmegen.renderer import render_readme
from readmegen.schema import (
    SOCIAL_PLATFORMS,
    License,
    ProjectDescription,
    TemplateVariant,
    apply_update,
    update_from_dict,
)

# Create Flask application with template folder
template_dir = Path(__file__).parent / "templates"
app = Flask(__name__, template_folder=str(template_dir))
app.config["MAX_CONTENT_LENGTH"] = 1 * 1024 * 1024  # 1MB max request body


def _get_json_body() -> dict[str, Any]:
    """
    Return the request's JSON object.

    Raises:
        ValueError: If the body is missing or not a JSON object
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def parse_render_request(data: dict[str, Any]) -> tuple[ProjectDescription, TemplateVariant]:
    """
    Pull the project and template variant out of a render request.

    Accepts {"project": {...}, "template": "academic"}; "template" may be
    omitted for the default variant.

    Raises:
        ValueError: If the project is not an object or the variant is unknown
    """
    project_data = data.get("project", {})
    if not isinstance(project_data, dict):
        raise ValueError("'project' must be a JSON object")
    variant = TemplateVariant.parse(data.get("template"))
    return ProjectDescription.from_dict(project_data), variant


def _bad_request(error: ValueError) -> tuple[Response, int]:
    app.logger.warning("Rejected %s %s: %s", request.method, request.path, error)
    return jsonify({"error": str(error)}), 400


@app.route("/")
def index():
    """Serve the generator form."""
    return render_template(
        "index.html",
        version=__version__,
        licenses=[lic.value for lic in License],
        templates=[variant.value for variant in TemplateVariant],
        badge_types=[badge.value for badge in BadgeType],
        platforms=SOCIAL_PLATFORMS,
        defaults=ProjectDescription().to_dict(),
    )


@app.route("/api/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify({"status": "healthy", "version": __version__})


@app.route("/api/options", methods=["GET"])
def get_options() -> Response:
    """Choices the form offers, plus an empty project to start from."""
    return jsonify({
        "licenses": [lic.value for lic in License],
        "templates": [variant.value for variant in TemplateVariant],
        "badge_types": [badge.value for badge in BadgeType],
        "platforms": list(SOCIAL_PLATFORMS),
        "project": ProjectDescription().to_dict(),
    })


@app.route("/api/render", methods=["POST"])
def render() -> tuple[Response, int]:
    """
    Render a README from the posted project.

    Request JSON:
        - project: the project fields (see ProjectDescription.from_dict)
        - template: 'default' | 'academic' (default: 'default')

    Returns:
        JSON response with:
            - readme: The rendered Markdown
            - filename: Suggested download filename
            - template: The variant used
    """
    try:
        project, variant = parse_render_request(_get_json_body())
    except ValueError as e:
        return _bad_request(e)

    return jsonify({
        "success": True,
        "readme": render_readme(project, variant),
        "filename": readme_filename(project.title),
        "template": variant.value,
    }), 200


@app.route("/api/download", methods=["POST"])
def download():
    """Render the posted project and return it as a Markdown attachment."""
    try:
        project, variant = parse_render_request(_get_json_body())
    except ValueError as e:
        return _bad_request(e)

    # send_file quotes the name and adds filename* for non-ASCII titles
    return send_file(
        io.BytesIO(render_readme(project, variant).encode("utf-8")),
        mimetype=MARKDOWN_MIME_TYPE,
        as_attachment=True,
        download_name=readme_filename(project.title),
    )


@app.route("/api/badges", methods=["POST"])
def generate_badge() -> tuple[Response, int]:
    """
    Build a badge URL.

    Request JSON:
        - type: one of the BadgeType values (e.g. 'stars', 'lastCommit')
        - title: the project title the badge is keyed off
    """
    try:
        data = _get_json_body()
        url = badge_url(str(data.get("type", "")), str(data.get("title") or ""))
    except ValueError as e:
        return _bad_request(e)

    return jsonify({"url": url}), 200


@app.route("/api/update", methods=["POST"])
def update_project() -> tuple[Response, int]:
    """
    Apply one edit to a project and return the new project.

    Request JSON:
        - project: the current project fields
        - update: the edit, e.g. {"kind": "add", "field": "features"}
    """
    try:
        data = _get_json_body()
        project_data = data.get("project", {})
        if not isinstance(project_data, dict):
            raise ValueError("'project' must be a JSON object")
        project = ProjectDescription.from_dict(project_data)
        updated = apply_update(project, update_from_dict(data.get("update")))
    except ValueError as e:
        return _bad_request(e)

    return jsonify({"project": updated.to_dict()}), 200


@app.errorhandler(413)
def request_entity_too_large(error):
    """Handle request too large errors."""
    return jsonify({"error": "Request too large. Maximum size is 1MB."}), 413


@app.errorhandler(500)
def internal_server_error(error):
    """Handle internal server errors."""
    app.logger.error("Internal server error: %s", error)
    return jsonify({"error": "Internal server error"}), 500


def create_app() -> Flask:
    """
    Application factory for creating the Flask app.

    This allows for easier testing and configuration.

    Returns:
        Configured Flask application instance.
    """
    return app


def main() -> None:
    """Run the development server."""
    host = os.environ.get("READMEGEN_HOST", "127.0.0.1")
    port = int(os.environ.get("READMEGEN_PORT", "5001"))
    debug = os.environ.get("READMEGEN_DEBUG", "").lower() in ("1", "true", "yes")

    print("Starting readmegen server...")
    print()
    print(f"Web Interface: http://{host}:{port}")
    print()
    print("API Endpoints:")
    print("  POST /api/render   - Render README from project JSON")
    print("  POST /api/download - Download rendered README")
    print("  POST /api/badges   - Build a badge URL")
    print("  POST /api/update   - Apply a form edit")
    print("  GET  /api/options  - Form choices and defaults")
    print("  GET  /api/health   - Health check")
    print()
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
