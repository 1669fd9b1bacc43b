"""
Editor server — Flask app factory.

Serves the JSON API the editor UI talks to and, when a pre-built UI
directory is configured, the UI itself as a single-page app.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask, jsonify, send_from_directory

from codehike_editor.core.context import resolve_project_root, set_project_root
from codehike_editor.core.models.config import EditorConfig

logger = logging.getLogger(__name__)


def create_app(
    project_root: Path | None = None,
    config: EditorConfig | None = None,
    editor_dist: Path | None = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        project_root: Root directory of the user's project.
        config: Editor configuration (defaults when None).
        editor_dist: Directory holding the built editor (index.html).
    """
    root = (project_root or resolve_project_root()).resolve()
    config = config or EditorConfig()
    if editor_dist is None and config.editor_dist:
        editor_dist = root / config.editor_dist

    app = Flask(__name__, static_folder=None)

    app.config["PROJECT_ROOT"] = str(root)
    app.config["EDITOR_CONFIG"] = config
    app.config["EDITOR_DIST"] = str(editor_dist) if editor_dist else None

    set_project_root(root)

    from codehike_editor.ui.web.routes_api import api_bp
    from codehike_editor.ui.web.routes_inject import inject_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(inject_bp, url_prefix="/api")

    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def _editor(path: str):  # type: ignore[no-untyped-def]
        dist = app.config["EDITOR_DIST"]
        if not dist or not (Path(dist) / "index.html").is_file():
            return jsonify({"error": "Pre-built editor not found"}), 404
        if path and (Path(dist) / path).is_file():
            return send_from_directory(dist, path)
        return send_from_directory(dist, "index.html")

    logger.info("Editor app created (root=%s)", root)
    return app


def run_server(
    app: Flask,
    host: str = "127.0.0.1",
    port: int = 4321,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    logger.info("Starting editor on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
