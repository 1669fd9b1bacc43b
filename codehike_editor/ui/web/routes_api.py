"""
API routes — documents, user components, component detection.

Blueprint: api_bp
Prefix: /api
Routes:
    /api/files               — list MDX documents
    /api/file/<path>         — read (GET) or save (PUT) a document
    /api/components          — the user's existing components
    /api/detect-components   — Code Hike components used in posted text
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Blueprint, current_app, jsonify, request

from codehike_editor.core.models.config import EditorConfig
from codehike_editor.core.services import mdx_files
from codehike_editor.core.services.component_detector import detect_components
from codehike_editor.core.services.component_resolver import find_user_components

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _project_root() -> Path:
    return Path(current_app.config["PROJECT_ROOT"])


def _config() -> EditorConfig:
    return current_app.config["EDITOR_CONFIG"]


def _respond(result: dict):  # type: ignore[no-untyped-def]
    """Turn a service result dict into a JSON response."""
    status = result.pop("_status", 200 if "error" not in result else 400)
    return jsonify(result), status


# ── Documents ────────────────────────────────────────────────────────


@api_bp.route("/files")
def api_files():  # type: ignore[no-untyped-def]
    """List all MDX files in the content directory."""
    return jsonify(mdx_files.list_mdx_files(_project_root(), _config().content_dir))


@api_bp.route("/file/<path:file_path>", methods=["GET"])
def api_read_file(file_path: str):  # type: ignore[no-untyped-def]
    """Read a document."""
    try:
        return _respond(mdx_files.read_document(_project_root(), file_path))
    except (OSError, UnicodeDecodeError):
        logger.exception("Error reading %s", file_path)
        return jsonify({"error": "Failed to read file"}), 500


@api_bp.route("/file/<path:file_path>", methods=["PUT"])
def api_write_file(file_path: str):  # type: ignore[no-untyped-def]
    """Save a document.

    JSON body:
        content: full document text
    """
    data = request.get_json(silent=True) or {}
    try:
        return _respond(mdx_files.write_document(_project_root(), file_path, data.get("content")))
    except OSError:
        logger.exception("Error writing %s", file_path)
        return jsonify({"error": "Failed to write file"}), 500


# ── Components ───────────────────────────────────────────────────────


@api_bp.route("/components")
def api_components():  # type: ignore[no-untyped-def]
    """List the user's existing components."""
    return jsonify({"components": find_user_components(_project_root())})


@api_bp.route("/detect-components", methods=["POST"])
def api_detect_components():  # type: ignore[no-untyped-def]
    """Detect Code Hike components used in MDX content.

    JSON body:
        content: MDX text
    """
    data = request.get_json(silent=True) or {}
    content = data.get("content")
    if not isinstance(content, str):
        return jsonify({"error": "Content required"}), 400
    return jsonify({"components": detect_components(content)})
