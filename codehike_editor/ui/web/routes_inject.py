"""
Injection API — templates and component injection.

Blueprint: inject_bp
Prefix: /api
Routes:
    /api/inject                    — copy templates and wire them up
    /api/templates                 — list code and layout templates
    /api/template/<type>/<name>    — template source and MDX snippet
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from flask import Blueprint, current_app, jsonify, request

from codehike_editor.core.models.config import EditorConfig
from codehike_editor.core.services.injection.workflow import inject_components
from codehike_editor.core.services.template_catalog import TemplateCatalog, extract_snippet

logger = logging.getLogger(__name__)

inject_bp = Blueprint("inject", __name__)

# Injections rewrite shared generated files; one at a time per process.
_inject_lock = threading.Lock()

TEMPLATE_TYPES = ("code", "layouts")


def _project_root() -> Path:
    return Path(current_app.config["PROJECT_ROOT"])


def _config() -> EditorConfig:
    return current_app.config["EDITOR_CONFIG"]


def _catalog() -> TemplateCatalog:
    return TemplateCatalog(_project_root() / _config().templates_dir)


@inject_bp.route("/inject", methods=["POST"])
def api_inject():  # type: ignore[no-untyped-def]
    """Inject components into the project.

    JSON body:
        components: list of component names
    """
    data = request.get_json(silent=True) or {}
    components = data.get("components")
    if not isinstance(components, list) or not all(isinstance(c, str) for c in components):
        return jsonify({"error": "Components array required"}), 400

    with _inject_lock:
        report = inject_components(_project_root(), components, _config())

    return jsonify(report.to_dict())


@inject_bp.route("/templates")
def api_templates():  # type: ignore[no-untyped-def]
    """List available templates."""
    return jsonify(_catalog().list_templates())


@inject_bp.route("/template/<template_type>/<name>")
def api_template(template_type: str, name: str):  # type: ignore[no-untyped-def]
    """Template content plus the MDX usage snippet from its header comment."""
    if template_type not in TEMPLATE_TYPES:
        return jsonify({"error": "Invalid template type"}), 400

    content = _catalog().read(name)
    if content is None:
        return jsonify({"error": "Template not found"}), 404

    return jsonify({
        "content": content,
        "snippet": extract_snippet(content),
        "name": name,
        "type": template_type,
    })
