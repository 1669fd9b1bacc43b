"""
Injection workflow — copy templates into a project and wire them up.

    requested names
      → expand template dependencies (diff needs mark)
      → skip what code.tsx already wires up
      → copy template + companion files into the components dir
      → code.tsx handlers (newly copied only)
      → code.tsx wrappers, mdx-components.tsx (everything requested)
      → code-mentions hover CSS

Callers serialize concurrent requests for the same project; nothing
here locks the generated files.
"""

from __future__ import annotations

import logging
from pathlib import Path

from codehike_editor.core.models.config import EditorConfig
from codehike_editor.core.models.injection import InjectionReport
from codehike_editor.core.services.file_store import FileStore
from codehike_editor.core.services.hover_styles import ensure_hover_styles
from codehike_editor.core.services.injection.code_component import (
    ensure_code_component,
    ensure_code_wrappers,
)
from codehike_editor.core.services.injection.handlers import is_handler_already_added
from codehike_editor.core.services.injection.mdx_registration import ensure_mdx_registration
from codehike_editor.core.services.template_catalog import TemplateCatalog

logger = logging.getLogger(__name__)

HOVER_TEMPLATE = "code-mentions"


def expand_dependencies(
    catalog: TemplateCatalog,
    components: list[str],
) -> list[tuple[str, str]]:
    """(requested name, file key) pairs with dependencies appended once."""
    requested = [(name, catalog.resolve_key(name)) for name in components]
    keys = {key for _, key in requested}

    expanded = list(requested)
    for _, key in requested:
        for dep in catalog.dependencies(key):
            if dep not in keys:
                keys.add(dep)
                expanded.append((dep, dep))
    return expanded


def _copy_template(catalog: TemplateCatalog, target: FileStore, key: str) -> bool:
    """Copy one template and its companions. False if the template is missing.

    Raises:
        OSError: If the template cannot be written.
    """
    content = catalog.read(key)
    if content is None:
        return False

    target.write(catalog.filename(key), content)

    for companion in catalog.companions(key):
        companion_content = catalog.read_file(companion)
        if companion_content is None:
            logger.warning("Companion file %s for %s is missing", companion, key)
            continue
        try:
            target.write(companion, companion_content)
        except OSError as e:
            logger.warning("Could not copy companion %s: %s", companion, e)

    return True


def inject_components(
    project_root: Path,
    components: list[str],
    config: EditorConfig | None = None,
) -> InjectionReport:
    """Inject the named components into the project.

    Args:
        project_root: Root of the user's project.
        components: Names as the editor sends them (``Focus``, ``copy-button``).
        config: Editor configuration (defaults when None).

    Returns:
        InjectionReport. I/O failures in the generator steps are logged
        and listed in ``errors``; later steps still run.
    """
    config = config or EditorConfig()
    project = FileStore(project_root)
    target = project.child(config.components_dir)
    catalog = TemplateCatalog(project_root / config.templates_dir)
    report = InjectionReport()

    requested = expand_dependencies(catalog, components)
    all_keys = [key for _, key in requested]
    copied: list[str] = []

    for name, key in requested:
        if is_handler_already_added(target, catalog, key, config.code_file):
            report.skipped.append(name)
            continue

        try:
            found = _copy_template(catalog, target, key)
        except OSError as e:
            logger.error("Failed to copy template %s: %s", key, e)
            report.failed.append(name)
            continue

        if not found:
            logger.warning("Template not found: %s", catalog.store.path(catalog.filename(key)))
            report.failed.append(name)
            continue

        report.injected.append(name)
        copied.append(key)

    try:
        report.code_component = ensure_code_component(
            target, catalog, copied, code_file=config.code_file, theme=config.theme,
        )
    except OSError as e:
        logger.exception("Error managing %s", config.code_file)
        report.errors.append(f"{config.code_file}: {e}")

    try:
        report.code_wrappers = ensure_code_wrappers(target, all_keys, code_file=config.code_file)
    except OSError as e:
        logger.exception("Error adding code wrappers")
        report.errors.append(f"{config.code_file} wrappers: {e}")

    try:
        report.mdx_registration = ensure_mdx_registration(
            project, target, all_keys, mdx_file=config.mdx_components_file,
        )
    except OSError as e:
        logger.exception("Error updating %s", config.mdx_components_file)
        report.errors.append(f"{config.mdx_components_file}: {e}")

    if HOVER_TEMPLATE in all_keys:
        try:
            report.hover_styles = ensure_hover_styles(project_root)
        except OSError as e:
            logger.exception("Error adding hover styles")
            report.errors.append(f"hover styles: {e}")

    logger.info(
        "Injection: %d injected, %d skipped, %d failed",
        len(report.injected), len(report.skipped), len(report.failed),
    )
    return report
