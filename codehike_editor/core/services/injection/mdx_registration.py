"""
MDX registration generator — mdx-components.tsx.

Components a document uses without importing (``<HoverContainer>``, the
``a`` override for hover links) must be returned by
``useMDXComponents()``. Presence is a plain substring check on the
component name, coarser than the handlers-array check in code.tsx.
"""

from __future__ import annotations

import logging

from codehike_editor.core.models.injection import (
    MdxComponentDescriptor,
    MutationResult,
    Outcome,
)
from codehike_editor.core.services.file_store import FileStore
from codehike_editor.core.services.injection.registries import MDX_COMPONENTS
from codehike_editor.core.services.injection.text_splice import (
    extend_named_import,
    import_line,
    insert_after_last_import,
    insert_into_object_literal,
)

logger = logging.getLogger(__name__)

DEFAULT_MDX_FILE = "mdx-components.tsx"

_MDX_TYPES_IMPORT = 'import type { MDXComponents } from "mdx/types"'


def collect_mdx_components(file_keys: list[str]) -> list[MdxComponentDescriptor]:
    """Flatten a batch through the MDX component table."""
    found: list[MdxComponentDescriptor] = []
    for key in dict.fromkeys(file_keys):
        found.extend(MDX_COMPONENTS.get(key, ()))
    return found


def import_base(project: FileStore, target: FileStore) -> str:
    """Relative import prefix from the project root to the components dir."""
    rel = target.relative_to(project)
    return f"./{rel}" if rel else "."


def generate_mdx_components(
    components: list[MdxComponentDescriptor],
    base: str,
) -> str:
    """Fresh mdx-components.tsx registering ``components``."""
    by_file: dict[str, list[MdxComponentDescriptor]] = {}
    for info in components:
        by_file.setdefault(info.file_key, []).append(info)

    imports = [_MDX_TYPES_IMPORT]
    entries = ["    ...components"]
    for file_key, infos in by_file.items():
        imports.append(import_line([i.component_name for i in infos], f"{base}/{file_key}"))
        entries.extend(f"    {i.entry}" for i in infos)

    return (
        "\n".join(imports)
        + "\n\n"
        + "export function useMDXComponents(components: MDXComponents): MDXComponents {\n"
        + "  return {\n"
        + ",\n".join(entries)
        + ",\n"
        + "  }\n"
        + "}\n"
    )


def update_mdx_components(
    existing: str,
    components: list[MdxComponentDescriptor],
    base: str,
) -> str:
    """Add missing imports and registrations to an existing file."""
    content = existing

    for info in components:
        if info.component_name in content:
            continue

        source = f"{base}/{info.file_key}"
        merged = extend_named_import(content, source, info.component_name)
        if merged != content:
            content = merged
        else:
            content = insert_after_last_import(
                content, import_line([info.component_name], source),
            )

        content = insert_into_object_literal(content, info.entry)

    return content


def apply_mdx_registration(
    existing: str | None,
    file_keys: list[str],
    base: str,
) -> MutationResult:
    """Create or update mdx-components.tsx text for a batch."""
    components = collect_mdx_components(file_keys)
    if not components:
        return MutationResult(existing, Outcome.UNCHANGED)

    if existing is None:
        return MutationResult(generate_mdx_components(components, base), Outcome.CREATED)

    updated = update_mdx_components(existing, components, base)
    if updated == existing:
        return MutationResult(existing, Outcome.UNCHANGED)
    return MutationResult(updated, Outcome.UPDATED)


def ensure_mdx_registration(
    project: FileStore,
    target: FileStore,
    file_keys: list[str],
    mdx_file: str = DEFAULT_MDX_FILE,
) -> Outcome:
    """Register the batch's MDX components in ``project``/mdx-components.tsx.

    ``target`` is the components directory the templates were copied to;
    imports point there relative to the project root.

    Raises:
        OSError: If writing the file fails.
    """
    if not collect_mdx_components(file_keys):
        return Outcome.UNCHANGED

    result = apply_mdx_registration(
        project.read(mdx_file), file_keys, import_base(project, target),
    )
    if result.changed and result.text is not None:
        project.write(mdx_file, result.text)

    logger.info("%s %s", mdx_file, result.outcome)
    return result.outcome
