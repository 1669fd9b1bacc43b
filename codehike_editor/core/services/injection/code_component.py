"""
Code component generator — code.tsx.

code.tsx is the single server component that highlights a code block
and renders it with Code Hike's ``<Pre>``. Injected templates add to it:

    handler exporters  → import + entry in handlers={[...]}
    inline handlers    → import + local ``const x: AnnotationHandler``
    code wrappers      → import + the <Pre /> return wrapped in JSX

The ``apply_*`` functions are pure (text in, MutationResult out). The
``ensure_*`` functions read the file once and write only on change.
"""

from __future__ import annotations

import logging
import re

from codehike_editor.core.models.injection import (
    HandlerDescriptor,
    InlineHandlerDescriptor,
    MutationResult,
    Outcome,
)
from codehike_editor.core.services.file_store import FileStore
from codehike_editor.core.services.injection.handlers import (
    DEFAULT_CODE_FILE,
    extract_handler_exports,
)
from codehike_editor.core.services.injection.registries import (
    CODE_WRAPPERS,
    CODEHIKE_CODE_MODULE,
    HANDLER_TYPE,
    INLINE_HANDLERS,
    RENDER_PRIMITIVE,
)
from codehike_editor.core.services.injection.text_splice import (
    extend_named_import,
    has_named_import,
    import_line,
    insert_after_last_import,
    insert_into_array_literal,
)
from codehike_editor.core.services.template_catalog import TemplateCatalog

logger = logging.getLogger(__name__)

DEFAULT_THEME = "github-dark"

# `return <Pre ... />` with optional parentheses around the JSX
_RETURN_PRE = re.compile(
    rf"return\s*(?:\(\s*)?(<{RENDER_PRIMITIVE}\b.*?/>)(?:\s*\))?",
    re.DOTALL,
)


def collect_handlers(
    catalog: TemplateCatalog,
    file_keys: list[str],
) -> tuple[list[HandlerDescriptor], list[InlineHandlerDescriptor]]:
    """Split a batch into handler exporters and inline handlers.

    Keys matching neither (wrappers, unreadable or unknown templates)
    are dropped.
    """
    handlers: list[HandlerDescriptor] = []
    inline: list[InlineHandlerDescriptor] = []

    for key in dict.fromkeys(file_keys):
        inline_handler = INLINE_HANDLERS.get(key)
        if inline_handler is not None:
            inline.append(inline_handler)
            continue

        content = catalog.read(key)
        if content is None:
            logger.debug("Template %s not readable, skipping", key)
            continue

        export_names = extract_handler_exports(content)
        if export_names:
            handlers.append(HandlerDescriptor(key, tuple(export_names)))

    return handlers, inline


# ── Create ──────────────────────────────────────────────────────


def generate_code_component(
    handlers: list[HandlerDescriptor],
    inline_handlers: list[InlineHandlerDescriptor],
    theme: str = DEFAULT_THEME,
) -> str:
    """Fresh code.tsx for the given handlers."""
    primitives = [RENDER_PRIMITIVE, "RawCode", "highlight"]
    if inline_handlers:
        primitives.append(HANDLER_TYPE)

    imports = [import_line(primitives, CODEHIKE_CODE_MODULE)]
    names: list[str] = []

    for handler in handlers:
        imports.append(import_line(handler.export_names, f"./{handler.file_key}"))
        names.extend(handler.export_names)

    for ih in inline_handlers:
        imports.append(import_line([ih.import_name], f"./{ih.file_key}"))
        names.append(ih.handler_name)

    content = (
        "\n".join(imports)
        + "\n\n"
        + "export async function Code({ codeblock }: { codeblock: RawCode }) {\n"
        + f'  const highlighted = await highlight(codeblock, "{theme}")\n'
        + f"  return <Pre code={{highlighted}} handlers={{[{', '.join(names)}]}} />\n"
        + "}\n"
    )

    if inline_handlers:
        definitions = "\n\n".join(ih.handler_definition for ih in inline_handlers)
        content += f"\n{definitions}\n"

    return content


# ── Update ──────────────────────────────────────────────────────


def update_code_component(
    existing: str,
    handlers: list[HandlerDescriptor],
    inline_handlers: list[InlineHandlerDescriptor],
) -> str:
    """Add missing imports and handler entries to an existing code.tsx."""
    content = existing

    for handler in handlers:
        source = f"./{handler.file_key}"
        new_exports = [
            name for name in handler.export_names
            if not has_named_import(content, name, source)
        ]
        if not new_exports:
            continue

        content = insert_after_last_import(content, import_line(new_exports, source))
        for name in new_exports:
            content = insert_into_array_literal(content, name)

    for ih in inline_handlers:
        if ih.import_name in content:
            continue

        content = insert_after_last_import(
            content, import_line([ih.import_name], f"./{ih.file_key}"),
        )
        content = extend_named_import(content, CODEHIKE_CODE_MODULE, HANDLER_TYPE)
        content = content.rstrip() + "\n\n" + ih.handler_definition + "\n"
        content = insert_into_array_literal(content, ih.handler_name)

    return content


def apply_code_component(
    existing: str | None,
    handlers: list[HandlerDescriptor],
    inline_handlers: list[InlineHandlerDescriptor],
    theme: str = DEFAULT_THEME,
) -> MutationResult:
    """Create or update code.tsx text for a batch of handlers."""
    if not handlers and not inline_handlers:
        return MutationResult(existing, Outcome.UNCHANGED)

    if existing is None:
        return MutationResult(
            generate_code_component(handlers, inline_handlers, theme),
            Outcome.CREATED,
        )

    updated = update_code_component(existing, handlers, inline_handlers)
    if updated == existing:
        return MutationResult(existing, Outcome.UNCHANGED)
    return MutationResult(updated, Outcome.UPDATED)


def ensure_code_component(
    target: FileStore,
    catalog: TemplateCatalog,
    file_keys: list[str],
    code_file: str = DEFAULT_CODE_FILE,
    theme: str = DEFAULT_THEME,
) -> Outcome:
    """Make sure code.tsx in ``target`` wires up every handler in the batch.

    Raises:
        OSError: If writing code.tsx fails.
    """
    handlers, inline = collect_handlers(catalog, file_keys)
    if not handlers and not inline:
        return Outcome.UNCHANGED

    result = apply_code_component(target.read(code_file), handlers, inline, theme)
    if result.changed and result.text is not None:
        target.write(code_file, result.text)

    logger.info("%s %s (%d handler files, %d inline)",
                code_file, result.outcome, len(handlers), len(inline))
    return result.outcome


# ── Wrappers ────────────────────────────────────────────────────


def apply_code_wrappers(existing: str | None, requested_keys: list[str]) -> MutationResult:
    """Wrap the ``<Pre />`` return with every requested decorator not yet applied.

    A wrapper whose import is added but whose return pattern cannot be
    found (hand-edited file) is a silent partial application.
    """
    if existing is None:
        return MutationResult(None, Outcome.UNCHANGED)

    wrappers = [CODE_WRAPPERS[k] for k in dict.fromkeys(requested_keys) if k in CODE_WRAPPERS]
    content = existing

    for wrapper in wrappers:
        if wrapper.marker in content:
            continue

        if wrapper.import_name:
            content = insert_after_last_import(
                content, import_line([wrapper.import_name], wrapper.import_source),
            )

        m = _RETURN_PRE.search(content)
        if m is None:
            logger.debug("No <%s /> return found; %s not wrapped",
                         RENDER_PRIMITIVE, wrapper.file_key)
            continue

        wrapped = wrapper.wrap_return(m.group(1))
        content = content[:m.start()] + f"return (\n    {wrapped}\n  )" + content[m.end():]

    if content == existing:
        return MutationResult(existing, Outcome.UNCHANGED)
    return MutationResult(content, Outcome.UPDATED)


def ensure_code_wrappers(
    target: FileStore,
    requested_keys: list[str],
    code_file: str = DEFAULT_CODE_FILE,
) -> Outcome:
    """Apply wrapper templates to code.tsx. Missing file → unchanged.

    Raises:
        OSError: If writing code.tsx fails.
    """
    if not any(k in CODE_WRAPPERS for k in requested_keys):
        return Outcome.UNCHANGED

    result = apply_code_wrappers(target.read(code_file), requested_keys)
    if result.changed and result.text is not None:
        target.write(code_file, result.text)
        logger.info("%s wrapped (%s)", code_file,
                    ", ".join(k for k in requested_keys if k in CODE_WRAPPERS))
    return result.outcome
