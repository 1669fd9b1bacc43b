"""
Handler exports and the "already injected?" check.

Three kinds of templates exist, each with its own "done" signature:

    handler exporters   — every exported handler is in handlers={[...]}
    inline handlers     — code.tsx mentions the imported component
    code wrappers       — code.tsx contains the wrapper's marker
"""

from __future__ import annotations

import logging
import re

from codehike_editor.core.services.file_store import FileStore
from codehike_editor.core.services.injection.registries import (
    CODE_WRAPPERS,
    HANDLER_TYPE,
    INLINE_HANDLERS,
)
from codehike_editor.core.services.injection.text_splice import array_literal_entries
from codehike_editor.core.services.template_catalog import TemplateCatalog

logger = logging.getLogger(__name__)

# `export const focus: AnnotationHandler`, but not AnnotationHandler["Inline"],
# which types a component rather than a handler object.
_HANDLER_EXPORT = re.compile(
    rf"export const (\w+)\s*:\s*{HANDLER_TYPE}\b(?!\s*[\[.])"
)

DEFAULT_CODE_FILE = "code.tsx"


def extract_handler_exports(content: str) -> list[str]:
    """Names of exported handler objects, in order of appearance."""
    names: list[str] = []
    for m in _HANDLER_EXPORT.finditer(content):
        if m.group(1) not in names:
            names.append(m.group(1))
    return names


def get_existing_handlers(content: str | None) -> list[str]:
    """Entries of the handlers array in a code file ([] when absent)."""
    if content is None:
        return []
    return array_literal_entries(content) or []


def is_already_injected(
    generated: str | None,
    template: str | None,
    file_key: str,
) -> bool:
    """Is the component behind ``file_key`` fully wired into the code file?"""
    if template is None:
        return False

    export_names = extract_handler_exports(template)
    if export_names:
        if generated is None:
            return False
        existing = get_existing_handlers(generated)
        return all(name in existing for name in export_names)

    if generated is None:
        return False

    inline = INLINE_HANDLERS.get(file_key)
    if inline is not None:
        return inline.import_name in generated

    wrapper = CODE_WRAPPERS.get(file_key)
    if wrapper is not None:
        return wrapper.marker in generated

    return False


def is_handler_already_added(
    target: FileStore,
    catalog: TemplateCatalog,
    file_key: str,
    code_file: str = DEFAULT_CODE_FILE,
) -> bool:
    """Handle-based form of is_already_injected()."""
    result = is_already_injected(
        target.read(code_file),
        catalog.read(file_key),
        file_key,
    )
    logger.debug("%s already injected: %s", file_key, result)
    return result
