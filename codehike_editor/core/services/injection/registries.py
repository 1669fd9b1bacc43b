"""
Fixed lookup tables for the injection engine.

Keyed by file key (``copy-button``). Built once at import time and
exposed read-only; nothing registers entries at runtime.

    INLINE_HANDLERS       — handlers synthesized inside code.tsx
    CODE_WRAPPERS         — decorators wrapping the <Pre /> return
    MDX_COMPONENTS        — entries for useMDXComponents()
    COMPANION_FILES       — extra files copied next to a template
    TEMPLATE_DEPENDENCIES — templates that pull in other templates
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from codehike_editor.core.models.injection import (
    InlineHandlerDescriptor,
    MdxComponentDescriptor,
    WrapperDescriptor,
)

# Module the generated code file imports its primitives from
CODEHIKE_CODE_MODULE = "codehike/code"
HANDLER_TYPE = "AnnotationHandler"
RENDER_PRIMITIVE = "Pre"


# ── Inline handlers ─────────────────────────────────────────────
#
# "use client" components cannot be passed as handler objects from a
# server component, so the handler is defined locally in code.tsx.

INLINE_HANDLERS: Mapping[str, InlineHandlerDescriptor] = MappingProxyType({
    "fold": InlineHandlerDescriptor(
        file_key="fold",
        import_name="InlineFold",
        handler_name="fold",
        handler_definition=(
            "const fold: AnnotationHandler = {\n"
            '  name: "fold",\n'
            "  Inline: InlineFold,\n"
            "}"
        ),
    ),
})


# ── Code wrappers ───────────────────────────────────────────────


def _wrap_copy_button(pre_jsx: str) -> str:
    return (
        '<div className="relative">\n'
        "      <CopyButton text={highlighted.code} />\n"
        f"      {pre_jsx}\n"
        "    </div>"
    )


def _wrap_file_name(pre_jsx: str) -> str:
    return (
        '<div className="px-4 bg-zinc-950 rounded">\n'
        '      <div className="text-center text-zinc-400 text-sm py-2">\n'
        "        {highlighted.meta}\n"
        "      </div>\n"
        f"      {pre_jsx}\n"
        "    </div>"
    )


CODE_WRAPPERS: Mapping[str, WrapperDescriptor] = MappingProxyType({
    "copy-button": WrapperDescriptor(
        file_key="copy-button",
        marker="CopyButton",
        import_name="CopyButton",
        wrap_return=_wrap_copy_button,
    ),
    "file-name": WrapperDescriptor(
        file_key="file-name",
        marker="highlighted.meta",
        wrap_return=_wrap_file_name,
    ),
})


# ── MDX components ──────────────────────────────────────────────

MDX_COMPONENTS: Mapping[str, tuple[MdxComponentDescriptor, ...]] = MappingProxyType({
    "code-mentions": (
        MdxComponentDescriptor("code-mentions", "HoverContainer", "HoverContainer"),
        MdxComponentDescriptor("code-mentions", "Link", "a"),
    ),
})


# ── Template catalog extras ─────────────────────────────────────

COMPANION_FILES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "focus": ("focus.client.tsx",),
    "token-transitions": ("smooth-pre.tsx",),
    "tabs": ("tabs.client.tsx",),
    "language-switcher": ("language-switcher.client.tsx",),
})

TEMPLATE_DEPENDENCIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "diff": ("mark",),
})

LAYOUT_TEMPLATES: frozenset[str] = frozenset({"spotlight", "slideshow", "scrollycoding"})
