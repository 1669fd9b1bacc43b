"""
Text splice primitives — the line/regex editing layer.

Generated files are edited as text, never parsed into an AST, so
comments and formatting a user added survive every update. Each
helper returns the input unchanged when its anchor is missing.

Known limitation: the array and object literal patterns stop at the
first ``]`` / ``}``. A handler list or registration object containing
nested brackets is not handled.
"""

from __future__ import annotations

import re

_IMPORT_LINE = re.compile(r"^import\s", re.MULTILINE)

# handlers={[a, b]}  or  handlers: [a, b]
_HANDLERS_ARRAY = re.compile(r"(handlers[=:]\s*\{?\[)([^\]]*?)(\])")

# first `return { ... }` object literal (may span lines)
_RETURN_OBJECT = re.compile(r"return\s*\{([^}]*)\}", re.DOTALL)


def import_line(names: list[str] | tuple[str, ...], source: str) -> str:
    return f'import {{ {", ".join(names)} }} from "{source}"'


def _named_import_pattern(source: str) -> re.Pattern[str]:
    return re.compile(
        r"import\s*\{([^}]*)\}\s*from\s*[\"']" + re.escape(source) + r"[\"']"
    )


# ── Imports ─────────────────────────────────────────────────────


def insert_after_last_import(content: str, line: str) -> str:
    """Insert ``line`` after the last line starting with ``import``.

    Prepends when the text has no import at all. The new line uses the
    file's own terminator (CRLF files stay CRLF).
    """
    nl = "\r\n" if "\r\n" in content else "\n"
    matches = list(_IMPORT_LINE.finditer(content))
    if not matches:
        return f"{line}{nl}{content}"

    last = matches[-1]

    end_of_line = content.find("\n", last.start())
    if end_of_line == -1:
        return f"{content}{nl}{line}"
    if content[end_of_line - 1] == "\r":
        end_of_line -= 1
    return content[:end_of_line] + nl + line + content[end_of_line:]


def has_named_import(content: str, name: str, source: str) -> bool:
    """Is ``name`` listed in an ``import { ... } from "source"``?"""
    for m in _named_import_pattern(source).finditer(content):
        if re.search(rf"\b{re.escape(name)}\b", m.group(1)):
            return True
    return False


def extend_named_import(content: str, source: str, name: str) -> str:
    """Add ``name`` to the existing named import from ``source``.

    Unchanged when there is no such import or it already lists the name.
    """
    pattern = _named_import_pattern(source)
    m = pattern.search(content)
    if m is None:
        return content

    names = [n.strip() for n in m.group(1).split(",") if n.strip()]
    if name in names:
        return content

    names.append(name)
    return content[:m.start()] + import_line(names, source) + content[m.end():]


# ── handlers={[...]} ────────────────────────────────────────────


def array_literal_entries(content: str) -> list[str] | None:
    """Entries of the handlers array, or None when there is no array."""
    m = _HANDLERS_ARRAY.search(content)
    if m is None:
        return None
    return [s.strip() for s in m.group(2).split(",") if s.strip()]


def insert_into_array_literal(content: str, name: str) -> str:
    """Append ``name`` to the handlers array, keeping existing entries."""
    m = _HANDLERS_ARRAY.search(content)
    if m is None:
        return content

    existing = m.group(2).strip()
    entries = [s.strip() for s in existing.split(",") if s.strip()]
    if name in entries:
        return content

    new_list = f"{existing}, {name}" if existing else name
    return content[:m.start()] + m.group(1) + new_list + m.group(3) + content[m.end():]


# ── return { ... } ──────────────────────────────────────────────


def insert_into_object_literal(content: str, entry: str) -> str:
    """Append ``entry`` as the last property of the first returned object."""
    m = _RETURN_OBJECT.search(content)
    if m is None:
        return content

    existing = m.group(1).rstrip()
    stripped = existing.strip()
    comma = "" if not stripped or stripped.endswith(",") else ","
    body = f"{existing}{comma}\n    {entry},\n  "
    return content[:m.start()] + "return {" + body + "}" + content[m.end():]
