"""
Shared test fixtures — a demo Next.js project with the editor's templates.

    demo/
      app/components/
      node_modules/codehike-editor/dist/templates/*.tsx
"""

from pathlib import Path

import pytest

from codehike_editor.core.services.file_store import FileStore
from codehike_editor.core.services.template_catalog import TemplateCatalog

TEMPLATES_REL = "node_modules/codehike-editor/dist/templates"

SAMPLE_TEMPLATES = {
    "focus.tsx": (
        'import { AnnotationHandler } from "codehike/code"\n'
        'import { PreWithFocus } from "./focus.client"\n'
        "\n"
        "export const focus: AnnotationHandler = {\n"
        '  name: "focus",\n'
        "  PreWithRef: PreWithFocus,\n"
        "}\n"
    ),
    "focus.client.tsx": '"use client"\n\nexport function PreWithFocus() {\n  return null\n}\n',
    "mark.tsx": (
        'import { AnnotationHandler } from "codehike/code"\n'
        "\n"
        "export const mark: AnnotationHandler = {\n"
        '  name: "mark",\n'
        "}\n"
    ),
    "diff.tsx": (
        'import { AnnotationHandler } from "codehike/code"\n'
        "\n"
        "export const diff: AnnotationHandler = {\n"
        '  name: "diff",\n'
        "}\n"
    ),
    "collapse.tsx": (
        "export const collapse: AnnotationHandler = {}\n"
        "export const collapseTrigger: AnnotationHandler = {}\n"
        "export const collapseContent: AnnotationHandler = {}\n"
    ),
    "fold.tsx": (
        '"use client"\n'
        "\n"
        'export const InlineFold: AnnotationHandler["Inline"] = ({ children }) => {\n'
        "  return <>{children}</>\n"
        "}\n"
        "\n"
        "export const fold: AnnotationHandler = {\n"
        '  name: "fold",\n'
        "  Inline: InlineFold,\n"
        "}\n"
    ),
    "copy-button.tsx": (
        '"use client"\n'
        "\n"
        "export function CopyButton({ text }: { text: string }) {\n"
        "  return <button>{text}</button>\n"
        "}\n"
    ),
    "file-name.tsx": (
        "/* MDX Snippet:\n"
        "```js index.js\n"
        "console.log(1)\n"
        "```\n"
        "*/\n"
        "\n"
        "export function FileName() {\n"
        "  return null\n"
        "}\n"
    ),
    "code-mentions.tsx": (
        'import { AnnotationHandler, InnerLine } from "codehike/code"\n'
        "\n"
        "export function HoverContainer(props) {\n"
        '  return <div className="hover-container">{props.children}</div>\n'
        "}\n"
        "\n"
        "export function Link(props) {\n"
        "  return <a {...props} />\n"
        "}\n"
        "\n"
        "export const hover: AnnotationHandler = {\n"
        '  name: "hover",\n'
        "}\n"
    ),
    "typescript.tsx": "export function TypeScript() {\n  return null\n}\n",
    "spotlight.tsx": "export function Spotlight() {\n  return null\n}\n",
}


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Demo project with app/components and the template catalog."""
    root = tmp_path / "demo"
    (root / "app" / "components").mkdir(parents=True)
    templates = root / TEMPLATES_REL
    templates.mkdir(parents=True)
    for name, content in SAMPLE_TEMPLATES.items():
        (templates / name).write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def catalog(project_dir: Path) -> TemplateCatalog:
    return TemplateCatalog(project_dir / TEMPLATES_REL)


@pytest.fixture
def project_store(project_dir: Path) -> FileStore:
    return FileStore(project_dir)


@pytest.fixture
def components_store(project_dir: Path) -> FileStore:
    return FileStore(project_dir / "app" / "components")


@pytest.fixture
def templates() -> dict[str, str]:
    """Sample template bodies by filename."""
    return SAMPLE_TEMPLATES
