"""
Editor configuration model — loaded from codehike-editor.yml.

Every key is optional; a project without the file gets the defaults,
which match the layout of a Next.js app using Code Hike.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class EditorConfig(BaseModel):
    """Where the editor reads documents and writes generated components."""

    content_dir: str = "app"
    components_dir: str = "app/components"
    templates_dir: str = "node_modules/codehike-editor/dist/templates"

    code_file: str = "code.tsx"
    mdx_components_file: str = "mdx-components.tsx"
    theme: str = "github-dark"

    host: str = "127.0.0.1"
    port: int = Field(default=4321, ge=1, le=65535)
    editor_dist: str | None = None   # pre-built editor UI to serve at /
