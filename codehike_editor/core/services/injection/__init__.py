"""
Injection engine — keeps code.tsx and mdx-components.tsx in sync with
the templates copied into a project.

Modules are imported directly (``injection.code_component``); this
package re-exports nothing so template_catalog can load the registries
without pulling in the whole engine.
"""
