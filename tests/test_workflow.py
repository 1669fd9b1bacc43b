"""
End-to-end injection on a demo project.
"""

from pathlib import Path

from codehike_editor.core.models.config import EditorConfig
from codehike_editor.core.models.injection import Outcome
from codehike_editor.core.services.hover_styles import (
    HOVER_CSS_MARKER,
    ensure_hover_styles,
    find_global_css,
    hover_match_rules,
)
from codehike_editor.core.services.injection.workflow import (
    expand_dependencies,
    inject_components,
)


def _components(project_dir: Path) -> Path:
    return project_dir / "app" / "components"


class TestExpandDependencies:
    def test_dependency_appended(self, catalog):
        assert expand_dependencies(catalog, ["Diff"]) == [("Diff", "diff"), ("mark", "mark")]

    def test_dependency_already_requested(self, catalog):
        assert expand_dependencies(catalog, ["Diff", "Mark"]) == [("Diff", "diff"), ("Mark", "mark")]

    def test_names_resolved(self, catalog):
        pairs = expand_dependencies(catalog, ["CopyButton", "copy button", "TypeScript"])
        assert [key for _, key in pairs] == ["copy-button", "copy-button", "typescript"]


class TestInjectHandlers:
    def test_first_injection(self, project_dir):
        report = inject_components(project_dir, ["Focus"])

        assert report.injected == ["Focus"]
        assert report.skipped == []
        assert report.failed == []
        assert report.code_component == Outcome.CREATED

        components = _components(project_dir)
        assert (components / "focus.tsx").is_file()
        assert (components / "focus.client.tsx").is_file()
        assert "handlers={[focus]}" in (components / "code.tsx").read_text()

    def test_second_injection_skipped(self, project_dir):
        inject_components(project_dir, ["Focus"])
        before = (_components(project_dir) / "code.tsx").read_text()

        report = inject_components(project_dir, ["Focus"])

        assert report.injected == []
        assert report.skipped == ["Focus"]
        assert report.code_component == Outcome.UNCHANGED
        assert (_components(project_dir) / "code.tsx").read_text() == before

    def test_incremental(self, project_dir):
        inject_components(project_dir, ["Focus"])
        report = inject_components(project_dir, ["Mark"])

        assert report.code_component == Outcome.UPDATED
        assert "handlers={[focus, mark]}" in (_components(project_dir) / "code.tsx").read_text()

    def test_dependency_injected(self, project_dir):
        report = inject_components(project_dir, ["Diff"])

        assert report.injected == ["Diff", "mark"]
        code = (_components(project_dir) / "code.tsx").read_text()
        assert "handlers={[diff, mark]}" in code
        assert (_components(project_dir) / "mark.tsx").is_file()

    def test_missing_template_fails(self, project_dir):
        report = inject_components(project_dir, ["Focus", "Nope"])

        assert report.injected == ["Focus"]
        assert report.failed == ["Nope"]
        assert not (_components(project_dir) / "nope.tsx").exists()

    def test_missing_companion_is_not_fatal(self, project_dir, catalog):
        (catalog.root / "tabs.tsx").write_text("export function Tabs() {}\n")

        report = inject_components(project_dir, ["Tabs"])

        assert report.injected == ["Tabs"]
        assert (_components(project_dir) / "tabs.tsx").is_file()
        assert not (_components(project_dir) / "tabs.client.tsx").exists()

    def test_inline_handler(self, project_dir):
        report = inject_components(project_dir, ["Fold"])

        assert report.injected == ["Fold"]
        code = (_components(project_dir) / "code.tsx").read_text()
        assert 'import { InlineFold } from "./fold"' in code
        assert "handlers={[fold]}" in code

        again = inject_components(project_dir, ["Fold"])
        assert again.skipped == ["Fold"]


class TestInjectWrappers:
    def test_wrapper_after_handler(self, project_dir):
        inject_components(project_dir, ["Focus"])
        report = inject_components(project_dir, ["CopyButton"])

        assert report.injected == ["CopyButton"]
        assert report.code_component == Outcome.UNCHANGED
        assert report.code_wrappers == Outcome.UPDATED
        code = (_components(project_dir) / "code.tsx").read_text()
        assert "<CopyButton text={highlighted.code} />" in code

        again = inject_components(project_dir, ["CopyButton"])
        assert again.skipped == ["CopyButton"]
        assert again.code_wrappers == Outcome.UNCHANGED

    def test_wrapper_without_code_file(self, project_dir):
        report = inject_components(project_dir, ["CopyButton"])

        assert report.injected == ["CopyButton"]
        assert report.code_wrappers == Outcome.UNCHANGED
        assert not (_components(project_dir) / "code.tsx").exists()


class TestInjectCodeMentions:
    def test_registration_and_styles(self, project_dir):
        report = inject_components(project_dir, ["CodeMentions"])

        assert report.injected == ["CodeMentions"]
        assert report.mdx_registration == Outcome.CREATED
        assert report.hover_styles is True

        mdx = (project_dir / "mdx-components.tsx").read_text()
        assert 'import { HoverContainer, Link } from "./app/components/code-mentions"' in mdx
        assert "a: Link," in mdx
        assert HOVER_CSS_MARKER in (project_dir / "app" / "globals.css").read_text()

    def test_repeat_is_idempotent(self, project_dir):
        inject_components(project_dir, ["CodeMentions"])
        css = (project_dir / "app" / "globals.css").read_text()

        report = inject_components(project_dir, ["CodeMentions"])

        assert report.skipped == ["CodeMentions"]
        assert report.mdx_registration == Outcome.UNCHANGED
        assert report.hover_styles is False
        assert (project_dir / "app" / "globals.css").read_text() == css

    def test_custom_components_dir(self, project_dir):
        config = EditorConfig(components_dir="components")
        report = inject_components(project_dir, ["CodeMentions"], config)

        assert report.injected == ["CodeMentions"]
        assert (project_dir / "components" / "code-mentions.tsx").is_file()
        mdx = (project_dir / "mdx-components.tsx").read_text()
        assert 'from "./components/code-mentions"' in mdx


class TestInjectErrors:
    def test_code_file_write_error_reported(self, project_dir):
        (_components(project_dir) / "code.tsx").mkdir()

        report = inject_components(project_dir, ["Focus"])

        assert report.injected == ["Focus"]
        assert report.code_component == Outcome.UNCHANGED
        assert len(report.errors) == 1
        assert report.errors[0].startswith("code.tsx:")

    def test_report_serializes(self, project_dir):
        data = inject_components(project_dir, ["Focus", "Nope"]).to_dict()

        assert data["injected"] == ["Focus"]
        assert data["failed"] == ["Nope"]
        assert data["code_component"] == "created"
        assert data["mdx_registration"] == "unchanged"
        assert data["hover_styles"] is False
        assert data["errors"] == []


class TestHoverStyles:
    def test_appends_to_existing_stylesheet(self, tmp_path):
        css = tmp_path / "app" / "globals.css"
        css.parent.mkdir()
        css.write_text("body { margin: 0; }\n")

        assert ensure_hover_styles(tmp_path) is True
        content = css.read_text()
        assert content.startswith("body { margin: 0; }\n")
        assert '[data-line="three"]' in content

        assert ensure_hover_styles(tmp_path) is False
        assert css.read_text() == content

    def test_finds_alternate_location(self, tmp_path):
        css = tmp_path / "styles" / "globals.css"
        css.parent.mkdir()
        css.write_text("")

        assert find_global_css(tmp_path) == css
        ensure_hover_styles(tmp_path)
        assert not (tmp_path / "app" / "globals.css").exists()

    def test_match_rules(self):
        rules = hover_match_rules(["one", "two"])
        assert rules.splitlines() == [
            '.hover-container:has([data-hover="one"]:hover) [data-line="one"] { opacity: 1; }',
            '.hover-container:has([data-hover="two"]:hover) [data-line="two"] { opacity: 1; }',
        ]
