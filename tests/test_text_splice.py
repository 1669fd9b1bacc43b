"""
Tests for the splice helpers used by the code and MDX generators.
"""

from codehike_editor.core.services.injection.text_splice import (
    array_literal_entries,
    extend_named_import,
    has_named_import,
    import_line,
    insert_after_last_import,
    insert_into_array_literal,
    insert_into_object_literal,
)


# ═══════════════════════════════════════════════════════════════════
#  Imports
# ═══════════════════════════════════════════════════════════════════


class TestImportLine:
    def test_formats_named_import(self):
        assert import_line(["a", "b"], "./x") == 'import { a, b } from "./x"'


class TestInsertAfterLastImport:
    def test_after_last_of_several(self):
        content = 'import { a } from "a"\nimport { b } from "b"\n\nconst x = 1\n'
        result = insert_after_last_import(content, 'import { c } from "c"')
        assert result == 'import { a } from "a"\nimport { b } from "b"\nimport { c } from "c"\n\nconst x = 1\n'

    def test_single_import_on_first_line(self):
        content = 'import { Pre } from "codehike/code"\n\nexport function X() {}\n'
        result = insert_after_last_import(content, 'import { y } from "./y"')
        assert result.startswith('import { Pre } from "codehike/code"\nimport { y } from "./y"\n')

    def test_prepends_without_imports(self):
        assert insert_after_last_import("const x = 1\n", "import x") == "import x\nconst x = 1\n"

    def test_import_on_last_line_without_newline(self):
        assert insert_after_last_import('import a from "a"', "import b") == 'import a from "a"\nimport b'

    def test_keeps_crlf_line_endings(self):
        content = 'import { a } from "a"\r\n\r\nconst x = 1\r\n'
        result = insert_after_last_import(content, 'import { b } from "b"')
        assert result == 'import { a } from "a"\r\nimport { b } from "b"\r\n\r\nconst x = 1\r\n'

    def test_prepend_keeps_crlf(self):
        assert insert_after_last_import("const x = 1\r\n", "import x") == "import x\r\nconst x = 1\r\n"

    def test_ignores_indented_import_word(self):
        content = 'import a from "a"\nconst s = `\n  import nothing\n`\n'
        result = insert_after_last_import(content, "import b")
        assert result.startswith('import a from "a"\nimport b\n')


class TestHasNamedImport:
    def test_found_from_source(self):
        assert has_named_import('import { focus } from "./focus"', "focus", "./focus")

    def test_other_source_does_not_count(self):
        assert not has_named_import('import { focus } from "./other"', "focus", "./focus")

    def test_word_boundary(self):
        assert not has_named_import('import { focusMore } from "./focus"', "focus", "./focus")

    def test_single_quotes(self):
        assert has_named_import("import { a, focus } from './focus'", "focus", "./focus")


class TestExtendNamedImport:
    def test_adds_to_existing_list(self):
        content = 'import { Pre, RawCode, highlight } from "codehike/code"\n'
        result = extend_named_import(content, "codehike/code", "AnnotationHandler")
        assert result == 'import { Pre, RawCode, highlight, AnnotationHandler } from "codehike/code"\n'

    def test_no_matching_import(self):
        content = 'import { Pre } from "other"\n'
        assert extend_named_import(content, "codehike/code", "AnnotationHandler") == content

    def test_already_listed(self):
        content = 'import { Pre, AnnotationHandler } from "codehike/code"\n'
        assert extend_named_import(content, "codehike/code", "AnnotationHandler") == content


# ═══════════════════════════════════════════════════════════════════
#  handlers={[...]}
# ═══════════════════════════════════════════════════════════════════


class TestArrayLiteral:
    def test_entries(self):
        assert array_literal_entries("handlers={[focus, mark]}") == ["focus", "mark"]

    def test_object_property_form(self):
        assert array_literal_entries("handlers: [focus]") == ["focus"]

    def test_empty_array(self):
        assert array_literal_entries("handlers={[]}") == []

    def test_missing_array(self):
        assert array_literal_entries("<Pre />") is None

    def test_append_preserves_order(self):
        assert insert_into_array_literal("handlers={[focus]}", "mark") == "handlers={[focus, mark]}"

    def test_append_to_empty(self):
        assert insert_into_array_literal("handlers={[]}", "mark") == "handlers={[mark]}"

    def test_never_duplicates(self):
        assert insert_into_array_literal("handlers={[focus, mark]}", "focus") == "handlers={[focus, mark]}"

    def test_missing_anchor_is_noop(self):
        assert insert_into_array_literal("<Pre />", "mark") == "<Pre />"

    def test_nested_brackets_stop_at_first_close(self):
        """Known limitation: the array pattern ends at the first ']'."""
        content = "handlers={[focus, items[0]]}"
        assert array_literal_entries(content) == ["focus", "items[0"]


# ═══════════════════════════════════════════════════════════════════
#  return { ... }
# ═══════════════════════════════════════════════════════════════════


class TestObjectLiteral:
    def test_after_trailing_comma(self):
        content = "  return {\n    ...components,\n  }\n"
        result = insert_into_object_literal(content, "a: Link")
        assert result == "  return {\n    ...components,\n    a: Link,\n  }\n"

    def test_adds_missing_comma(self):
        content = "  return {\n    ...components\n  }\n"
        result = insert_into_object_literal(content, "Foo")
        assert result == "  return {\n    ...components,\n    Foo,\n  }\n"

    def test_empty_object(self):
        result = insert_into_object_literal("return {}", "Foo")
        assert result == "return {\n    Foo,\n  }"

    def test_missing_anchor_is_noop(self):
        assert insert_into_object_literal("export const x = 1", "Foo") == "export const x = 1"
