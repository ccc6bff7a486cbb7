"""Error classes and total behavior on hostile input.

Scanning and patching never raise; the error hierarchy is used by the
session, edits loading and the CLI.
"""

import pytest

from cssvars import CssVarsError, EditsFileError, UnknownDeclarationError, patch, scan


class TestErrorFormatting:
    def test_unknown_declaration_message(self) -> None:
        err = UnknownDeclarationError("6-10")
        assert str(err) == "Unknown declaration id: '6-10'"
        assert err.declaration_id == "6-10"

    def test_unknown_declaration_hierarchy(self) -> None:
        err = UnknownDeclarationError("x")
        assert isinstance(err, CssVarsError)
        assert isinstance(err, KeyError)

    def test_edits_file_error_without_file(self) -> None:
        err = EditsFileError("bad shape")
        assert str(err) == "bad shape"
        assert err.source_file is None

    def test_edits_file_error_with_file(self) -> None:
        err = EditsFileError("bad shape", source_file="edits.json")
        assert str(err) == "edits.json: bad shape"
        assert isinstance(err, CssVarsError)


class TestTotality:
    """Hostile input degrades to fewer declarations, never an exception."""

    @pytest.mark.parametrize(
        "source",
        [
            "}}}}{{{{",
            "\\",
            "\\\"",
            "'" * 50,
            "/*/",
            "*/ :root{--a:1}",
            "{" * 200 + "--a: 1;" + "}" * 200,
            ":root{--a: " + "(" * 100 + "}",
            "\x00\ufeff:root{--a: 1;}",
        ],
    )
    def test_scan_never_raises(self, source: str) -> None:
        declarations = scan(source)
        assert patch(source, declarations, {}) == source

    def test_deeply_nested_declaration_found(self) -> None:
        source = "{" * 200 + "--a: 1;" + "}" * 200
        (declaration,) = scan(source)
        assert declaration.value == " 1"
        assert declaration.selector == "Global"

    def test_close_comment_marker_without_open_is_text(self) -> None:
        assert [d.name for d in scan("*/ :root{--a:1}")] == ["--a"]

    def test_bom_is_part_of_prelude(self) -> None:
        (declaration,) = scan("\x00\ufeff:root{--a: 1;}")
        assert declaration.selector.endswith(":root")
