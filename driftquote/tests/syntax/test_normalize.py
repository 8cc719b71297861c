# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Canonical layout produced by normalize_whitespace()."""

import pytest

from driftquote.syntax import factory
from driftquote.syntax.parser import ParseContext, parse_text


def _normalized(text: str, context: ParseContext = ParseContext.UNIT, **kwargs) -> str:
	return parse_text(text, context).normalize_whitespace(**kwargs).to_full_string()


def test_function_body_is_indented() -> None:
	assert _normalized("fn   main( ){return 1;}") == "fn main() {\n\treturn 1;\n}"


def test_struct_fields_one_per_line() -> None:
	assert _normalized("struct P{x:Int,y:Int}") == "struct P {\n\tx: Int,\n\ty: Int\n}"


def test_empty_struct_stays_on_one_line() -> None:
	assert _normalized("struct   Point\n{\n}") == "struct Point {}"


def test_custom_indentation() -> None:
	assert _normalized("fn f() { break; }", indentation="    ") == "fn f() {\n    break;\n}"


def test_expression_spacing() -> None:
	text = _normalized("a=-b+f(1,2).c", ParseContext.EXPRESSION)
	assert text == "a = -b + f(1, 2).c"


def test_generic_type_arguments() -> None:
	assert _normalized("fn f(b: Map<String,Int>) {}") == "fn f(b: Map<String, Int>) {}"


def test_comments_are_kept() -> None:
	text = _normalized("// head\nfn f() { /* inline */ break; }")
	assert "// head\n" in text
	assert "/* inline */" in text


@pytest.mark.parametrize(
	"text",
	[
		"import std.io;\nfn main() returns Int { val x: Int = 1; if x > 0 { return x; } else { return 0; } }",
		"// note\nstruct A { x: Int } /* tail */",
		"/// doc\nconst K: Int = 3;",
	],
)
def test_normalize_is_idempotent(text: str) -> None:
	once = parse_text(text).normalize_whitespace()
	assert once.normalize_whitespace().to_full_string() == once.to_full_string()


def test_factory_built_tree_gets_spacing() -> None:
	node = factory.struct_declaration("Point")
	assert node.to_full_string() == "structPoint{}"
	assert node.normalize_whitespace().to_full_string() == "struct Point {}"
