# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Full-fidelity parsing: text survives, recovery is recorded, fragments parse per context."""

import pytest

from driftquote.syntax import SyntaxKind
from driftquote.syntax.nodes import (
	BinaryExpression,
	CompilationUnit,
	ExpressionStatement,
	IfStatement,
	LiteralExpression,
	StructDeclaration,
)
from driftquote.syntax.parser import ParseContext, parse_text

SAMPLES = [
	"struct Point {}",
	"struct Point { x: Int, y: Int }\n",
	"import std.io;\nimport std.collections as coll;\n\nfn main() returns Int {\n\tval x: Int = 1 + 2 * 3;\n\treturn x;\n}\n",
	"// leading comment\nfn f(a: Int, b: Array<String>) {\n\tif a > 0 {\n\t\tf(a - 1, b);\n\t} else {\n\t\twhile true { break; }\n\t}\n}\n",
	'const LIMIT: Int = 0x10;\npub fn g() { var s = "a\\tb"; s = s.trim(); }',
	"fn f() { return; } /* done */",
	"/// Documented.\nstruct Doc {}\n",
	"\n\n  fn   spaced ( )   {  }  \n\n",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_full_string_reproduces_source(text: str) -> None:
	root = parse_text(text)
	assert isinstance(root, CompilationUnit)
	assert root.to_full_string() == text
	assert root.diagnostics == ()


def test_unit_has_end_of_file_token() -> None:
	root = parse_text("struct Point {}\n")
	assert root.end_of_file_token.kind is SyntaxKind.END_OF_FILE_TOKEN
	assert root.end_of_file_token.text == ""
	assert [type(m) for m in root.members] == [StructDeclaration]


def test_member_context_returns_declaration() -> None:
	node = parse_text("struct Point {}", ParseContext.MEMBER)
	assert isinstance(node, StructDeclaration)
	assert node.identifier.text == "Point"
	assert node.semicolon_token.is_none


def test_statement_context() -> None:
	node = parse_text("if x { y(); }", ParseContext.STATEMENT)
	assert isinstance(node, IfStatement)
	assert isinstance(node.block.statements[0], ExpressionStatement)


def test_expression_context_kinds() -> None:
	node = parse_text("1 + 2 * 3", ParseContext.EXPRESSION)
	assert isinstance(node, BinaryExpression)
	assert node.kind is SyntaxKind.ADD_EXPRESSION
	assert node.right.kind is SyntaxKind.MULTIPLY_EXPRESSION


def test_context_accepts_string_value() -> None:
	node = parse_text("true", "expression")
	assert isinstance(node, LiteralExpression)
	assert node.kind is SyntaxKind.TRUE_LITERAL_EXPRESSION


def test_string_literal_value_is_decoded() -> None:
	node = parse_text('"\\x41"', ParseContext.EXPRESSION)
	assert node.token.text == '"\\x41"'
	assert node.token.value == "A"


def test_numeric_literal_values() -> None:
	assert parse_text("0x1F", ParseContext.EXPRESSION).token.value == 31
	assert parse_text("1_000", ParseContext.EXPRESSION).token.value == 1000
	assert parse_text("2.5", ParseContext.EXPRESSION).token.value == 2.5


def test_trailing_trivia_ends_at_line_break() -> None:
	root = parse_text("struct A {} // one\n// two\nstruct B {}")
	first, second = root.members
	trailing = [t.kind for t in first.close_brace_token.trailing_trivia]
	assert trailing == [
		SyntaxKind.WHITESPACE_TRIVIA,
		SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA,
		SyntaxKind.END_OF_LINE_TRIVIA,
	]
	leading = [t.text for t in second.struct_keyword.leading_trivia]
	assert leading == ["// two", "\n"]


def test_documentation_comment_is_structured() -> None:
	root = parse_text("/// Documented.\nstruct Doc {}\n")
	trivia = root.members[0].struct_keyword.leading_trivia[0]
	assert trivia.kind is SyntaxKind.DOCUMENTATION_COMMENT_TRIVIA
	assert trivia.structure is not None
	assert trivia.structure.content == " Documented."


def test_missing_close_brace_is_inserted() -> None:
	text = "struct Point {"
	root = parse_text(text)
	struct = root.members[0]
	assert struct.close_brace_token.is_missing
	assert struct.close_brace_token.kind is SyntaxKind.CLOSE_BRACE_TOKEN
	assert root.to_full_string() == text
	assert [d.message for d in root.diagnostics] == ["'}' expected"]
	assert root.diagnostics[0].code == "missing-token"


def test_missing_semicolon_is_inserted() -> None:
	text = "fn f() { return 1 }"
	root = parse_text(text)
	ret = root.members[0].body.statements[0]
	assert ret.semicolon_token.is_missing
	assert root.to_full_string() == text
	assert [d.message for d in root.diagnostics] == ["';' expected"]


def test_unexpected_token_is_skipped() -> None:
	text = "fn f() { ) }"
	root = parse_text(text)
	assert root.to_full_string() == text
	assert "skipped-token" in [d.code for d in root.diagnostics]
	kinds = [t.kind for tok in root.iter_tokens() for t in tok.leading_trivia]
	kinds += [t.kind for tok in root.iter_tokens() for t in tok.trailing_trivia]
	assert SyntaxKind.SKIPPED_TOKENS_TRIVIA in kinds


def test_diagnostics_carry_file_name() -> None:
	root = parse_text("struct Point {", file="point.drift")
	assert root.diagnostics[0].span.file == "point.drift"


def test_unlexable_text_gives_none() -> None:
	assert parse_text("struct @ {}") is None


def test_bad_escape_gives_none() -> None:
	assert parse_text('"\\q"', ParseContext.EXPRESSION) is None


def test_empty_unit() -> None:
	root = parse_text("")
	assert isinstance(root, CompilationUnit)
	assert len(root.members) == 0
	assert root.to_full_string() == ""
