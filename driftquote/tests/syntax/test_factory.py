# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Overload dispatch of the factory surface and the token helpers behind it."""

import pytest

from driftquote.syntax import SyntaxKind, factory
from driftquote.syntax.nodes import Block, Statement, StructDeclaration
from driftquote.syntax.overloads import NO_MATCH, accepts
from driftquote.syntax.parser import ParseContext, parse_text
from driftquote.syntax.tokens import (
	SyntaxToken,
	decode_string_literal,
	parse_numeric_literal,
	render_literal,
)


def test_short_and_full_overloads_build_equal_trees() -> None:
	short = factory.struct_declaration("Point")
	full = factory.struct_declaration(
		factory.token_list(),
		factory.token(SyntaxKind.STRUCT_KEYWORD),
		factory.identifier("Point"),
		factory.token(SyntaxKind.OPEN_BRACE_TOKEN),
		factory.separated_list[factory.FieldDeclaration](),
		factory.token(SyntaxKind.CLOSE_BRACE_TOKEN),
		SyntaxToken.none(),
	)
	assert isinstance(short, StructDeclaration)
	assert short == full


def test_factory_tree_equals_parsed_tree() -> None:
	parsed = parse_text("struct Point {}", ParseContext.MEMBER)
	built = factory.struct_declaration("Point").normalize_whitespace()
	assert built.to_full_string() == parsed.normalize_whitespace().to_full_string()


def test_variadic_block() -> None:
	node = factory.block(factory.break_statement(), factory.continue_statement())
	assert isinstance(node, Block)
	assert len(node.statements) == 2


def test_no_overload_raises_type_error() -> None:
	with pytest.raises(TypeError, match="identifier_name"):
		factory.identifier_name(1)


def test_generic_list_checks_elements() -> None:
	node = factory.syntax_list[Statement]([factory.break_statement()])
	assert len(node) == 1
	with pytest.raises(TypeError):
		factory.syntax_list[Statement]([factory.identifier_name("x")])


def test_non_generic_subscript_is_rejected() -> None:
	with pytest.raises(TypeError):
		factory.block[Statement]


def test_with_modifier_replaces_one_property() -> None:
	node = factory.struct_declaration("Point")
	changed = node.with_semicolon_token(factory.token(SyntaxKind.SEMICOLON_TOKEN))
	assert changed.semicolon_token.kind is SyntaxKind.SEMICOLON_TOKEN
	assert node.semicolon_token.is_none
	assert changed.identifier == node.identifier


def test_literal_expression_requires_token_for_numbers() -> None:
	with pytest.raises(ValueError):
		factory.literal_expression(SyntaxKind.NUMERIC_LITERAL_EXPRESSION)
	node = factory.literal_expression(SyntaxKind.TRUE_LITERAL_EXPRESSION)
	assert node.token.text == "true"


def test_literal_tokens() -> None:
	assert factory.literal(42).text == "42"
	assert factory.literal(1.5).value == 1.5
	assert factory.literal("a\tb").text == '"a\\tb"'
	tok = factory.literal('"\\x41"', "A")
	assert (tok.text, tok.value) == ('"\\x41"', "A")


def test_comment_kind_follows_text() -> None:
	assert factory.comment("// x").kind is SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA
	assert factory.comment("/* x */").kind is SyntaxKind.MULTI_LINE_COMMENT_TRIVIA
	with pytest.raises(ValueError):
		factory.comment("x")


def test_trivia_constants() -> None:
	assert factory.SPACE.text == " "
	assert factory.LINE_FEED.kind is SyntaxKind.END_OF_LINE_TRIVIA
	assert factory.whitespace(" ") == factory.SPACE


def test_accepts_conversions() -> None:
	assert accepts(float, 1) == 1.0
	assert accepts(int, True) is NO_MATCH
	assert accepts(bool, 1) is NO_MATCH


def test_literal_helpers() -> None:
	assert decode_string_literal('"\\x41\\n"') == "A\n"
	assert render_literal("A\n") == '"A\\n"'
	assert render_literal(3) == "3"
	assert render_literal("\ud800") == '"\\ud800"'
	assert decode_string_literal(render_literal("\ud800")) == "\ud800"
	assert parse_numeric_literal("0b101") == 5
	assert parse_numeric_literal("1e3") == 1000.0
	with pytest.raises(ValueError):
		decode_string_literal('"\\q"')
