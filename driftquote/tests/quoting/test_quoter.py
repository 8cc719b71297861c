# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Tree walker: overload choice, binding, placeholders and the quoted shape of tokens."""

from __future__ import annotations

import types
from dataclasses import dataclass

import pytest

from driftquote.quoting import (
	ArrayCreation,
	FactoryCall,
	FactoryRegistry,
	Literal,
	MemberRef,
	ModifierCall,
	ParseContext,
	QuoterOptions,
	UnsupportedModifierError,
	UnsupportedNodeError,
	quote,
	quote_text,
)
from driftquote.quoting.quoter import Quoter, string_argument
from driftquote.syntax import SyntaxKind, factory
from driftquote.syntax.nodes import SyntaxNode
from driftquote.syntax.overloads import overloaded
from driftquote.syntax.parser import parse_text
from driftquote.syntax.tokens import SyntaxToken, make_token

EXACT = QuoterOptions(use_default_formatting=False)


@dataclass(frozen=True)
class Pair(SyntaxNode):
	left: SyntaxToken
	right: SyntaxToken


@overloaded
def pair(left: SyntaxToken) -> Pair:
	return Pair(left, make_token(SyntaxKind.SEMICOLON_TOKEN))


def _pair_registry() -> FactoryRegistry:
	module = types.ModuleType("pair_factory")
	module.Pair = Pair
	module.pair = pair
	module.__all__ = ["Pair", "pair"]
	return FactoryRegistry(module)


def test_struct_in_unit() -> None:
	expected = (
		"factory.compilation_unit()\n"
		".with_members(\n"
		"    factory.singleton_list[factory.MemberDeclaration](\n"
		'        factory.struct_declaration("Point")))\n'
		".normalize_whitespace()"
	)
	assert quote_text("struct Point {}") == expected


def test_binary_expression() -> None:
	expected = (
		"factory.binary_expression(\n"
		"    SyntaxKind.ADD_EXPRESSION,\n"
		"    factory.literal_expression(\n"
		"        SyntaxKind.NUMERIC_LITERAL_EXPRESSION,\n"
		"        factory.literal(1)),\n"
		"    factory.literal_expression(\n"
		"        SyntaxKind.NUMERIC_LITERAL_EXPRESSION,\n"
		"        factory.literal(2)))\n"
		".normalize_whitespace()"
	)
	assert quote_text("1 + 2", ParseContext.EXPRESSION) == expected


def test_missing_close_brace_is_kept() -> None:
	call = quote(parse_text("struct Point {", ParseContext.MEMBER))
	assert call.name == "struct_declaration"
	assert call.arguments == (Literal('"Point"'),)
	assert call.modifiers == (
		ModifierCall("with_close_brace_token", (FactoryCall("missing_token", (MemberRef("SyntaxKind.CLOSE_BRACE_TOKEN"),)),)),
		ModifierCall("normalize_whitespace"),
	)


def test_single_member_uses_singleton_list() -> None:
	call = quote(parse_text("struct A {}"))
	(members,) = call.modifiers[0].arguments
	assert members.name == "singleton_list[MemberDeclaration]"


def test_several_members_use_an_array() -> None:
	call = quote(parse_text("struct A {}\nstruct B {}\nstruct C {}"))
	(members,) = call.modifiers[0].arguments
	assert members.name == "syntax_list[MemberDeclaration]"
	(array,) = members.arguments
	assert isinstance(array, ArrayCreation)
	assert [item.arguments for item in array.items] == [(Literal('"A"'),), (Literal('"B"'),), (Literal('"C"'),)]


def test_default_tokens_are_eliminated() -> None:
	node = parse_text("struct Point {}", ParseContext.MEMBER)
	call = quote(node)
	assert call.modifiers == (ModifierCall("normalize_whitespace"),)


def test_keeping_redundant_calls() -> None:
	node = parse_text("struct Point {}", ParseContext.MEMBER)
	call = quote(node, QuoterOptions(remove_redundant_modifying_calls=False))
	assert [m.name for m in call.modifiers] == [
		"with_struct_keyword",
		"with_open_brace_token",
		"with_close_brace_token",
		"normalize_whitespace",
	]


def test_escaped_string_keeps_source_text() -> None:
	call = quote(parse_text('"\\x41"', ParseContext.EXPRESSION))
	assert call.name == "literal_expression"
	assert call.arguments == (
		MemberRef("SyntaxKind.STRING_LITERAL_EXPRESSION"),
		FactoryCall("literal", (Literal.of('"\\x41"'), Literal.of("A"))),
	)


def test_keyword_literal_uses_kind_only() -> None:
	call = quote(parse_text("true", ParseContext.EXPRESSION))
	assert call.without_modifiers() == FactoryCall("literal_expression", (MemberRef("SyntaxKind.TRUE_LITERAL_EXPRESSION"),))


def test_none_token_quotes_to_nothing() -> None:
	assert Quoter().quote_token(SyntaxToken.none()) is None


def test_missing_token() -> None:
	tok = factory.missing_token(SyntaxKind.SEMICOLON_TOKEN)
	assert Quoter().quote_token(tok) == FactoryCall("missing_token", (MemberRef("SyntaxKind.SEMICOLON_TOKEN"),))


def test_empty_compilation_unit_in_exact_mode() -> None:
	call = quote(factory.compilation_unit(), EXACT)
	assert call == FactoryCall("compilation_unit")


def test_absent_identifier_gets_placeholder() -> None:
	node = factory.struct_declaration("Point").with_identifier(SyntaxToken.none())
	call = Quoter().quote_node(node)
	assert call.name == "struct_declaration"
	assert call.arguments == (FactoryCall("token", (MemberRef("SyntaxKind.NONE"),)),)


def test_exact_mode_keeps_whitespace_trivia() -> None:
	call = quote(parse_text("struct Point {}", ParseContext.MEMBER), EXACT)
	assert call.arguments[0] == FactoryCall(
		"identifier",
		(FactoryCall("trivia_list"), Literal('"Point"'), FactoryCall("trivia_list", (MemberRef("SPACE"),))),
	)
	assert all(m.name != "normalize_whitespace" for m in call.modifiers)


def test_comment_trivia_survives_default_formatting() -> None:
	call = quote(parse_text("// note\nstruct A {}", ParseContext.MEMBER))
	keyword = dict((m.name, m.arguments) for m in call.modifiers)["with_struct_keyword"][0]
	assert keyword.name == "token"
	leading = keyword.arguments[0]
	assert leading == FactoryCall("trivia_list", (FactoryCall("comment", (Literal('"// note"'),)),))


def test_variadic_block_flattens_statements() -> None:
	call = quote(parse_text("{ break; continue; }", ParseContext.STATEMENT))
	assert call.name == "block"
	assert call.arguments == (FactoryCall("break_statement"), FactoryCall("continue_statement"))


def test_absent_optional_parameter_is_omitted() -> None:
	node = factory.parameter_list()
	call = Quoter().quote_node(node)
	assert call.name == "parameter_list"
	assert call.arguments == ()


def test_string_argument_unwraps_plain_identifiers() -> None:
	assert string_argument(FactoryCall("identifier", (Literal('"x"'),))) == Literal('"x"')
	assert string_argument(Literal("1")) is None
	with_trivia = FactoryCall("identifier", (FactoryCall("trivia_list"), Literal('"x"'), FactoryCall("trivia_list")))
	assert string_argument(with_trivia) is None


def test_node_without_factory() -> None:
	with pytest.raises(UnsupportedNodeError):
		_pair_registry().for_type(SyntaxNode)
	with pytest.raises(UnsupportedNodeError, match="StructDeclaration"):
		Quoter(_pair_registry()).quote_node(factory.struct_declaration("Point"))


def test_leftover_property_without_modifier() -> None:
	node = Pair(make_token(SyntaxKind.COMMA_TOKEN), make_token(SyntaxKind.COLON_TOKEN))
	with pytest.raises(UnsupportedModifierError) as info:
		Quoter(_pair_registry()).quote_node(node)
	assert info.value.property_name == "right"
	assert info.value.node_type == "Pair"
