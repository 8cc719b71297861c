# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Evaluating call trees against the factory surface."""

import os

import pytest

from driftquote.quoting import (
	ArrayCreation,
	FactoryCall,
	Literal,
	MemberRef,
	ModifierCall,
	ResolutionError,
	evaluate,
)
from driftquote.quoting.interpreter import Interpreter
from driftquote.syntax import SyntaxKind, factory
from driftquote.syntax.nodes import Block, StructDeclaration


def test_literals_and_members() -> None:
	interp = Interpreter()
	assert interp.evaluate(Literal('"a\\tb"')) == "a\tb"
	assert interp.evaluate(Literal("-3")) == -3
	assert interp.evaluate(Literal("None")) is None
	assert interp.evaluate(MemberRef("True")) is True
	assert interp.evaluate(MemberRef("SyntaxKind.SEMICOLON_TOKEN")) is SyntaxKind.SEMICOLON_TOKEN
	assert interp.evaluate(MemberRef("os.linesep")) == os.linesep
	assert interp.evaluate(MemberRef("SPACE")) == factory.SPACE


def test_lone_surrogate_literal_is_escaped() -> None:
	lit = Literal.of("\ud800")
	assert lit.text == '"\\ud800"'
	assert Interpreter().evaluate(lit) == "\ud800"
	assert Literal.of("é").text == '"é"'


def test_builtin_value_constructors() -> None:
	assert evaluate(FactoryCall("float", (Literal('"inf"'),))) == float("inf")
	assert evaluate(FactoryCall("str")) == ""
	assert evaluate(FactoryCall("int")) == 0


def test_short_overload_with_modifiers() -> None:
	expr = FactoryCall(
		"struct_declaration",
		(Literal('"Point"'),),
		modifiers=(ModifierCall("with_semicolon_token", (FactoryCall("token", (MemberRef("SyntaxKind.SEMICOLON_TOKEN"),)),)),),
	)
	node = evaluate(expr)
	assert isinstance(node, StructDeclaration)
	assert node.to_full_string() == "structPoint{};"


def test_variadic_arguments() -> None:
	node = evaluate(FactoryCall("block", (FactoryCall("break_statement"), FactoryCall("continue_statement"))))
	assert isinstance(node, Block)
	assert len(node.statements) == 2


def test_generic_list() -> None:
	expr = FactoryCall("syntax_list[Statement]", (ArrayCreation((FactoryCall("break_statement"),)),))
	assert len(evaluate(expr)) == 1


def test_overload_follows_value_type() -> None:
	assert evaluate(FactoryCall("literal", (Literal('"0x10"'), Literal("16")))).value == 16
	assert evaluate(FactoryCall("literal", (Literal('"1e3"'), Literal("1000.0")))).value == 1000.0
	assert evaluate(FactoryCall("literal", (Literal.of('"\\x41"'), Literal.of("A")))).text == '"\\x41"'


def test_normalize_whitespace_modifier() -> None:
	expr = FactoryCall("struct_declaration", (Literal('"Point"'),), modifiers=(ModifierCall("normalize_whitespace"),))
	assert evaluate(expr).to_full_string() == "struct Point {}"


@pytest.mark.parametrize(
	"expr, call",
	[
		(FactoryCall("no_such_factory"), "no_such_factory"),
		(FactoryCall("struct_declaration", (Literal("1"),)), "struct_declaration"),
		(FactoryCall("syntax_list[Statement]", (ArrayCreation((FactoryCall("identifier_name", (Literal('"x"'),)),)),)), "syntax_list[Statement]"),
		(FactoryCall("syntax_list[Nope]"), "syntax_list[Nope]"),
		(FactoryCall("block[Statement]"), "block[Statement]"),
		(MemberRef("SyntaxKind.NOPE"), "SyntaxKind.NOPE"),
		(MemberRef("nowhere"), "nowhere"),
		(Literal("[1]"), "[1]"),
		(FactoryCall("int", (Literal('"x"'),)), "int"),
	],
)
def test_resolution_errors(expr, call) -> None:
	with pytest.raises(ResolutionError) as info:
		evaluate(expr)
	assert info.value.call == call


def test_no_overload_message_lists_argument_types() -> None:
	with pytest.raises(ResolutionError, match=r"no overload accepts \(int\)"):
		evaluate(FactoryCall("struct_declaration", (Literal("1"),)))


def test_modifier_errors() -> None:
	base = FactoryCall("struct_declaration", (Literal('"Point"'),))
	with pytest.raises(ResolutionError, match="not a modifier"):
		evaluate(base.with_modifiers((ModifierCall("to_full_string"),)))
	with pytest.raises(ResolutionError, match="no such method"):
		evaluate(base.with_modifiers((ModifierCall("with_nothing", (Literal("1"),)),)))
	with pytest.raises(ResolutionError, match="not a valid identifier"):
		evaluate(base.with_modifiers((ModifierCall("with_identifier", (Literal('"Other"'),)),)))
