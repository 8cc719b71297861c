# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Dropping `with_*` calls that leave the rendered tree unchanged."""

import pytest

from driftquote.quoting import (
	FactoryCall,
	Literal,
	MemberRef,
	ModifierCall,
	ParseContext,
	QuoterOptions,
	evaluate,
	render_node,
)
from driftquote.quoting.callexpr import count_modifiers
from driftquote.quoting.eliminator import RedundantCallEliminator
from driftquote.quoting.quoter import Quoter
from driftquote.syntax.parser import parse_text

SOURCES = [
	("struct Point { x: Int, y: Int }", ParseContext.UNIT),
	("fn main() returns Int {\n\tval x: Int = (1 + 2) * 3;\n\treturn x;\n}", ParseContext.UNIT),
	("import std.io as io;", ParseContext.UNIT),
	("if a > 0 { f(a, b.c); } else { return; }", ParseContext.STATEMENT),
]


def _token(kind: str) -> FactoryCall:
	return FactoryCall("token", (MemberRef(f"SyntaxKind.{kind}"),))


def test_default_token_is_dropped() -> None:
	call = FactoryCall("break_statement", modifiers=(ModifierCall("with_semicolon_token", (_token("SEMICOLON_TOKEN"),)),))
	eliminator = RedundantCallEliminator()
	assert eliminator.eliminate(call) == FactoryCall("break_statement")
	assert eliminator.removed == 1


def test_changing_modifier_is_kept() -> None:
	call = FactoryCall(
		"struct_declaration",
		(Literal('"Point"'),),
		modifiers=(ModifierCall("with_semicolon_token", (_token("SEMICOLON_TOKEN"),)),),
	)
	eliminator = RedundantCallEliminator()
	assert eliminator.eliminate(call) == call
	assert eliminator.removed == 0


def test_modifier_undone_later_is_judged_in_order() -> None:
	semicolon = ModifierCall("with_semicolon_token", (_token("SEMICOLON_TOKEN"),))
	cleared = ModifierCall("with_semicolon_token", (_token("NONE"),))
	call = FactoryCall("struct_declaration", (Literal('"Point"'),), modifiers=(semicolon, cleared))
	assert RedundantCallEliminator().eliminate(call).modifiers == (semicolon, cleared)


def test_normalize_whitespace_is_always_kept() -> None:
	call = FactoryCall("break_statement", modifiers=(ModifierCall("normalize_whitespace"),))
	assert RedundantCallEliminator().eliminate(call) == call


@pytest.mark.parametrize("text, context", SOURCES)
def test_second_pass_removes_nothing(text: str, context: ParseContext) -> None:
	node = parse_text(text, context)
	full = Quoter().quote(node)
	first = RedundantCallEliminator()
	once = first.eliminate(full)
	assert first.removed > 0
	assert count_modifiers(once) < count_modifiers(full)
	second = RedundantCallEliminator()
	assert second.eliminate(once) == once
	assert second.removed == 0


@pytest.mark.parametrize("text, context", SOURCES)
def test_elimination_keeps_the_rendered_tree(text: str, context: ParseContext) -> None:
	node = parse_text(text, context)
	full = Quoter().quote(node)
	trimmed = RedundantCallEliminator().eliminate(full)
	assert render_node(evaluate(trimmed)) == render_node(evaluate(full)) == render_node(node)


def test_exact_mode_compares_verbatim_text() -> None:
	options = QuoterOptions(use_default_formatting=False)
	node = parse_text("struct  Point {}", ParseContext.MEMBER)
	full = Quoter(options=options).quote(node)
	trimmed = RedundantCallEliminator(options=options).eliminate(full)
	assert evaluate(trimmed).to_full_string() == "struct  Point {}"
