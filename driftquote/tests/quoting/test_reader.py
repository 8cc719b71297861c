# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Reading printed factory-call code back into call trees."""

import pytest

from driftquote.quoting import (
	ArrayCreation,
	CallTextError,
	FactoryCall,
	Literal,
	MemberRef,
	ModifierCall,
	ParseContext,
	QuoterOptions,
	evaluate_text,
	print_call,
	quote,
)
from driftquote.quoting.reader import read_call
from driftquote.syntax.parser import parse_text


def test_printed_code_reads_back_equal() -> None:
	node = parse_text("fn f(a: Int) { if a > 1 { f(a - 1); } }\nstruct P { x: Int }")
	call = quote(node)
	for options in (
		QuoterOptions(),
		QuoterOptions(shorten_with_static_import=True),
		QuoterOptions(open_parenthesis_on_new_line=True, closing_parenthesis_on_new_line=True),
	):
		assert read_call(print_call(call, options)) == call


def test_shapes() -> None:
	text = 'factory.syntax_list[factory.Statement]([factory.break_statement(),])'
	assert read_call(text) == FactoryCall(
		"syntax_list[Statement]",
		(ArrayCreation((FactoryCall("break_statement"),)),),
	)
	text = 'if_statement(identifier_name("x"), block(), else_clause=None).normalize_whitespace()'
	assert read_call(text) == FactoryCall(
		"if_statement",
		(FactoryCall("identifier_name", (Literal('"x"'),)), FactoryCall("block")),
		(("else_clause", Literal("None")),),
		(ModifierCall("normalize_whitespace"),),
	)


def test_leaves() -> None:
	assert read_call("SyntaxKind.SEMICOLON_TOKEN") == MemberRef("SyntaxKind.SEMICOLON_TOKEN")
	assert read_call("factory.SPACE") == MemberRef("SPACE")
	assert read_call("-1.5e3") == Literal("-1.5e3")
	assert read_call("'single'") == Literal("'single'")
	assert read_call("True") == Literal("True")


def test_comments_are_ignored() -> None:
	assert read_call("# generated\nfactory.break_statement()  # trailing") == FactoryCall("break_statement")


def test_evaluate_text() -> None:
	node = evaluate_text('factory.struct_declaration("Point").normalize_whitespace()')
	assert node.to_full_string() == "struct Point {}"


@pytest.mark.parametrize(
	"text",
	[
		"factory.break_statement(",
		"block(break_statement(), x=1, continue_statement())",
		"break_statement().with_semicolon_token(value=None)",
		"f(a.b=1)",
		"",
	],
)
def test_malformed_code(text: str) -> None:
	with pytest.raises(CallTextError):
		read_call(text)


def test_error_position() -> None:
	with pytest.raises(CallTextError) as info:
		read_call("factory.block(\n    factory.break_statement() factory.continue_statement())")
	assert info.value.line == 2
	assert info.value.column is not None


def test_member_context_round_trip_through_text() -> None:
	node = parse_text("struct Point {", ParseContext.MEMBER)
	rebuilt = evaluate_text(print_call(quote(node)))
	assert rebuilt.to_full_string() == "struct Point {"
