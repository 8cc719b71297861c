# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Layout of printed factory calls."""

from driftquote.quoting import (
	ArrayCreation,
	FactoryCall,
	Literal,
	MemberRef,
	ModifierCall,
	QuoterOptions,
	print_call,
)

IF_STATEMENT = FactoryCall(
	"if_statement",
	(FactoryCall("identifier_name", (Literal('"ok"'),)), FactoryCall("block")),
	keywords=(("else_clause", Literal("None")),),
)

STATEMENTS = FactoryCall(
	"syntax_list[Statement]",
	(ArrayCreation((FactoryCall("break_statement"), FactoryCall("continue_statement"))),),
)


def test_simple_calls_stay_on_one_line() -> None:
	assert print_call(FactoryCall("break_statement")) == "factory.break_statement()"
	assert print_call(FactoryCall("identifier_name", (Literal('"x"'),))) == 'factory.identifier_name("x")'
	assert print_call(FactoryCall("token", (MemberRef("SyntaxKind.COMMA_TOKEN"),))) == "factory.token(SyntaxKind.COMMA_TOKEN)"


def test_keyword_arguments() -> None:
	expected = (
		"factory.if_statement(\n"
		'    factory.identifier_name("ok"),\n'
		"    factory.block(),\n"
		"    else_clause=None)"
	)
	assert print_call(IF_STATEMENT) == expected


def test_list_display() -> None:
	expected = (
		"factory.syntax_list[factory.Statement](\n"
		"    [\n"
		"        factory.break_statement(),\n"
		"        factory.continue_statement()\n"
		"    ])"
	)
	assert print_call(STATEMENTS) == expected
	assert print_call(FactoryCall("token_list", (ArrayCreation(),))) == "factory.token_list(\n    [])"


def test_modifier_chain() -> None:
	call = FactoryCall(
		"break_statement",
		modifiers=(
			ModifierCall("with_semicolon_token", (FactoryCall("missing_token", (MemberRef("SyntaxKind.SEMICOLON_TOKEN"),)),)),
			ModifierCall("normalize_whitespace"),
		),
	)
	expected = (
		"factory.break_statement()\n"
		".with_semicolon_token(\n"
		"    factory.missing_token(SyntaxKind.SEMICOLON_TOKEN))\n"
		".normalize_whitespace()"
	)
	assert print_call(call) == expected


def test_static_import_drops_prefix() -> None:
	options = QuoterOptions(shorten_with_static_import=True)
	assert print_call(STATEMENTS, options).startswith("syntax_list[Statement](\n")
	assert print_call(FactoryCall("trivia_list", (MemberRef("SPACE"),)), options) == "trivia_list(SPACE)"


def test_prefix_rules_for_members_and_builtins() -> None:
	assert print_call(FactoryCall("trivia_list", (MemberRef("SPACE"),))) == "factory.trivia_list(factory.SPACE)"
	assert print_call(FactoryCall("end_of_line", (MemberRef("os.linesep"),))) == "factory.end_of_line(os.linesep)"
	assert print_call(FactoryCall("float", (Literal('"inf"'),))) == 'float("inf")'


def test_parenthesis_on_new_lines() -> None:
	options = QuoterOptions(open_parenthesis_on_new_line=True, closing_parenthesis_on_new_line=True)
	expected = (
		"factory.if_statement\n"
		"(\n"
		'    factory.identifier_name("ok"),\n'
		"    factory.block(),\n"
		"    else_clause=None\n"
		")"
	)
	assert print_call(IF_STATEMENT, options) == expected
