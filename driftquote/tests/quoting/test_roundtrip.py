# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Quote -> evaluate must rebuild the source tree: normalized text under default
formatting, the exact text otherwise.
"""

import pytest

from driftquote.quoting import (
	PARSE_ERROR,
	ParseContext,
	QuoterOptions,
	evaluate,
	evaluate_text,
	print_call,
	quote,
	quote_text,
	render_node,
)
from driftquote.syntax.parser import parse_text

SAMPLES = [
	("", ParseContext.UNIT),
	("struct Point {}", ParseContext.UNIT),
	("struct Point { x: Int, y: Array<Int> };\n", ParseContext.UNIT),
	("import std.io;\nimport std.collections as coll;\n", ParseContext.UNIT),
	("/// Entry point.\npub fn main() returns Int {\n\tval x: Int = 1 + 2 * 3;\n\tvar y = -x;\n\treturn (x);\n}\n", ParseContext.UNIT),
	("// lead\nconst LIMIT: Int = 0x10; /* tail */\n", ParseContext.UNIT),
	("fn f(a: Int, b: Map<String, Int>) {\n  while a > 0 { a = a - 1; continue; }\n  break;\n}", ParseContext.UNIT),
	("struct Broken {", ParseContext.UNIT),
	("fn f() { return 1 }", ParseContext.UNIT),
	("fn f() { ) }", ParseContext.UNIT),
	("struct Point {}", ParseContext.MEMBER),
	("if a { f(); } else if b { g(1, \"two\", 3.5); } else { return; }", ParseContext.STATEMENT),
	('"\\x41\\n"', ParseContext.EXPRESSION),
	('"\\ud800"', ParseContext.EXPRESSION),
	("a.b.c(d)(e)", ParseContext.EXPRESSION),
	("!done", ParseContext.EXPRESSION),
]

MODES = [
	QuoterOptions(),
	QuoterOptions(use_default_formatting=False),
	QuoterOptions(remove_redundant_modifying_calls=False),
	QuoterOptions(use_default_formatting=False, remove_redundant_modifying_calls=False),
]


@pytest.mark.parametrize("options", MODES)
@pytest.mark.parametrize("text, context", SAMPLES)
def test_round_trip(text: str, context: ParseContext, options: QuoterOptions) -> None:
	node = parse_text(text, context)
	rebuilt = evaluate(quote(node, options))
	assert render_node(rebuilt, options) == render_node(node, options)
	if not options.use_default_formatting:
		assert rebuilt.to_full_string() == text


@pytest.mark.parametrize("text, context", SAMPLES)
def test_round_trip_through_printed_code(text: str, context: ParseContext) -> None:
	options = QuoterOptions(use_default_formatting=False, shorten_with_static_import=True)
	node = parse_text(text, context)
	assert evaluate_text(print_call(quote(node, options), options)).to_full_string() == text


@pytest.mark.parametrize("text, context", SAMPLES)
def test_quoting_is_deterministic(text: str, context: ParseContext) -> None:
	assert quote_text(text, context) == quote_text(text, context)
	assert quote(parse_text(text, context)) == quote(parse_text(text, context))


def test_parse_error() -> None:
	assert quote_text("struct @ {}") == PARSE_ERROR
	assert quote_text('"\\q"', ParseContext.EXPRESSION) == PARSE_ERROR
