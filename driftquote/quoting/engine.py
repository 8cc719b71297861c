# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Entry points of the quoting engine.

	quote(node, options)           -> FactoryCall
	quote_text(text, context, ...) -> str ("Parse error" when nothing parses)
	evaluate(expr)                 -> rebuilt tree
	evaluate_text(code)            -> rebuilt tree from printed code
	print_call(expr, options)      -> str

All functions take an optional registry; without one the lazily built default
registry is shared.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from driftquote.syntax.nodes import SyntaxNode
from driftquote.syntax.parser import ParseContext, parse_text

from .callexpr import CallExpr, FactoryCall
from .eliminator import RedundantCallEliminator, render
from .interpreter import Interpreter
from .options import DEFAULT_OPTIONS, QuoterOptions
from .printer import CallPrinter
from .quoter import Quoter
from .reader import read_call
from .registry import FactoryRegistry

logger = logging.getLogger(__name__)

PARSE_ERROR = "Parse error"


def quote(node: SyntaxNode, options: QuoterOptions = DEFAULT_OPTIONS, *, registry: Optional[FactoryRegistry] = None) -> FactoryCall:
	registry = registry or FactoryRegistry.default()
	call = Quoter(registry, options).quote(node)
	if options.remove_redundant_modifying_calls:
		eliminator = RedundantCallEliminator(Interpreter(registry), options)
		call = eliminator.eliminate(call)
		logger.debug("%s: %d redundant modifier calls removed", call.name, eliminator.removed)
	return call


def quote_text(
	text: str,
	context: ParseContext = ParseContext.UNIT,
	options: QuoterOptions = DEFAULT_OPTIONS,
	*,
	registry: Optional[FactoryRegistry] = None,
) -> str:
	"""Parse, quote and print; `PARSE_ERROR` when the parser yields no tree."""
	node = parse_text(text, context)
	if node is None:
		return PARSE_ERROR
	return print_call(quote(node, options, registry=registry), options)


def evaluate(expr: CallExpr, *, registry: Optional[FactoryRegistry] = None) -> Any:
	return Interpreter(registry).evaluate(expr)


def evaluate_text(code: str, *, registry: Optional[FactoryRegistry] = None) -> Any:
	return evaluate(read_call(code), registry=registry)


def print_call(expr: CallExpr, options: QuoterOptions = DEFAULT_OPTIONS) -> str:
	return CallPrinter(options).print(expr)


def render_node(node: Any, options: QuoterOptions = DEFAULT_OPTIONS) -> str:
	"""Text a round trip compares: normalized under default formatting, verbatim otherwise."""
	return render(node, options)


__all__ = [
	"PARSE_ERROR",
	"quote",
	"quote_text",
	"evaluate",
	"evaluate_text",
	"print_call",
	"render_node",
]
