# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Call-expression printer.

Layout rules:

- a call with no arguments, or with a single literal / member-reference
  argument, stays on one line: `factory.identifier_name("x")`;
- otherwise every argument goes on its own line, four spaces deeper than the
  call, separated by `,`;
- keyword arguments print as `name=value`;
- a non-empty list display opens with `[` on the argument line and lists one
  item per line;
- modifier calls start a new line at the depth of the call they modify:

	factory.compilation_unit()
	.with_members(
	    factory.singleton_list[factory.MemberDeclaration](
	        factory.struct_declaration("Point")))
	.normalize_whitespace()

Without `shorten_with_static_import` factory names, the type argument of a
generic list call and trivia constants are written `factory.<name>`; kind tags
(`SyntaxKind.X`), `os.linesep`, `True` / `False` / `None`, the builtin
value constructors and modifier names never are.
"""

from __future__ import annotations

from typing import List

from .callexpr import ArrayCreation, CallExpr, FactoryCall, Literal, MemberRef, ModifierCall
from .options import DEFAULT_OPTIONS, QuoterOptions
from .registry import TRIVIA_CONSTANTS

FACTORY_PREFIX = "factory."
INDENT = "    "

_UNQUALIFIED_CALLS = frozenset({"str", "int", "float", "bool"})


class CallPrinter:
	def __init__(self, options: QuoterOptions = DEFAULT_OPTIONS) -> None:
		self.options = options

	def print(self, expr: CallExpr) -> str:
		return self._expr(expr, 0)

	def _qualify(self, name: str) -> str:
		if self.options.shorten_with_static_import:
			return name
		return FACTORY_PREFIX + name

	def _call_name(self, call: FactoryCall) -> str:
		if call.base_name in _UNQUALIFIED_CALLS:
			return call.name
		name = self._qualify(call.base_name)
		if call.type_argument is not None:
			name += f"[{self._qualify(call.type_argument)}]"
		return name

	def _expr(self, expr: CallExpr, depth: int) -> str:
		if isinstance(expr, Literal):
			return expr.text
		if isinstance(expr, MemberRef):
			if expr.name in TRIVIA_CONSTANTS:
				return self._qualify(expr.name)
			return expr.name
		if isinstance(expr, ArrayCreation):
			return self._array(expr, depth)
		if isinstance(expr, FactoryCall):
			out = self._call_name(expr) + self._arguments(expr.arguments, expr.keywords, depth)
			for modifier in expr.modifiers:
				out += self._modifier(modifier, depth)
			return out
		raise TypeError(f"not a call expression: {type(expr).__name__}")

	def _array(self, expr: ArrayCreation, depth: int) -> str:
		if not expr.items:
			return "[]"
		pad = INDENT * (depth + 1)
		items = ",\n".join(pad + self._expr(item, depth + 1) for item in expr.items)
		return "[\n" + items + "\n" + INDENT * depth + "]"

	def _modifier(self, modifier: ModifierCall, depth: int) -> str:
		return "\n" + INDENT * depth + "." + modifier.name + self._arguments(modifier.arguments, (), depth)

	def _arguments(self, arguments: tuple, keywords: tuple, depth: int) -> str:
		if not arguments and not keywords:
			return "()"
		if len(arguments) == 1 and not keywords and isinstance(arguments[0], (Literal, MemberRef)):
			return "(" + self._expr(arguments[0], depth) + ")"
		pad = INDENT * (depth + 1)
		lines: List[str] = [pad + self._expr(a, depth + 1) for a in arguments]
		lines.extend(f"{pad}{name}={self._expr(value, depth + 1)}" for name, value in keywords)
		if self.options.open_parenthesis_on_new_line:
			opening = "\n" + INDENT * depth + "(\n"
		else:
			opening = "(\n"
		if self.options.closing_parenthesis_on_new_line:
			closing = "\n" + INDENT * depth + ")"
		else:
			closing = ")"
		return opening + ",\n".join(lines) + closing


__all__ = ["CallPrinter", "FACTORY_PREFIX", "INDENT"]
