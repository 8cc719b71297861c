# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Reader for printed factory-call code.

`read_call(text)` turns the printer's output (or hand-written code in the same
shape) back into the call-expression model, so generated code can be evaluated
by the interpreter without handing it to Python's `eval`. The `factory.`
qualifier is optional everywhere and dropped on the way in.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from lark import Lark, Token, Tree
from lark.exceptions import LarkError, UnexpectedInput

from .callexpr import ArrayCreation, CallExpr, FactoryCall, Literal, MemberRef, ModifierCall
from .errors import CallTextError
from .printer import FACTORY_PREFIX

_GRAMMAR_PATH = Path(__file__).with_name("callexpr.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	maybe_placeholders=False,
)

_LITERAL_NAMES = frozenset({"True", "False", "None"})


class _Keyword:
	def __init__(self, name: str, value: CallExpr) -> None:
		self.name = name
		self.value = value


def read_call(text: str) -> CallExpr:
	"""Parse printed call code into a call-expression tree; raises `CallTextError`."""
	try:
		tree = _PARSER.parse(text)
	except UnexpectedInput as err:
		raise CallTextError(str(err).splitlines()[0], line=err.line, column=err.column) from err
	except LarkError as err:
		raise CallTextError(str(err)) from err
	return _build_value(tree.children[0])


def _name(tree: Tree) -> str:
	return tree.data if isinstance(tree.data, str) else tree.data.value


def _strip(name: str) -> str:
	if name.startswith(FACTORY_PREFIX):
		return name[len(FACTORY_PREFIX) :]
	return name


def _build_value(node: Tree) -> CallExpr:
	kind = _name(node)
	if kind == "call":
		return _build_call(node)
	if kind == "array":
		return ArrayCreation(tuple(_build_value(child) for child in node.children))
	tok = node.children[0]
	if kind in ("string", "number"):
		return Literal(str(tok))
	if kind == "member":
		name = _strip(str(tok))
		if name in _LITERAL_NAMES:
			return Literal(name)
		return MemberRef(name)
	raise CallTextError(f"unexpected {kind}", line=getattr(tok, "line", None), column=getattr(tok, "column", None))


def _build_arguments(node: Tree, owner: Token) -> Tuple[Tuple[CallExpr, ...], Tuple[Tuple[str, CallExpr], ...]]:
	positional: List[CallExpr] = []
	keywords: List[Tuple[str, CallExpr]] = []
	for child in node.children:
		if _name(child) == "keyword":
			name_tok, value = child.children
			if "." in str(name_tok):
				raise CallTextError(f"bad keyword {name_tok}", line=name_tok.line, column=name_tok.column)
			keywords.append((str(name_tok), _build_value(value)))
			continue
		if keywords:
			raise CallTextError(f"positional argument after keyword in {owner}", line=owner.line, column=owner.column)
		positional.append(_build_value(child))
	return tuple(positional), tuple(keywords)


def _build_call(node: Tree) -> FactoryCall:
	name_tok: Token = node.children[0]
	name = _strip(str(name_tok))
	arguments: Tuple[CallExpr, ...] = ()
	keywords: Tuple[Tuple[str, CallExpr], ...] = ()
	modifiers: List[ModifierCall] = []
	for child in node.children[1:]:
		kind = _name(child)
		if kind == "type_argument":
			name += f"[{_strip(str(child.children[0]))}]"
		elif kind == "arguments":
			arguments, keywords = _build_arguments(child, name_tok)
		elif kind == "modifier":
			modifiers.append(_build_modifier(child))
	return FactoryCall(name, arguments, keywords, tuple(modifiers))


def _build_modifier(node: Tree) -> ModifierCall:
	name_tok: Token = node.children[0]
	arguments: Tuple[CallExpr, ...] = ()
	if len(node.children) > 1:
		arguments, keywords = _build_arguments(node.children[1], name_tok)
		if keywords:
			raise CallTextError(f"keyword argument in .{name_tok}()", line=name_tok.line, column=name_tok.column)
	return ModifierCall(str(name_tok), arguments)


__all__ = ["read_call"]
