# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tree walker: syntax tree -> call-expression tree.

For every node the quoter

1. quotes each structural property in declaration order (child node -> nested
   call, list -> list call, token -> token call, plain value -> literal) and
   drops absent ones (`None`, the NONE token, empty lists);
2. picks one factory overload for the node's class (see `_select`);
3. binds the quoted values to the overload's parameters by name;
4. turns every value the overload did not take into a trailing
   `with_<property>(value)` modifier call.

The result is deliberately verbose: every default token shows up as a modifier
call. `RedundantCallEliminator` trims the chain afterwards.
"""

from __future__ import annotations

import logging
import math
import typing
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from driftquote.syntax.kinds import SyntaxKind
from driftquote.syntax.nodes import LiteralExpression, SyntaxNode
from driftquote.syntax.tokens import (
	SeparatedSyntaxList,
	SyntaxList,
	SyntaxToken,
	SyntaxTokenList,
	SyntaxTrivia,
	SyntaxTriviaList,
	render_literal,
)

from .callexpr import ArrayCreation, CallExpr, FactoryCall, Literal, MemberRef, ModifierCall
from .errors import UnsupportedModifierError, UnsupportedNodeError
from .options import DEFAULT_OPTIONS, QuoterOptions
from .registry import FactoryDescriptor, FactoryRegistry, ParameterDescriptor

logger = logging.getLogger(__name__)

# Node members that describe a node without being part of its shape.
NON_STRUCTURAL = frozenset({"kind", "span", "full_span", "diagnostics", "parent", "is_missing", "contains_diagnostics"})

# Node classes whose short overload takes the name as a plain string.
_PREFER_STRING = frozenset(
	{
		"IdentifierName",
		"GenericName",
		"StructDeclaration",
		"FunctionDeclaration",
		"FieldDeclaration",
		"Parameter",
		"ConstDeclaration",
		"LocalDeclarationStatement",
		"ImportAlias",
	}
)

_KEYWORD_LITERALS = (SyntaxKind.TRUE_LITERAL_EXPRESSION, SyntaxKind.FALSE_LITERAL_EXPRESSION)
_LITERAL_TOKENS = (SyntaxKind.NUMERIC_LITERAL_TOKEN, SyntaxKind.STRING_LITERAL_TOKEN)

_VALUE_PLACEHOLDERS = {str: "str", int: "int", float: "float", bool: "bool"}


@dataclass(frozen=True)
class QuotedValue:
	"""A quoted property value waiting to be bound to a parameter or a modifier."""

	name: str
	expr: CallExpr


def _element_type_name(annotation: Any) -> str:
	"""`SyntaxList[Statement]` -> "Statement" (unwrapping Optional)."""
	origin = typing.get_origin(annotation)
	args = typing.get_args(annotation)
	if origin is typing.Union:
		for member in args:
			if member is not type(None):
				return _element_type_name(member)
	if args and isinstance(args[0], type):
		return args[0].__name__
	return "SyntaxNode"


def string_argument(expr: CallExpr) -> Optional[Literal]:
	"""
	The plain string a value can be written as, if any.

	A string literal is itself; `identifier("x")` and `identifier_name("x")`
	without trivia or modifiers unwrap to `"x"`.
	"""
	if isinstance(expr, Literal):
		return expr if expr.text[:1] in ("'", '"') else None
	if (
		isinstance(expr, FactoryCall)
		and expr.name in ("identifier", "identifier_name")
		and len(expr.arguments) == 1
		and not expr.keywords
		and not expr.modifiers
		and isinstance(expr.arguments[0], Literal)
	):
		return expr.arguments[0]
	return None


def _flatten_list_call(expr: CallExpr) -> Optional[List[CallExpr]]:
	"""`syntax_list[T]([a, b])` -> [a, b]; `singleton_list[T](a)` -> [a]; None for anything else."""
	if not isinstance(expr, FactoryCall) or expr.keywords or expr.modifiers:
		return None
	if expr.base_name == "singleton_list" and len(expr.arguments) == 1:
		return [expr.arguments[0]]
	if expr.base_name == "syntax_list" and len(expr.arguments) == 1 and isinstance(expr.arguments[0], ArrayCreation):
		return list(expr.arguments[0].items)
	return None


class Quoter:
	"""Quotes nodes against one registry under one set of options."""

	def __init__(self, registry: Optional[FactoryRegistry] = None, options: QuoterOptions = DEFAULT_OPTIONS) -> None:
		self.registry = registry or FactoryRegistry.default()
		self.options = options

	def quote(self, node: SyntaxNode) -> FactoryCall:
		"""Quote a root node; under default formatting the call ends in `.normalize_whitespace()`."""
		call = self.quote_node(node)
		if self.options.use_default_formatting:
			call = call.with_modifiers(call.modifiers + (ModifierCall("normalize_whitespace"),))
		return call

	# --- nodes ---------------------------------------------------------------

	def quote_node(self, node: SyntaxNode) -> FactoryCall:
		if not isinstance(node, SyntaxNode):
			raise UnsupportedNodeError(type(node).__name__)
		cls = type(node)
		descriptors = self.registry.for_type(cls)
		values = self._property_values(node)
		chosen = self._select(node, descriptors, values)
		logger.debug("%s: %s (of %d overloads)", cls.__name__, chosen, len(descriptors))
		return self._bind(node, chosen, values)

	def _property_values(self, node: SyntaxNode) -> List[QuotedValue]:
		cls = type(node)
		hints = self.registry.field_hints(cls)
		values: List[QuotedValue] = []
		if self.registry.has_kind_parameter(cls):
			values.append(QuotedValue("kind", MemberRef(f"SyntaxKind.{node.kind.name}")))
		for name in node.structural_fields():
			if name in NON_STRUCTURAL:
				continue
			expr = self.quote_value(getattr(node, name), hints.get(name))
			if expr is not None:
				values.append(QuotedValue(name, expr))
		return values

	def quote_value(self, value: Any, annotation: Any = None) -> Optional[CallExpr]:
		"""Quote one property value; None when the value is absent."""
		if value is None:
			return None
		if isinstance(value, SyntaxToken):
			return self.quote_token(value)
		if isinstance(value, SyntaxNode):
			return self.quote_node(value)
		if isinstance(value, SeparatedSyntaxList):
			return self._quote_separated_list(value, _element_type_name(annotation))
		if isinstance(value, SyntaxList):
			return self._quote_syntax_list(value, _element_type_name(annotation))
		if isinstance(value, SyntaxTokenList):
			return self._quote_token_list(value)
		if isinstance(value, SyntaxTriviaList):
			return self.quote_trivia_list(value)
		if isinstance(value, SyntaxKind):
			return MemberRef(f"SyntaxKind.{value.name}")
		if isinstance(value, (str, bool, int, float)):
			return _value_expr(value)
		raise UnsupportedNodeError(type(value).__name__)

	# --- overload selection --------------------------------------------------

	def _select(self, node: SyntaxNode, descriptors: Sequence[FactoryDescriptor], values: List[QuotedValue]) -> FactoryDescriptor:
		if len(descriptors) == 1:
			return descriptors[0]
		by_name = {v.name.lower(): v.expr for v in values}
		candidates = [d for d in descriptors if self._strings_bindable(d, by_name)]
		if not candidates:
			candidates = list(descriptors)

		if type(node).__name__ in _PREFER_STRING:
			string_first = [d for d in candidates if d.parameters and d.parameters[0].annotation is str]
			if string_first:
				candidates = string_first

		if isinstance(node, LiteralExpression) and node.kind not in _KEYWORD_LITERALS:
			two = [d for d in candidates if len(d.parameters) == 2]
			if two:
				candidates = two

		complete = [d for d in candidates if not self._missing_node(d, by_name)]
		if complete:
			candidates = complete

		candidates.sort(key=lambda d: (len(d.parameters), not d.has_variadic, not d.sole_parameter_optional, d.index))
		return candidates[0]

	@staticmethod
	def _strings_bindable(desc: FactoryDescriptor, by_name: Dict[str, CallExpr]) -> bool:
		"""A `str` parameter is usable only when its property can be written as a plain string."""
		for param in desc.parameters:
			if param.annotation is not str:
				continue
			expr = by_name.get(param.name.lower())
			if expr is None or string_argument(expr) is None:
				return False
		return True

	@staticmethod
	def _missing_node(desc: FactoryDescriptor, by_name: Dict[str, CallExpr]) -> bool:
		return any(
			not p.optional and not p.variadic and p.is_node_typed and p.name.lower() not in by_name
			for p in desc.parameters
		)

	# --- binding -------------------------------------------------------------

	def _bind(self, node: SyntaxNode, desc: FactoryDescriptor, values: List[QuotedValue]) -> FactoryCall:
		pool: "OrderedDict[str, QuotedValue]" = OrderedDict((v.name.lower(), v) for v in values)
		arguments: List[CallExpr] = []
		keywords: List[Tuple[str, CallExpr]] = []
		by_keyword = False

		for param in desc.parameters:
			quoted = pool.get(param.name.lower())
			if param.variadic:
				if quoted is None:
					continue
				items = _flatten_list_call(quoted.expr)
				if items is None or len(desc.parameters) != 1:
					# Left for a `with_*` call.
					continue
				del pool[param.name.lower()]
				arguments.extend(items)
				continue
			if quoted is None:
				if param.optional:
					by_keyword = True
					continue
				expr = self._placeholder(param)
			else:
				del pool[param.name.lower()]
				expr = quoted.expr
				if param.annotation is str:
					expr = string_argument(expr) or expr
			if by_keyword:
				keywords.append((param.name, expr))
			else:
				arguments.append(expr)

		modifiers = []
		for quoted in pool.values():
			method = f"with_{quoted.name}"
			if not callable(getattr(type(node), method, None)):
				raise UnsupportedModifierError(type(node).__name__, quoted.name)
			modifiers.append(ModifierCall(method, (quoted.expr,)))
		return FactoryCall(desc.name, tuple(arguments), tuple(keywords), tuple(modifiers))

	def _placeholder(self, param: ParameterDescriptor) -> CallExpr:
		annotation = param.annotation
		if param.accepts_none:
			return Literal("None")
		if annotation in _VALUE_PLACEHOLDERS:
			return FactoryCall(_VALUE_PLACEHOLDERS[annotation])
		if annotation is SyntaxKind:
			return MemberRef("SyntaxKind.NONE")
		if annotation is SyntaxToken:
			return FactoryCall("token", (MemberRef("SyntaxKind.NONE"),))
		if annotation is SyntaxTokenList:
			return FactoryCall("token_list")
		if annotation is SyntaxTriviaList:
			return FactoryCall("trivia_list")
		origin = typing.get_origin(annotation)
		if origin is SyntaxList:
			return FactoryCall(f"syntax_list[{_element_type_name(annotation)}]")
		if origin is SeparatedSyntaxList:
			return FactoryCall(f"separated_list[{_element_type_name(annotation)}]")
		return Literal("None")

	# --- lists ---------------------------------------------------------------

	def _quote_syntax_list(self, value: SyntaxList, element: str) -> Optional[CallExpr]:
		items = [self.quote_node(n) for n in value]
		if not items:
			return None
		if len(items) == 1:
			return FactoryCall(f"singleton_list[{element}]", (items[0],))
		return FactoryCall(f"syntax_list[{element}]", (ArrayCreation(tuple(items)),))

	def _quote_separated_list(self, value: SeparatedSyntaxList, element: str) -> Optional[CallExpr]:
		items: List[CallExpr] = []
		for item in value.nodes_and_tokens:
			if isinstance(item, SyntaxToken):
				items.append(self.quote_token(item) or FactoryCall("token", (MemberRef("SyntaxKind.NONE"),)))
			else:
				items.append(self.quote_node(item))
		if not items:
			return None
		if len(items) == 1:
			return FactoryCall(f"singleton_separated_list[{element}]", (items[0],))
		return FactoryCall(f"separated_list[{element}]", (ArrayCreation(tuple(items)),))

	def _quote_token_list(self, value: SyntaxTokenList) -> Optional[CallExpr]:
		items = [q for q in (self.quote_token(t) for t in value) if q is not None]
		if not items:
			return None
		if len(items) == 1:
			return FactoryCall("token_list", (items[0],))
		return FactoryCall("token_list", (ArrayCreation(tuple(items)),))

	# --- tokens and trivia ---------------------------------------------------

	def quote_token(self, tok: SyntaxToken) -> Optional[CallExpr]:
		if tok.is_none:
			return None
		kind = MemberRef(f"SyntaxKind.{tok.kind.name}")
		leading = self.quote_trivia_list(tok.leading_trivia)
		trailing = self.quote_trivia_list(tok.trailing_trivia)
		with_trivia = leading is not None or trailing is not None
		if with_trivia:
			leading = leading or FactoryCall("trivia_list")
			trailing = trailing or FactoryCall("trivia_list")

		if tok.is_missing:
			if with_trivia:
				return FactoryCall("missing_token", (leading, kind, trailing))
			return FactoryCall("missing_token", (kind,))
		if tok.kind is SyntaxKind.IDENTIFIER_TOKEN:
			text = Literal.of(tok.text)
			if with_trivia:
				return FactoryCall("identifier", (leading, text, trailing))
			return FactoryCall("identifier", (text,))
		if tok.kind in _LITERAL_TOKENS:
			value = _value_expr(tok.value)
			if with_trivia:
				return FactoryCall("literal", (leading, Literal.of(tok.text), value, trailing))
			if render_literal(tok.value) == tok.text:
				return FactoryCall("literal", (value,))
			return FactoryCall("literal", (Literal.of(tok.text), value))
		if with_trivia:
			return FactoryCall("token", (leading, kind, trailing))
		return FactoryCall("token", (kind,))

	def quote_trivia_list(self, trivia: SyntaxTriviaList) -> Optional[CallExpr]:
		items = [q for q in (self.quote_trivia(t) for t in trivia) if q is not None]
		if not items:
			return None
		if len(items) == 1:
			return FactoryCall("trivia_list", (items[0],))
		return FactoryCall("trivia_list", (ArrayCreation(tuple(items)),))

	def quote_trivia(self, trivia: SyntaxTrivia) -> Optional[CallExpr]:
		if self.options.use_default_formatting and trivia.is_whitespace:
			return None
		constant = self.registry.constant_name(trivia)
		if constant is not None:
			return MemberRef(constant)
		kind = trivia.kind
		if trivia.structure is not None:
			return FactoryCall("trivia", (self.quote_node(trivia.structure),))
		if kind is SyntaxKind.WHITESPACE_TRIVIA:
			return FactoryCall("whitespace", (Literal.of(trivia.text),))
		if kind is SyntaxKind.END_OF_LINE_TRIVIA:
			return FactoryCall("end_of_line", (Literal.of(trivia.text),))
		if kind in (SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA, SyntaxKind.MULTI_LINE_COMMENT_TRIVIA):
			return FactoryCall("comment", (Literal.of(trivia.text),))
		if kind is SyntaxKind.SKIPPED_TOKENS_TRIVIA:
			return FactoryCall("skipped_tokens", (Literal.of(trivia.text),))
		raise UnsupportedNodeError(f"{kind.name} trivia")


def _value_expr(value: Any) -> CallExpr:
	if isinstance(value, float) and not math.isfinite(value):
		return FactoryCall("float", (Literal.of(repr(value)),))
	return Literal.of(value)


__all__ = ["Quoter", "QuotedValue", "NON_STRUCTURAL", "string_argument"]
