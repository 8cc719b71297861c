# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Call-expression interpreter.

Evaluates a call-expression tree against the live factory surface without
generating and executing Python source:

- literals are read with `ast.literal_eval`;
- member references are looked up directly (`SyntaxKind.X`, trivia constants,
  `os.linesep`, `True`/`False`/`None`);
- factory calls evaluate their arguments first, then try the overloads
  registered under the call's name in declaration order and invoke the first
  one whose parameters accept the arguments (variadic packing, optional
  defaults, `int` -> `float` widening, node-or-token lists);
- `name[Type]` instantiates a generic list factory and checks the elements;
- modifier calls resolve against the runtime object itself (`with_*`,
  `normalize_whitespace`).

Any failure to resolve raises `ResolutionError` naming the call. Generated code
that cannot be evaluated is wrong by definition, so the interpreter is also the
main oracle for quoter bugs.
"""

from __future__ import annotations

import ast
import logging
import os
from typing import Any, Dict, List, Optional

from driftquote.syntax.kinds import SyntaxKind
from driftquote.syntax.nodes import SyntaxNode
from driftquote.syntax.overloads import NO_MATCH, accepts

from .callexpr import ArrayCreation, CallExpr, FactoryCall, Literal, MemberRef, ModifierCall
from .errors import ResolutionError
from .registry import FactoryRegistry

logger = logging.getLogger(__name__)

_BUILTINS = {"str": str, "int": int, "float": float, "bool": bool}
_NAMED_VALUES = {"True": True, "False": False, "None": None}


class Interpreter:
	def __init__(self, registry: Optional[FactoryRegistry] = None) -> None:
		self.registry = registry or FactoryRegistry.default()

	def evaluate(self, expr: CallExpr) -> Any:
		if isinstance(expr, Literal):
			return self._literal(expr)
		if isinstance(expr, MemberRef):
			return self._member(expr.name)
		if isinstance(expr, ArrayCreation):
			return [self.evaluate(item) for item in expr.items]
		if isinstance(expr, FactoryCall):
			result = self._call(expr)
			for modifier in expr.modifiers:
				result = self.apply_modifier(result, modifier, expr)
			return result
		raise TypeError(f"not a call expression: {type(expr).__name__}")

	# --- leaves --------------------------------------------------------------

	def _literal(self, expr: Literal) -> Any:
		try:
			value = ast.literal_eval(expr.text)
		except (ValueError, SyntaxError) as exc:
			raise ResolutionError(f"not a literal ({exc})", call=expr.text) from exc
		if not isinstance(value, (str, int, float, bool, type(None))):
			raise ResolutionError(f"unsupported literal type {type(value).__name__}", call=expr.text)
		return value

	def _member(self, name: str) -> Any:
		if name.startswith("SyntaxKind."):
			try:
				return SyntaxKind[name.split(".", 1)[1]]
			except KeyError:
				raise ResolutionError("unknown syntax kind", call=name) from None
		if name == "os.linesep":
			return os.linesep
		if name in _NAMED_VALUES:
			return _NAMED_VALUES[name]
		constant = self.registry.constant(name)
		if constant is not None:
			return constant
		raise ResolutionError("unknown name", call=name)

	# --- calls ---------------------------------------------------------------

	def _call(self, expr: FactoryCall) -> Any:
		args = [self.evaluate(a) for a in expr.arguments]
		kwargs: Dict[str, Any] = {name: self.evaluate(value) for name, value in expr.keywords}
		base = expr.base_name

		if base in _BUILTINS and expr.type_argument is None and not kwargs:
			try:
				return _BUILTINS[base](*args)
			except (TypeError, ValueError) as exc:
				raise ResolutionError(str(exc), call=expr.name) from exc

		candidates = self.registry.by_name(base)
		if not candidates:
			raise ResolutionError("unknown factory", call=expr.name)

		element_type: Optional[type] = None
		if expr.type_argument is not None:
			element_type = self.registry.node_type(expr.type_argument)
			if element_type is None:
				raise ResolutionError(f"unknown type argument {expr.type_argument}", call=expr.name)
			if not candidates[0].is_generic:
				raise ResolutionError("factory is not generic", call=expr.name)

		for desc in candidates:
			bound = desc.owner.match(desc.function, tuple(args), kwargs)
			if bound is None:
				continue
			try:
				result = desc.function(*bound.args, **bound.kwargs)
				if element_type is not None:
					desc.owner.check_elements(result, element_type)
			except (TypeError, ValueError) as exc:
				raise ResolutionError(str(exc), call=expr.name) from exc
			logger.debug("resolved %s -> %s", expr.name, desc)
			return result

		shown = ", ".join([type(a).__name__ for a in args] + [f"{k}={type(v).__name__}" for k, v in kwargs.items()])
		raise ResolutionError(f"no overload accepts ({shown})", call=expr.name)

	def apply_modifier(self, target: Any, modifier: ModifierCall, owner: FactoryCall) -> Any:
		call = f"{owner.name}(...).{modifier.name}"
		if not (modifier.name.startswith("with_") or modifier.name == "normalize_whitespace"):
			raise ResolutionError("not a modifier", call=call)
		method = getattr(target, modifier.name, None)
		if not callable(method):
			raise ResolutionError(f"{type(target).__name__} has no such method", call=call)
		args = [self.evaluate(a) for a in modifier.arguments]
		if modifier.name.startswith("with_") and isinstance(target, SyntaxNode):
			args = self._check_property(target, modifier.name[len("with_") :], args, call)
		try:
			return method(*args)
		except (TypeError, ValueError) as exc:
			raise ResolutionError(str(exc), call=call) from exc

	def _check_property(self, target: SyntaxNode, name: str, args: List[Any], call: str) -> List[Any]:
		if len(args) != 1:
			raise ResolutionError(f"expected one argument, got {len(args)}", call=call)
		annotation = self.registry.field_hints(type(target)).get(name)
		if annotation is None:
			return args
		converted = accepts(annotation, args[0])
		if converted is NO_MATCH:
			raise ResolutionError(f"{type(args[0]).__name__} is not a valid {name}", call=call)
		return [converted]


__all__ = ["Interpreter"]
