# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Overload sets for the factory surface.

A factory name such as `struct_declaration` has several call shapes (a short
one taking the name as a string, one taking the identifier token, a full one
taking every property). Python has no static overloading, so each public name
is a `FactoryFunction` holding its overloads in declaration order:

	@overloaded
	def block(*statements: Statement) -> Block: ...

	@block.register
	def _(statements: SyntaxList[Statement]) -> Block: ...

Calling the set binds the arguments against each overload in turn and invokes
the first one whose parameter annotations accept them. Generic sets (list
factories) can be specialized with an element type, `syntax_list[Statement]`,
which additionally checks the elements of the produced list.

`accepts()` is the argument-to-annotation matcher shared with the quoting
interpreter.
"""

from __future__ import annotations

import collections.abc
import inspect
import types
import typing
from typing import Any, Callable, Dict, List, Optional

_NO_MATCH = object()


def _is_sequence_origin(origin: Any) -> bool:
	return origin in (collections.abc.Sequence, list, tuple, collections.abc.Iterable)


def accepts(annotation: Any, value: Any) -> Any:
	"""
	Check `value` against a resolved annotation.

	Returns the (possibly converted) value when accepted, or `NO_MATCH`.
	Conversions are the ones a literal argument needs: an `int` widens to a
	`float` parameter and a list/tuple becomes a list for `Sequence[...]`.
	"""
	if annotation is Any or annotation is inspect.Parameter.empty:
		return value
	if isinstance(annotation, typing.TypeVar):
		bound = annotation.__bound__
		return value if bound is None or isinstance(value, bound) else _NO_MATCH
	if annotation is None or annotation is type(None):
		return value if value is None else _NO_MATCH
	origin = typing.get_origin(annotation)
	if origin is typing.Union or origin is types.UnionType:
		for member in typing.get_args(annotation):
			converted = accepts(member, value)
			if converted is not _NO_MATCH:
				return converted
		return _NO_MATCH
	if origin is not None and _is_sequence_origin(origin):
		if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
			return _NO_MATCH
		(element,) = typing.get_args(annotation) or (Any,)
		out = []
		for item in value:
			converted = accepts(element, item)
			if converted is _NO_MATCH:
				return _NO_MATCH
			out.append(converted)
		return out
	if origin is not None:
		return value if isinstance(value, origin) else _NO_MATCH
	if annotation is bool:
		return value if isinstance(value, bool) else _NO_MATCH
	if annotation is int:
		return value if isinstance(value, int) and not isinstance(value, bool) else _NO_MATCH
	if annotation is float:
		if isinstance(value, bool) or not isinstance(value, (int, float)):
			return _NO_MATCH
		return float(value)
	if isinstance(annotation, type):
		return value if isinstance(value, annotation) else _NO_MATCH
	return _NO_MATCH


NO_MATCH = _NO_MATCH


class FactoryFunction:
	"""A public factory name and its overloads, tried in declaration order."""

	def __init__(self, func: Callable[..., Any], *, generic: bool = False) -> None:
		self.__name__ = func.__name__
		self.__qualname__ = func.__qualname__
		self.__doc__ = func.__doc__
		self.__module__ = func.__module__
		self.generic = generic
		self.overloads: List[Callable[..., Any]] = [func]
		self._hints: Dict[Callable[..., Any], Dict[str, Any]] = {}

	def register(self, func: Callable[..., Any]) -> "FactoryFunction":
		self.overloads.append(func)
		return self

	def hints(self, func: Callable[..., Any]) -> Dict[str, Any]:
		hints = self._hints.get(func)
		if hints is None:
			hints = typing.get_type_hints(func)
			self._hints[func] = hints
		return hints

	def match(self, func: Callable[..., Any], args: tuple, kwargs: dict) -> Optional[inspect.BoundArguments]:
		"""Bind `args`/`kwargs` to one overload; None when arity or annotations reject them."""
		try:
			bound = inspect.signature(func).bind(*args, **kwargs)
		except TypeError:
			return None
		hints = self.hints(func)
		params = inspect.signature(func).parameters
		for name, value in list(bound.arguments.items()):
			annotation = hints.get(name, Any)
			if params[name].kind is inspect.Parameter.VAR_POSITIONAL:
				converted = []
				for item in value:
					item = accepts(annotation, item)
					if item is NO_MATCH:
						return None
					converted.append(item)
				bound.arguments[name] = tuple(converted)
				continue
			converted = accepts(annotation, value)
			if converted is NO_MATCH:
				return None
			bound.arguments[name] = converted
		return bound

	def __call__(self, *args: Any, **kwargs: Any) -> Any:
		for func in self.overloads:
			bound = self.match(func, args, kwargs)
			if bound is not None:
				return func(*bound.args, **bound.kwargs)
		shown = ", ".join([type(a).__name__ for a in args] + [f"{k}={type(v).__name__}" for k, v in kwargs.items()])
		raise TypeError(f"no overload of {self.__name__}() accepts ({shown})")

	def __getitem__(self, element_type: type) -> Callable[..., Any]:
		if not self.generic:
			raise TypeError(f"{self.__name__}() is not generic")
		return _Specialized(self, element_type)

	def check_elements(self, result: Any, element_type: type) -> Any:
		"""Validate that every node in the list `result` is an `element_type`."""
		nodes = getattr(result, "nodes", None)
		items = nodes if nodes is not None else tuple(result)
		for item in items:
			if not isinstance(item, element_type):
				raise TypeError(f"{self.__name__}[{element_type.__name__}]() got a {type(item).__name__} element")
		return result

	def __repr__(self) -> str:
		return f"<factory {self.__name__} ({len(self.overloads)} overloads)>"


class _Specialized:
	def __init__(self, function: FactoryFunction, element_type: type) -> None:
		self.function = function
		self.element_type = element_type

	def __call__(self, *args: Any, **kwargs: Any) -> Any:
		return self.function.check_elements(self.function(*args, **kwargs), self.element_type)


def overloaded(func: Optional[Callable[..., Any]] = None, *, generic: bool = False) -> Any:
	"""Decorator creating a `FactoryFunction`; `@overloaded(generic=True)` for list factories."""
	if func is None:
		return lambda f: FactoryFunction(f, generic=generic)
	return FactoryFunction(func, generic=generic)


__all__ = ["FactoryFunction", "overloaded", "accepts", "NO_MATCH"]
