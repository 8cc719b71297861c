# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Factory registry for quoting and interpretation.

The registry is built once from the public surface of
`driftquote.syntax.factory`: every overload of every public `FactoryFunction`
becomes one `FactoryDescriptor` carrying its ordered parameter descriptors.
Descriptors are indexed two ways:

- by produced type (the overload's return annotation), used by the quoter to
  find the ways a node of a given class can be constructed;
- by public name, used by the interpreter, which dispatches on the name written
  in the call rather than on a declared return type.

The registry is immutable after construction and is passed explicitly into the
quoter, the interpreter and the eliminator. `FactoryRegistry.default()` returns
a lazily built process-wide instance.
"""

from __future__ import annotations

import inspect
import logging
import threading
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple

from driftquote.syntax import factory as _factory_module
from driftquote.syntax.nodes import SyntaxNode
from driftquote.syntax.overloads import FactoryFunction
from driftquote.syntax.tokens import SyntaxTrivia

from .errors import UnsupportedNodeError

logger = logging.getLogger(__name__)

# Convenience factories that build nodes by calling other factories. A tree
# built through them has several valid call shapes, so they are never quoted to
# and never resolved by name.
DELEGATING_FACTORIES: FrozenSet[str] = frozenset({"parse_name", "string_literal_expression", "numeric_literal_expression"})

# Trivia singletons exposed by the factory module.
TRIVIA_CONSTANTS: Tuple[str, ...] = ("SPACE", "TAB", "LINE_FEED", "CARRIAGE_RETURN_LINE_FEED", "CARRIAGE_RETURN")


@dataclass(frozen=True)
class ParameterDescriptor:
	name: str
	annotation: Any
	optional: bool = False
	variadic: bool = False
	default: Any = None

	@property
	def accepts_none(self) -> bool:
		if self.annotation is None or self.annotation is type(None):
			return True
		origin = typing.get_origin(self.annotation)
		if origin is typing.Union or origin is types.UnionType:
			return type(None) in typing.get_args(self.annotation)
		return False

	@property
	def is_node_typed(self) -> bool:
		"""True for a parameter that takes exactly a syntax node (not a list, token or optional node)."""
		return isinstance(self.annotation, type) and issubclass(self.annotation, SyntaxNode)


@dataclass(frozen=True)
class FactoryDescriptor:
	"""One overload of a public factory function."""

	name: str
	function: Callable[..., Any]
	owner: FactoryFunction
	produced_type: Any
	parameters: Tuple[ParameterDescriptor, ...]
	# Position in the registry's declaration order; the final tie-breaker.
	index: int
	is_generic: bool = False

	@property
	def has_variadic(self) -> bool:
		return any(p.variadic for p in self.parameters)

	@property
	def sole_parameter_optional(self) -> bool:
		return len(self.parameters) == 1 and self.parameters[0].optional

	def parameter(self, name: str) -> Optional[ParameterDescriptor]:
		lowered = name.lower()
		for param in self.parameters:
			if param.name.lower() == lowered:
				return param
		return None

	def __str__(self) -> str:
		shown = ", ".join(("*" if p.variadic else "") + p.name for p in self.parameters)
		return f"{self.name}({shown})"


def _describe(owner: FactoryFunction, func: Callable[..., Any], index: int) -> FactoryDescriptor:
	hints = owner.hints(func)
	params = []
	for param in inspect.signature(func).parameters.values():
		variadic = param.kind is inspect.Parameter.VAR_POSITIONAL
		optional = param.default is not inspect.Parameter.empty
		params.append(
			ParameterDescriptor(
				name=param.name,
				annotation=hints.get(param.name, Any),
				optional=optional,
				variadic=variadic,
				default=param.default if optional else None,
			)
		)
	return FactoryDescriptor(
		name=owner.__name__,
		function=func,
		owner=owner,
		produced_type=hints.get("return"),
		parameters=tuple(params),
		index=index,
		is_generic=owner.generic,
	)


class FactoryRegistry:
	"""
	Read-only index of factory overloads, node classes and trivia constants.

	Construction walks `module.__all__` in order, so descriptor order (and
	therefore every tie-break that depends on it) is stable across runs.
	"""

	_default: Optional["FactoryRegistry"] = None
	_default_lock = threading.Lock()

	def __init__(self, module: types.ModuleType = _factory_module, *, deny: FrozenSet[str] = DELEGATING_FACTORIES) -> None:
		by_type: Dict[Any, list] = {}
		by_name: Dict[str, list] = {}
		node_types: Dict[str, type] = {}
		constants: Dict[str, SyntaxTrivia] = {}
		index = 0
		for public in getattr(module, "__all__", ()):
			value = getattr(module, public)
			if isinstance(value, FactoryFunction):
				if public in deny:
					continue
				for func in value.overloads:
					desc = _describe(value, func, index)
					index += 1
					by_name.setdefault(public, []).append(desc)
					by_type.setdefault(desc.produced_type, []).append(desc)
			elif isinstance(value, type) and issubclass(value, SyntaxNode):
				node_types[public] = value
			elif public in TRIVIA_CONSTANTS and isinstance(value, SyntaxTrivia):
				constants[public] = value
		self._by_type: Dict[Any, Tuple[FactoryDescriptor, ...]] = {k: tuple(v) for k, v in by_type.items()}
		self._by_name: Dict[str, Tuple[FactoryDescriptor, ...]] = {k: tuple(v) for k, v in by_name.items()}
		self._node_types = node_types
		self._field_hints: Dict[type, Dict[str, Any]] = {cls: typing.get_type_hints(cls) for cls in node_types.values()}
		self._constants = constants
		self._constant_names: Dict[SyntaxTrivia, str] = {}
		for name, trivia in constants.items():
			self._constant_names.setdefault(trivia, name)
		logger.debug(
			"factory registry: %d names, %d overloads, %d node types, %d constants",
			len(self._by_name),
			index,
			len(node_types),
			len(constants),
		)

	@classmethod
	def default(cls) -> "FactoryRegistry":
		if cls._default is None:
			with cls._default_lock:
				if cls._default is None:
					cls._default = cls()
		return cls._default

	def for_type(self, node_type: type) -> Tuple[FactoryDescriptor, ...]:
		"""Overloads producing exactly `node_type`; raises `UnsupportedNodeError` when there are none."""
		found = self._by_type.get(node_type)
		if not found:
			raise UnsupportedNodeError(getattr(node_type, "__name__", str(node_type)))
		return found

	def by_name(self, name: str) -> Tuple[FactoryDescriptor, ...]:
		return self._by_name.get(name, ())

	def has_kind_parameter(self, node_type: type) -> bool:
		return any(d.parameter("kind") is not None for d in self._by_type.get(node_type, ()))

	def node_type(self, name: str) -> Optional[type]:
		return self._node_types.get(name)

	def field_hints(self, node_type: type) -> Dict[str, Any]:
		"""Resolved annotations of a node class; classes outside the factory module are resolved per call."""
		hints = self._field_hints.get(node_type)
		if hints is None:
			hints = typing.get_type_hints(node_type)
		return hints

	def constant(self, name: str) -> Optional[SyntaxTrivia]:
		return self._constants.get(name)

	def constant_name(self, trivia: SyntaxTrivia) -> Optional[str]:
		return self._constant_names.get(trivia)

	@property
	def names(self) -> Tuple[str, ...]:
		return tuple(self._by_name)


__all__ = [
	"FactoryRegistry",
	"FactoryDescriptor",
	"ParameterDescriptor",
	"DELEGATING_FACTORIES",
	"TRIVIA_CONSTANTS",
]
