# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Errors raised by the quoting engine.

All of them are `ValueError` subclasses so hosts can treat them uniformly as
"this input could not be quoted/evaluated", while still telling mapping gaps
(`UnsupportedNodeError`, `UnsupportedModifierError`) apart from bad generated
code (`ResolutionError`, `CallTextError`).
"""

from __future__ import annotations


class UnsupportedNodeError(ValueError):
	"""No factory in the registry produces the node's runtime type."""

	def __init__(self, node_type: str) -> None:
		super().__init__(f"no factory produces {node_type}")
		self.node_type = node_type


class UnsupportedModifierError(ValueError):
	"""
	A property value is left over after binding, but the node type has no
	`with_<property>` method to set it.
	"""

	def __init__(self, node_type: str, property_name: str) -> None:
		super().__init__(f"{node_type} has no modifier with_{property_name}()")
		self.node_type = node_type
		self.property_name = property_name


class ResolutionError(ValueError):
	"""The interpreter found no overload (or no name) for a call."""

	def __init__(self, message: str, *, call: str) -> None:
		super().__init__(f"{call}: {message}")
		self.call = call


class CallTextError(ValueError):
	"""Generated call text could not be read back into a call-expression tree."""

	def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
		super().__init__(message)
		self.line = line
		self.column = column


__all__ = ["UnsupportedNodeError", "UnsupportedModifierError", "ResolutionError", "CallTextError"]
