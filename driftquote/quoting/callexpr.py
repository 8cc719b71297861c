# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Call-expression model: the intermediate form between a syntax tree and the
generated code text.

The model is a closed set of frozen dataclasses:

- `Literal`: Python source text of a str/int/float/bool/None value;
- `MemberRef`: a named constant (`SyntaxKind.SEMICOLON_TOKEN`, `SPACE`,
  `os.linesep`);
- `ArrayCreation`: a list display `[a, b, c]`;
- `FactoryCall`: a call of a factory function by name (`struct_declaration`,
  `syntax_list[Statement]`) with positional and keyword arguments and a chain
  of `ModifierCall`s applied to its result.

The printer, the interpreter and the eliminator all dispatch on these types
with `isinstance`, so anything else in a call tree is a bug.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, replace
from typing import Tuple, Union


@dataclass(frozen=True)
class Literal:
	text: str

	@classmethod
	def of(cls, value: Union[str, int, float, bool, None]) -> "Literal":
		return cls(python_literal(value))


@dataclass(frozen=True)
class MemberRef:
	name: str


@dataclass(frozen=True)
class ArrayCreation:
	items: Tuple["CallExpr", ...] = ()


@dataclass(frozen=True)
class ModifierCall:
	name: str
	arguments: Tuple["CallExpr", ...] = ()


@dataclass(frozen=True)
class FactoryCall:
	name: str
	arguments: Tuple["CallExpr", ...] = ()
	keywords: Tuple[Tuple[str, "CallExpr"], ...] = ()
	modifiers: Tuple[ModifierCall, ...] = ()

	@property
	def base_name(self) -> str:
		"""`syntax_list[Statement]` -> `syntax_list`."""
		return self.name.split("[", 1)[0]

	@property
	def type_argument(self) -> str | None:
		if "[" not in self.name:
			return None
		return self.name.split("[", 1)[1].rstrip("]")

	def with_modifiers(self, modifiers: Tuple[ModifierCall, ...]) -> "FactoryCall":
		return replace(self, modifiers=tuple(modifiers))

	def without_modifiers(self) -> "FactoryCall":
		return replace(self, modifiers=())


CallExpr = Union[Literal, MemberRef, ArrayCreation, FactoryCall]


def python_literal(value: Union[str, int, float, bool, None]) -> str:
	"""Source text for a scalar value, strings in double quotes."""
	if value is None or isinstance(value, bool):
		return repr(value)
	if isinstance(value, str):
		try:
			value.encode("utf-8")
		except UnicodeEncodeError:
			# lone surrogates only survive as \u escapes
			return json.dumps(value)
		return json.dumps(value, ensure_ascii=False)
	if isinstance(value, float) and not math.isfinite(value):
		raise ValueError(f"{value!r} has no literal form")
	if isinstance(value, (int, float)):
		return repr(value)
	raise TypeError(f"no literal form for {type(value).__name__}")


def count_modifiers(expr: CallExpr) -> int:
	"""Total number of modifier calls in a call tree."""
	if isinstance(expr, FactoryCall):
		nested = sum(count_modifiers(a) for a in expr.arguments)
		nested += sum(count_modifiers(v) for _k, v in expr.keywords)
		nested += sum(count_modifiers(a) for m in expr.modifiers for a in m.arguments)
		return len(expr.modifiers) + nested
	if isinstance(expr, ArrayCreation):
		return sum(count_modifiers(i) for i in expr.items)
	return 0


__all__ = [
	"Literal",
	"MemberRef",
	"ArrayCreation",
	"ModifierCall",
	"FactoryCall",
	"CallExpr",
	"python_literal",
	"count_modifiers",
]
