# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Redundant-call elimination.

Runs after the quoter has built the complete call tree. For every factory call
(arguments first, then the call holding them) each `with_*` modifier is kept
only when applying it changes the rendered text of what the chain built so far:

	base                -> text0
	base.with_a(x)      -> text1   (kept if text1 != text0)
	base.with_a(x).with_b(y) ...

The interpreter is the only oracle; there is no table of what a modifier
means. Text is compared after `normalize_whitespace()` under default
formatting, verbatim otherwise. Calls that are not `with_*` modifiers
(`normalize_whitespace`) are always kept.

A second pass over an eliminated tree removes nothing: every surviving
modifier was kept against exactly the prefix it still follows.
"""

from __future__ import annotations

import logging
from typing import Any, List

from driftquote.syntax.nodes import SyntaxNode

from .callexpr import ArrayCreation, CallExpr, FactoryCall, ModifierCall
from .interpreter import Interpreter
from .options import DEFAULT_OPTIONS, QuoterOptions

logger = logging.getLogger(__name__)


def render(value: Any, options: QuoterOptions = DEFAULT_OPTIONS) -> str:
	"""Text of an evaluated value as the round-trip compares it."""
	if isinstance(value, SyntaxNode):
		if options.use_default_formatting:
			return value.normalize_whitespace().to_full_string()
		return value.to_full_string()
	to_full_string = getattr(value, "to_full_string", None)
	if callable(to_full_string):
		return to_full_string()
	return repr(value)


class RedundantCallEliminator:
	def __init__(self, interpreter: Interpreter | None = None, options: QuoterOptions = DEFAULT_OPTIONS) -> None:
		self.interpreter = interpreter or Interpreter()
		self.options = options
		self.removed = 0

	def eliminate(self, expr: CallExpr) -> CallExpr:
		if isinstance(expr, ArrayCreation):
			return ArrayCreation(tuple(self.eliminate(item) for item in expr.items))
		if not isinstance(expr, FactoryCall):
			return expr
		call = FactoryCall(
			expr.name,
			tuple(self.eliminate(a) for a in expr.arguments),
			tuple((name, self.eliminate(value)) for name, value in expr.keywords),
			tuple(ModifierCall(m.name, tuple(self.eliminate(a) for a in m.arguments)) for m in expr.modifiers),
		)
		if not any(m.name.startswith("with_") for m in call.modifiers):
			return call
		return call.with_modifiers(self._trim(call))

	def _trim(self, call: FactoryCall) -> tuple:
		current = self.interpreter.evaluate(call.without_modifiers())
		text = render(current, self.options)
		kept: List[ModifierCall] = []
		for modifier in call.modifiers:
			candidate = self.interpreter.apply_modifier(current, modifier, call)
			candidate_text = render(candidate, self.options)
			if candidate_text == text and modifier.name.startswith("with_"):
				self.removed += 1
				logger.debug("dropped %s(...).%s: no change in rendered text", call.name, modifier.name)
				continue
			kept.append(modifier)
			current, text = candidate, candidate_text
		return tuple(kept)


__all__ = ["RedundantCallEliminator", "render"]
