# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Quoting configuration.

All switches are independent. `use_default_formatting` and
`remove_redundant_modifying_calls` change the generated call tree; the other
three only change how the printer lays it out.
"""

from __future__ import annotations

from dataclasses import dataclass

from driftquote.syntax.parser import ParseContext


@dataclass(frozen=True)
class QuoterOptions:
	# Drop whitespace trivia and end the root call with `.normalize_whitespace()`.
	use_default_formatting: bool = True
	# Drop `with_*` calls that do not change the rendered tree.
	remove_redundant_modifying_calls: bool = True
	# Print `struct_declaration(...)` instead of `factory.struct_declaration(...)`.
	shorten_with_static_import: bool = False
	open_parenthesis_on_new_line: bool = False
	closing_parenthesis_on_new_line: bool = False


DEFAULT_OPTIONS = QuoterOptions()


__all__ = ["QuoterOptions", "DEFAULT_OPTIONS", "ParseContext"]
