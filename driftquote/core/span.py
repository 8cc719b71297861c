# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source span attached to tokens and parser diagnostics.

Spans are metadata: they never take part in syntax-tree equality, so a tree
rebuilt from factory calls compares equal to the parsed one even though only
the parsed tree knows where its tokens came from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Best-effort file/line/column range plus character offsets into the source."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None
	start: Optional[int] = None
	end: Optional[int] = None

	@classmethod
	def from_loc(cls, loc: Any, file: Optional[str] = None) -> "Span":
		"""
		Construct a Span from a lexer token or any object with location fields.

		lark tokens expose `line`/`column`/`end_line`/`end_column` and the
		`start_pos`/`end_pos` offsets; missing attributes stay None.
		"""
		if loc is None:
			return cls(file=file)
		if isinstance(loc, cls):
			return loc
		return cls(
			file=file or getattr(loc, "file", None),
			line=getattr(loc, "line", None),
			column=getattr(loc, "column", None),
			end_line=getattr(loc, "end_line", None),
			end_column=getattr(loc, "end_column", None),
			start=getattr(loc, "start_pos", None),
			end=getattr(loc, "end_pos", None),
		)

	def cover(self, other: "Span") -> "Span":
		"""Smallest span reaching from the start of `self` to the end of `other`."""
		return Span(
			file=self.file or other.file,
			line=self.line,
			column=self.column,
			end_line=other.end_line,
			end_column=other.end_column,
			start=self.start,
			end=other.end,
		)

	def __str__(self) -> str:
		line = "?" if self.line is None else str(self.line)
		column = "?" if self.column is None else str(self.column)
		return f"{line}:{column}"


__all__ = ["Span"]
