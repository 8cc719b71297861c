# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tokens, trivia and the list containers of the Drift syntax model.

Everything here is immutable. A token owns the trivia around it (leading and
trailing), so concatenating `to_full_string()` of every token in a tree gives
back the exact source text the tree was parsed from.

The `make_*` helpers are the single place where token text/value pairs are
computed; both the parser and the public factory functions go through them,
which keeps a parsed token equal to the factory-built one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, Iterable, Iterator, Optional, Tuple, TypeVar, Union

from driftquote.core.span import Span

from .kinds import SyntaxKind, token_text

if TYPE_CHECKING:
	from .nodes import SyntaxNode

T = TypeVar("T")


@dataclass(frozen=True)
class SyntaxTrivia:
	"""Whitespace, comment or skipped text attached to a token."""

	kind: SyntaxKind
	text: str
	# Parsed sub-tree for structured trivia (documentation comments).
	structure: Optional["SyntaxNode"] = None

	def to_full_string(self) -> str:
		return self.text

	@property
	def is_whitespace(self) -> bool:
		return self.kind in (SyntaxKind.WHITESPACE_TRIVIA, SyntaxKind.END_OF_LINE_TRIVIA)

	@property
	def has_structure(self) -> bool:
		return self.structure is not None


@dataclass(frozen=True)
class SyntaxTriviaList:
	items: Tuple[SyntaxTrivia, ...] = ()

	def __post_init__(self) -> None:
		if not isinstance(self.items, tuple):
			object.__setattr__(self, "items", tuple(self.items))

	def __iter__(self) -> Iterator[SyntaxTrivia]:
		return iter(self.items)

	def __len__(self) -> int:
		return len(self.items)

	def __getitem__(self, index: int) -> SyntaxTrivia:
		return self.items[index]

	def to_full_string(self) -> str:
		return "".join(t.text for t in self.items)


EMPTY_TRIVIA = SyntaxTriviaList()


@dataclass(frozen=True)
class SyntaxToken:
	kind: SyntaxKind
	text: str
	value: Any = None
	leading_trivia: SyntaxTriviaList = EMPTY_TRIVIA
	trailing_trivia: SyntaxTriviaList = EMPTY_TRIVIA
	is_missing: bool = False
	span: Optional[Span] = field(default=None, compare=False, repr=False)

	@classmethod
	def none(cls) -> "SyntaxToken":
		"""The default token: stands for an absent optional token."""
		return NONE_TOKEN

	@property
	def is_none(self) -> bool:
		return self.kind is SyntaxKind.NONE

	def to_string(self) -> str:
		return self.text

	def to_full_string(self) -> str:
		return self.leading_trivia.to_full_string() + self.text + self.trailing_trivia.to_full_string()

	def with_leading_trivia(self, trivia: SyntaxTriviaList) -> "SyntaxToken":
		return SyntaxToken(self.kind, self.text, self.value, trivia, self.trailing_trivia, self.is_missing, self.span)

	def with_trailing_trivia(self, trivia: SyntaxTriviaList) -> "SyntaxToken":
		return SyntaxToken(self.kind, self.text, self.value, self.leading_trivia, trivia, self.is_missing, self.span)

	def without_trivia(self) -> "SyntaxToken":
		return SyntaxToken(self.kind, self.text, self.value, EMPTY_TRIVIA, EMPTY_TRIVIA, self.is_missing, self.span)

	def __str__(self) -> str:
		return self.to_full_string()


NONE_TOKEN = SyntaxToken(SyntaxKind.NONE, "")


@dataclass(frozen=True)
class SyntaxTokenList:
	items: Tuple[SyntaxToken, ...] = ()

	def __post_init__(self) -> None:
		if not isinstance(self.items, tuple):
			object.__setattr__(self, "items", tuple(self.items))

	def __iter__(self) -> Iterator[SyntaxToken]:
		return iter(self.items)

	def __len__(self) -> int:
		return len(self.items)

	def __getitem__(self, index: int) -> SyntaxToken:
		return self.items[index]

	def to_full_string(self) -> str:
		return "".join(t.to_full_string() for t in self.items)


@dataclass(frozen=True)
class SyntaxList(Generic[T]):
	"""An ordered list of nodes of one category."""

	items: Tuple[T, ...] = ()

	def __post_init__(self) -> None:
		if not isinstance(self.items, tuple):
			object.__setattr__(self, "items", tuple(self.items))

	def __iter__(self) -> Iterator[T]:
		return iter(self.items)

	def __len__(self) -> int:
		return len(self.items)

	def __getitem__(self, index: int) -> T:
		return self.items[index]

	def to_full_string(self) -> str:
		return "".join(n.to_full_string() for n in self.items)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class SeparatedSyntaxList(Generic[T]):
	"""
	Nodes interleaved with separator tokens: `node (separator node)*`.

	Iteration and `len()` see the nodes only; `nodes_and_tokens` keeps the
	separators in place for printing and quoting.
	"""

	nodes_and_tokens: Tuple[Union[T, SyntaxToken], ...] = ()

	def __post_init__(self) -> None:
		if not isinstance(self.nodes_and_tokens, tuple):
			object.__setattr__(self, "nodes_and_tokens", tuple(self.nodes_and_tokens))
		for index, item in enumerate(self.nodes_and_tokens):
			if (index % 2 == 1) != isinstance(item, SyntaxToken):
				raise ValueError("separated list must alternate nodes and separator tokens")

	@property
	def nodes(self) -> Tuple[T, ...]:
		return tuple(self.nodes_and_tokens[0::2])  # type: ignore[arg-type]

	@property
	def separators(self) -> Tuple[SyntaxToken, ...]:
		return tuple(self.nodes_and_tokens[1::2])  # type: ignore[arg-type]

	def __iter__(self) -> Iterator[T]:
		return iter(self.nodes)

	def __len__(self) -> int:
		return (len(self.nodes_and_tokens) + 1) // 2

	def __getitem__(self, index: int) -> T:
		return self.nodes[index]

	def to_full_string(self) -> str:
		return "".join(item.to_full_string() for item in self.nodes_and_tokens)  # type: ignore[union-attr]


# --- token construction -----------------------------------------------------

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0", "\\": "\\", '"': '"', "'": "'"}
_ESCAPE_RE = re.compile(r"\\(x[0-9A-Fa-f]{2}|u[0-9A-Fa-f]{4}|.)", re.DOTALL)
_RENDER_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r", "\0": "\\0"}


def decode_string_literal(text: str) -> str:
	"""Decode a quoted Drift string literal (`"..."`) to its value."""

	def _replace(m: re.Match) -> str:
		esc = m.group(1)
		if esc[0] in "xu" and len(esc) > 1:
			return chr(int(esc[1:], 16))
		if esc in _ESCAPES:
			return _ESCAPES[esc]
		raise ValueError(f"unknown escape sequence \\{esc}")

	return _ESCAPE_RE.sub(_replace, text[1:-1])


def render_string_literal(value: str) -> str:
	"""Canonical source text for a string value."""
	out = []
	for ch in value:
		if ch in _RENDER_ESCAPES:
			out.append(_RENDER_ESCAPES[ch])
		elif ord(ch) < 0x20 or ord(ch) == 0x7F:
			out.append(f"\\x{ord(ch):02x}")
		elif 0xD800 <= ord(ch) <= 0xDFFF:
			out.append(f"\\u{ord(ch):04x}")
		else:
			out.append(ch)
	return '"' + "".join(out) + '"'


def parse_numeric_literal(text: str) -> Union[int, float]:
	digits = text.replace("_", "")
	lowered = digits.lower()
	if lowered.startswith("0x"):
		return int(lowered[2:], 16)
	if lowered.startswith("0b"):
		return int(lowered[2:], 2)
	if "." in digits or "e" in lowered:
		return float(digits)
	return int(digits, 10)


def render_numeric_literal(value: Union[int, float]) -> str:
	return repr(value) if isinstance(value, float) else str(value)


def render_literal(value: Union[int, float, str]) -> str:
	if isinstance(value, str):
		return render_string_literal(value)
	return render_numeric_literal(value)


def literal_token_kind(value: Any) -> SyntaxKind:
	if isinstance(value, str):
		return SyntaxKind.STRING_LITERAL_TOKEN
	if isinstance(value, (int, float)) and not isinstance(value, bool):
		return SyntaxKind.NUMERIC_LITERAL_TOKEN
	raise TypeError(f"no literal token for {type(value).__name__} values")


def _trivia(trivia: Optional[Iterable[SyntaxTrivia]]) -> SyntaxTriviaList:
	if trivia is None:
		return EMPTY_TRIVIA
	if isinstance(trivia, SyntaxTriviaList):
		return trivia
	return SyntaxTriviaList(tuple(trivia))


def make_token(
	kind: SyntaxKind,
	leading: Optional[Iterable[SyntaxTrivia]] = None,
	trailing: Optional[Iterable[SyntaxTrivia]] = None,
	span: Optional[Span] = None,
) -> SyntaxToken:
	"""Token with the fixed text of `kind` (punctuation, keyword, end of file)."""
	if kind is SyntaxKind.NONE:
		return NONE_TOKEN
	text = token_text(kind)
	if text is None:
		raise ValueError(f"{kind.name} has no fixed text")
	return SyntaxToken(kind, text, text, _trivia(leading), _trivia(trailing), False, span)


def make_missing(
	kind: SyntaxKind,
	leading: Optional[Iterable[SyntaxTrivia]] = None,
	trailing: Optional[Iterable[SyntaxTrivia]] = None,
	span: Optional[Span] = None,
) -> SyntaxToken:
	return SyntaxToken(kind, "", None, _trivia(leading), _trivia(trailing), True, span)


def make_identifier(
	text: str,
	leading: Optional[Iterable[SyntaxTrivia]] = None,
	trailing: Optional[Iterable[SyntaxTrivia]] = None,
	span: Optional[Span] = None,
) -> SyntaxToken:
	return SyntaxToken(SyntaxKind.IDENTIFIER_TOKEN, text, text, _trivia(leading), _trivia(trailing), False, span)


def make_literal(
	text: str,
	value: Union[int, float, str],
	leading: Optional[Iterable[SyntaxTrivia]] = None,
	trailing: Optional[Iterable[SyntaxTrivia]] = None,
	span: Optional[Span] = None,
) -> SyntaxToken:
	return SyntaxToken(literal_token_kind(value), text, value, _trivia(leading), _trivia(trailing), False, span)


__all__ = [
	"SyntaxTrivia",
	"SyntaxTriviaList",
	"SyntaxToken",
	"SyntaxTokenList",
	"SyntaxList",
	"SeparatedSyntaxList",
	"NONE_TOKEN",
	"EMPTY_TRIVIA",
	"decode_string_literal",
	"render_string_literal",
	"parse_numeric_literal",
	"render_numeric_literal",
	"render_literal",
	"literal_token_kind",
	"make_token",
	"make_missing",
	"make_identifier",
	"make_literal",
]
