# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Canonical layout for Drift syntax trees.

`normalize_whitespace` throws away every whitespace and line-break trivia of a
tree and lays the tokens out again: one statement / member / struct field per
line, blocks indented one level per `{`, single spaces around binary operators
and after keywords and commas. Comments and skipped text are kept and placed on
their own line (`//`, `///`) or inline (`/* */`).

The result depends only on the tokens and the kept trivia, never on the
source spacing.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .kinds import BINARY_OPERATORS, SyntaxKind
from .nodes import (
	ArgumentList,
	AssignmentExpression,
	BinaryExpression,
	ConstDeclaration,
	EqualsValueClause,
	ParameterList,
	PrefixUnaryExpression,
	StructDeclaration,
	SyntaxNode,
	TypeArgumentList,
)
from .tokens import SyntaxToken, SyntaxTrivia, SyntaxTriviaList

_LAYOUT_TRIVIA = (SyntaxKind.WHITESPACE_TRIVIA, SyntaxKind.END_OF_LINE_TRIVIA)
_LINE_COMMENTS = (SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA, SyntaxKind.DOCUMENTATION_COMMENT_TRIVIA)
_OPERATOR_KINDS = frozenset(BINARY_OPERATORS.values())

_NONE = ""
_SPACE = " "
_NEWLINE = "\n"


def normalize_whitespace(node: SyntaxNode, indentation: str = "\t", eol: str = "\n") -> SyntaxNode:
	"""Copy of `node` with canonical whitespace; `indentation` is repeated once per nesting level."""
	pairs = list(node.iter_tokens_with_parent())
	if not pairs:
		return node
	layout = _Layout(indentation, eol)
	leading, trailing = layout.run(pairs)
	rebuilt = iter(
		tok.with_leading_trivia(SyntaxTriviaList(tuple(lead))).with_trailing_trivia(SyntaxTriviaList(tuple(trail)))
		for (_parent, tok), lead, trail in zip(pairs, leading, trailing)
	)
	return node.map_tokens(lambda _tok: next(rebuilt))


def _kept(trivia: SyntaxTriviaList) -> List[SyntaxTrivia]:
	return [t for t in trivia if t.kind not in _LAYOUT_TRIVIA]


def _is_word(ch: str) -> bool:
	return ch.isalnum() or ch == "_"


class _Layout:
	def __init__(self, indentation: str, eol: str) -> None:
		self.indentation = indentation
		self.space = SyntaxTrivia(SyntaxKind.WHITESPACE_TRIVIA, " ")
		self.newline = SyntaxTrivia(SyntaxKind.END_OF_LINE_TRIVIA, eol)

	def indent(self, depth: int) -> List[SyntaxTrivia]:
		if depth <= 0 or not self.indentation:
			return []
		return [SyntaxTrivia(SyntaxKind.WHITESPACE_TRIVIA, self.indentation * depth)]

	def run(self, pairs: Sequence[Tuple[SyntaxNode, SyntaxToken]]) -> Tuple[List[list], List[list]]:
		leading: List[list] = [[] for _ in pairs]
		trailing: List[list] = [[] for _ in pairs]
		depth = 0
		last_text = ""
		for index, (parent, tok) in enumerate(pairs):
			if tok.kind is SyntaxKind.CLOSE_BRACE_TOKEN:
				depth = max(depth - 1, 0)
			pending = _kept(tok.leading_trivia)
			if index == 0:
				leading[index] = self.between(None, pending, tok, depth)
			else:
				prev_parent, prev = pairs[index - 1]
				pending = _kept(prev.trailing_trivia) + pending
				sep = _separator(prev, prev_parent, tok, parent)
				if sep == _NONE and last_text and tok.text and _is_word(last_text[-1]) and _is_word(tok.text[0]):
					sep = _SPACE
				trail, lead = _split_at_line_break(self.between(sep, pending, tok, depth))
				trailing[index - 1] = trail
				leading[index] = lead
			if tok.text:
				last_text = tok.text
			if tok.kind is SyntaxKind.OPEN_BRACE_TOKEN:
				depth += 1
		for comment in _kept(pairs[-1][1].trailing_trivia):
			trailing[-1].extend([self.space, comment])
		return leading, trailing

	def between(self, sep: Optional[str], pending: List[SyntaxTrivia], tok: SyntaxToken, depth: int) -> List[SyntaxTrivia]:
		"""Trivia between the previous token (None at the start) and `tok`."""
		if tok.kind is SyntaxKind.END_OF_FILE_TOKEN:
			out: List[SyntaxTrivia] = []
			for comment in pending:
				if out or sep is not None:
					out.append(self.newline)
				out.append(comment)
			return out
		if not pending:
			if sep == _NEWLINE:
				return [self.newline] + self.indent(depth)
			if sep == _SPACE:
				return [self.space]
			return []
		# Comments in front of a closing brace belong to the block body.
		comment_depth = depth + 1 if tok.kind is SyntaxKind.CLOSE_BRACE_TOKEN else depth
		if sep == _NEWLINE:
			out = [self.newline] + self.indent(comment_depth)
		elif sep is None:
			out = []
		else:
			out = [self.space]
		for index, comment in enumerate(pending):
			out.append(comment)
			last = index == len(pending) - 1
			if comment.kind in _LINE_COMMENTS:
				out.extend([self.newline] + self.indent(depth if last else comment_depth))
			elif last and sep == _NEWLINE:
				out.extend([self.newline] + self.indent(depth))
			else:
				out.append(self.space)
		return out


def _split_at_line_break(pieces: List[SyntaxTrivia]) -> Tuple[List[SyntaxTrivia], List[SyntaxTrivia]]:
	for index, piece in enumerate(pieces):
		if piece.kind is SyntaxKind.END_OF_LINE_TRIVIA:
			return pieces[: index + 1], pieces[index + 1 :]
	return pieces, []


def _separator(prev: SyntaxToken, prev_parent: SyntaxNode, tok: SyntaxToken, parent: SyntaxNode) -> str:
	p, t = prev.kind, tok.kind
	if tok.is_missing or t is SyntaxKind.END_OF_FILE_TOKEN:
		return _NONE
	if p is SyntaxKind.OPEN_BRACE_TOKEN:
		return _NONE if t is SyntaxKind.CLOSE_BRACE_TOKEN else _NEWLINE
	if t is SyntaxKind.CLOSE_BRACE_TOKEN:
		return _NEWLINE
	if p is SyntaxKind.CLOSE_BRACE_TOKEN:
		if t is SyntaxKind.ELSE_KEYWORD:
			return _SPACE
		return _NONE if t is SyntaxKind.SEMICOLON_TOKEN else _NEWLINE
	if p is SyntaxKind.SEMICOLON_TOKEN:
		return _NEWLINE
	if t in (SyntaxKind.SEMICOLON_TOKEN, SyntaxKind.COMMA_TOKEN, SyntaxKind.CLOSE_PAREN_TOKEN):
		return _NONE
	if p is SyntaxKind.COMMA_TOKEN:
		return _NEWLINE if isinstance(prev_parent, StructDeclaration) else _SPACE
	if p is SyntaxKind.OPEN_PAREN_TOKEN:
		return _NONE
	if SyntaxKind.DOT_TOKEN in (p, t):
		return _NONE
	if isinstance(parent, TypeArgumentList) and t in (SyntaxKind.LESS_THAN_TOKEN, SyntaxKind.GREATER_THAN_TOKEN):
		return _NONE
	if isinstance(prev_parent, TypeArgumentList) and p is SyntaxKind.LESS_THAN_TOKEN:
		return _NONE
	if t is SyntaxKind.OPEN_PAREN_TOKEN and isinstance(parent, (ArgumentList, ParameterList)):
		return _NONE
	if isinstance(prev_parent, PrefixUnaryExpression) and prev is prev_parent.operator_token:
		return _NONE
	if isinstance(prev_parent, BinaryExpression) and p in _OPERATOR_KINDS:
		return _SPACE
	if t is SyntaxKind.EQUALS_TOKEN and isinstance(parent, (AssignmentExpression, EqualsValueClause, ConstDeclaration)):
		return _SPACE
	if t is SyntaxKind.COLON_TOKEN:
		return _NONE
	return _SPACE


__all__ = ["normalize_whitespace"]
