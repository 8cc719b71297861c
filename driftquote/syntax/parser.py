# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Full-fidelity Drift parser.

The grammar (`grammar.lark`) is a plain lark LALR grammar that ignores
whitespace and comments. Fidelity is restored around it:

- tokens are lexed up front and fed to lark's interactive parser one by one;
- when a token is rejected, the parser tries to insert a *missing* token
  (empty text, `is_missing=True`) that lets the parse continue, and failing
  that skips the token, which then becomes `SKIPPED_TOKENS_TRIVIA`;
- trivia is rebuilt from the source text between accepted tokens: everything
  up to and including the first line break after a token is its trailing
  trivia, the rest is leading trivia of the next token.

`parse_text` returns None only when the text cannot be lexed or recovery gives
up; callers treat that as a parse error.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedToken

from driftquote.core.diagnostics import Diagnostic
from driftquote.core.span import Span

from .kinds import (
	SyntaxKind,
	binary_expression_kind,
	literal_expression_kind,
	prefix_unary_expression_kind,
	token_text,
)
from .nodes import (
	Argument,
	ArgumentList,
	AssignmentExpression,
	BinaryExpression,
	Block,
	BreakStatement,
	CompilationUnit,
	ConstDeclaration,
	ContinueStatement,
	DocumentationComment,
	ElseClause,
	EqualsValueClause,
	ExpressionStatement,
	FieldDeclaration,
	FunctionDeclaration,
	GenericName,
	IdentifierName,
	IfStatement,
	ImportAlias,
	ImportDirective,
	InvocationExpression,
	LiteralExpression,
	LocalDeclarationStatement,
	MemberAccessExpression,
	Parameter,
	ParameterList,
	ParenthesizedExpression,
	PrefixUnaryExpression,
	QualifiedName,
	ReturnClause,
	ReturnStatement,
	StructDeclaration,
	SyntaxNode,
	TypeAnnotation,
	TypeArgumentList,
	WhileStatement,
)
from .tokens import (
	NONE_TOKEN,
	SeparatedSyntaxList,
	SyntaxList,
	SyntaxToken,
	SyntaxTokenList,
	SyntaxTrivia,
	SyntaxTriviaList,
	decode_string_literal,
	make_identifier,
	make_literal,
	make_missing,
	make_token,
	parse_numeric_literal,
)

logger = logging.getLogger(__name__)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()


class ParseContext(Enum):
	"""What kind of fragment the input text is."""

	UNIT = "unit"
	MEMBER = "member"
	STATEMENT = "statement"
	EXPRESSION = "expression"


_START_RULES: Dict[ParseContext, str] = {
	ParseContext.UNIT: "compilation_unit",
	ParseContext.MEMBER: "member_context",
	ParseContext.STATEMENT: "statement_context",
	ParseContext.EXPRESSION: "expression_context",
}

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start=list(_START_RULES.values()),
	keep_all_tokens=True,
	maybe_placeholders=False,
)

# Token kinds the parser prefers to synthesize, most preferred first. Any
# other expected terminal is tried afterwards in name order.
_PREFERRED_INSERTIONS = (
	"SEMICOLON_TOKEN",
	"CLOSE_BRACE_TOKEN",
	"CLOSE_PAREN_TOKEN",
	"GREATER_THAN_TOKEN",
	"IDENTIFIER_TOKEN",
	"EQUALS_TOKEN",
	"COLON_TOKEN",
	"OPEN_BRACE_TOKEN",
	"OPEN_PAREN_TOKEN",
)
_MAX_INSERTIONS = 4
_MAX_EOF_INSERTIONS = 16

_TRIVIA_RE = re.compile(
	r"""
	(?P<eol>\r\n|\r|\n)
	|(?P<ws>[ \t\f]+)
	|(?P<doc>///[^\r\n]*)
	|(?P<line>//[^\r\n]*)
	|(?P<block>/\*.*?\*/)
	""",
	re.VERBOSE | re.DOTALL,
)


def parse_text(
	text: str,
	context: Union[ParseContext, str] = ParseContext.UNIT,
	*,
	file: Optional[str] = None,
) -> Optional[SyntaxNode]:
	"""
	Parse `text` as the given fragment kind.

	Returns the root node (a `CompilationUnit` for `ParseContext.UNIT`), or
	None when the text cannot be parsed at all. Recovered errors are recorded
	in the root's `diagnostics`.
	"""
	context = ParseContext(context)
	try:
		lexed = list(_PARSER.lex(text))
	except UnexpectedCharacters as exc:
		logger.debug("lexing failed at %s:%s: %s", exc.line, exc.column, exc)
		return None
	session = _ParseSession(text, lexed, context, file)
	try:
		return session.run()
	except ValueError as exc:
		# Malformed literal text (bad escape sequence).
		logger.debug("token conversion failed: %s", exc)
		return None


class _ParseSession:
	def __init__(self, text: str, lexed: List[Token], context: ParseContext, file: Optional[str]) -> None:
		self.text = text
		self.lexed = lexed
		self.context = context
		self.file = file
		self.fed: List[Token] = []
		self.missing: Set[int] = set()
		self.skipped: Dict[int, int] = {}
		self.diagnostics: List[Diagnostic] = []
		self.tokens: Dict[int, SyntaxToken] = {}

	def run(self) -> Optional[SyntaxNode]:
		ip = _PARSER.parse_interactive(self.text, start=_START_RULES[self.context])
		for tok in self.lexed:
			ip = self._feed(ip, tok)
		tree = self._finish(ip)
		if tree is None:
			return None
		eof_leading = self._assign_tokens()
		root = _Builder(self.tokens).build(tree)
		if self.context is ParseContext.UNIT:
			eof = make_token(SyntaxKind.END_OF_FILE_TOKEN, eof_leading, span=Span(file=self.file, start=len(self.text), end=len(self.text)))
			root = root.with_end_of_file_token(eof)  # type: ignore[attr-defined]
		if self.diagnostics:
			root = _with_diagnostics(root, self.diagnostics)
		return root

	# --- feeding -------------------------------------------------------------

	def _feed(self, ip, tok: Token):
		attempt = ip.copy(deepcopy_values=False)
		inserted: List[Token] = []
		for _ in range(_MAX_INSERTIONS + 1):
			try:
				attempt.feed_token(tok)
			except UnexpectedToken as exc:
				recovered = self._insert_missing(attempt, exc.expected, tok)
				if recovered is None:
					break
				attempt, missing = recovered
				inserted.append(missing)
				continue
			self._accept(inserted, tok)
			return attempt
		self._skip(tok)
		return ip

	def _finish(self, ip) -> Optional[Tree]:
		last = self.lexed[-1] if self.lexed else None
		eof = Token("$END", "", start_pos=len(self.text), line=getattr(last, "end_line", 1), column=getattr(last, "end_column", 1))
		attempt = ip.copy(deepcopy_values=False)
		inserted: List[Token] = []
		for _ in range(_MAX_EOF_INSERTIONS + 1):
			try:
				tree = attempt.feed_token(eof)
			except UnexpectedToken as exc:
				recovered = self._insert_missing(attempt, exc.expected, eof)
				if recovered is None:
					break
				attempt, missing = recovered
				inserted.append(missing)
				continue
			self._accept(inserted, None)
			return tree
		logger.debug("recovery gave up at end of input (%d tokens inserted)", len(inserted))
		return None

	def _insert_missing(self, attempt, expected: Iterable[str], before: Token):
		for name in _insertion_candidates(expected):
			trial = attempt.copy(deepcopy_values=False)
			missing = Token(name, "", start_pos=before.start_pos, line=before.line, column=before.column)
			try:
				trial.feed_token(missing)
			except UnexpectedToken:
				continue
			return trial, missing
		return None

	def _accept(self, inserted: List[Token], tok: Optional[Token]) -> None:
		for missing in inserted:
			self.fed.append(missing)
			self.missing.add(id(missing))
			kind = SyntaxKind[missing.type]
			shown = token_text(kind) or kind.name
			logger.debug("inserted missing %s at %s:%s", kind.name, missing.line, missing.column)
			self.diagnostics.append(
				Diagnostic(
					message=f"'{shown}' expected",
					code="missing-token",
					phase="parser",
					span=Span.from_loc(missing, self.file),
				)
			)
		if tok is not None:
			self.fed.append(tok)

	def _skip(self, tok: Token) -> None:
		logger.debug("skipped unexpected %s %r at %s:%s", tok.type, str(tok), tok.line, tok.column)
		self.skipped[tok.start_pos] = tok.end_pos
		self.diagnostics.append(
			Diagnostic(
				message=f"unexpected '{tok}'",
				code="skipped-token",
				phase="parser",
				span=Span.from_loc(tok, self.file),
			)
		)

	# --- tokens and trivia ---------------------------------------------------

	def _assign_tokens(self) -> SyntaxTriviaList:
		"""Create a SyntaxToken per fed lexer token; returns the end-of-file leading trivia."""
		real = [t for t in self.fed if id(t) not in self.missing]
		leading: Dict[int, List[SyntaxTrivia]] = {}
		trailing: Dict[int, List[SyntaxTrivia]] = {}
		eof_leading: List[SyntaxTrivia] = []
		pos = 0
		for index, tok in enumerate(real):
			gap = self._scan_trivia(pos, tok.start_pos)
			if index == 0:
				leading[id(tok)] = gap
			else:
				trail, lead = _split_trailing(gap)
				trailing[id(real[index - 1])] = trail
				leading[id(tok)] = lead
			pos = tok.end_pos
		rest = self._scan_trivia(pos, len(self.text))
		if real:
			if self.context is ParseContext.UNIT:
				trail, eof_leading = _split_trailing(rest)
				trailing[id(real[-1])] = trail
			else:
				trailing[id(real[-1])] = rest
		elif self.context is ParseContext.UNIT:
			eof_leading = rest
		elif self.fed:
			trailing[id(self.fed[-1])] = rest

		for tok in self.fed:
			lead = leading.get(id(tok))
			trail = trailing.get(id(tok))
			kind = SyntaxKind[tok.type]
			if id(tok) in self.missing:
				self.tokens[id(tok)] = make_missing(kind, lead, trail)
				continue
			span = Span.from_loc(tok, self.file)
			text = str(tok)
			if kind is SyntaxKind.IDENTIFIER_TOKEN:
				self.tokens[id(tok)] = make_identifier(text, lead, trail, span)
			elif kind is SyntaxKind.NUMERIC_LITERAL_TOKEN:
				self.tokens[id(tok)] = make_literal(text, parse_numeric_literal(text), lead, trail, span)
			elif kind is SyntaxKind.STRING_LITERAL_TOKEN:
				self.tokens[id(tok)] = make_literal(text, decode_string_literal(text), lead, trail, span)
			else:
				self.tokens[id(tok)] = make_token(kind, lead, trail, span)
		return SyntaxTriviaList(tuple(eof_leading))

	def _scan_trivia(self, start: int, end: int) -> List[SyntaxTrivia]:
		out: List[SyntaxTrivia] = []
		pos = start
		while pos < end:
			skipped_end = self.skipped.get(pos)
			if skipped_end is not None:
				out.append(SyntaxTrivia(SyntaxKind.SKIPPED_TOKENS_TRIVIA, self.text[pos:skipped_end]))
				pos = skipped_end
				continue
			m = _TRIVIA_RE.match(self.text, pos, end)
			if m is None:
				out.append(SyntaxTrivia(SyntaxKind.SKIPPED_TOKENS_TRIVIA, self.text[pos]))
				pos += 1
				continue
			piece = m.group(0)
			if m.lastgroup == "eol":
				out.append(SyntaxTrivia(SyntaxKind.END_OF_LINE_TRIVIA, piece))
			elif m.lastgroup == "ws":
				out.append(SyntaxTrivia(SyntaxKind.WHITESPACE_TRIVIA, piece))
			elif m.lastgroup == "doc":
				out.append(SyntaxTrivia(SyntaxKind.DOCUMENTATION_COMMENT_TRIVIA, piece, DocumentationComment(piece[3:])))
			elif m.lastgroup == "line":
				out.append(SyntaxTrivia(SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA, piece))
			else:
				out.append(SyntaxTrivia(SyntaxKind.MULTI_LINE_COMMENT_TRIVIA, piece))
			pos = m.end()
		return out


def _insertion_candidates(expected: Iterable[str]) -> List[str]:
	expected = {e for e in expected if e in SyntaxKind.__members__}
	ordered = [name for name in _PREFERRED_INSERTIONS if name in expected]
	ordered.extend(sorted(expected - set(ordered)))
	return ordered


def _split_trailing(pieces: List[SyntaxTrivia]) -> Tuple[List[SyntaxTrivia], List[SyntaxTrivia]]:
	for index, piece in enumerate(pieces):
		if piece.kind is SyntaxKind.END_OF_LINE_TRIVIA:
			return pieces[: index + 1], pieces[index + 1 :]
	return pieces, []


def _with_diagnostics(root: SyntaxNode, diagnostics: List[Diagnostic]) -> SyntaxNode:
	return dataclasses.replace(root, diagnostics=tuple(diagnostics))


# --- tree -> nodes ---------------------------------------------------------------

def _name(node: object) -> str:
	return str(node.data) if isinstance(node, Tree) else ""


class _Builder:
	"""Turns the lark parse tree into syntax nodes, one `_build_<rule>` per rule."""

	def __init__(self, tokens: Dict[int, SyntaxToken]) -> None:
		self.tokens = tokens

	def tok(self, node: object) -> SyntaxToken:
		if not isinstance(node, Token):
			raise TypeError(f"expected a token, got {_name(node)}")
		return self.tokens[id(node)]

	def build(self, node: object):
		if isinstance(node, Token):
			raise TypeError(f"unexpected token {node.type}")
		builder = getattr(self, f"_build_{_name(node)}", None)
		if builder is None:
			raise TypeError(f"no builder for rule {_name(node)}")
		return builder(node.children)

	def _separated(self, children: List[object]) -> SeparatedSyntaxList:
		return SeparatedSyntaxList(tuple(self.tok(c) if isinstance(c, Token) else self.build(c) for c in children))

	def _opt(self, children: List[object], rule: str):
		for child in children:
			if _name(child) == rule:
				return self.build(child)
		return None

	# contexts

	def _build_member_context(self, children):
		return self.build(children[0])

	def _build_statement_context(self, children):
		return self.build(children[0])

	def _build_expression_context(self, children):
		return self.build(children[0])

	def _build_compilation_unit(self, children):
		imports = [self.build(c) for c in children if _name(c) == "import_directive"]
		members = [self.build(c) for c in children if _name(c) != "import_directive"]
		return CompilationUnit(SyntaxList(tuple(imports)), SyntaxList(tuple(members)), NONE_TOKEN)

	def _build_import_directive(self, children):
		return ImportDirective(
			self.tok(children[0]),
			self.build(children[1]),
			self._opt(children, "import_alias"),
			self.tok(children[-1]),
		)

	def _build_import_alias(self, children):
		return ImportAlias(self.tok(children[0]), self.build(children[1]))

	# declarations

	def _build_modifiers(self, children):
		return SyntaxTokenList(tuple(self.tok(c) for c in children))

	def _build_function_declaration(self, children):
		return FunctionDeclaration(
			self.build(children[0]),
			self.tok(children[1]),
			self.tok(children[2]),
			self.build(children[3]),
			self._opt(children, "return_clause"),
			self.build(children[-1]),
		)

	def _build_parameter_list(self, children):
		return ParameterList(self.tok(children[0]), self._separated(children[1:-1]), self.tok(children[-1]))

	def _build_parameter(self, children):
		return Parameter(self.tok(children[0]), self.tok(children[1]), self.build(children[2]))

	def _build_return_clause(self, children):
		return ReturnClause(self.tok(children[0]), self.build(children[1]))

	def _build_struct_declaration(self, children):
		close = next(
			i for i, c in enumerate(children) if i > 3 and isinstance(c, Token) and c.type == "CLOSE_BRACE_TOKEN"
		)
		semicolon = self.tok(children[close + 1]) if len(children) > close + 1 else NONE_TOKEN
		return StructDeclaration(
			self.build(children[0]),
			self.tok(children[1]),
			self.tok(children[2]),
			self.tok(children[3]),
			self._separated(children[4:close]),
			self.tok(children[close]),
			semicolon,
		)

	def _build_field_declaration(self, children):
		return FieldDeclaration(self.tok(children[0]), self.tok(children[1]), self.build(children[2]))

	def _build_const_declaration(self, children):
		return ConstDeclaration(
			self.tok(children[0]),
			self.tok(children[1]),
			self.tok(children[2]),
			self.build(children[3]),
			self.tok(children[4]),
			self.build(children[5]),
			self.tok(children[6]),
		)

	# names

	def _build_identifier_name(self, children):
		return IdentifierName(self.tok(children[0]))

	def _build_generic_name(self, children):
		return GenericName(self.tok(children[0]), self.build(children[1]))

	def _build_qualified_name(self, children):
		return QualifiedName(self.build(children[0]), self.tok(children[1]), self.build(children[2]))

	def _build_type_argument_list(self, children):
		return TypeArgumentList(self.tok(children[0]), self._separated(children[1:-1]), self.tok(children[-1]))

	# statements

	def _build_block(self, children):
		statements = tuple(self.build(c) for c in children[1:-1])
		return Block(self.tok(children[0]), SyntaxList(statements), self.tok(children[-1]))

	def _build_local_declaration_statement(self, children):
		return LocalDeclarationStatement(
			self.tok(children[0].children[0]),
			self.tok(children[1]),
			self._opt(children, "type_annotation"),
			self._opt(children, "equals_value_clause"),
			self.tok(children[-1]),
		)

	def _build_type_annotation(self, children):
		return TypeAnnotation(self.tok(children[0]), self.build(children[1]))

	def _build_equals_value_clause(self, children):
		return EqualsValueClause(self.tok(children[0]), self.build(children[1]))

	def _build_return_statement(self, children):
		expression = self.build(children[1]) if len(children) == 3 else None
		return ReturnStatement(self.tok(children[0]), expression, self.tok(children[-1]))

	def _build_expression_statement(self, children):
		return ExpressionStatement(self.build(children[0]), self.tok(children[1]))

	def _build_if_statement(self, children):
		return IfStatement(
			self.tok(children[0]),
			self.build(children[1]),
			self.build(children[2]),
			self._opt(children[3:], "else_clause"),
		)

	def _build_else_clause(self, children):
		return ElseClause(self.tok(children[0]), self.build(children[1]))

	def _build_while_statement(self, children):
		return WhileStatement(self.tok(children[0]), self.build(children[1]), self.build(children[2]))

	def _build_break_statement(self, children):
		return BreakStatement(self.tok(children[0]), self.tok(children[1]))

	def _build_continue_statement(self, children):
		return ContinueStatement(self.tok(children[0]), self.tok(children[1]))

	# expressions

	def _build_assignment_expression(self, children):
		return AssignmentExpression(self.build(children[0]), self.tok(children[1]), self.build(children[2]))

	def _build_binary_expression(self, children):
		operator = self.tok(children[1])
		return BinaryExpression(
			binary_expression_kind(operator.kind),
			self.build(children[0]),
			operator,
			self.build(children[2]),
		)

	def _build_prefix_unary_expression(self, children):
		operator = self.tok(children[0])
		return PrefixUnaryExpression(prefix_unary_expression_kind(operator.kind), operator, self.build(children[1]))

	def _build_invocation_expression(self, children):
		return InvocationExpression(self.build(children[0]), self.build(children[1]))

	def _build_member_access_expression(self, children):
		return MemberAccessExpression(self.build(children[0]), self.tok(children[1]), self.build(children[2]))

	def _build_literal_expression(self, children):
		token = self.tok(children[0])
		return LiteralExpression(literal_expression_kind(token.kind), token)

	def _build_parenthesized_expression(self, children):
		return ParenthesizedExpression(self.tok(children[0]), self.build(children[1]), self.tok(children[2]))

	def _build_argument_list(self, children):
		return ArgumentList(self.tok(children[0]), self._separated(children[1:-1]), self.tok(children[-1]))

	def _build_argument(self, children):
		return Argument(self.build(children[0]))


__all__ = ["ParseContext", "parse_text"]
