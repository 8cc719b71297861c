# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Syntax node classes of the full-fidelity Drift tree.

Every node is a frozen dataclass whose fields are its structural properties in
source order: child nodes, tokens, token/node lists and (for a few multi-kind
classes) the `kind` tag. The `diagnostics` field is metadata: keyword-only and
excluded from equality.

`@syntax_node` also generates one chainable `with_<field>(value)` modifier per
structural field (except `kind`), so a tree can be built with a short factory
call and then adjusted property by property.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Iterator, Optional, Tuple, Union

from driftquote.core.diagnostics import Diagnostic
from driftquote.core.span import Span

from .kinds import SyntaxKind
from .tokens import SeparatedSyntaxList, SyntaxList, SyntaxToken, SyntaxTokenList

# Fields that describe a node but are not part of its syntax.
METADATA_FIELDS = frozenset({"diagnostics"})


@dataclass(frozen=True)
class SyntaxNode:
	kind: ClassVar[SyntaxKind]

	diagnostics: Tuple[Diagnostic, ...] = field(default=(), kw_only=True, compare=False, repr=False)

	@classmethod
	def structural_fields(cls) -> Tuple[str, ...]:
		return tuple(f.name for f in dataclasses.fields(cls) if f.name not in METADATA_FIELDS)

	def iter_tokens(self) -> Iterator[SyntaxToken]:
		"""All tokens below this node in source order (absent `NONE` tokens excluded)."""
		for _parent, tok in self.iter_tokens_with_parent():
			yield tok

	def iter_tokens_with_parent(self) -> Iterator[Tuple["SyntaxNode", SyntaxToken]]:
		for name in self.structural_fields():
			yield from _walk_value(self, getattr(self, name))

	def map_tokens(self, fn: Callable[[SyntaxToken], SyntaxToken]) -> "SyntaxNode":
		"""Rebuild the tree, replacing each token (in `iter_tokens` order) with `fn(token)`."""
		changes = {}
		for name in self.structural_fields():
			value = getattr(self, name)
			changes[name] = _map_value(value, fn)
		return dataclasses.replace(self, **changes)

	@property
	def span(self) -> Optional[Span]:
		spans = [t.span for t in self.iter_tokens() if t.span is not None]
		if not spans:
			return None
		return spans[0].cover(spans[-1])

	@property
	def contains_diagnostics(self) -> bool:
		return bool(self.diagnostics)

	def first_token(self) -> Optional[SyntaxToken]:
		return next(self.iter_tokens(), None)

	def to_full_string(self) -> str:
		return "".join(t.to_full_string() for t in self.iter_tokens())

	def to_string(self) -> str:
		"""Text without the leading trivia of the first token and trailing trivia of the last."""
		tokens = list(self.iter_tokens())
		if not tokens:
			return ""
		if len(tokens) == 1:
			return tokens[0].text
		inner = "".join(t.to_full_string() for t in tokens[1:-1])
		first, last = tokens[0], tokens[-1]
		return first.text + first.trailing_trivia.to_full_string() + inner + last.leading_trivia.to_full_string() + last.text

	def normalize_whitespace(self, indentation: str = "\t", eol: str = "\n") -> "SyntaxNode":
		from .normalize import normalize_whitespace

		return normalize_whitespace(self, indentation=indentation, eol=eol)

	def __str__(self) -> str:
		return self.to_full_string()


def _walk_value(parent: SyntaxNode, value: Any) -> Iterator[Tuple[SyntaxNode, SyntaxToken]]:
	if isinstance(value, SyntaxToken):
		if not value.is_none:
			yield parent, value
	elif isinstance(value, SyntaxNode):
		yield from value.iter_tokens_with_parent()
	elif isinstance(value, SeparatedSyntaxList):
		for item in value.nodes_and_tokens:
			yield from _walk_value(parent, item)
	elif isinstance(value, (SyntaxList, SyntaxTokenList)):
		for item in value:
			yield from _walk_value(parent, item)


def _map_value(value: Any, fn: Callable[[SyntaxToken], SyntaxToken]) -> Any:
	if isinstance(value, SyntaxToken):
		return value if value.is_none else fn(value)
	if isinstance(value, SyntaxNode):
		return value.map_tokens(fn)
	if isinstance(value, SeparatedSyntaxList):
		return SeparatedSyntaxList(tuple(_map_value(v, fn) for v in value.nodes_and_tokens))
	if isinstance(value, SyntaxList):
		return SyntaxList(tuple(_map_value(v, fn) for v in value))
	if isinstance(value, SyntaxTokenList):
		return SyntaxTokenList(tuple(_map_value(v, fn) for v in value))
	return value


def _make_modifier(name: str) -> Callable[[Any, Any], Any]:
	def modifier(self, value):
		return dataclasses.replace(self, **{name: value})

	modifier.__name__ = f"with_{name}"
	modifier.__qualname__ = f"with_{name}"
	modifier.__doc__ = f"Copy of this node with `{name}` replaced."
	return modifier


def syntax_node(kind: Optional[SyntaxKind] = None) -> Callable[[type], type]:
	"""Class decorator: frozen dataclass + `with_<field>` modifiers (+ fixed kind tag)."""

	def wrap(cls: type) -> type:
		cls = dataclass(frozen=True)(cls)
		if kind is not None:
			cls.kind = kind  # type: ignore[attr-defined]
		for f in dataclasses.fields(cls):
			if f.name in METADATA_FIELDS or f.name == "kind":
				continue
			setattr(cls, f"with_{f.name}", _make_modifier(f.name))
		return cls

	return wrap


# --- categories ----------------------------------------------------------------

class MemberDeclaration(SyntaxNode):
	"""Top-level declaration (function, struct, const)."""


class Statement(SyntaxNode):
	pass


class Expression(SyntaxNode):
	pass


class TypeSyntax(Expression):
	pass


class NameSyntax(TypeSyntax):
	pass


# --- compilation unit ----------------------------------------------------------

@syntax_node(SyntaxKind.COMPILATION_UNIT)
class CompilationUnit(SyntaxNode):
	imports: SyntaxList[ImportDirective]
	members: SyntaxList[MemberDeclaration]
	end_of_file_token: SyntaxToken


@syntax_node(SyntaxKind.IMPORT_DIRECTIVE)
class ImportDirective(SyntaxNode):
	import_keyword: SyntaxToken
	name: NameSyntax
	alias: Optional[ImportAlias]
	semicolon_token: SyntaxToken


@syntax_node(SyntaxKind.IMPORT_ALIAS)
class ImportAlias(SyntaxNode):
	as_keyword: SyntaxToken
	name: IdentifierName


# --- declarations --------------------------------------------------------------

@syntax_node(SyntaxKind.FUNCTION_DECLARATION)
class FunctionDeclaration(MemberDeclaration):
	modifiers: SyntaxTokenList
	fn_keyword: SyntaxToken
	identifier: SyntaxToken
	parameter_list: ParameterList
	return_clause: Optional[ReturnClause]
	body: Block


@syntax_node(SyntaxKind.PARAMETER_LIST)
class ParameterList(SyntaxNode):
	open_paren_token: SyntaxToken
	parameters: SeparatedSyntaxList[Parameter]
	close_paren_token: SyntaxToken


@syntax_node(SyntaxKind.PARAMETER)
class Parameter(SyntaxNode):
	identifier: SyntaxToken
	colon_token: SyntaxToken
	type: TypeSyntax


@syntax_node(SyntaxKind.RETURN_CLAUSE)
class ReturnClause(SyntaxNode):
	returns_keyword: SyntaxToken
	type: TypeSyntax


@syntax_node(SyntaxKind.STRUCT_DECLARATION)
class StructDeclaration(MemberDeclaration):
	modifiers: SyntaxTokenList
	struct_keyword: SyntaxToken
	identifier: SyntaxToken
	open_brace_token: SyntaxToken
	fields: SeparatedSyntaxList[FieldDeclaration]
	close_brace_token: SyntaxToken
	# Optional trailing `;` (NONE when absent).
	semicolon_token: SyntaxToken


@syntax_node(SyntaxKind.FIELD_DECLARATION)
class FieldDeclaration(SyntaxNode):
	identifier: SyntaxToken
	colon_token: SyntaxToken
	type: TypeSyntax


@syntax_node(SyntaxKind.CONST_DECLARATION)
class ConstDeclaration(MemberDeclaration):
	const_keyword: SyntaxToken
	identifier: SyntaxToken
	colon_token: SyntaxToken
	type: TypeSyntax
	equals_token: SyntaxToken
	value: Expression
	semicolon_token: SyntaxToken


# --- statements ----------------------------------------------------------------

@syntax_node(SyntaxKind.BLOCK)
class Block(Statement):
	open_brace_token: SyntaxToken
	statements: SyntaxList[Statement]
	close_brace_token: SyntaxToken


@syntax_node(SyntaxKind.LOCAL_DECLARATION_STATEMENT)
class LocalDeclarationStatement(Statement):
	# `val` or `var`.
	binding_keyword: SyntaxToken
	identifier: SyntaxToken
	type_annotation: Optional[TypeAnnotation]
	initializer: EqualsValueClause
	semicolon_token: SyntaxToken


@syntax_node(SyntaxKind.TYPE_ANNOTATION)
class TypeAnnotation(SyntaxNode):
	colon_token: SyntaxToken
	type: TypeSyntax


@syntax_node(SyntaxKind.EQUALS_VALUE_CLAUSE)
class EqualsValueClause(SyntaxNode):
	equals_token: SyntaxToken
	value: Expression


@syntax_node(SyntaxKind.RETURN_STATEMENT)
class ReturnStatement(Statement):
	return_keyword: SyntaxToken
	expression: Optional[Expression]
	semicolon_token: SyntaxToken


@syntax_node(SyntaxKind.EXPRESSION_STATEMENT)
class ExpressionStatement(Statement):
	expression: Expression
	semicolon_token: SyntaxToken


@syntax_node(SyntaxKind.IF_STATEMENT)
class IfStatement(Statement):
	if_keyword: SyntaxToken
	condition: Expression
	block: Block
	else_clause: Optional[ElseClause]


@syntax_node(SyntaxKind.ELSE_CLAUSE)
class ElseClause(SyntaxNode):
	else_keyword: SyntaxToken
	# Block or a chained IfStatement.
	statement: Statement


@syntax_node(SyntaxKind.WHILE_STATEMENT)
class WhileStatement(Statement):
	while_keyword: SyntaxToken
	condition: Expression
	block: Block


@syntax_node(SyntaxKind.BREAK_STATEMENT)
class BreakStatement(Statement):
	break_keyword: SyntaxToken
	semicolon_token: SyntaxToken


@syntax_node(SyntaxKind.CONTINUE_STATEMENT)
class ContinueStatement(Statement):
	continue_keyword: SyntaxToken
	semicolon_token: SyntaxToken


# --- names and types -----------------------------------------------------------

@syntax_node(SyntaxKind.IDENTIFIER_NAME)
class IdentifierName(NameSyntax):
	identifier: SyntaxToken


@syntax_node(SyntaxKind.QUALIFIED_NAME)
class QualifiedName(NameSyntax):
	left: NameSyntax
	dot_token: SyntaxToken
	right: IdentifierName


@syntax_node(SyntaxKind.GENERIC_NAME)
class GenericName(NameSyntax):
	identifier: SyntaxToken
	type_argument_list: TypeArgumentList


@syntax_node(SyntaxKind.TYPE_ARGUMENT_LIST)
class TypeArgumentList(SyntaxNode):
	less_than_token: SyntaxToken
	arguments: SeparatedSyntaxList[TypeSyntax]
	greater_than_token: SyntaxToken


# --- expressions ---------------------------------------------------------------

@syntax_node()
class LiteralExpression(Expression):
	kind: SyntaxKind
	token: SyntaxToken


@syntax_node()
class BinaryExpression(Expression):
	kind: SyntaxKind
	left: Expression
	operator_token: SyntaxToken
	right: Expression


@syntax_node(SyntaxKind.SIMPLE_ASSIGNMENT_EXPRESSION)
class AssignmentExpression(Expression):
	left: Expression
	equals_token: SyntaxToken
	right: Expression


@syntax_node()
class PrefixUnaryExpression(Expression):
	kind: SyntaxKind
	operator_token: SyntaxToken
	operand: Expression


@syntax_node(SyntaxKind.PARENTHESIZED_EXPRESSION)
class ParenthesizedExpression(Expression):
	open_paren_token: SyntaxToken
	expression: Expression
	close_paren_token: SyntaxToken


@syntax_node(SyntaxKind.INVOCATION_EXPRESSION)
class InvocationExpression(Expression):
	expression: Expression
	argument_list: ArgumentList


@syntax_node(SyntaxKind.ARGUMENT_LIST)
class ArgumentList(SyntaxNode):
	open_paren_token: SyntaxToken
	arguments: SeparatedSyntaxList[Argument]
	close_paren_token: SyntaxToken


@syntax_node(SyntaxKind.ARGUMENT)
class Argument(SyntaxNode):
	expression: Expression


@syntax_node(SyntaxKind.SIMPLE_MEMBER_ACCESS_EXPRESSION)
class MemberAccessExpression(Expression):
	expression: Expression
	dot_token: SyntaxToken
	name: IdentifierName


# --- structured trivia ---------------------------------------------------------

@syntax_node(SyntaxKind.DOCUMENTATION_COMMENT)
class DocumentationComment(SyntaxNode):
	"""Parsed `///` comment; `content` is everything after the three slashes."""

	content: str

	def to_full_string(self) -> str:
		return "///" + self.content


NodeOrToken = Union[SyntaxNode, SyntaxToken]


__all__ = [
	"SyntaxNode",
	"NodeOrToken",
	"METADATA_FIELDS",
	"syntax_node",
	"MemberDeclaration",
	"Statement",
	"Expression",
	"TypeSyntax",
	"NameSyntax",
	"CompilationUnit",
	"ImportDirective",
	"ImportAlias",
	"FunctionDeclaration",
	"ParameterList",
	"Parameter",
	"ReturnClause",
	"StructDeclaration",
	"FieldDeclaration",
	"ConstDeclaration",
	"Block",
	"LocalDeclarationStatement",
	"TypeAnnotation",
	"EqualsValueClause",
	"ReturnStatement",
	"ExpressionStatement",
	"IfStatement",
	"ElseClause",
	"WhileStatement",
	"BreakStatement",
	"ContinueStatement",
	"IdentifierName",
	"QualifiedName",
	"GenericName",
	"TypeArgumentList",
	"LiteralExpression",
	"BinaryExpression",
	"AssignmentExpression",
	"PrefixUnaryExpression",
	"ParenthesizedExpression",
	"InvocationExpression",
	"ArgumentList",
	"Argument",
	"MemberAccessExpression",
	"DocumentationComment",
]
