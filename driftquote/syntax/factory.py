# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Public construction API for Drift syntax trees.

Every public name here is an overload set (`FactoryFunction`). The short
overloads fill in the fixed tokens (`{`, `;`, keywords) and leave optional
parts absent; the full overloads take every structural property. Generated
quoter output calls exactly these functions:

	from driftquote.syntax import factory
	from driftquote.syntax.kinds import SyntaxKind

	factory.compilation_unit().with_members(
		factory.singleton_list[factory.MemberDeclaration](
			factory.struct_declaration("Point"))).normalize_whitespace()

Optional absent parts use empty lists, `None` nodes or the NONE token as
defaults, never a present default, so a short overload plus `with_*` calls
can rebuild any tree.
"""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar, Union

from .kinds import (
	BINARY_OPERATORS,
	LITERAL_TOKENS,
	PREFIX_UNARY_OPERATORS,
	SyntaxKind,
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
	Expression,
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
	MemberDeclaration,
	NameSyntax,
	Parameter,
	ParameterList,
	ParenthesizedExpression,
	PrefixUnaryExpression,
	QualifiedName,
	ReturnClause,
	ReturnStatement,
	Statement,
	StructDeclaration,
	SyntaxNode,
	TypeAnnotation,
	TypeArgumentList,
	TypeSyntax,
	WhileStatement,
)
from .overloads import overloaded
from .tokens import (
	NONE_TOKEN,
	SeparatedSyntaxList,
	SyntaxList,
	SyntaxToken,
	SyntaxTokenList,
	SyntaxTrivia,
	SyntaxTriviaList,
	make_identifier,
	make_literal,
	make_missing,
	make_token,
	render_literal,
)

T = TypeVar("T", bound=SyntaxNode)


# --- trivia ---------------------------------------------------------------------

@overloaded
def whitespace(text: str) -> SyntaxTrivia:
	return SyntaxTrivia(SyntaxKind.WHITESPACE_TRIVIA, text)


@overloaded
def end_of_line(text: str) -> SyntaxTrivia:
	return SyntaxTrivia(SyntaxKind.END_OF_LINE_TRIVIA, text)


@overloaded
def comment(text: str) -> SyntaxTrivia:
	"""`// ...` or `/* ... */` comment trivia; the kind follows the opening characters."""
	if text.startswith("/*"):
		return SyntaxTrivia(SyntaxKind.MULTI_LINE_COMMENT_TRIVIA, text)
	if text.startswith("//"):
		return SyntaxTrivia(SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA, text)
	raise ValueError(f"not a comment: {text!r}")


@overloaded
def skipped_tokens(text: str) -> SyntaxTrivia:
	return SyntaxTrivia(SyntaxKind.SKIPPED_TOKENS_TRIVIA, text)


@overloaded
def documentation_comment(content: str) -> DocumentationComment:
	return DocumentationComment(content)


@overloaded
def trivia(structure: DocumentationComment) -> SyntaxTrivia:
	return SyntaxTrivia(SyntaxKind.DOCUMENTATION_COMMENT_TRIVIA, structure.to_full_string(), structure)


SPACE = whitespace(" ")
TAB = whitespace("\t")
LINE_FEED = end_of_line("\n")
CARRIAGE_RETURN_LINE_FEED = end_of_line("\r\n")
CARRIAGE_RETURN = end_of_line("\r")


@overloaded
def trivia_list() -> SyntaxTriviaList:
	return SyntaxTriviaList()


@trivia_list.register
def _(trivia: SyntaxTrivia) -> SyntaxTriviaList:
	return SyntaxTriviaList((trivia,))


@trivia_list.register
def _(*trivia: SyntaxTrivia) -> SyntaxTriviaList:
	return SyntaxTriviaList(tuple(trivia))


@trivia_list.register
def _(trivia: Sequence[SyntaxTrivia]) -> SyntaxTriviaList:
	return SyntaxTriviaList(tuple(trivia))


# --- tokens ---------------------------------------------------------------------

@overloaded
def token(kind: SyntaxKind) -> SyntaxToken:
	return make_token(kind)


@token.register
def _(leading: SyntaxTriviaList, kind: SyntaxKind, trailing: SyntaxTriviaList) -> SyntaxToken:
	return make_token(kind, leading, trailing)


@overloaded
def missing_token(kind: SyntaxKind) -> SyntaxToken:
	return make_missing(kind)


@missing_token.register
def _(leading: SyntaxTriviaList, kind: SyntaxKind, trailing: SyntaxTriviaList) -> SyntaxToken:
	return make_missing(kind, leading, trailing)


@overloaded
def identifier(text: str) -> SyntaxToken:
	return make_identifier(text)


@identifier.register
def _(leading: SyntaxTriviaList, text: str, trailing: SyntaxTriviaList) -> SyntaxToken:
	return make_identifier(text, leading, trailing)


@overloaded
def literal(value: int) -> SyntaxToken:
	"""Numeric/string literal token; without `text` the canonical rendering of `value` is used."""
	return make_literal(render_literal(value), value)


@literal.register
def _(value: float) -> SyntaxToken:
	return make_literal(render_literal(value), value)


@literal.register
def _(value: str) -> SyntaxToken:
	return make_literal(render_literal(value), value)


@literal.register
def _(text: str, value: int) -> SyntaxToken:
	return make_literal(text, value)


@literal.register
def _(text: str, value: float) -> SyntaxToken:
	return make_literal(text, value)


@literal.register
def _(text: str, value: str) -> SyntaxToken:
	return make_literal(text, value)


@literal.register
def _(leading: SyntaxTriviaList, text: str, value: int, trailing: SyntaxTriviaList) -> SyntaxToken:
	return make_literal(text, value, leading, trailing)


@literal.register
def _(leading: SyntaxTriviaList, text: str, value: float, trailing: SyntaxTriviaList) -> SyntaxToken:
	return make_literal(text, value, leading, trailing)


@literal.register
def _(leading: SyntaxTriviaList, text: str, value: str, trailing: SyntaxTriviaList) -> SyntaxToken:
	return make_literal(text, value, leading, trailing)


@overloaded
def token_list() -> SyntaxTokenList:
	return SyntaxTokenList()


@token_list.register
def _(token: SyntaxToken) -> SyntaxTokenList:
	return SyntaxTokenList((token,))


@token_list.register
def _(tokens: Sequence[SyntaxToken]) -> SyntaxTokenList:
	return SyntaxTokenList(tuple(tokens))


# --- node lists -----------------------------------------------------------------

@overloaded(generic=True)
def syntax_list() -> SyntaxList:
	return SyntaxList()


@syntax_list.register
def _(nodes: Sequence[T]) -> SyntaxList:
	return SyntaxList(tuple(nodes))


@overloaded(generic=True)
def singleton_list(node: T) -> SyntaxList:
	return SyntaxList((node,))


@overloaded(generic=True)
def separated_list() -> SeparatedSyntaxList:
	return SeparatedSyntaxList()


@separated_list.register
def _(nodes: Sequence[T]) -> SeparatedSyntaxList:
	"""Separated list with a plain `,` between the nodes."""
	items: list = []
	for index, node in enumerate(nodes):
		if index:
			items.append(make_token(SyntaxKind.COMMA_TOKEN))
		items.append(node)
	return SeparatedSyntaxList(tuple(items))


@separated_list.register
def _(nodes_and_tokens: Sequence[Union[SyntaxNode, SyntaxToken]]) -> SeparatedSyntaxList:
	return SeparatedSyntaxList(tuple(nodes_and_tokens))


@overloaded(generic=True)
def singleton_separated_list(node: T) -> SeparatedSyntaxList:
	return SeparatedSyntaxList((node,))


_EMPTY_LIST: SyntaxList = SyntaxList()
_EMPTY_SEPARATED: SeparatedSyntaxList = SeparatedSyntaxList()
_EMPTY_TOKENS = SyntaxTokenList()


# --- compilation unit -----------------------------------------------------------

@overloaded
def compilation_unit() -> CompilationUnit:
	return CompilationUnit(_EMPTY_LIST, _EMPTY_LIST, make_token(SyntaxKind.END_OF_FILE_TOKEN))


@compilation_unit.register
def _(
	imports: SyntaxList[ImportDirective],
	members: SyntaxList[MemberDeclaration],
	end_of_file_token: SyntaxToken,
) -> CompilationUnit:
	return CompilationUnit(imports, members, end_of_file_token)


@overloaded
def import_directive(name: NameSyntax) -> ImportDirective:
	return ImportDirective(make_token(SyntaxKind.IMPORT_KEYWORD), name, None, make_token(SyntaxKind.SEMICOLON_TOKEN))


@import_directive.register
def _(name: NameSyntax, alias: ImportAlias) -> ImportDirective:
	return ImportDirective(make_token(SyntaxKind.IMPORT_KEYWORD), name, alias, make_token(SyntaxKind.SEMICOLON_TOKEN))


@import_directive.register
def _(
	import_keyword: SyntaxToken,
	name: NameSyntax,
	alias: Optional[ImportAlias],
	semicolon_token: SyntaxToken,
) -> ImportDirective:
	return ImportDirective(import_keyword, name, alias, semicolon_token)


@overloaded
def import_alias(name: str) -> ImportAlias:
	return ImportAlias(make_token(SyntaxKind.AS_KEYWORD), IdentifierName(make_identifier(name)))


@import_alias.register
def _(name: IdentifierName) -> ImportAlias:
	return ImportAlias(make_token(SyntaxKind.AS_KEYWORD), name)


@import_alias.register
def _(as_keyword: SyntaxToken, name: IdentifierName) -> ImportAlias:
	return ImportAlias(as_keyword, name)


# --- declarations ---------------------------------------------------------------

def _empty_block() -> Block:
	return Block(make_token(SyntaxKind.OPEN_BRACE_TOKEN), _EMPTY_LIST, make_token(SyntaxKind.CLOSE_BRACE_TOKEN))


def _empty_parameter_list() -> ParameterList:
	return ParameterList(make_token(SyntaxKind.OPEN_PAREN_TOKEN), _EMPTY_SEPARATED, make_token(SyntaxKind.CLOSE_PAREN_TOKEN))


@overloaded
def function_declaration(identifier: str) -> FunctionDeclaration:
	return function_declaration(make_identifier(identifier))


@function_declaration.register
def _(identifier: SyntaxToken) -> FunctionDeclaration:
	return FunctionDeclaration(
		_EMPTY_TOKENS,
		make_token(SyntaxKind.FN_KEYWORD),
		identifier,
		_empty_parameter_list(),
		None,
		_empty_block(),
	)


@function_declaration.register
def _(
	modifiers: SyntaxTokenList,
	fn_keyword: SyntaxToken,
	identifier: SyntaxToken,
	parameter_list: ParameterList,
	return_clause: Optional[ReturnClause],
	body: Block,
) -> FunctionDeclaration:
	return FunctionDeclaration(modifiers, fn_keyword, identifier, parameter_list, return_clause, body)


@overloaded
def parameter_list(parameters: Optional[SeparatedSyntaxList[Parameter]] = None) -> ParameterList:
	return ParameterList(
		make_token(SyntaxKind.OPEN_PAREN_TOKEN),
		parameters if parameters is not None else _EMPTY_SEPARATED,
		make_token(SyntaxKind.CLOSE_PAREN_TOKEN),
	)


@parameter_list.register
def _(
	open_paren_token: SyntaxToken,
	parameters: SeparatedSyntaxList[Parameter],
	close_paren_token: SyntaxToken,
) -> ParameterList:
	return ParameterList(open_paren_token, parameters, close_paren_token)


@overloaded
def parameter(identifier: str, type: TypeSyntax) -> Parameter:
	return Parameter(make_identifier(identifier), make_token(SyntaxKind.COLON_TOKEN), type)


@parameter.register
def _(identifier: SyntaxToken, type: TypeSyntax) -> Parameter:
	return Parameter(identifier, make_token(SyntaxKind.COLON_TOKEN), type)


@parameter.register
def _(identifier: SyntaxToken, colon_token: SyntaxToken, type: TypeSyntax) -> Parameter:
	return Parameter(identifier, colon_token, type)


@overloaded
def return_clause(type: TypeSyntax) -> ReturnClause:
	return ReturnClause(make_token(SyntaxKind.RETURNS_KEYWORD), type)


@return_clause.register
def _(returns_keyword: SyntaxToken, type: TypeSyntax) -> ReturnClause:
	return ReturnClause(returns_keyword, type)


@overloaded
def struct_declaration(identifier: str) -> StructDeclaration:
	return struct_declaration(make_identifier(identifier))


@struct_declaration.register
def _(identifier: SyntaxToken) -> StructDeclaration:
	return StructDeclaration(
		_EMPTY_TOKENS,
		make_token(SyntaxKind.STRUCT_KEYWORD),
		identifier,
		make_token(SyntaxKind.OPEN_BRACE_TOKEN),
		_EMPTY_SEPARATED,
		make_token(SyntaxKind.CLOSE_BRACE_TOKEN),
		NONE_TOKEN,
	)


@struct_declaration.register
def _(
	modifiers: SyntaxTokenList,
	struct_keyword: SyntaxToken,
	identifier: SyntaxToken,
	open_brace_token: SyntaxToken,
	fields: SeparatedSyntaxList[FieldDeclaration],
	close_brace_token: SyntaxToken,
	semicolon_token: SyntaxToken,
) -> StructDeclaration:
	return StructDeclaration(modifiers, struct_keyword, identifier, open_brace_token, fields, close_brace_token, semicolon_token)


@overloaded
def field_declaration(identifier: str, type: TypeSyntax) -> FieldDeclaration:
	return FieldDeclaration(make_identifier(identifier), make_token(SyntaxKind.COLON_TOKEN), type)


@field_declaration.register
def _(identifier: SyntaxToken, type: TypeSyntax) -> FieldDeclaration:
	return FieldDeclaration(identifier, make_token(SyntaxKind.COLON_TOKEN), type)


@field_declaration.register
def _(identifier: SyntaxToken, colon_token: SyntaxToken, type: TypeSyntax) -> FieldDeclaration:
	return FieldDeclaration(identifier, colon_token, type)


@overloaded
def const_declaration(identifier: str, type: TypeSyntax, value: Expression) -> ConstDeclaration:
	return const_declaration(make_identifier(identifier), type, value)


@const_declaration.register
def _(identifier: SyntaxToken, type: TypeSyntax, value: Expression) -> ConstDeclaration:
	return ConstDeclaration(
		make_token(SyntaxKind.CONST_KEYWORD),
		identifier,
		make_token(SyntaxKind.COLON_TOKEN),
		type,
		make_token(SyntaxKind.EQUALS_TOKEN),
		value,
		make_token(SyntaxKind.SEMICOLON_TOKEN),
	)


@const_declaration.register
def _(
	const_keyword: SyntaxToken,
	identifier: SyntaxToken,
	colon_token: SyntaxToken,
	type: TypeSyntax,
	equals_token: SyntaxToken,
	value: Expression,
	semicolon_token: SyntaxToken,
) -> ConstDeclaration:
	return ConstDeclaration(const_keyword, identifier, colon_token, type, equals_token, value, semicolon_token)


# --- statements -----------------------------------------------------------------

@overloaded
def block(*statements: Statement) -> Block:
	return Block(make_token(SyntaxKind.OPEN_BRACE_TOKEN), SyntaxList(tuple(statements)), make_token(SyntaxKind.CLOSE_BRACE_TOKEN))


@block.register
def _(statements: SyntaxList[Statement]) -> Block:
	return Block(make_token(SyntaxKind.OPEN_BRACE_TOKEN), statements, make_token(SyntaxKind.CLOSE_BRACE_TOKEN))


@block.register
def _(open_brace_token: SyntaxToken, statements: SyntaxList[Statement], close_brace_token: SyntaxToken) -> Block:
	return Block(open_brace_token, statements, close_brace_token)


@overloaded
def local_declaration_statement(identifier: str, initializer: EqualsValueClause) -> LocalDeclarationStatement:
	"""`val <identifier> = ...;` (use `with_binding_keyword` for `var`)."""
	return local_declaration_statement(make_identifier(identifier), initializer)


@local_declaration_statement.register
def _(identifier: SyntaxToken, initializer: EqualsValueClause) -> LocalDeclarationStatement:
	return LocalDeclarationStatement(
		make_token(SyntaxKind.VAL_KEYWORD),
		identifier,
		None,
		initializer,
		make_token(SyntaxKind.SEMICOLON_TOKEN),
	)


@local_declaration_statement.register
def _(
	binding_keyword: SyntaxToken,
	identifier: SyntaxToken,
	type_annotation: Optional[TypeAnnotation],
	initializer: EqualsValueClause,
	semicolon_token: SyntaxToken,
) -> LocalDeclarationStatement:
	return LocalDeclarationStatement(binding_keyword, identifier, type_annotation, initializer, semicolon_token)


@overloaded
def type_annotation(type: TypeSyntax) -> TypeAnnotation:
	return TypeAnnotation(make_token(SyntaxKind.COLON_TOKEN), type)


@type_annotation.register
def _(colon_token: SyntaxToken, type: TypeSyntax) -> TypeAnnotation:
	return TypeAnnotation(colon_token, type)


@overloaded
def equals_value_clause(value: Expression) -> EqualsValueClause:
	return EqualsValueClause(make_token(SyntaxKind.EQUALS_TOKEN), value)


@equals_value_clause.register
def _(equals_token: SyntaxToken, value: Expression) -> EqualsValueClause:
	return EqualsValueClause(equals_token, value)


@overloaded
def return_statement(expression: Optional[Expression] = None) -> ReturnStatement:
	return ReturnStatement(make_token(SyntaxKind.RETURN_KEYWORD), expression, make_token(SyntaxKind.SEMICOLON_TOKEN))


@return_statement.register
def _(return_keyword: SyntaxToken, expression: Optional[Expression], semicolon_token: SyntaxToken) -> ReturnStatement:
	return ReturnStatement(return_keyword, expression, semicolon_token)


@overloaded
def expression_statement(expression: Expression) -> ExpressionStatement:
	return ExpressionStatement(expression, make_token(SyntaxKind.SEMICOLON_TOKEN))


@expression_statement.register
def _(expression: Expression, semicolon_token: SyntaxToken) -> ExpressionStatement:
	return ExpressionStatement(expression, semicolon_token)


@overloaded
def if_statement(condition: Expression, block: Block, else_clause: Optional[ElseClause] = None) -> IfStatement:
	return IfStatement(make_token(SyntaxKind.IF_KEYWORD), condition, block, else_clause)


@if_statement.register
def _(if_keyword: SyntaxToken, condition: Expression, block: Block, else_clause: Optional[ElseClause]) -> IfStatement:
	return IfStatement(if_keyword, condition, block, else_clause)


@overloaded
def else_clause(statement: Statement) -> ElseClause:
	return ElseClause(make_token(SyntaxKind.ELSE_KEYWORD), statement)


@else_clause.register
def _(else_keyword: SyntaxToken, statement: Statement) -> ElseClause:
	return ElseClause(else_keyword, statement)


@overloaded
def while_statement(condition: Expression, block: Block) -> WhileStatement:
	return WhileStatement(make_token(SyntaxKind.WHILE_KEYWORD), condition, block)


@while_statement.register
def _(while_keyword: SyntaxToken, condition: Expression, block: Block) -> WhileStatement:
	return WhileStatement(while_keyword, condition, block)


@overloaded
def break_statement() -> BreakStatement:
	return BreakStatement(make_token(SyntaxKind.BREAK_KEYWORD), make_token(SyntaxKind.SEMICOLON_TOKEN))


@break_statement.register
def _(break_keyword: SyntaxToken, semicolon_token: SyntaxToken) -> BreakStatement:
	return BreakStatement(break_keyword, semicolon_token)


@overloaded
def continue_statement() -> ContinueStatement:
	return ContinueStatement(make_token(SyntaxKind.CONTINUE_KEYWORD), make_token(SyntaxKind.SEMICOLON_TOKEN))


@continue_statement.register
def _(continue_keyword: SyntaxToken, semicolon_token: SyntaxToken) -> ContinueStatement:
	return ContinueStatement(continue_keyword, semicolon_token)


# --- names and types ------------------------------------------------------------

@overloaded
def identifier_name(identifier: str) -> IdentifierName:
	return IdentifierName(make_identifier(identifier))


@identifier_name.register
def _(identifier: SyntaxToken) -> IdentifierName:
	return IdentifierName(identifier)


@overloaded
def qualified_name(left: NameSyntax, right: IdentifierName) -> QualifiedName:
	return QualifiedName(left, make_token(SyntaxKind.DOT_TOKEN), right)


@qualified_name.register
def _(left: NameSyntax, dot_token: SyntaxToken, right: IdentifierName) -> QualifiedName:
	return QualifiedName(left, dot_token, right)


@overloaded
def generic_name(identifier: str) -> GenericName:
	return generic_name(make_identifier(identifier))


@generic_name.register
def _(identifier: SyntaxToken) -> GenericName:
	return GenericName(identifier, type_argument_list())


@generic_name.register
def _(identifier: SyntaxToken, type_argument_list: TypeArgumentList) -> GenericName:
	return GenericName(identifier, type_argument_list)


@overloaded
def type_argument_list(arguments: Optional[SeparatedSyntaxList[TypeSyntax]] = None) -> TypeArgumentList:
	return TypeArgumentList(
		make_token(SyntaxKind.LESS_THAN_TOKEN),
		arguments if arguments is not None else _EMPTY_SEPARATED,
		make_token(SyntaxKind.GREATER_THAN_TOKEN),
	)


@type_argument_list.register
def _(
	less_than_token: SyntaxToken,
	arguments: SeparatedSyntaxList[TypeSyntax],
	greater_than_token: SyntaxToken,
) -> TypeArgumentList:
	return TypeArgumentList(less_than_token, arguments, greater_than_token)


# --- expressions ----------------------------------------------------------------

@overloaded
def literal_expression(kind: SyntaxKind) -> LiteralExpression:
	"""Keyword literal (`true`/`false`); numeric and string literals need a token."""
	token_kind = LITERAL_TOKENS.get(kind)
	if token_kind not in (SyntaxKind.TRUE_KEYWORD, SyntaxKind.FALSE_KEYWORD):
		raise ValueError(f"{kind.name} requires a literal token")
	return LiteralExpression(kind, make_token(token_kind))


@literal_expression.register
def _(kind: SyntaxKind, token: SyntaxToken) -> LiteralExpression:
	if kind not in LITERAL_TOKENS:
		raise ValueError(f"{kind.name} is not a literal expression kind")
	return LiteralExpression(kind, token)


@overloaded
def binary_expression(kind: SyntaxKind, left: Expression, right: Expression) -> BinaryExpression:
	operator = BINARY_OPERATORS.get(kind)
	if operator is None:
		raise ValueError(f"{kind.name} is not a binary expression kind")
	return BinaryExpression(kind, left, make_token(operator), right)


@binary_expression.register
def _(kind: SyntaxKind, left: Expression, operator_token: SyntaxToken, right: Expression) -> BinaryExpression:
	if kind not in BINARY_OPERATORS:
		raise ValueError(f"{kind.name} is not a binary expression kind")
	return BinaryExpression(kind, left, operator_token, right)


@overloaded
def assignment_expression(left: Expression, right: Expression) -> AssignmentExpression:
	return AssignmentExpression(left, make_token(SyntaxKind.EQUALS_TOKEN), right)


@assignment_expression.register
def _(left: Expression, equals_token: SyntaxToken, right: Expression) -> AssignmentExpression:
	return AssignmentExpression(left, equals_token, right)


@overloaded
def prefix_unary_expression(kind: SyntaxKind, operand: Expression) -> PrefixUnaryExpression:
	operator = PREFIX_UNARY_OPERATORS.get(kind)
	if operator is None:
		raise ValueError(f"{kind.name} is not a prefix unary expression kind")
	return PrefixUnaryExpression(kind, make_token(operator), operand)


@prefix_unary_expression.register
def _(kind: SyntaxKind, operator_token: SyntaxToken, operand: Expression) -> PrefixUnaryExpression:
	if kind not in PREFIX_UNARY_OPERATORS:
		raise ValueError(f"{kind.name} is not a prefix unary expression kind")
	return PrefixUnaryExpression(kind, operator_token, operand)


@overloaded
def parenthesized_expression(expression: Expression) -> ParenthesizedExpression:
	return ParenthesizedExpression(make_token(SyntaxKind.OPEN_PAREN_TOKEN), expression, make_token(SyntaxKind.CLOSE_PAREN_TOKEN))


@parenthesized_expression.register
def _(open_paren_token: SyntaxToken, expression: Expression, close_paren_token: SyntaxToken) -> ParenthesizedExpression:
	return ParenthesizedExpression(open_paren_token, expression, close_paren_token)


@overloaded
def invocation_expression(expression: Expression) -> InvocationExpression:
	return InvocationExpression(expression, argument_list())


@invocation_expression.register
def _(expression: Expression, argument_list: ArgumentList) -> InvocationExpression:
	return InvocationExpression(expression, argument_list)


@overloaded
def argument_list(arguments: Optional[SeparatedSyntaxList[Argument]] = None) -> ArgumentList:
	return ArgumentList(
		make_token(SyntaxKind.OPEN_PAREN_TOKEN),
		arguments if arguments is not None else _EMPTY_SEPARATED,
		make_token(SyntaxKind.CLOSE_PAREN_TOKEN),
	)


@argument_list.register
def _(open_paren_token: SyntaxToken, arguments: SeparatedSyntaxList[Argument], close_paren_token: SyntaxToken) -> ArgumentList:
	return ArgumentList(open_paren_token, arguments, close_paren_token)


@overloaded
def argument(expression: Expression) -> Argument:
	return Argument(expression)


@overloaded
def member_access_expression(expression: Expression, name: IdentifierName) -> MemberAccessExpression:
	return MemberAccessExpression(expression, make_token(SyntaxKind.DOT_TOKEN), name)


@member_access_expression.register
def _(expression: Expression, dot_token: SyntaxToken, name: IdentifierName) -> MemberAccessExpression:
	return MemberAccessExpression(expression, dot_token, name)


# --- convenience helpers --------------------------------------------------------
# These delegate to the factories above, so one tree has several valid call
# shapes through them; the quoting registry leaves them out.

@overloaded
def parse_name(text: str) -> NameSyntax:
	"""`a.b.c` -> nested qualified_name(...) of identifier names."""
	parts = text.split(".")
	name: NameSyntax = identifier_name(parts[0])
	for part in parts[1:]:
		name = qualified_name(name, identifier_name(part))
	return name


@overloaded
def string_literal_expression(value: str) -> LiteralExpression:
	return literal_expression(SyntaxKind.STRING_LITERAL_EXPRESSION, literal(value))


@overloaded
def numeric_literal_expression(value: Union[int, float]) -> LiteralExpression:
	return literal_expression(SyntaxKind.NUMERIC_LITERAL_EXPRESSION, literal(value))


__all__ = [
	"SyntaxKind",
	"SyntaxNode",
	"MemberDeclaration",
	"Statement",
	"Expression",
	"TypeSyntax",
	"NameSyntax",
	"Argument",
	"ArgumentList",
	"AssignmentExpression",
	"BinaryExpression",
	"Block",
	"BreakStatement",
	"CompilationUnit",
	"ConstDeclaration",
	"ContinueStatement",
	"DocumentationComment",
	"ElseClause",
	"EqualsValueClause",
	"ExpressionStatement",
	"FieldDeclaration",
	"FunctionDeclaration",
	"GenericName",
	"IdentifierName",
	"IfStatement",
	"ImportAlias",
	"ImportDirective",
	"InvocationExpression",
	"LiteralExpression",
	"LocalDeclarationStatement",
	"MemberAccessExpression",
	"Parameter",
	"ParameterList",
	"ParenthesizedExpression",
	"PrefixUnaryExpression",
	"QualifiedName",
	"ReturnClause",
	"ReturnStatement",
	"StructDeclaration",
	"TypeAnnotation",
	"TypeArgumentList",
	"WhileStatement",
	"SPACE",
	"TAB",
	"LINE_FEED",
	"CARRIAGE_RETURN_LINE_FEED",
	"CARRIAGE_RETURN",
	"whitespace",
	"end_of_line",
	"comment",
	"skipped_tokens",
	"documentation_comment",
	"trivia",
	"trivia_list",
	"token",
	"missing_token",
	"identifier",
	"literal",
	"token_list",
	"syntax_list",
	"singleton_list",
	"separated_list",
	"singleton_separated_list",
	"compilation_unit",
	"import_directive",
	"import_alias",
	"function_declaration",
	"parameter_list",
	"parameter",
	"return_clause",
	"struct_declaration",
	"field_declaration",
	"const_declaration",
	"block",
	"local_declaration_statement",
	"type_annotation",
	"equals_value_clause",
	"return_statement",
	"expression_statement",
	"if_statement",
	"else_clause",
	"while_statement",
	"break_statement",
	"continue_statement",
	"identifier_name",
	"qualified_name",
	"generic_name",
	"type_argument_list",
	"literal_expression",
	"binary_expression",
	"assignment_expression",
	"prefix_unary_expression",
	"parenthesized_expression",
	"invocation_expression",
	"argument_list",
	"argument",
	"member_access_expression",
	"parse_name",
	"string_literal_expression",
	"numeric_literal_expression",
]
