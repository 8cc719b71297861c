# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Kind tags for Drift tokens, trivia and syntax nodes.

Token kind names double as terminal names in `grammar.lark`, so the parser can
map a lexer token to its kind with `SyntaxKind[token.type]`.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Dict, Optional


class SyntaxKind(Enum):
	NONE = auto()

	# Punctuation and operators.
	OPEN_BRACE_TOKEN = auto()
	CLOSE_BRACE_TOKEN = auto()
	OPEN_PAREN_TOKEN = auto()
	CLOSE_PAREN_TOKEN = auto()
	LESS_THAN_TOKEN = auto()
	GREATER_THAN_TOKEN = auto()
	SEMICOLON_TOKEN = auto()
	COLON_TOKEN = auto()
	COMMA_TOKEN = auto()
	DOT_TOKEN = auto()
	EQUALS_TOKEN = auto()
	PLUS_TOKEN = auto()
	MINUS_TOKEN = auto()
	ASTERISK_TOKEN = auto()
	SLASH_TOKEN = auto()
	PERCENT_TOKEN = auto()
	EXCLAMATION_TOKEN = auto()
	EQUALS_EQUALS_TOKEN = auto()
	EXCLAMATION_EQUALS_TOKEN = auto()
	LESS_THAN_EQUALS_TOKEN = auto()
	GREATER_THAN_EQUALS_TOKEN = auto()
	AMPERSAND_AMPERSAND_TOKEN = auto()
	BAR_BAR_TOKEN = auto()

	# Keywords.
	FN_KEYWORD = auto()
	STRUCT_KEYWORD = auto()
	IMPORT_KEYWORD = auto()
	AS_KEYWORD = auto()
	CONST_KEYWORD = auto()
	PUB_KEYWORD = auto()
	RETURNS_KEYWORD = auto()
	VAL_KEYWORD = auto()
	VAR_KEYWORD = auto()
	RETURN_KEYWORD = auto()
	IF_KEYWORD = auto()
	ELSE_KEYWORD = auto()
	WHILE_KEYWORD = auto()
	BREAK_KEYWORD = auto()
	CONTINUE_KEYWORD = auto()
	TRUE_KEYWORD = auto()
	FALSE_KEYWORD = auto()

	# Tokens with variable text.
	IDENTIFIER_TOKEN = auto()
	NUMERIC_LITERAL_TOKEN = auto()
	STRING_LITERAL_TOKEN = auto()
	END_OF_FILE_TOKEN = auto()

	# Trivia.
	WHITESPACE_TRIVIA = auto()
	END_OF_LINE_TRIVIA = auto()
	SINGLE_LINE_COMMENT_TRIVIA = auto()
	MULTI_LINE_COMMENT_TRIVIA = auto()
	DOCUMENTATION_COMMENT_TRIVIA = auto()
	SKIPPED_TOKENS_TRIVIA = auto()

	# Nodes.
	COMPILATION_UNIT = auto()
	IMPORT_DIRECTIVE = auto()
	IMPORT_ALIAS = auto()
	FUNCTION_DECLARATION = auto()
	PARAMETER_LIST = auto()
	PARAMETER = auto()
	RETURN_CLAUSE = auto()
	STRUCT_DECLARATION = auto()
	FIELD_DECLARATION = auto()
	CONST_DECLARATION = auto()
	BLOCK = auto()
	LOCAL_DECLARATION_STATEMENT = auto()
	TYPE_ANNOTATION = auto()
	EQUALS_VALUE_CLAUSE = auto()
	RETURN_STATEMENT = auto()
	EXPRESSION_STATEMENT = auto()
	IF_STATEMENT = auto()
	ELSE_CLAUSE = auto()
	WHILE_STATEMENT = auto()
	BREAK_STATEMENT = auto()
	CONTINUE_STATEMENT = auto()
	IDENTIFIER_NAME = auto()
	QUALIFIED_NAME = auto()
	GENERIC_NAME = auto()
	TYPE_ARGUMENT_LIST = auto()
	NUMERIC_LITERAL_EXPRESSION = auto()
	STRING_LITERAL_EXPRESSION = auto()
	TRUE_LITERAL_EXPRESSION = auto()
	FALSE_LITERAL_EXPRESSION = auto()
	ADD_EXPRESSION = auto()
	SUBTRACT_EXPRESSION = auto()
	MULTIPLY_EXPRESSION = auto()
	DIVIDE_EXPRESSION = auto()
	MODULO_EXPRESSION = auto()
	EQUALS_EXPRESSION = auto()
	NOT_EQUALS_EXPRESSION = auto()
	LESS_THAN_EXPRESSION = auto()
	LESS_THAN_OR_EQUAL_EXPRESSION = auto()
	GREATER_THAN_EXPRESSION = auto()
	GREATER_THAN_OR_EQUAL_EXPRESSION = auto()
	LOGICAL_AND_EXPRESSION = auto()
	LOGICAL_OR_EXPRESSION = auto()
	UNARY_MINUS_EXPRESSION = auto()
	LOGICAL_NOT_EXPRESSION = auto()
	SIMPLE_ASSIGNMENT_EXPRESSION = auto()
	PARENTHESIZED_EXPRESSION = auto()
	INVOCATION_EXPRESSION = auto()
	ARGUMENT_LIST = auto()
	ARGUMENT = auto()
	SIMPLE_MEMBER_ACCESS_EXPRESSION = auto()
	DOCUMENTATION_COMMENT = auto()


_FIXED_TEXT: Dict[SyntaxKind, str] = {
	SyntaxKind.OPEN_BRACE_TOKEN: "{",
	SyntaxKind.CLOSE_BRACE_TOKEN: "}",
	SyntaxKind.OPEN_PAREN_TOKEN: "(",
	SyntaxKind.CLOSE_PAREN_TOKEN: ")",
	SyntaxKind.LESS_THAN_TOKEN: "<",
	SyntaxKind.GREATER_THAN_TOKEN: ">",
	SyntaxKind.SEMICOLON_TOKEN: ";",
	SyntaxKind.COLON_TOKEN: ":",
	SyntaxKind.COMMA_TOKEN: ",",
	SyntaxKind.DOT_TOKEN: ".",
	SyntaxKind.EQUALS_TOKEN: "=",
	SyntaxKind.PLUS_TOKEN: "+",
	SyntaxKind.MINUS_TOKEN: "-",
	SyntaxKind.ASTERISK_TOKEN: "*",
	SyntaxKind.SLASH_TOKEN: "/",
	SyntaxKind.PERCENT_TOKEN: "%",
	SyntaxKind.EXCLAMATION_TOKEN: "!",
	SyntaxKind.EQUALS_EQUALS_TOKEN: "==",
	SyntaxKind.EXCLAMATION_EQUALS_TOKEN: "!=",
	SyntaxKind.LESS_THAN_EQUALS_TOKEN: "<=",
	SyntaxKind.GREATER_THAN_EQUALS_TOKEN: ">=",
	SyntaxKind.AMPERSAND_AMPERSAND_TOKEN: "&&",
	SyntaxKind.BAR_BAR_TOKEN: "||",
	SyntaxKind.FN_KEYWORD: "fn",
	SyntaxKind.STRUCT_KEYWORD: "struct",
	SyntaxKind.IMPORT_KEYWORD: "import",
	SyntaxKind.AS_KEYWORD: "as",
	SyntaxKind.CONST_KEYWORD: "const",
	SyntaxKind.PUB_KEYWORD: "pub",
	SyntaxKind.RETURNS_KEYWORD: "returns",
	SyntaxKind.VAL_KEYWORD: "val",
	SyntaxKind.VAR_KEYWORD: "var",
	SyntaxKind.RETURN_KEYWORD: "return",
	SyntaxKind.IF_KEYWORD: "if",
	SyntaxKind.ELSE_KEYWORD: "else",
	SyntaxKind.WHILE_KEYWORD: "while",
	SyntaxKind.BREAK_KEYWORD: "break",
	SyntaxKind.CONTINUE_KEYWORD: "continue",
	SyntaxKind.TRUE_KEYWORD: "true",
	SyntaxKind.FALSE_KEYWORD: "false",
	SyntaxKind.END_OF_FILE_TOKEN: "",
}

# Binary expression kind -> operator token kind.
BINARY_OPERATORS: Dict[SyntaxKind, SyntaxKind] = {
	SyntaxKind.ADD_EXPRESSION: SyntaxKind.PLUS_TOKEN,
	SyntaxKind.SUBTRACT_EXPRESSION: SyntaxKind.MINUS_TOKEN,
	SyntaxKind.MULTIPLY_EXPRESSION: SyntaxKind.ASTERISK_TOKEN,
	SyntaxKind.DIVIDE_EXPRESSION: SyntaxKind.SLASH_TOKEN,
	SyntaxKind.MODULO_EXPRESSION: SyntaxKind.PERCENT_TOKEN,
	SyntaxKind.EQUALS_EXPRESSION: SyntaxKind.EQUALS_EQUALS_TOKEN,
	SyntaxKind.NOT_EQUALS_EXPRESSION: SyntaxKind.EXCLAMATION_EQUALS_TOKEN,
	SyntaxKind.LESS_THAN_EXPRESSION: SyntaxKind.LESS_THAN_TOKEN,
	SyntaxKind.LESS_THAN_OR_EQUAL_EXPRESSION: SyntaxKind.LESS_THAN_EQUALS_TOKEN,
	SyntaxKind.GREATER_THAN_EXPRESSION: SyntaxKind.GREATER_THAN_TOKEN,
	SyntaxKind.GREATER_THAN_OR_EQUAL_EXPRESSION: SyntaxKind.GREATER_THAN_EQUALS_TOKEN,
	SyntaxKind.LOGICAL_AND_EXPRESSION: SyntaxKind.AMPERSAND_AMPERSAND_TOKEN,
	SyntaxKind.LOGICAL_OR_EXPRESSION: SyntaxKind.BAR_BAR_TOKEN,
}

PREFIX_UNARY_OPERATORS: Dict[SyntaxKind, SyntaxKind] = {
	SyntaxKind.UNARY_MINUS_EXPRESSION: SyntaxKind.MINUS_TOKEN,
	SyntaxKind.LOGICAL_NOT_EXPRESSION: SyntaxKind.EXCLAMATION_TOKEN,
}

# Literal expression kind -> token kind.
LITERAL_TOKENS: Dict[SyntaxKind, SyntaxKind] = {
	SyntaxKind.NUMERIC_LITERAL_EXPRESSION: SyntaxKind.NUMERIC_LITERAL_TOKEN,
	SyntaxKind.STRING_LITERAL_EXPRESSION: SyntaxKind.STRING_LITERAL_TOKEN,
	SyntaxKind.TRUE_LITERAL_EXPRESSION: SyntaxKind.TRUE_KEYWORD,
	SyntaxKind.FALSE_LITERAL_EXPRESSION: SyntaxKind.FALSE_KEYWORD,
}


def token_text(kind: SyntaxKind) -> Optional[str]:
	"""Fixed source text of a punctuation/keyword token kind, or None for variable-text kinds."""
	return _FIXED_TEXT.get(kind)


def is_keyword(kind: SyntaxKind) -> bool:
	return kind.name.endswith("_KEYWORD")


def is_trivia(kind: SyntaxKind) -> bool:
	return kind.name.endswith("_TRIVIA")


def binary_expression_kind(operator: SyntaxKind) -> SyntaxKind:
	for expr_kind, op_kind in BINARY_OPERATORS.items():
		if op_kind is operator:
			return expr_kind
	raise ValueError(f"{operator.name} is not a binary operator")


def prefix_unary_expression_kind(operator: SyntaxKind) -> SyntaxKind:
	for expr_kind, op_kind in PREFIX_UNARY_OPERATORS.items():
		if op_kind is operator:
			return expr_kind
	raise ValueError(f"{operator.name} is not a prefix operator")


def literal_expression_kind(token_kind: SyntaxKind) -> SyntaxKind:
	for expr_kind, tok_kind in LITERAL_TOKENS.items():
		if tok_kind is token_kind:
			return expr_kind
	raise ValueError(f"{token_kind.name} is not a literal token")


__all__ = [
	"SyntaxKind",
	"BINARY_OPERATORS",
	"PREFIX_UNARY_OPERATORS",
	"LITERAL_TOKENS",
	"token_text",
	"is_keyword",
	"is_trivia",
	"binary_expression_kind",
	"prefix_unary_expression_kind",
	"literal_expression_kind",
]
