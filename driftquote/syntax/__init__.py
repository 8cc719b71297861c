# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Full-fidelity Drift syntax API: the tree model that driftquote quotes.

Pipeline placement:
  text → parser (lark + recovery) → SyntaxNode tree → quoting → factory calls

Public API:
  - parse_text / ParseContext: text to tree (None on unrecoverable input)
  - SyntaxKind, SyntaxToken, SyntaxTrivia and the list containers
  - factory: the overloaded construction functions generated code calls
  - normalize_whitespace: canonical layout of a tree
"""

from .kinds import SyntaxKind
from .tokens import (
	SeparatedSyntaxList,
	SyntaxList,
	SyntaxToken,
	SyntaxTokenList,
	SyntaxTrivia,
	SyntaxTriviaList,
)
from .nodes import SyntaxNode
from .normalize import normalize_whitespace
from .parser import ParseContext, parse_text
from . import factory

__all__ = [
	"SyntaxKind",
	"SyntaxNode",
	"SyntaxToken",
	"SyntaxTokenList",
	"SyntaxTrivia",
	"SyntaxTriviaList",
	"SyntaxList",
	"SeparatedSyntaxList",
	"ParseContext",
	"parse_text",
	"normalize_whitespace",
	"factory",
]
