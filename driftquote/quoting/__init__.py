# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Quoting engine: syntax tree -> factory calls -> syntax tree.

Pipeline placement:
  SyntaxNode → Quoter (registry) → call tree → eliminator → printer → code text
  call tree (or code text via the reader) → Interpreter (registry) → SyntaxNode

Public API:
  - quote / quote_text / evaluate / evaluate_text / print_call (engine)
  - QuoterOptions, ParseContext
  - the call-expression model and the error types
"""

from .callexpr import ArrayCreation, CallExpr, FactoryCall, Literal, MemberRef, ModifierCall
from .engine import PARSE_ERROR, evaluate, evaluate_text, print_call, quote, quote_text, render_node
from .errors import CallTextError, ResolutionError, UnsupportedModifierError, UnsupportedNodeError
from .options import DEFAULT_OPTIONS, ParseContext, QuoterOptions
from .registry import FactoryRegistry

__all__ = [
	"ArrayCreation",
	"CallExpr",
	"FactoryCall",
	"Literal",
	"MemberRef",
	"ModifierCall",
	"PARSE_ERROR",
	"quote",
	"quote_text",
	"evaluate",
	"evaluate_text",
	"print_call",
	"render_node",
	"CallTextError",
	"ResolutionError",
	"UnsupportedModifierError",
	"UnsupportedNodeError",
	"DEFAULT_OPTIONS",
	"ParseContext",
	"QuoterOptions",
	"FactoryRegistry",
]
