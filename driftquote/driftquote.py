# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
driftquote command line.

	driftquote quote [FILE] [--parse-as unit|member|statement|expression]
	driftquote eval FILE
	driftquote roundtrip [FILE]

FILE defaults to `-` (stdin). Parse and resolution errors are printed as
`<file>:<line>:<column>: error: <message>` on stderr with exit code 1; empty
or oversized input, and input nested too deeply to quote, print an advisory and
exit with 1 as well.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from driftquote.core.diagnostics import Diagnostic
from driftquote.quoting import (
	PARSE_ERROR,
	CallTextError,
	QuoterOptions,
	ResolutionError,
	UnsupportedModifierError,
	UnsupportedNodeError,
	evaluate,
	evaluate_text,
	print_call,
	quote,
	render_node,
)
from driftquote.syntax.parser import ParseContext, parse_text

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 2000
EMPTY_INPUT = "Please specify the source text."
TOO_DEEP = "Input nests too deeply to quote; split it into smaller pieces."

_QUOTING_ERRORS = (UnsupportedNodeError, UnsupportedModifierError, ResolutionError, CallTextError)


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="driftquote", description="Quote Drift source into the factory calls that rebuild it")
	p.add_argument("--verbose", action="store_true", help="Log debug records (registry, overload choice, recovery) to stderr")
	sub = p.add_subparsers(dest="cmd", required=True)

	def add_common(cmd: argparse.ArgumentParser) -> None:
		cmd.add_argument("source", nargs="?", default="-", help="Input file (default: stdin)")
		cmd.add_argument("--json", action="store_true", help="Emit machine-readable JSON")

	def add_quoting(cmd: argparse.ArgumentParser) -> None:
		cmd.add_argument(
			"--max-length",
			type=int,
			default=DEFAULT_MAX_LENGTH,
			help=f"Refuse source text longer than this many characters (default: {DEFAULT_MAX_LENGTH})",
		)
		cmd.add_argument(
			"--parse-as",
			choices=[c.value for c in ParseContext],
			default=ParseContext.UNIT.value,
			help="What the source text is (default: unit)",
		)
		cmd.add_argument(
			"--preserve-whitespace",
			action="store_true",
			help="Quote whitespace trivia verbatim instead of ending with normalize_whitespace()",
		)
		cmd.add_argument("--keep-redundant-calls", action="store_true", help="Keep with_* calls that change nothing")
		cmd.add_argument("--static-import", action="store_true", help="Omit the factory. prefix")
		cmd.add_argument("--open-paren-on-new-line", action="store_true", help="Put '(' of multi-line calls on its own line")
		cmd.add_argument("--close-paren-on-new-line", action="store_true", help="Put ')' of multi-line calls on its own line")

	quote_cmd = sub.add_parser("quote", help="Print the factory calls that build the parsed source")
	add_common(quote_cmd)
	add_quoting(quote_cmd)

	eval_cmd = sub.add_parser("eval", help="Evaluate generated factory-call code and print the tree's text")
	add_common(eval_cmd)

	roundtrip = sub.add_parser("roundtrip", help="Quote, evaluate and compare against the source text")
	add_common(roundtrip)
	add_quoting(roundtrip)
	return p


def _options(args: argparse.Namespace) -> QuoterOptions:
	return QuoterOptions(
		use_default_formatting=not args.preserve_whitespace,
		remove_redundant_modifying_calls=not args.keep_redundant_calls,
		shorten_with_static_import=bool(args.static_import),
		open_parenthesis_on_new_line=bool(args.open_paren_on_new_line),
		closing_parenthesis_on_new_line=bool(args.close_paren_on_new_line),
	)


def _read_source(source: str) -> tuple[str, str]:
	if source == "-":
		return "<stdin>", sys.stdin.read()
	path = Path(source)
	return str(path), path.read_text(encoding="utf-8")


def _emit_error(name: str, diag: Diagnostic, as_json: bool) -> None:
	if as_json:
		print(json.dumps({"ok": False, "diagnostics": [diag.to_json(file=name)]}, sort_keys=True, separators=(",", ":")))
		return
	print(f"{diag.span.file or name}:{diag.span}: {diag.severity}: {diag.message}", file=sys.stderr)


def _advisory(text: str, args: argparse.Namespace) -> str | None:
	if not text.strip():
		return EMPTY_INPUT
	max_length = getattr(args, "max_length", None)
	if max_length is not None and len(text) > max_length:
		return f"Input is {len(text)} characters long; the limit is {max_length} (see --max-length)."
	return None


def _run_quote(name: str, text: str, args: argparse.Namespace) -> int:
	options = _options(args)
	node = parse_text(text, ParseContext(args.parse_as), file=name)
	if node is None:
		_emit_error(name, Diagnostic(message=PARSE_ERROR, code="parse-error", phase="parser"), args.json)
		return 1
	try:
		code = print_call(quote(node, options), options)
	except _QUOTING_ERRORS as err:
		_emit_error(name, Diagnostic(message=str(err), code=type(err).__name__, phase="quoter"), args.json)
		return 1
	if args.json:
		payload = {
			"ok": True,
			"code": code,
			"diagnostics": [d.to_json(file=name) for d in node.diagnostics],
		}
		print(json.dumps(payload, sort_keys=True, separators=(",", ":")))
		return 0
	for diag in node.diagnostics:
		print(f"{diag.span.file or name}:{diag.span}: warning: {diag.message}", file=sys.stderr)
	print(code)
	return 0


def _run_eval(name: str, text: str, args: argparse.Namespace) -> int:
	try:
		node = evaluate_text(text)
	except CallTextError as err:
		span = f"{err.line if err.line is not None else '?'}:{err.column if err.column is not None else '?'}"
		if args.json:
			diag = Diagnostic(message=str(err), code="CallTextError", phase="reader")
			out = diag.to_json(file=name)
			out.update(line=err.line, column=err.column)
			print(json.dumps({"ok": False, "diagnostics": [out]}, sort_keys=True, separators=(",", ":")))
		else:
			print(f"{name}:{span}: error: {err}", file=sys.stderr)
		return 1
	except ResolutionError as err:
		_emit_error(name, Diagnostic(message=str(err), code="ResolutionError", phase="interpreter"), args.json)
		return 1
	rendered = render_node(node, QuoterOptions(use_default_formatting=False))
	if args.json:
		print(json.dumps({"ok": True, "text": rendered}, sort_keys=True, separators=(",", ":")))
	else:
		sys.stdout.write(rendered)
		if not rendered.endswith("\n"):
			sys.stdout.write("\n")
	return 0


def _run_roundtrip(name: str, text: str, args: argparse.Namespace) -> int:
	options = _options(args)
	node = parse_text(text, ParseContext(args.parse_as), file=name)
	if node is None:
		_emit_error(name, Diagnostic(message=PARSE_ERROR, code="parse-error", phase="parser"), args.json)
		return 1
	try:
		rebuilt = evaluate(quote(node, options))
	except _QUOTING_ERRORS as err:
		_emit_error(name, Diagnostic(message=str(err), code=type(err).__name__, phase="quoter"), args.json)
		return 1
	expected = render_node(node, options)
	actual = render_node(rebuilt, options)
	ok = expected == actual
	if args.json:
		print(json.dumps({"ok": ok, "expected": expected, "actual": actual}, sort_keys=True, separators=(",", ":")))
	elif ok:
		print(f"{name}: round trip ok")
	else:
		print(f"{name}: round trip mismatch", file=sys.stderr)
		print(f"--- expected\n{expected}\n--- actual\n{actual}", file=sys.stderr)
	return 0 if ok else 1


def main(argv: list[str] | None = None) -> int:
	p = _build_parser()
	args = p.parse_args(argv)
	if args.verbose:
		logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

	try:
		name, text = _read_source(args.source)
	except OSError as err:
		p.error(str(err))
		return 2
	logger.debug("%s %s: %d characters", args.cmd, name, len(text))

	advisory = _advisory(text, args)
	if advisory is not None:
		print(advisory)
		return 1

	run = {"quote": _run_quote, "eval": _run_eval, "roundtrip": _run_roundtrip}[args.cmd]
	try:
		return run(name, text, args)
	except RecursionError:
		# parser, quoter and interpreter all recurse per nesting level
		logger.debug("%s %s: recursion limit hit", args.cmd, name)
		print(TOO_DEEP)
		return 1


if __name__ == "__main__":
	sys.exit(main())
