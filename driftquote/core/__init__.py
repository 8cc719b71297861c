"""
driftquote.core: shared diagnostics/span types used by the parser and the CLI.

Modules:
  - span: best-effort source locations
  - diagnostics: Diagnostic records produced by parser recovery
"""
