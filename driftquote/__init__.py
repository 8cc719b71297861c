# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
driftquote: turn Drift syntax trees into the factory calls that rebuild them.

The syntax model lives under `driftquote.syntax`, the quoting engine under
`driftquote.quoting`. The CLI entrypoint is `driftquote.driftquote:main`.
"""

__all__ = []
