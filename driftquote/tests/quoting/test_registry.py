# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Factory registry built from the public factory surface."""

import pytest

from driftquote.quoting import FactoryRegistry, UnsupportedNodeError
from driftquote.quoting.registry import DELEGATING_FACTORIES, TRIVIA_CONSTANTS
from driftquote.syntax import SyntaxKind, factory
from driftquote.syntax.nodes import (
	Block,
	CompilationUnit,
	LiteralExpression,
	MemberDeclaration,
	StructDeclaration,
)
from driftquote.syntax.tokens import SyntaxToken


def test_default_is_shared() -> None:
	assert FactoryRegistry.default() is FactoryRegistry.default()


def test_overloads_in_declaration_order() -> None:
	registry = FactoryRegistry.default()
	shapes = [str(d) for d in registry.for_type(StructDeclaration)]
	assert shapes[0] == "struct_declaration(identifier)"
	assert shapes[1] == "struct_declaration(identifier)"
	assert len(shapes) == 3
	indices = [d.index for d in registry.by_name("literal")]
	assert indices == sorted(indices)


def test_parameter_descriptors() -> None:
	registry = FactoryRegistry.default()
	variadic = registry.by_name("block")[0]
	assert variadic.has_variadic
	assert str(variadic) == "block(*statements)"
	optional = registry.by_name("return_statement")[0]
	assert optional.sole_parameter_optional
	assert optional.parameters[0].accepts_none
	assert optional.parameter("EXPRESSION") is optional.parameters[0]
	full = registry.for_type(Block)[2]
	assert [p.name for p in full.parameters] == ["open_brace_token", "statements", "close_brace_token"]
	assert not full.parameters[0].is_node_typed


def test_kind_parameter() -> None:
	registry = FactoryRegistry.default()
	assert registry.has_kind_parameter(LiteralExpression)
	assert not registry.has_kind_parameter(CompilationUnit)


def test_generic_list_factories() -> None:
	registry = FactoryRegistry.default()
	assert registry.by_name("syntax_list")[0].is_generic
	assert not registry.by_name("block")[0].is_generic
	assert registry.node_type("MemberDeclaration") is MemberDeclaration
	assert registry.node_type("struct_declaration") is None


def test_delegating_factories_are_not_indexed() -> None:
	registry = FactoryRegistry.default()
	for name in DELEGATING_FACTORIES:
		assert registry.by_name(name) == ()
	assert "struct_declaration" in registry.names


def test_trivia_constants() -> None:
	registry = FactoryRegistry.default()
	for name in TRIVIA_CONSTANTS:
		assert registry.constant(name) is getattr(factory, name)
	assert registry.constant_name(factory.whitespace(" ")) == "SPACE"
	assert registry.constant_name(factory.whitespace("  ")) is None


def test_unsupported_type() -> None:
	with pytest.raises(UnsupportedNodeError) as info:
		FactoryRegistry.default().for_type(MemberDeclaration)
	assert info.value.node_type == "MemberDeclaration"


def test_field_hints_are_resolved_per_registry() -> None:
	registry = FactoryRegistry.default()
	hints = registry.field_hints(StructDeclaration)
	assert hints["identifier"] is SyntaxToken
	assert hints["kind"] is not None
	assert registry.field_hints(StructDeclaration) is hints
	assert SyntaxKind.STRUCT_DECLARATION is StructDeclaration.kind
	fresh = FactoryRegistry()
	assert fresh.field_hints(StructDeclaration) is not hints
	assert fresh.field_hints(StructDeclaration) == hints
