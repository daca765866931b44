"""Action class generation.

This module provides generate_actions(), which turns every action container
declared in a compilation unit into Dart companion code:

- A dispatcher subclass (``_$Foo extends Foo``) wiring each action field to
  the runtime dispatcher, emitted only for declarations with more than one
  constructor
- A names class (``FooNames``) holding one static action name per action field
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import cast

from ..model import CompilationUnit, Declaration, Field, InterfaceType, TypeRef
from .conventions import NamingConventions
from .fields import for_each_field_with_inherited
from .predicates import field_type_declaration, is_dispatcher_field, needs_generation
from .templates import (
    DispatcherClassIR,
    DispatcherFieldIR,
    NamesClassIR,
    NestedActionsFieldIR,
    emit_dispatcher_class,
    emit_lint_ignores,
    emit_names_class,
)
from .type_emitter import TypeEmitter

logger = logging.getLogger(__name__)


@dataclass
class ActionsOutput:
    """Output of action class generation.

    Attributes:
        code: Generated source, empty when nothing qualified
        generated: Names of the declarations that produced output
        repairs: Builder names inferred while rendering payload types
    """

    code: str
    generated: list[str] = field(default_factory=list)
    repairs: list[str] = field(default_factory=list)


def generate_actions(
    unit: CompilationUnit,
    conventions: NamingConventions | None = None,
) -> ActionsOutput:
    """Generate action classes for every qualifying declaration in a unit.

    Args:
        unit: The compilation unit to scan
        conventions: Naming conventions; defaults to NamingConventions()

    Returns:
        ActionsOutput holding the concatenated generated code

    Raises:
        ModelError: If a payload type is malformed; no partial output is produced
    """
    conventions = conventions or NamingConventions()
    emitter = TypeEmitter(conventions)
    lines: list[str] = []
    generated: list[str] = []
    for declaration in unit.declarations:
        if not needs_generation(declaration, conventions):
            continue
        if not generated:
            lines.extend(emit_lint_ignores())
        logger.info("Generating action classes for %s", declaration.name)
        lines.extend(generate_declaration_actions(declaration, emitter))
        generated.append(declaration.name)
    code = "\n".join(lines).rstrip() + "\n" if lines else ""
    return ActionsOutput(code=code, generated=generated, repairs=list(dict.fromkeys(emitter.repairs)))


def generate_declaration_actions(declaration: Declaration, emitter: TypeEmitter) -> list[str]:
    lines: list[str] = []
    if len(declaration.constructors) > 1:
        lines.extend(emit_dispatcher_class(build_dispatcher_class(declaration, emitter)))
    lines.extend(emit_names_class(build_names_class(declaration, emitter)))
    return lines


def build_dispatcher_class(declaration: Declaration, emitter: TypeEmitter) -> DispatcherClassIR:
    conventions = emitter.conventions
    return DispatcherClassIR(
        class_name=conventions.generated_name(declaration.name),
        base_name=declaration.name,
        dispatcher_wrapper=conventions.dispatcher_marker,
        dispatcher_type=conventions.dispatcher_type,
        dispatchers=_dispatcher_fields(declaration, emitter),
        nested=for_each_field_with_inherited(
            declaration,
            _nested_actions_field,
            partial(needs_generation, conventions=conventions),
        ),
    )


def build_names_class(declaration: Declaration, emitter: TypeEmitter) -> NamesClassIR:
    conventions = emitter.conventions
    return NamesClassIR(
        class_name=conventions.names_class_name(declaration.name),
        action_name_type=conventions.action_name_type,
        names=_dispatcher_fields(declaration, emitter),
    )


def _dispatcher_fields(declaration: Declaration, emitter: TypeEmitter) -> list[DispatcherFieldIR]:
    conventions = emitter.conventions

    def template(owner: Declaration, action: Field) -> DispatcherFieldIR:
        return DispatcherFieldIR(
            name=action.name,
            payload_type=emitter.emit(_payload_type(action)),
            key=conventions.action_key(owner.name, action.name),
        )

    return for_each_field_with_inherited(
        declaration,
        template,
        partial(is_dispatcher_field, conventions=conventions),
    )


def _nested_actions_field(owner: Declaration, nested: Field) -> NestedActionsFieldIR:
    type_declaration = cast(Declaration, field_type_declaration(nested))
    return NestedActionsFieldIR(name=nested.name, type_name=type_declaration.name)


def _payload_type(action: Field) -> TypeRef | None:
    if isinstance(action.type, InterfaceType) and action.type.arguments:
        return action.type.arguments[0]
    return None
