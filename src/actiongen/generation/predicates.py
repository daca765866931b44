from __future__ import annotations

from ..model import Declaration, Field, InterfaceType
from .conventions import NamingConventions


def needs_generation(declaration: Declaration | None, conventions: NamingConventions) -> bool:
    """Check whether a declaration is an action container needing generated code.

    Declarations already carrying the generated prefix are rejected so that
    generated output is never processed again.
    """
    if declaration is None or not declaration.is_class:
        return False
    return has_supertype(declaration, conventions.container_marker) and not declaration.shown_name.startswith(
        conventions.generated_prefix
    )


def is_dispatcher_field(declaration: Declaration | None, conventions: NamingConventions) -> bool:
    """Check whether a field type declaration is the action dispatcher wrapper."""
    return declaration is not None and declaration.is_class and declaration.name == conventions.dispatcher_marker


def has_supertype(declaration: Declaration, name: str) -> bool:
    return any(supertype.name == name for supertype in declaration.supertypes)


def field_type_declaration(field: Field) -> Declaration | None:
    """Get the declaration named by a field's type, if there is one."""
    if isinstance(field.type, InterfaceType):
        return field.type.declaration
    return None
