from __future__ import annotations

from typing import Callable, TypeVar

from ..model import Declaration, Field
from .predicates import field_type_declaration

T = TypeVar("T")

FieldTest = Callable[[Declaration | None], bool]
FieldTemplate = Callable[[Declaration, Field], T]


def collect_fields(declaration: Declaration, field_test: FieldTest) -> list[tuple[Declaration, Field]]:
    """Collect matching fields from a declaration and all of its supertypes.

    The declaration's own fields come first, followed by each supertype's
    directly declared fields in supertype order. Fields are never
    deduplicated by name: a field shadowed by a subclass appears twice.

    Args:
        declaration: The declaration being generated
        field_test: Predicate applied to the declaration named by each field's type

    Returns:
        (owner, field) pairs where owner is the declaration declaring the field
    """
    collected: list[tuple[Declaration, Field]] = []
    for source in (declaration, *declaration.supertypes):
        for field in source.fields:
            if field_test(field_type_declaration(field)):
                collected.append((source, field))
    return collected


def for_each_field_with_inherited(
    declaration: Declaration,
    template: FieldTemplate[T],
    field_test: FieldTest,
) -> list[T]:
    """Apply a template to every matching field, inherited ones included."""
    return [template(owner, field) for owner, field in collect_fields(declaration, field_test)]
