"""Structural declaration model consumed by the generator.

This module defines the read-only snapshot of a compilation unit that the
generation modules work on. Instances are built either by hand (tests) or
by the loader from a JSON/YAML dump produced by an analyzer.

Key classes:
- CompilationUnit: All declarations visible in one source file
- Declaration: A class-like entity with fields, constructors and supertypes
- Field: A named field with a type reference
- InterfaceType / FunctionType / VoidType / DynamicType: Type references
- TypeParameter: A declared type parameter with an optional bound
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeParameter:
    """A declared type parameter.

    Attributes:
        name: The parameter name (e.g., "T")
        bound: The declared upper bound, if any
    """

    name: str
    bound: TypeRef | None = None


@dataclass(frozen=True)
class InterfaceType:
    """A named type, optionally parameterized.

    Attributes:
        name: The type name without type arguments
        arguments: The supplied type arguments, in order
        parameters: The declared type parameters. Must be the same length as
            arguments; a simple `List<int>` still needs one TypeParameter.
            Rendering a misaligned type raises ModelError.
        declaration: The declaration this type refers to, when known
    """

    name: str
    arguments: tuple[TypeRef, ...] = ()
    parameters: tuple[TypeParameter, ...] = ()
    declaration: Declaration | None = None


@dataclass(frozen=True)
class FunctionType:
    """A function type, usually referenced through a typedef name.

    Attributes:
        name: The typedef name
        arguments: The supplied type arguments, in order
        parameters: The typedef's type parameters. Must be the same length
            as arguments; rendering a misaligned type raises ModelError.
    """

    name: str
    arguments: tuple[TypeRef, ...] = ()
    parameters: tuple[TypeParameter, ...] = ()


@dataclass(frozen=True)
class VoidType:
    """The void type."""


@dataclass(frozen=True)
class DynamicType:
    """An unresolved or placeholder type."""


TypeRef = InterfaceType | FunctionType | VoidType | DynamicType


@dataclass(frozen=True)
class Field:
    name: str
    type: TypeRef


@dataclass(frozen=True)
class Constructor:
    name: str = ""


@dataclass(frozen=True)
class Declaration:
    """A class-like declaration.

    Attributes:
        name: The declaration name
        display_name: The name as shown to users; defaults to name
        is_class: Whether the declaration is a class (as opposed to e.g. an enum or typedef)
        constructors: Declared constructors, in order
        fields: Fields declared directly on this declaration, in order
        supertypes: The transitively flattened supertypes, in model order
    """

    name: str
    display_name: str | None = None
    is_class: bool = True
    constructors: tuple[Constructor, ...] = ()
    fields: tuple[Field, ...] = ()
    supertypes: tuple[Declaration, ...] = ()

    @property
    def shown_name(self) -> str:
        return self.display_name if self.display_name is not None else self.name


@dataclass(frozen=True)
class CompilationUnit:
    """All declarations visible in one source file.

    Attributes:
        name: The source file name (e.g., "counter.dart")
        declarations: The declarations in source order
    """

    name: str
    declarations: tuple[Declaration, ...]
