"""Type rendering for generated action classes.

This module provides the TypeEmitter class which converts type references
from the declaration model back into Dart source text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..errors import ModelError
from ..model import FunctionType, InterfaceType, TypeParameter, TypeRef, VoidType
from .conventions import NamingConventions

logger = logging.getLogger(__name__)


@dataclass
class TypeEmitter:
    """Converts model type references to Dart type strings.

    Attributes:
        conventions: Naming conventions used for fallback tokens and the
            value/builder correction
        repairs: Builder names inferred by the correction heuristic, in the
            order they were produced

    Example:
        >>> emitter = TypeEmitter(NamingConventions())
        >>> emitter.emit(InterfaceType("int"))
        'int'
        >>> emitter.emit(DynamicType())
        'dynamic'
    """

    conventions: NamingConventions = field(default_factory=NamingConventions)
    repairs: list[str] = field(default_factory=list)

    def emit(self, type_ref: TypeRef | None) -> str:
        """Render a type reference as Dart source text.

        Function and interface types render their name, followed by their
        corrected type arguments in angle brackets when there are any. Void
        renders as ``void`` and everything else as ``dynamic``.

        Raises:
            ModelError: If a type's arguments and parameters are not aligned
        """
        if isinstance(type_ref, (FunctionType, InterfaceType)):
            generics = self.correct_unresolved_generics(type_ref.arguments, type_ref.parameters)
            if not generics:
                return type_ref.name
            return f"{type_ref.name}<{','.join(generics)}>"
        if isinstance(type_ref, VoidType):
            return self.conventions.void_token
        return self.conventions.dynamic_token

    def correct_unresolved_generics(
        self,
        arguments: Sequence[TypeRef],
        parameters: Sequence[TypeParameter],
    ) -> list[str]:
        """Render type arguments, inferring builder types that are not generated yet.

        When a parameter bounded by a value type is immediately followed by a
        parameter bounded by a builder type, and the argument supplied for the
        builder slot is still unresolved, the builder slot is rewritten as the
        value argument's name plus the builder suffix. Every other position is
        left untouched. The final position is only ever inspected as the
        builder half of a pair.

        Args:
            arguments: Supplied type arguments
            parameters: Declared type parameters, aligned with arguments

        Returns:
            A new list of rendered type arguments

        Raises:
            ModelError: If arguments and parameters differ in length
        """
        if len(arguments) != len(parameters):
            raise ModelError(
                f"Type arguments and parameters are not aligned: {len(arguments)} arguments, "
                f"{len(parameters)} parameters"
            )
        rendered = [self.emit(argument) for argument in arguments]
        bounds = [_bound_name(parameter) for parameter in parameters]
        for index in range(len(bounds) - 1):
            bound = bounds[index]
            if bound is None or not self.conventions.is_value_bound(bound):
                continue
            following = bounds[index + 1]
            if (
                following is not None
                and self.conventions.is_builder_bound(following)
                and rendered[index + 1] == self.conventions.dynamic_token
            ):
                builder = self.conventions.builder_name(rendered[index])
                logger.info("Replacing unresolved builder name %s", builder)
                rendered[index + 1] = builder
                self.repairs.append(builder)
        return rendered


def _bound_name(parameter: TypeParameter) -> str | None:
    bound = parameter.bound
    if isinstance(bound, (FunctionType, InterfaceType)):
        return bound.name
    return None
