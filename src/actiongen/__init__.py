from .errors import ActiongenError, ModelError
from .generation import (
    ActionsOutput,
    NamingConventions,
    TypeEmitter,
    generate_actions,
)
from .generator import PartFileSpec, generate_part_file
from .loader import load_unit
from .model import (
    CompilationUnit,
    Constructor,
    Declaration,
    DynamicType,
    Field,
    FunctionType,
    InterfaceType,
    TypeParameter,
    TypeRef,
    VoidType,
)

__all__ = [
    "ActiongenError",
    "ModelError",
    "ActionsOutput",
    "NamingConventions",
    "TypeEmitter",
    "generate_actions",
    "PartFileSpec",
    "generate_part_file",
    "load_unit",
    "CompilationUnit",
    "Constructor",
    "Declaration",
    "DynamicType",
    "Field",
    "FunctionType",
    "InterfaceType",
    "TypeParameter",
    "TypeRef",
    "VoidType",
]
