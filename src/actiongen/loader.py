from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Mapping, cast

from .errors import ModelError
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

ModelSource = str | PathLike[str] | Mapping[str, object]


def load_unit(source: ModelSource) -> CompilationUnit:
    """Load a compilation unit from a declaration dump.

    Args:
        source: A file path (JSON or YAML) or a dict-like object

    Returns:
        The compilation unit with supertypes flattened and type names resolved

    Raises:
        ModelError: If the document is malformed
    """
    document = _read_source(source)
    library = document.get("library")
    if not isinstance(library, str) or not library:
        raise ModelError("Missing or invalid 'library' field in document")
    raw_declarations = document.get("declarations", [])
    if not isinstance(raw_declarations, list):
        raise ModelError("'declarations' must be a list")
    builder = UnitBuilder(cast(list[object], raw_declarations))
    return CompilationUnit(name=library, declarations=builder.build())


@dataclass
class UnitBuilder:
    """Builds immutable declarations from raw declaration documents.

    This class handles:
    - Flattening direct supertypes into the transitive supertype set
    - Resolving type names to declarations, creating stubs for unknown names
    - Supertype cycle detection

    Supertypes are flattened depth-first in declared order; the first
    occurrence of a name wins. Declarations referenced from field types are
    headers: they carry names, kinds and supertypes but no fields.
    """

    raw: list[object]
    _documents: dict[str, dict[str, object]] = field(default_factory=dict, init=False)
    _built: dict[str, Declaration] = field(default_factory=dict, init=False)
    _headers: dict[str, Declaration] = field(default_factory=dict, init=False)
    _in_progress: set[str] = field(default_factory=set, init=False)

    def build(self) -> tuple[Declaration, ...]:
        for index, item in enumerate(self.raw):
            if not isinstance(item, dict):
                raise ModelError(f"declarations[{index}] must be an object")
            name = item.get("name")
            if not isinstance(name, str) or not name:
                raise ModelError(f"declarations[{index}] is missing a name")
            if name in self._documents:
                raise ModelError(f"Duplicate declaration: {name}")
            self._documents[name] = cast(dict[str, object], item)
        return tuple(self.declaration(name) for name in self._documents)

    def declaration(self, name: str) -> Declaration:
        """Get the full declaration for a name, fields included."""
        if name not in self._built:
            self._built[name] = self._make(name, with_fields=True)
        return self._built[name]

    def header(self, name: str) -> Declaration:
        """Get the field-less declaration for a name."""
        if name not in self._headers:
            self._headers[name] = self._make(name, with_fields=False)
        return self._headers[name]

    def _make(self, name: str, with_fields: bool) -> Declaration:
        document = self._documents.get(name)
        if document is None:
            return Declaration(name=name)
        key = f"{name}:{with_fields}"
        if key in self._in_progress:
            raise ModelError(f"Supertype cycle through {name}")
        self._in_progress.add(key)
        supertypes = self._flatten_supertypes(name, document, with_fields)
        self._in_progress.discard(key)
        return Declaration(
            name=name,
            display_name=_optional_str(document, "display_name", name),
            is_class=document.get("kind", "class") == "class",
            constructors=_constructors(document, name),
            fields=tuple(self._fields(document, name)) if with_fields else (),
            supertypes=supertypes,
        )

    def type_ref(self, value: object, path: str) -> TypeRef:
        if isinstance(value, str):
            return self._named_type(value, path)
        if not isinstance(value, dict):
            raise ModelError(f"{path} must be a type name or an object")
        kind = value.get("kind", "interface")
        if kind == "void":
            return VoidType()
        if kind == "dynamic":
            return DynamicType()
        name = value.get("name")
        if not isinstance(name, str) or not name:
            raise ModelError(f"{path} is missing a type name")
        arguments = tuple(
            self.type_ref(argument, f"{path}.arguments[{index}]")
            for index, argument in enumerate(_list(value, "arguments", path))
        )
        raw_parameters = value.get("parameters")
        if raw_parameters is None:
            parameters = tuple(TypeParameter(name=f"T{index}") for index in range(len(arguments)))
        else:
            parameters = tuple(
                self._type_parameter(parameter, f"{path}.parameters[{index}]")
                for index, parameter in enumerate(_list(value, "parameters", path))
            )
        if len(parameters) != len(arguments):
            raise ModelError(f"{path} has {len(arguments)} arguments but {len(parameters)} parameters")
        if kind == "function":
            return FunctionType(name=name, arguments=arguments, parameters=parameters)
        if kind == "interface":
            return InterfaceType(
                name=name,
                arguments=arguments,
                parameters=parameters,
                declaration=self.header(name),
            )
        raise ModelError(f"{path} has unsupported type kind: {kind}")

    def _named_type(self, name: str, path: str) -> TypeRef:
        if name == "void":
            return VoidType()
        if name == "dynamic":
            return DynamicType()
        if not name:
            raise ModelError(f"{path} is an empty type name")
        return InterfaceType(name=name, declaration=self.header(name))

    def _type_parameter(self, value: object, path: str) -> TypeParameter:
        if isinstance(value, str):
            return TypeParameter(name=value)
        if not isinstance(value, dict):
            raise ModelError(f"{path} must be a parameter name or an object")
        name = value.get("name")
        if not isinstance(name, str) or not name:
            raise ModelError(f"{path} is missing a parameter name")
        bound = value.get("bound")
        return TypeParameter(
            name=name,
            bound=self.type_ref(bound, f"{path}.bound") if bound is not None else None,
        )

    def _fields(self, document: dict[str, object], owner: str) -> list[Field]:
        fields: list[Field] = []
        for index, item in enumerate(_list(document, "fields", owner)):
            path = f"{owner}.fields[{index}]"
            if not isinstance(item, dict):
                raise ModelError(f"{path} must be an object")
            name = item.get("name")
            if not isinstance(name, str) or not name:
                raise ModelError(f"{path} is missing a name")
            if "type" not in item:
                raise ModelError(f"{path} is missing a type")
            fields.append(Field(name=name, type=self.type_ref(item["type"], f"{path}.type")))
        return fields

    def _flatten_supertypes(
        self,
        owner: str,
        document: dict[str, object],
        with_fields: bool,
    ) -> tuple[Declaration, ...]:
        flattened: dict[str, Declaration] = {}
        for index, name in enumerate(_list(document, "supertypes", owner)):
            if not isinstance(name, str) or not name:
                raise ModelError(f"{owner}.supertypes[{index}] must be a type name")
            supertype = self.declaration(name) if with_fields else self.header(name)
            for entry in (supertype, *supertype.supertypes):
                flattened.setdefault(entry.name, entry)
        return tuple(flattened.values())


def _constructors(document: dict[str, object], owner: str) -> tuple[Constructor, ...]:
    value = document.get("constructors", 1)
    if isinstance(value, bool):
        raise ModelError(f"{owner}.constructors must be a count or a list of names")
    if isinstance(value, int):
        if value < 0:
            raise ModelError(f"{owner}.constructors must not be negative")
        return tuple(Constructor() for _ in range(value))
    if isinstance(value, list) and all(isinstance(name, str) for name in value):
        return tuple(Constructor(name=name) for name in value)
    raise ModelError(f"{owner}.constructors must be a count or a list of names")


def _optional_str(document: dict[str, object], key: str, owner: str) -> str | None:
    value = document.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ModelError(f"{owner}.{key} must be a string")


def _list(document: dict[str, object], key: str, path: str) -> list[object]:
    value = document.get(key, [])
    if not isinstance(value, list):
        raise ModelError(f"{path}.{key} must be a list")
    return cast(list[object], value)


def _read_source(source: ModelSource) -> dict[str, object]:
    """Read a declaration dump from a mapping or a file path."""
    if isinstance(source, Mapping):
        return dict(source)

    path = Path(source)
    text = path.read_text(encoding="utf-8")
    if path.suffix in {".yaml", ".yml"}:
        data = _load_yaml(text)
    else:
        data = _load_json_or_yaml(text)
    if not isinstance(data, dict):
        raise ModelError("Declaration document must be an object")
    return cast(dict[str, object], data)


def _load_json_or_yaml(text: str) -> object:
    """Try to load as JSON, fall back to YAML if that fails."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return _load_yaml(text)


def _load_yaml(text: str) -> object:
    """Load YAML text, requiring PyYAML to be installed."""
    try:
        import yaml
    except ImportError as exc:  # pragma: no cover - declared dependency
        raise ModelError("PyYAML is required to load YAML declaration dumps") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ModelError(f"Invalid declaration document: {exc}") from exc
