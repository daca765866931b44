from __future__ import annotations

from dataclasses import dataclass

LINT_IGNORES = [
    "// ignore_for_file: avoid_classes_with_only_static_members",
    "// ignore_for_file: annotate_overrides",
]


@dataclass(frozen=True)
class DispatcherFieldIR:
    """A dispatchable action field.

    Attributes:
        name: The field name
        payload_type: Rendered payload type of the action
        key: Composite action key shared by the dispatcher and its name
    """

    name: str
    payload_type: str
    key: str


@dataclass(frozen=True)
class NestedActionsFieldIR:
    """A field whose type is itself an action container."""

    name: str
    type_name: str


@dataclass(frozen=True)
class DispatcherClassIR:
    """Data for the generated dispatcher subclass.

    Attributes:
        class_name: Name of the generated subclass
        base_name: Name of the declaration being extended
        dispatcher_wrapper: Action dispatcher type instantiated per field
        dispatcher_type: Runtime dispatcher type accepted by setDispatcher
        dispatchers: Dispatchable action fields
        nested: Nested action container fields
    """

    class_name: str
    base_name: str
    dispatcher_wrapper: str
    dispatcher_type: str
    dispatchers: list[DispatcherFieldIR]
    nested: list[NestedActionsFieldIR]


@dataclass(frozen=True)
class NamesClassIR:
    class_name: str
    action_name_type: str
    names: list[DispatcherFieldIR]


def emit_lint_ignores() -> list[str]:
    return [*LINT_IGNORES, ""]


def emit_dispatcher_class(ir: DispatcherClassIR) -> list[str]:
    """Generate the subclass wiring every action field to the dispatcher.

    The private redirecting constructor pair is a fixed idiom that relies on
    the base declaration exposing a ``_()`` constructor.
    """
    lines = [
        f"class {ir.class_name} extends {ir.base_name} {{",
        f"  factory {ir.class_name}() => new {ir.class_name}._();",
        f"  {ir.class_name}._() : super._();",
        "",
    ]
    for dispatcher in ir.dispatchers:
        wrapper = f"{ir.dispatcher_wrapper}<{dispatcher.payload_type}>"
        lines.append(f"  final {wrapper} {dispatcher.name} = new {wrapper}('{dispatcher.key}');")
    for nested in ir.nested:
        lines.append(f"  final {nested.type_name} {nested.name} = new {nested.type_name}();")
    if ir.dispatchers or ir.nested:
        lines.append("")
    lines.append("  @override")
    lines.append(f"  void setDispatcher({ir.dispatcher_type} dispatcher) {{")
    for name in [item.name for item in ir.dispatchers] + [item.name for item in ir.nested]:
        lines.append(f"    {name}.setDispatcher(dispatcher);")
    lines.extend(["  }", "}", ""])
    return lines


def emit_names_class(ir: NamesClassIR) -> list[str]:
    """Generate the companion class holding one static name per action."""
    lines = [f"class {ir.class_name} {{"]
    for name in ir.names:
        action_name = f"{ir.action_name_type}<{name.payload_type}>"
        lines.append(f"  static final {action_name} {name.name} = new {action_name}('{name.key}');")
    lines.extend(["}", ""])
    return lines
