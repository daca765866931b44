from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NamingConventions:
    """Naming conventions recognized and emitted by the action generator.

    Every stringly-typed convention used by the predicates, the generic
    correction heuristic and the templates lives here.

    Attributes:
        container_marker: Supertype name flagging a declaration for generation
        dispatcher_marker: Field type name marking a dispatchable action
        action_name_type: Type used for the static action name fields
        dispatcher_type: Runtime dispatcher type passed to setDispatcher
        generated_prefix: Prefix carried by generated declarations
        names_suffix: Suffix of the names companion class
        value_prefix: Bound name prefix of the value half of a value/builder pair
        builder_prefix: Bound name prefix of the builder half of a value/builder pair
        builder_suffix: Suffix appended to a value type to name its builder
        dynamic_token: Rendering of unresolved or unknown types
        void_token: Rendering of the void type
    """

    container_marker: str = "ReduxActions"
    dispatcher_marker: str = "ActionDispatcher"
    action_name_type: str = "ActionName"
    dispatcher_type: str = "Dispatcher"
    generated_prefix: str = "_$"
    names_suffix: str = "Names"
    value_prefix: str = "Built"
    builder_prefix: str = "Builder"
    builder_suffix: str = "Builder"
    dynamic_token: str = "dynamic"
    void_token: str = "void"

    def generated_name(self, name: str) -> str:
        return f"{self.generated_prefix}{name}"

    def names_class_name(self, name: str) -> str:
        return f"{name}{self.names_suffix}"

    def builder_name(self, value_name: str) -> str:
        return f"{value_name}{self.builder_suffix}"

    def action_key(self, owner_name: str, field_name: str) -> str:
        return f"{owner_name}-{field_name}"

    def is_value_bound(self, name: str) -> bool:
        return name.startswith(self.value_prefix)

    def is_builder_bound(self, name: str) -> bool:
        return name.startswith(self.builder_prefix)
