from .actions import ActionsOutput, generate_actions
from .conventions import NamingConventions
from .fields import collect_fields, for_each_field_with_inherited
from .predicates import is_dispatcher_field, needs_generation
from .type_emitter import TypeEmitter

__all__ = [
    "ActionsOutput",
    "NamingConventions",
    "TypeEmitter",
    "collect_fields",
    "for_each_field_with_inherited",
    "generate_actions",
    "is_dispatcher_field",
    "needs_generation",
]
