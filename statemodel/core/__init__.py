"""
Core package providing the model parsing functionality.

Architecture:
- Flattens hierarchical state machine models into state and transition records
- Resolves entry/exit behaviors into actions through an injected resolver
- Depends on the model only through statemodel.interfaces protocols

Cross-cutting:
- InputError is the only failure propagated for model content
- Logging through module loggers, no handlers installed
"""

# Import order matters to avoid circular dependencies
from .types import (
    BehaviorKind,
    ElementType,
    EventKind,
    PseudostateKind,
    TriggerKind,
    TriggerSpec,
    VertexKind,
)
from .errors import BuildError, InputError, StateModelError
from .records import ParseResult, StateRecord, TransitionRecord
from .markers import is_initial_state
from .actions import ActionBinder, NullActionResolver, RegistryActionResolver
from .parser import ModelParser, classify_trigger, parse_model

__all__ = [
    # Tags
    "BehaviorKind",
    "ElementType",
    "EventKind",
    "PseudostateKind",
    "TriggerKind",
    "TriggerSpec",
    "VertexKind",
    # Errors
    "BuildError",
    "InputError",
    "StateModelError",
    # Records
    "ParseResult",
    "StateRecord",
    "TransitionRecord",
    # Parsing
    "ActionBinder",
    "ModelParser",
    "NullActionResolver",
    "RegistryActionResolver",
    "classify_trigger",
    "is_initial_state",
    "parse_model",
]
