"""statemodel: flattening of UML state machine models

This package turns a hierarchical state machine model (regions, composite
states, triggered transitions) into flat, ordered state and transition
records that an execution engine can consume.

Responsibilities:
    - Locating the state machine in a loaded model
    - Depth-first traversal of nested regions
    - Parent/initial bookkeeping for every state
    - Signal trigger filtering for transitions
    - Entry/exit action resolution through an injected resolver

Interactions:
    - Model graphs through read-only protocols (statemodel.interfaces)
    - In-memory reference models (statemodel.uml)
    - Client action catalogs through the ActionResolver protocol
    - Logging system for diagnostics

Cross-cutting Concerns:
    Error Handling:
        - InputError when no state machine can be found
        - Missing actions and unsupported triggers are not errors

    Logging:
        - Module level loggers, DEBUG for traversal details
        - No handlers installed by the library

    Thread Safety:
        - Each parse keeps its working data local to the call
        - RegistryActionResolver is lock protected
"""

# core must load before config, which imports from it
from statemodel.core import (
    InputError,
    ModelParser,
    NullActionResolver,
    ParseResult,
    RegistryActionResolver,
    StateModelError,
    StateRecord,
    TransitionRecord,
    parse_model,
)
from statemodel.config import ParserConfig

__version__ = "0.1.0"

__all__ = [
    "InputError",
    "ModelParser",
    "NullActionResolver",
    "ParseResult",
    "ParserConfig",
    "RegistryActionResolver",
    "StateModelError",
    "StateRecord",
    "TransitionRecord",
    "parse_model",
]
