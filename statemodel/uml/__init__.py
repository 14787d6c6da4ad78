"""
UML package providing an in-memory model graph.

Architecture:
- Implements the element protocols the parser traverses
- Maintains containment and incoming/outgoing links
- Offers a name-based builder for assembling models in code
"""

from .builder import ModelBuilder
from .elements import (
    Activity,
    AnyReceiveEvent,
    Behavior,
    CallEvent,
    ChangeEvent,
    Element,
    Event,
    Model,
    OpaqueBehavior,
    Pseudostate,
    Region,
    Signal,
    SignalEvent,
    State,
    StateMachine,
    TimeEvent,
    Transition,
    Trigger,
    Vertex,
)

__all__ = [
    "Activity",
    "AnyReceiveEvent",
    "Behavior",
    "CallEvent",
    "ChangeEvent",
    "Element",
    "Event",
    "Model",
    "ModelBuilder",
    "OpaqueBehavior",
    "Pseudostate",
    "Region",
    "Signal",
    "SignalEvent",
    "State",
    "StateMachine",
    "TimeEvent",
    "Transition",
    "Trigger",
    "Vertex",
]
