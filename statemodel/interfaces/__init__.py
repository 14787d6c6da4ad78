"""
Interfaces package for the model boundary.

Architecture:
- Declares the read-only protocols the parser traverses
- Declares the action resolver capability
- Keeps the parser independent of any concrete model library
"""

from .protocols import (
    ActionResolver,
    BehaviorElement,
    EventElement,
    Model,
    ModelElement,
    PseudostateElement,
    RegionElement,
    SignalElement,
    SignalEventElement,
    StateElement,
    StateMachineElement,
    TransitionElement,
    TriggerElement,
    VertexElement,
)

__all__ = [
    "ActionResolver",
    "BehaviorElement",
    "EventElement",
    "Model",
    "ModelElement",
    "PseudostateElement",
    "RegionElement",
    "SignalElement",
    "SignalEventElement",
    "StateElement",
    "StateMachineElement",
    "TransitionElement",
    "TriggerElement",
    "VertexElement",
]
