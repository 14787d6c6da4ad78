# statemodel/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Read-only protocols the parser needs from a model object graph.

Any modeling toolkit can be parsed as long as its elements (or thin adapters
around them) satisfy these protocols. Kinds are exposed as enum tags so the
parser never has to downcast.

Runtime Invariants:
- Accessors are side-effect free.
- Collections are returned in document order.
"""

from typing import Optional, Protocol, Sequence, runtime_checkable

from statemodel.core.types import (
    Action,
    ActionId,
    BehaviorKind,
    ElementType,
    EventKind,
    PseudostateKind,
    VertexKind,
)


@runtime_checkable
class ModelElement(Protocol):
    """Anything owned by a model. Tagged with its element type."""

    element_type: ElementType


@runtime_checkable
class SignalElement(Protocol):
    def get_name(self) -> Optional[str]: ...


@runtime_checkable
class EventElement(Protocol):
    """
    An event a trigger refers to.

    Signal events (``event_kind == EventKind.SIGNAL``) additionally expose
    ``get_signal()``, which may return None.
    """

    event_kind: EventKind


@runtime_checkable
class SignalEventElement(EventElement, Protocol):
    def get_signal(self) -> Optional[SignalElement]: ...


@runtime_checkable
class TriggerElement(Protocol):
    def get_event(self) -> Optional[EventElement]: ...


@runtime_checkable
class BehaviorElement(Protocol):
    """A behavior sitting in a state's entry or exit slot."""

    behavior_kind: BehaviorKind

    def get_name(self) -> Optional[str]: ...


@runtime_checkable
class VertexElement(Protocol):
    """
    A node in a region's graph.

    Pseudostates additionally carry ``pseudostate_kind``.
    """

    vertex_kind: VertexKind

    def get_name(self) -> Optional[str]: ...

    def get_container(self) -> Optional["RegionElement"]: ...

    def get_incomings(self) -> Sequence["TransitionElement"]: ...

    def get_outgoings(self) -> Sequence["TransitionElement"]: ...


@runtime_checkable
class PseudostateElement(VertexElement, Protocol):
    pseudostate_kind: PseudostateKind


@runtime_checkable
class StateElement(VertexElement, Protocol):
    """A simple or composite state."""

    def get_regions(self) -> Sequence["RegionElement"]: ...

    def get_entry(self) -> Optional[BehaviorElement]: ...

    def get_exit(self) -> Optional[BehaviorElement]: ...


@runtime_checkable
class TransitionElement(Protocol):
    def get_source(self) -> Optional[VertexElement]: ...

    def get_target(self) -> Optional[VertexElement]: ...

    def get_triggers(self) -> Sequence[TriggerElement]: ...


@runtime_checkable
class RegionElement(Protocol):
    """A container of vertices and transitions."""

    def get_owner(self) -> Optional[ModelElement]: ...

    def get_subvertices(self) -> Sequence[VertexElement]: ...

    def get_transitions(self) -> Sequence[TransitionElement]: ...


@runtime_checkable
class StateMachineElement(Protocol):
    element_type: ElementType

    def get_regions(self) -> Sequence[RegionElement]: ...


@runtime_checkable
class Model(Protocol):
    """Root of a loaded model."""

    def get_packaged_elements(self) -> Sequence[ModelElement]: ...


@runtime_checkable
class ActionResolver(Protocol):
    """
    Maps an action identifier to an invocable action.

    Error Handling:
    - An unknown identifier is reported by returning None, never by raising.
    """

    def resolve(self, identifier: ActionId) -> Optional[Action]: ...
