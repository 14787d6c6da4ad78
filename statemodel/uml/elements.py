# statemodel/uml/elements.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
In-memory UML state machine elements.

Architecture:
- Reference implementation of the protocols in statemodel.interfaces
- Owned collections are lists kept in insertion (document) order
- Upward links (region owner, vertex container) are weak references

Responsibilities:
1. Containment
   - Model owns packaged elements
   - State machines and composite states own regions
   - Regions own vertices and transitions

2. Navigation
   - Region owner and vertex container lookup
   - Incoming/outgoing transitions per vertex
   - Trigger to event to signal chain

Dependencies:
- core/types.py: kind tags exposed to the parser
"""

from typing import List, Optional, Sequence, Union
from weakref import ReferenceType, ref

from statemodel.core.types import (
    BehaviorKind,
    ElementType,
    EventKind,
    PseudostateKind,
    VertexKind,
)


class Element:
    """Base class of every model element."""

    element_type: ElementType

    def __init__(self, name: Optional[str] = None) -> None:
        if name is not None and not isinstance(name, str):
            raise ValueError("Element name must be a string or None")
        self._name = name

    @property
    def name(self) -> Optional[str]:
        return self._name

    def get_name(self) -> Optional[str]:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class Signal(Element):
    """A named signal carried by signal events."""

    element_type = ElementType.SIGNAL


class Behavior(Element):
    element_type = ElementType.BEHAVIOR
    behavior_kind: BehaviorKind


class Activity(Behavior):
    """Named behavior whose name identifies an action."""

    behavior_kind = BehaviorKind.ACTIVITY


class OpaqueBehavior(Behavior):
    """Behavior given as opaque text in some language."""

    behavior_kind = BehaviorKind.OPAQUE_BEHAVIOR

    def __init__(self, name: Optional[str] = None, body: str = "", language: str = "") -> None:
        super().__init__(name)
        self.body = body
        self.language = language


class Event(Element):
    element_type = ElementType.EVENT
    event_kind: EventKind


class SignalEvent(Event):
    """Event raised by the reception of a signal."""

    event_kind = EventKind.SIGNAL

    def __init__(self, signal: Optional[Signal] = None, name: Optional[str] = None) -> None:
        super().__init__(name)
        self._signal = signal

    def get_signal(self) -> Optional[Signal]:
        return self._signal


class TimeEvent(Event):
    """Event raised when a timer expires.

    ``when`` is expressed in milliseconds, relative to state entry unless
    ``relative`` is False.
    """

    event_kind = EventKind.TIME

    def __init__(self, when: Optional[int] = None, relative: bool = True, name: Optional[str] = None) -> None:
        super().__init__(name)
        if when is not None and when < 0:
            raise ValueError("Time event delay must be non-negative")
        self.when = when
        self.relative = relative


class ChangeEvent(Event):
    event_kind = EventKind.CHANGE

    def __init__(self, expression: str = "", name: Optional[str] = None) -> None:
        super().__init__(name)
        self.expression = expression


class CallEvent(Event):
    event_kind = EventKind.CALL

    def __init__(self, operation: Optional[str] = None, name: Optional[str] = None) -> None:
        super().__init__(name)
        self.operation = operation


class AnyReceiveEvent(Event):
    event_kind = EventKind.ANY_RECEIVE


class Trigger(Element):
    element_type = ElementType.TRIGGER

    def __init__(self, event: Optional[Event] = None, name: Optional[str] = None) -> None:
        super().__init__(name)
        self._event = event

    def get_event(self) -> Optional[Event]:
        return self._event


class Vertex(Element):
    """Node of a region's graph."""

    vertex_kind: VertexKind

    def __init__(self, name: Optional[str] = None) -> None:
        super().__init__(name)
        self._container: Optional[ReferenceType["Region"]] = None
        self._incomings: List["Transition"] = []
        self._outgoings: List["Transition"] = []

    def get_container(self) -> Optional["Region"]:
        return self._container() if self._container is not None else None

    def get_incomings(self) -> Sequence["Transition"]:
        return tuple(self._incomings)

    def get_outgoings(self) -> Sequence["Transition"]:
        return tuple(self._outgoings)


class Pseudostate(Vertex):
    """Transient vertex: initial, choice, fork, join, history, final, ..."""

    element_type = ElementType.PSEUDOSTATE
    vertex_kind = VertexKind.PSEUDOSTATE

    def __init__(self, name: Optional[str] = None, kind: PseudostateKind = PseudostateKind.INITIAL) -> None:
        if not isinstance(kind, PseudostateKind):
            raise ValueError("Pseudostate kind must be a PseudostateKind enum value")
        super().__init__(name)
        self.pseudostate_kind = kind


class State(Vertex):
    """
    Simple or composite state.

    A state becomes composite as soon as it owns a region.
    """

    element_type = ElementType.STATE

    def __init__(
        self,
        name: Optional[str] = None,
        entry: Optional[Behavior] = None,
        exit: Optional[Behavior] = None,
        do_activity: Optional[Behavior] = None,
    ) -> None:
        super().__init__(name)
        self._regions: List["Region"] = []
        self.entry = entry
        self.exit = exit
        self.do_activity = do_activity

    @property
    def vertex_kind(self) -> VertexKind:
        return VertexKind.COMPOSITE if self._regions else VertexKind.SIMPLE

    @property
    def is_composite(self) -> bool:
        return bool(self._regions)

    def get_regions(self) -> Sequence["Region"]:
        return tuple(self._regions)

    def get_entry(self) -> Optional[Behavior]:
        return self.entry

    def get_exit(self) -> Optional[Behavior]:
        return self.exit

    def add_region(self, region: Optional["Region"] = None) -> "Region":
        """Attach ``region`` (or a new one) to this state and return it."""
        region = region if region is not None else Region()
        region._set_owner(self)
        self._regions.append(region)
        return region


RegionOwner = Union["StateMachine", State]


class Transition(Element):
    """
    Directed edge between two vertices.

    Creating a transition registers it as outgoing on its source and
    incoming on its target.
    """

    element_type = ElementType.TRANSITION

    def __init__(
        self,
        source: Optional[Vertex],
        target: Optional[Vertex],
        triggers: Sequence[Trigger] = (),
        name: Optional[str] = None,
    ) -> None:
        super().__init__(name)
        self._source = source
        self._target = target
        self._triggers: List[Trigger] = list(triggers)
        self._container: Optional[ReferenceType["Region"]] = None
        if source is not None:
            source._outgoings.append(self)
        if target is not None:
            target._incomings.append(self)

    def get_source(self) -> Optional[Vertex]:
        return self._source

    def get_target(self) -> Optional[Vertex]:
        return self._target

    def get_triggers(self) -> Sequence[Trigger]:
        return tuple(self._triggers)

    def get_container(self) -> Optional["Region"]:
        return self._container() if self._container is not None else None

    def add_trigger(self, trigger: Trigger) -> Trigger:
        self._triggers.append(trigger)
        return trigger

    def __repr__(self) -> str:
        source = self._source.get_name() if self._source is not None else None
        target = self._target.get_name() if self._target is not None else None
        return f"Transition({source!r} -> {target!r})"


class Region(Element):
    """Container of vertices and transitions."""

    element_type = ElementType.REGION

    def __init__(self, name: Optional[str] = None) -> None:
        super().__init__(name)
        self._owner: Optional[ReferenceType[RegionOwner]] = None
        self._subvertices: List[Vertex] = []
        self._transitions: List[Transition] = []

    def _set_owner(self, owner: RegionOwner) -> None:
        if self._owner is not None and self._owner() is not None:
            raise ValueError(f"{self!r} already has an owner")
        self._owner = ref(owner)

    def get_owner(self) -> Optional[RegionOwner]:
        return self._owner() if self._owner is not None else None

    def get_subvertices(self) -> Sequence[Vertex]:
        return tuple(self._subvertices)

    def get_transitions(self) -> Sequence[Transition]:
        return tuple(self._transitions)

    def add_vertex(self, vertex: Vertex) -> Vertex:
        """
        Add a vertex to this region.

        :raises ValueError: If the vertex already belongs to a region.
        """
        if vertex.get_container() is not None:
            raise ValueError(f"{vertex!r} already belongs to a region")
        vertex._container = ref(self)
        self._subvertices.append(vertex)
        return vertex

    def add_transition(self, transition: Transition) -> Transition:
        if transition.get_container() is not None:
            raise ValueError(f"{transition!r} already belongs to a region")
        transition._container = ref(self)
        self._transitions.append(transition)
        return transition


class StateMachine(Element):
    element_type = ElementType.STATE_MACHINE

    def __init__(self, name: Optional[str] = None) -> None:
        super().__init__(name)
        self._regions: List[Region] = []

    def get_regions(self) -> Sequence[Region]:
        return tuple(self._regions)

    def add_region(self, region: Optional[Region] = None) -> Region:
        region = region if region is not None else Region()
        region._set_owner(self)
        self._regions.append(region)
        return region


class Model(Element):
    """Root element holding packaged elements in document order."""

    element_type = ElementType.MODEL

    def __init__(self, name: Optional[str] = None) -> None:
        super().__init__(name)
        self._packaged_elements: List[Element] = []

    def get_packaged_elements(self) -> Sequence[Element]:
        return tuple(self._packaged_elements)

    def add_packaged_element(self, element: Element) -> Element:
        self._packaged_elements.append(element)
        return element
