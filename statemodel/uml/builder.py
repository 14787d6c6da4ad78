# statemodel/uml/builder.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Builder assembling in-memory models from names.

Example::

    builder = ModelBuilder()
    builder.state("S1", initial=True)
    builder.state("S2")
    builder.transition("S1", "S2", "GO")
    model = builder.build()
"""

from typing import Dict, Optional, Union

from statemodel.core.errors import BuildError
from statemodel.core.types import PseudostateKind
from statemodel.uml.elements import (
    Activity,
    Behavior,
    Event,
    Model,
    Pseudostate,
    Region,
    Signal,
    SignalEvent,
    State,
    StateMachine,
    Transition,
    Trigger,
    Vertex,
)

BehaviorLike = Union[str, Behavior, None]
EventLike = Union[str, Event]


class ModelBuilder:
    """Builds a model holding exactly one state machine.

    Vertices are addressed by name, so names must be unique within one
    builder. States go into the first region of their parent (created on
    demand) unless an explicit region is given.

    Class Invariants:
    1. Each vertex name maps to exactly one vertex
    2. Each signal name maps to exactly one packaged signal
    3. Each region holds at most one initial pseudostate
    """

    def __init__(self, model_name: str = "model", machine_name: str = "machine") -> None:
        self._model = Model(model_name)
        self._machine = StateMachine(machine_name)
        self._model.add_packaged_element(self._machine)
        self._vertices: Dict[str, Vertex] = {}
        self._signals: Dict[str, Signal] = {}
        self._initials: Dict[int, Pseudostate] = {}

    @property
    def machine(self) -> StateMachine:
        return self._machine

    def vertex(self, name: str) -> Vertex:
        """
        Look up a vertex by name.

        :raises BuildError: If no vertex has that name.
        """
        try:
            return self._vertices[name]
        except KeyError:
            raise BuildError(f"Unknown vertex '{name}'") from None

    def region(self, owner: Optional[str] = None) -> Region:
        """Add a new region to ``owner`` (a state name) or to the machine."""
        if owner is None:
            return self._machine.add_region()
        state = self.vertex(owner)
        if not isinstance(state, State):
            raise BuildError(f"Vertex '{owner}' is not a state and cannot own regions")
        return state.add_region()

    def _default_region(self, parent: Optional[str]) -> Region:
        if parent is None:
            regions = self._machine.get_regions()
        else:
            state = self.vertex(parent)
            if not isinstance(state, State):
                raise BuildError(f"Vertex '{parent}' is not a state and cannot own regions")
            regions = state.get_regions()
        return regions[0] if regions else self.region(parent)

    def _add_vertex(self, vertex: Vertex, parent: Optional[str], region: Optional[Region]) -> Vertex:
        name = vertex.get_name()
        if not name:
            raise BuildError("Vertex name must be a non-empty string")
        if name in self._vertices:
            raise BuildError(f"Duplicate vertex '{name}'")
        target = region if region is not None else self._default_region(parent)
        target.add_vertex(vertex)
        self._vertices[name] = vertex
        return vertex

    def state(
        self,
        name: str,
        parent: Optional[str] = None,
        region: Optional[Region] = None,
        entry: BehaviorLike = None,
        exit: BehaviorLike = None,
        initial: bool = False,
    ) -> State:
        """
        Add a state.

        :param name: Unique state name.
        :param parent: Name of the enclosing state, None for a top-level state.
        :param region: Explicit region, overrides ``parent``.
        :param entry: Entry behavior, a string becomes an Activity of that name.
        :param exit: Exit behavior, a string becomes an Activity of that name.
        :param initial: Mark the state as its region's initial state.
        """
        state = State(name, entry=self._behavior(entry), exit=self._behavior(exit))
        self._add_vertex(state, parent, region)
        if initial:
            self.initial(name)
        return state

    def pseudostate(
        self,
        name: str,
        kind: PseudostateKind,
        parent: Optional[str] = None,
        region: Optional[Region] = None,
    ) -> Pseudostate:
        vertex = Pseudostate(name, kind)
        self._add_vertex(vertex, parent, region)
        return vertex

    def initial(self, name: str) -> Transition:
        """Mark vertex ``name`` as the initial target of its region."""
        target = self.vertex(name)
        region = target.get_container()
        initial = self._initials.get(id(region))
        if initial is None:
            initial = Pseudostate(f"{name}__initial", PseudostateKind.INITIAL)
            region.add_vertex(initial)
            self._initials[id(region)] = initial
        elif initial.get_outgoings():
            raise BuildError(f"Region of '{name}' already has an initial state")
        return region.add_transition(Transition(initial, target))

    def signal(self, name: str) -> Signal:
        """Return the packaged signal called ``name``, creating it once."""
        signal = self._signals.get(name)
        if signal is None:
            signal = Signal(name)
            self._model.add_packaged_element(signal)
            self._signals[name] = signal
        return signal

    def transition(
        self,
        source: str,
        target: str,
        *events: EventLike,
        region: Optional[Region] = None,
    ) -> Transition:
        """
        Add a transition with one trigger per event.

        Strings are turned into signal events of that signal name. The
        transition is owned by the source's region unless ``region`` is given.
        """
        source_vertex = self.vertex(source)
        target_vertex = self.vertex(target)
        triggers = [Trigger(self._event(event)) for event in events]
        owner = region if region is not None else source_vertex.get_container()
        return owner.add_transition(Transition(source_vertex, target_vertex, triggers))

    def _event(self, event: EventLike) -> Event:
        if isinstance(event, str):
            return SignalEvent(self.signal(event))
        if isinstance(event, Event):
            return event
        raise BuildError(f"Unsupported event: {event!r}")

    @staticmethod
    def _behavior(behavior: BehaviorLike) -> Optional[Behavior]:
        if behavior is None or isinstance(behavior, Behavior):
            return behavior
        if isinstance(behavior, str):
            return Activity(behavior)
        raise BuildError(f"Unsupported behavior: {behavior!r}")

    def build(self) -> Model:
        """Return the assembled model."""
        return self._model
