# statemodel/core/parser.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Model parser flattening a hierarchical state machine model.

Architecture:
- Walks the machine's regions depth-first, in document order
- Emits one StateRecord per state vertex, with its parent's name
- Emits one TransitionRecord per signal trigger of each transition
- Delegates entry/exit action lookup to the ActionBinder

Design:
- Depends only on the protocols in statemodel.interfaces
- Switches on kind tags, never on concrete classes
- Accumulators belong to a single parse() call

Error Handling:
- A model without a state machine raises InputError before anything is built
- Unresolved actions and non-signal triggers are dropped silently
- Endpoint names are forwarded unchecked, including None
"""

import logging
from typing import List, Optional

from statemodel.config import DEFAULT_CONFIG, ParserConfig
from statemodel.core.actions import ActionBinder
from statemodel.core.errors import InputError
from statemodel.core.records import ParseResult, StateRecord, TransitionRecord
from statemodel.core.types import (
    OTHER_TRIGGER,
    ElementType,
    EventKind,
    TriggerKind,
    TriggerSpec,
    VertexKind,
)
from statemodel.interfaces.protocols import (
    ActionResolver,
    Model,
    RegionElement,
    StateElement,
    StateMachineElement,
    TransitionElement,
    TriggerElement,
)

logger = logging.getLogger(__name__)

STATE_KINDS = frozenset({VertexKind.SIMPLE, VertexKind.COMPOSITE})


def find_state_machine(model: Model) -> Optional[StateMachineElement]:
    """
    Return the first state machine among the model's packaged elements.

    :param model: The loaded model.
    :return: The state machine element, or None if the model has none.
    """
    machines = [
        element
        for element in model.get_packaged_elements()
        if getattr(element, "element_type", None) is ElementType.STATE_MACHINE
    ]
    if not machines:
        return None
    if len(machines) > 1:
        logger.warning("Model contains %d state machines, using the first one", len(machines))
    return machines[0]


def classify_trigger(trigger: TriggerElement) -> TriggerSpec:
    """
    Classify a trigger as a named-signal trigger or anything else.

    Only signal events with a signal attached qualify. The signal's name is
    carried as-is, even when the model leaves it empty.
    """
    event = trigger.get_event()
    if event is None or event.event_kind is not EventKind.SIGNAL:
        return OTHER_TRIGGER
    signal = event.get_signal()
    if signal is None:
        return OTHER_TRIGGER
    return TriggerSpec(TriggerKind.SIGNAL, signal.get_name())


def parent_name(state: StateElement) -> Optional[str]:
    """Name of the state owning ``state``'s region, or None for root states."""
    container = state.get_container()
    owner = container.get_owner() if container is not None else None
    if owner is not None and getattr(owner, "element_type", None) is ElementType.STATE:
        return owner.get_name()
    return None


class ModelParser:
    """
    Constructs flat state and transition data out of a state machine model.

    Class Invariants:
    1. States are emitted in depth-first document order
    2. A state's record precedes the records of its nested states
    3. Every emitted transition carries a signal event
    4. Results never share mutable state with the parser

    Threading/Concurrency Guarantees:
    1. parse() keeps all working data local to the call
    2. Concurrent parses are as safe as the model's read accessors

    Performance Characteristics:
    1. O(v + t) where v is vertex count and t is trigger count
    """

    def __init__(
        self,
        model: Model,
        resolver: ActionResolver,
        config: Optional[ParserConfig] = None,
    ) -> None:
        """
        Initialize the parser.

        :param model: The loaded model holding one state machine.
        :param resolver: Resolver used to look up entry/exit actions.
        :param config: Optional parser settings.
        :raises ValueError: If model or resolver is None.
        """
        if model is None:
            raise ValueError("Model must be set")
        if resolver is None:
            raise ValueError("Resolver must be set")
        self._model = model
        self._config = config if config is not None else DEFAULT_CONFIG
        self._binder = ActionBinder(resolver, self._config.behavior_kinds)

    @property
    def model(self) -> Model:
        return self._model

    @property
    def config(self) -> ParserConfig:
        return self._config

    def parse(self) -> ParseResult:
        """
        Parse the model.

        :return: The flattened states and transitions.
        :raises InputError: If the model has no state machine.
        """
        machine = find_state_machine(self._model)
        if machine is None:
            logger.error("Can't find statemachine from model")
            raise InputError("Can't find statemachine from model")

        states: List[StateRecord] = []
        transitions: List[TransitionRecord] = []
        for region in machine.get_regions():
            self._handle_region(region, states, transitions)

        logger.debug("Parsed %d states and %d transitions", len(states), len(transitions))
        return ParseResult(states=tuple(states), transitions=tuple(transitions))

    def _handle_region(
        self,
        region: RegionElement,
        states: List[StateRecord],
        transitions: List[TransitionRecord],
    ) -> None:
        logger.debug("Handling region %r", region)

        for vertex in region.get_subvertices():
            if vertex.vertex_kind not in STATE_KINDS:
                continue
            states.append(self._build_state(vertex))
            for sub in vertex.get_regions():
                self._handle_region(sub, states, transitions)

        for transition in region.get_transitions():
            transitions.extend(self._build_transitions(transition))

    def _build_state(self, state: StateElement) -> StateRecord:
        record = StateRecord(
            parent=parent_name(state),
            name=state.get_name(),
            initial=bool(self._config.initial_marker(state)),
        )
        record = self._binder.bind(record, state)
        logger.debug("Built state %s (parent=%s, initial=%s)", record.name, record.parent, record.initial)
        return record

    def _build_transitions(self, transition: TransitionElement) -> List[TransitionRecord]:
        source = transition.get_source()
        target = transition.get_target()
        # Endpoints are not validated
        source_name = source.get_name() if source is not None else None
        target_name = target.get_name() if target is not None else None

        records = []
        for trigger in transition.get_triggers():
            classified = classify_trigger(trigger)
            if classified.kind is TriggerKind.SIGNAL:
                records.append(TransitionRecord(source_name, target_name, classified.event))
                logger.debug("Built transition %s -> %s on %s", source_name, target_name, classified.event)
            else:
                logger.debug("Skipping non-signal trigger on transition %s -> %s", source_name, target_name)
        return records


def parse_model(
    model: Model,
    resolver: ActionResolver,
    config: Optional[ParserConfig] = None,
) -> ParseResult:
    """
    Parse ``model`` in one call.

    :raises InputError: If the model has no state machine.
    """
    return ModelParser(model, resolver, config).parse()
