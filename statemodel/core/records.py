# statemodel/core/records.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Flat records produced by the model parser.

A parse produces one StateRecord per state vertex and one TransitionRecord
per signal-triggered (transition, trigger) pair, wrapped in a ParseResult.
All three are frozen; the hierarchy is kept through parent names only.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from statemodel.core.types import Action, EventName, StateName


@dataclass(frozen=True)
class StateRecord:
    """One state of the flattened hierarchy.

    ``parent`` is None for states living directly in a machine region.
    The parent cross reference is not checked here, consumers must do it.
    """

    parent: Optional[StateName]
    name: StateName
    initial: bool = False
    entry_actions: Tuple[Action, ...] = ()
    exit_actions: Tuple[Action, ...] = ()

    @property
    def is_root(self) -> bool:
        return self.parent is None


@dataclass(frozen=True)
class TransitionRecord:
    """One directed transition fired by a named signal.

    Endpoint names are copied from the model as-is and may be None when the
    model is malformed.
    """

    source: Optional[StateName]
    target: Optional[StateName]
    event: Optional[EventName]


@dataclass(frozen=True)
class ParseResult:
    """Immutable pair of state and transition records, in insertion order."""

    states: Tuple[StateRecord, ...] = ()
    transitions: Tuple[TransitionRecord, ...] = ()

    def __iter__(self) -> Iterator[tuple]:
        # Allows ``states, transitions = result``
        yield self.states
        yield self.transitions

    def state_names(self) -> Tuple[StateName, ...]:
        return tuple(s.name for s in self.states)

    def find_state(self, name: StateName) -> Optional[StateRecord]:
        """Return the first state record with the given name, or None."""
        for state in self.states:
            if state.name == name:
                return state
        return None

    def children_of(self, parent: Optional[StateName]) -> Tuple[StateRecord, ...]:
        """Return the records whose parent is ``parent`` (None for root states)."""
        return tuple(s for s in self.states if s.parent == parent)

    def initial_states(self) -> Tuple[StateRecord, ...]:
        return tuple(s for s in self.states if s.initial)

    def transitions_from(self, source: StateName) -> Tuple[TransitionRecord, ...]:
        return tuple(t for t in self.transitions if t.source == source)
