# statemodel/core/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Type definitions and enums for the model parser.

This module contains the tags used at the boundary between the parser and
whatever object graph supplies the model. The parser switches on these tags
instead of inspecting concrete classes, so any model format can be adapted
by exposing the right tag values.

Design:
- No runtime dependencies on other modules
- Only contains type definitions and enums
- Used by interfaces, core and uml packages
"""

from enum import Enum, auto
from typing import Any, Callable, NamedTuple, Optional


class ElementType(Enum):
    """Tags the packaged and owned elements of a model.

    Used to find the state machine among a model's packaged elements and
    to tell whether a region is owned by a state or by the machine itself.
    """

    MODEL = auto()
    STATE_MACHINE = auto()
    REGION = auto()
    STATE = auto()
    PSEUDOSTATE = auto()
    TRANSITION = auto()
    TRIGGER = auto()
    EVENT = auto()
    SIGNAL = auto()
    BEHAVIOR = auto()


class VertexKind(Enum):
    """Defines the kinds of vertex found in a region."""

    SIMPLE = auto()  # State without regions
    COMPOSITE = auto()  # State owning one or more regions
    PSEUDOSTATE = auto()  # Initial, choice, fork, join, final, ...


class PseudostateKind(Enum):
    """Defines the pseudostate kinds a region may contain.

    FINAL is kept here too: final vertices are never emitted as state
    records, the same as every other pseudostate.
    """

    INITIAL = auto()
    DEEP_HISTORY = auto()
    SHALLOW_HISTORY = auto()
    JOIN = auto()
    FORK = auto()
    JUNCTION = auto()
    CHOICE = auto()
    ENTRY_POINT = auto()
    EXIT_POINT = auto()
    TERMINATE = auto()
    FINAL = auto()


class EventKind(Enum):
    """Defines the event kinds a trigger may refer to."""

    SIGNAL = auto()  # Named signal events
    CALL = auto()  # Operation call events
    TIME = auto()  # Timer events
    CHANGE = auto()  # Change notification events
    ANY_RECEIVE = auto()  # Anonymous triggers


class BehaviorKind(Enum):
    """Defines the behavior kinds that can sit in a state's entry/exit slot."""

    ACTIVITY = auto()
    OPAQUE_BEHAVIOR = auto()
    STATE_MACHINE = auto()
    INTERACTION = auto()


class TriggerKind(Enum):
    """Classification of a trigger as seen by the parser."""

    SIGNAL = auto()  # Signal event with a signal attached
    OTHER = auto()  # Anything else, filtered out of the output


class TriggerSpec(NamedTuple):
    """A classified trigger. ``event`` is the signal name for SIGNAL triggers."""

    kind: TriggerKind
    event: Optional[str] = None


OTHER_TRIGGER = TriggerSpec(TriggerKind.OTHER)

# Type aliases for common types
StateName = str
EventName = str
ActionId = str
Action = Callable[..., Any]
