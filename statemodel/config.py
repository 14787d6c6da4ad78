# statemodel/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Parser configuration.

ParserConfig collects the knobs the parser exposes. The defaults reproduce
the standard behavior: initial states are found through initial
pseudostates and only activities are treated as named entry/exit actions.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, FrozenSet

from statemodel.core.markers import is_initial_state
from statemodel.core.types import BehaviorKind

DEFAULT_BEHAVIOR_KINDS: FrozenSet[BehaviorKind] = frozenset({BehaviorKind.ACTIVITY})


@dataclass(frozen=True)
class ParserConfig:
    """Immutable parser settings.

    Attributes:
        initial_marker: Per-vertex query deciding the ``initial`` flag.
        behavior_kinds: Behavior kinds whose names are looked up as action ids.
    """

    initial_marker: Callable[[Any], bool] = is_initial_state
    behavior_kinds: FrozenSet[BehaviorKind] = field(default=DEFAULT_BEHAVIOR_KINDS)

    def __post_init__(self) -> None:
        if not callable(self.initial_marker):
            raise ValueError("Initial marker must be callable")

        kinds = frozenset(self.behavior_kinds)
        if not kinds:
            raise ValueError("At least one behavior kind must be recognized")
        if not all(isinstance(kind, BehaviorKind) for kind in kinds):
            raise ValueError("Behavior kinds must be BehaviorKind enum values")
        # Accept any iterable, store a frozenset
        object.__setattr__(self, "behavior_kinds", kinds)

    def with_overrides(self, **changes: Any) -> "ParserConfig":
        """Return a copy with the given fields replaced.

        Raises:
            ValueError: If the resulting configuration is invalid
        """
        return replace(self, **changes)


DEFAULT_CONFIG = ParserConfig()
