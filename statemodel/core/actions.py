# statemodel/core/actions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Action resolution and binding.

The parser never invokes actions. It only turns the behavior names found in
a state's entry/exit slots into action objects, through an injected
resolver, and stores them on the state record.
"""

import logging
import threading
from dataclasses import replace
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from statemodel.core.records import StateRecord
from statemodel.core.types import Action, ActionId, BehaviorKind
from statemodel.interfaces.protocols import ActionResolver, BehaviorElement, StateElement

logger = logging.getLogger(__name__)


class NullActionResolver:
    """Resolver that knows no actions. Every state comes out actionless."""

    def resolve(self, identifier: ActionId) -> Optional[Action]:
        return None


class RegistryActionResolver:
    """
    Resolves action identifiers from an in-memory registry.

    Identifiers that are not registered are passed to the optional fallback
    resolver, so registries can be layered (e.g. test doubles on top of an
    application catalog).

    Threading/Concurrency Guarantees:
    1. Registration and lookup are guarded by one lock
    2. Safe to share between concurrent parses
    """

    def __init__(
        self,
        actions: Optional[Mapping[ActionId, Action]] = None,
        fallback: Optional[ActionResolver] = None,
    ) -> None:
        """
        Initialize the registry.

        :param actions: Initial identifier to action mapping.
        :param fallback: Resolver consulted for unknown identifiers.
        :raises ValueError: If an initial action is not callable.
        """
        self._actions: Dict[ActionId, Action] = {}
        self._fallback = fallback
        self._lock = threading.Lock()
        for identifier, action in (actions or {}).items():
            self.register(identifier, action)

    @property
    def identifiers(self) -> Tuple[ActionId, ...]:
        with self._lock:
            return tuple(self._actions)

    def register(self, identifier: ActionId, action: Action) -> None:
        """
        Register an action under an identifier, replacing any previous one.

        :raises ValueError: If the identifier is empty or the action is not callable.
        """
        if not identifier or not isinstance(identifier, str):
            raise ValueError("Action identifier must be a non-empty string")
        if not callable(action):
            raise ValueError(f"Action registered as '{identifier}' must be callable")
        with self._lock:
            self._actions[identifier] = action

    def unregister(self, identifier: ActionId) -> None:
        with self._lock:
            self._actions.pop(identifier, None)

    def resolve(self, identifier: ActionId) -> Optional[Action]:
        with self._lock:
            action = self._actions.get(identifier)
        if action is None and self._fallback is not None:
            action = self._fallback.resolve(identifier)
        return action

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._actions

    def __len__(self) -> int:
        with self._lock:
            return len(self._actions)


class ActionBinder:
    """
    Attaches entry/exit actions to state records.

    Binding is best effort: a behavior of an unrecognized kind, a behavior
    without a name, or an identifier the resolver does not know all leave
    the corresponding action tuple empty. Nothing here raises for model
    content.
    """

    def __init__(
        self,
        resolver: ActionResolver,
        behavior_kinds: Iterable[BehaviorKind] = (BehaviorKind.ACTIVITY,),
    ) -> None:
        if resolver is None:
            raise ValueError("Resolver must be set")
        self._resolver = resolver
        self._behavior_kinds: FrozenSet[BehaviorKind] = frozenset(behavior_kinds)

    @property
    def resolver(self) -> ActionResolver:
        return self._resolver

    def bind(self, record: StateRecord, state: StateElement) -> StateRecord:
        """
        Return ``record`` with the state's entry and exit actions resolved.

        :param record: Record built for ``state`` without actions.
        :param state: The model state whose behavior slots are read.
        :return: A new record, or ``record`` itself when nothing resolved.
        """
        changes = {}
        entry = self._resolve_slot(record.name, "entry", state.get_entry())
        if entry is not None:
            changes["entry_actions"] = (entry,)
        exit_action = self._resolve_slot(record.name, "exit", state.get_exit())
        if exit_action is not None:
            changes["exit_actions"] = (exit_action,)
        return replace(record, **changes) if changes else record

    def _resolve_slot(
        self, state_name: Optional[str], slot: str, behavior: Optional[BehaviorElement]
    ) -> Optional[Action]:
        if behavior is None or behavior.behavior_kind not in self._behavior_kinds:
            return None

        identifier = behavior.get_name()
        if not identifier:
            logger.debug("State %s has an unnamed %s behavior, no action bound", state_name, slot)
            return None

        action = self._resolver.resolve(identifier)
        if action is None:
            logger.debug("No action found for %s behavior '%s' of state %s", slot, identifier, state_name)
        return action
