# statemodel/core/markers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Initial-state marker queries.

A region marks its starting vertex with an initial pseudostate and a single
outgoing transition from it. The queries here answer, per vertex, whether it
is that target.
"""

from typing import Optional

from statemodel.core.types import PseudostateKind, VertexKind
from statemodel.interfaces.protocols import TransitionElement, VertexElement


def is_initial_pseudostate(vertex: Optional[VertexElement]) -> bool:
    if vertex is None or vertex.vertex_kind is not VertexKind.PSEUDOSTATE:
        return False
    return getattr(vertex, "pseudostate_kind", None) is PseudostateKind.INITIAL


def resolve_initial_transition(vertex: VertexElement) -> Optional[TransitionElement]:
    """
    Find the transition leading from an initial pseudostate into ``vertex``.

    :param vertex: The vertex to inspect.
    :return: The first such incoming transition, or None.
    """
    for transition in vertex.get_incomings():
        if is_initial_pseudostate(transition.get_source()):
            return transition
    return None


def is_initial_state(vertex: VertexElement) -> bool:
    """True if ``vertex`` is the initial pseudostate target of its region."""
    return resolve_initial_transition(vertex) is not None
