# tests/unit/test_elements.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Unit tests for the in-memory UML elements."""

import unittest

from statemodel.core.types import BehaviorKind, ElementType, EventKind, PseudostateKind, VertexKind
from statemodel.interfaces.protocols import (
    BehaviorElement,
    Model as ModelProtocol,
    PseudostateElement,
    RegionElement,
    SignalEventElement,
    StateElement,
    StateMachineElement,
    TransitionElement,
    TriggerElement,
)
from statemodel.uml.elements import (
    Activity,
    AnyReceiveEvent,
    CallEvent,
    ChangeEvent,
    Model,
    OpaqueBehavior,
    Pseudostate,
    Region,
    Signal,
    SignalEvent,
    State,
    StateMachine,
    TimeEvent,
    Transition,
    Trigger,
)


class TestContainment(unittest.TestCase):
    """Test cases for ownership links between elements."""

    def setUp(self):
        self.machine = StateMachine("sm")
        self.region = self.machine.add_region(Region("main"))
        self.parent = self.region.add_vertex(State("P"))
        self.child_region = self.parent.add_region()
        self.child = self.child_region.add_vertex(State("C"))

    def test_region_owner(self):
        self.assertIs(self.region.get_owner(), self.machine)
        self.assertIs(self.child_region.get_owner(), self.parent)
        self.assertIsNone(Region().get_owner())

    def test_vertex_container(self):
        self.assertIs(self.parent.get_container(), self.region)
        self.assertIs(self.child.get_container(), self.child_region)
        self.assertIsNone(State("loose").get_container())

    def test_document_order(self):
        second = self.region.add_vertex(State("Q"))
        self.assertEqual(self.region.get_subvertices(), (self.parent, second))
        self.assertEqual(self.machine.get_regions(), (self.region,))

    def test_vertex_kind_follows_regions(self):
        self.assertEqual(self.parent.vertex_kind, VertexKind.COMPOSITE)
        self.assertTrue(self.parent.is_composite)
        self.assertEqual(self.child.vertex_kind, VertexKind.SIMPLE)
        self.assertFalse(self.child.is_composite)

    def test_vertex_belongs_to_one_region(self):
        with self.assertRaises(ValueError):
            Region().add_vertex(self.child)

    def test_region_has_one_owner(self):
        with self.assertRaises(ValueError):
            State("other").add_region(self.child_region)

    def test_transition_links(self):
        transition = self.child_region.add_transition(Transition(self.child, self.parent))

        self.assertEqual(self.child.get_outgoings(), (transition,))
        self.assertEqual(self.parent.get_incomings(), (transition,))
        self.assertIs(transition.get_container(), self.child_region)
        self.assertEqual(self.child_region.get_transitions(), (transition,))
        with self.assertRaises(ValueError):
            self.region.add_transition(transition)

    def test_returned_collections_are_copies(self):
        vertices = self.region.get_subvertices()
        self.region.add_vertex(State("late"))
        self.assertEqual(len(vertices), 1)


class TestElements(unittest.TestCase):
    """Test cases for element tags and accessors."""

    def test_element_types(self):
        self.assertEqual(Model().element_type, ElementType.MODEL)
        self.assertEqual(StateMachine().element_type, ElementType.STATE_MACHINE)
        self.assertEqual(State().element_type, ElementType.STATE)
        self.assertEqual(Pseudostate().element_type, ElementType.PSEUDOSTATE)
        self.assertEqual(Signal().element_type, ElementType.SIGNAL)
        self.assertEqual(Activity().element_type, ElementType.BEHAVIOR)

    def test_event_kinds(self):
        self.assertEqual(SignalEvent().event_kind, EventKind.SIGNAL)
        self.assertEqual(TimeEvent().event_kind, EventKind.TIME)
        self.assertEqual(ChangeEvent().event_kind, EventKind.CHANGE)
        self.assertEqual(CallEvent().event_kind, EventKind.CALL)
        self.assertEqual(AnyReceiveEvent().event_kind, EventKind.ANY_RECEIVE)

    def test_behavior_kinds(self):
        self.assertEqual(Activity("a").behavior_kind, BehaviorKind.ACTIVITY)
        opaque = OpaqueBehavior("o", body="x = 1", language="python")
        self.assertEqual(opaque.behavior_kind, BehaviorKind.OPAQUE_BEHAVIOR)
        self.assertEqual(opaque.body, "x = 1")

    def test_name_validation(self):
        with self.assertRaises(ValueError):
            State(42)
        self.assertIsNone(State().get_name())
        self.assertEqual(State("S").name, "S")

    def test_pseudostate_kind_validation(self):
        self.assertEqual(Pseudostate("f", PseudostateKind.FORK).pseudostate_kind, PseudostateKind.FORK)
        with self.assertRaises(ValueError):
            Pseudostate("bad", "INITIAL")

    def test_time_event_validation(self):
        with self.assertRaises(ValueError):
            TimeEvent(-1)
        self.assertEqual(TimeEvent(500, relative=False).when, 500)

    def test_trigger_chain(self):
        signal = Signal("GO")
        trigger = Trigger(SignalEvent(signal))
        self.assertIs(trigger.get_event().get_signal(), signal)
        self.assertIsNone(Trigger().get_event())

    def test_transition_triggers(self):
        transition = Transition(State("A"), State("B"))
        trigger = transition.add_trigger(Trigger(SignalEvent(Signal("GO"))))
        self.assertEqual(transition.get_triggers(), (trigger,))
        self.assertEqual(repr(transition), "Transition('A' -> 'B')")

    def test_state_behaviors(self):
        entry, exit_behavior = Activity("in"), Activity("out")
        state = State("S", entry=entry, exit=exit_behavior)
        self.assertIs(state.get_entry(), entry)
        self.assertIs(state.get_exit(), exit_behavior)

    def test_model_packaged_elements(self):
        model = Model("m")
        machine = model.add_packaged_element(StateMachine("sm"))
        signal = model.add_packaged_element(Signal("GO"))
        self.assertEqual(model.get_packaged_elements(), (machine, signal))


def test_protocol_conformance():
    machine = StateMachine("sm")
    region = machine.add_region()
    state = region.add_vertex(State("S"))
    pseudostate = region.add_vertex(Pseudostate("i"))
    transition = region.add_transition(Transition(pseudostate, state))

    assert isinstance(Model(), ModelProtocol)
    assert isinstance(machine, StateMachineElement)
    assert isinstance(region, RegionElement)
    assert isinstance(state, StateElement)
    assert isinstance(pseudostate, PseudostateElement)
    assert isinstance(transition, TransitionElement)
    assert isinstance(Trigger(), TriggerElement)
    assert isinstance(SignalEvent(), SignalEventElement)
    assert isinstance(Activity("a"), BehaviorElement)
