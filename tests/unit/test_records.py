# tests/unit/test_records.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import dataclasses

import pytest

from statemodel.core.records import ParseResult, StateRecord, TransitionRecord


@pytest.fixture
def result():
    return ParseResult(
        states=(
            StateRecord(None, "P", initial=True),
            StateRecord("P", "C1", initial=True),
            StateRecord("P", "C2"),
            StateRecord(None, "Q"),
        ),
        transitions=(
            TransitionRecord("C1", "C2", "E1"),
            TransitionRecord("C1", "Q", "E2"),
            TransitionRecord("P", "Q", "E3"),
        ),
    )


def test_state_record_defaults():
    record = StateRecord(parent=None, name="S")
    assert record.initial is False
    assert record.entry_actions == ()
    assert record.exit_actions == ()
    assert record.is_root


def test_records_are_frozen():
    record = StateRecord(parent="P", name="S")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.name = "T"
    with pytest.raises(dataclasses.FrozenInstanceError):
        TransitionRecord("A", "B", "GO").event = "STOP"
    with pytest.raises(dataclasses.FrozenInstanceError):
        ParseResult().states = ()


def test_empty_result():
    empty = ParseResult()
    assert empty.states == ()
    assert empty.transitions == ()
    assert empty.find_state("anything") is None


def test_unpacking(result):
    states, transitions = result
    assert states is result.states
    assert transitions is result.transitions


def test_state_names_keep_order(result):
    assert result.state_names() == ("P", "C1", "C2", "Q")


def test_find_state(result):
    assert result.find_state("C2") == StateRecord("P", "C2")
    assert result.find_state("missing") is None


def test_children_of(result):
    assert [s.name for s in result.children_of("P")] == ["C1", "C2"]
    assert [s.name for s in result.children_of(None)] == ["P", "Q"]
    assert result.children_of("C1") == ()


def test_initial_states(result):
    assert [s.name for s in result.initial_states()] == ["P", "C1"]


def test_transitions_from(result):
    assert [t.event for t in result.transitions_from("C1")] == ["E1", "E2"]
    assert result.transitions_from("Q") == ()
