# statemodel/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class StateModelError(Exception):
    """
    Base exception class for errors within the state model library.
    """


class InputError(StateModelError, ValueError):
    """
    Raised when the model handed to the parser has no state machine element.
    """


class BuildError(StateModelError):
    """
    Raised when the model builder is asked to wire up an element it does not know.
    """
