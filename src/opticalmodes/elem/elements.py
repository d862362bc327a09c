#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 opticalmodes developers
""" Module for optical element modeling

.. Created on Mon Oct 19 11:02:48 2026

.. codeauthor: opticalmodes developers
"""
import logging

from anytree import Node  # type: ignore

from opticalmodes.elem.elementerror import InvalidNameError, InvalidStateError
from opticalmodes.elem.states import ElementState, state_token_of

logger = logging.getLogger(__name__)


def check_state(state):
    """Raise InvalidStateError unless `state` implements ElementState.

    Classes and elements have the right method names but not the state
    signatures, so both are rejected.
    """
    if (isinstance(state, (type, OpticalElement)) or
            not isinstance(state, ElementState)):
        raise InvalidStateError(state)
    return state


class OpticalElement:
    """Optical element domain model with a swappable behavior mode.

    Ray handling and rendering are delegated to the current
    :class:`~opticalmodes.elem.states.ElementState`. Any state may replace
    any other; there are no transition rules.

    The element is not thread safe: calling :meth:`set_state` while another
    thread is in :meth:`handle_ray` or :meth:`render` is a race.

    Attributes:
        name: identity of the element, fixed at construction
        state: the current ElementState
    """

    def __init__(self, name: str, initial_state: ElementState):
        if not isinstance(name, str) or not name:
            raise InvalidNameError(name)
        self._name = name
        self._state = check_state(initial_state)

    @property
    def name(self) -> str:
        """Element identity (read only). """
        return self._name

    @property
    def state(self) -> ElementState:
        """The current behavior mode. """
        return self._state

    @state.setter
    def state(self, new_state):
        self.set_state(new_state)

    def __str__(self):
        return f"{self.name}: {type(self._state).__name__}"

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, {self._state!r})"

    def listobj_str(self):
        o_str = f"element: {self.name}\n"
        o_str += (f"state: {type(self._state).__name__} "
                  f"({state_token_of(self._state)})\n")
        return o_str

    def set_state(self, new_state: ElementState) -> None:
        """Replace the current behavior mode with `new_state`. """
        check_state(new_state)
        logger.debug("%s: %s -> %s", self.name,
                     type(self._state).__name__, type(new_state).__name__)
        self._state = new_state

    def handle_ray(self) -> None:
        self._state.handle_ray(self)

    def render(self) -> None:
        self._state.render(self)

    def tree(self, **kwargs) -> Node:
        """Build a tree node for this element with its state as a leaf. """
        default_tag = '#element'
        tag = default_tag + kwargs.get('tag', '')
        e = Node(self.name, id=self,
                 tag=f"{tag}#{state_token_of(self._state)}")
        Node(type(self._state).__name__, id=self._state, tag='#state',
             parent=e)
        return e
