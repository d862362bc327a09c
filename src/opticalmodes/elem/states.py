#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 opticalmodes developers
""" Behavior modes for optical elements

    An :class:`ElementState` decides how the owning element reacts to an
    incoming ray and how it is displayed. States hold no data and can be
    shared by any number of elements; they only read the element's name to
    format the status line.

    New behaviors are added by writing a class with :meth:`handle_ray` and
    :meth:`render` methods. Registering it with :func:`register_state` makes
    it available to :func:`create_state`.

.. Created on Mon Oct 19 10:31:55 2026

.. codeauthor: opticalmodes developers
"""
import logging

from typing import Protocol, Dict, Type, runtime_checkable

from opticalmodes.elem.elementerror import InvalidStateError, UnknownStateError
from opticalmodes.util.messages import emit

logger = logging.getLogger(__name__)


@runtime_checkable
class ElementState(Protocol):
    """Interface for the behavior mode of an optical element.

    Concrete states also carry a `state_token` class attribute naming the
    mode; it is used for listings and lookup, never for behavior.
    """

    def handle_ray(self, element) -> None:
        """Emit how this mode processes a ray arriving at `element`. """
        ...

    def render(self, element) -> None:
        """Emit how `element` is displayed in this mode. """
        ...


class TransparentState:
    """The element transmits the ray. """
    state_token = 'transmit'

    def handle_ray(self, element):
        emit(element, self.state_token, 'ray')

    def render(self, element):
        emit(element, self.state_token, 'render')

    def __repr__(self):
        return f"{type(self).__name__}()"


class ReflectiveState:
    """The element reflects the ray. """
    state_token = 'reflect'

    def handle_ray(self, element):
        emit(element, self.state_token, 'ray')

    def render(self, element):
        emit(element, self.state_token, 'render')

    def __repr__(self):
        return f"{type(self).__name__}()"


class AbsorptiveState:
    """The element absorbs the ray. """
    state_token = 'absorb'

    def handle_ray(self, element):
        emit(element, self.state_token, 'ray')

    def render(self, element):
        emit(element, self.state_token, 'render')

    def __repr__(self):
        return f"{type(self).__name__}()"


state_types: Dict[str, Type] = {
    TransparentState.state_token: TransparentState,
    ReflectiveState.state_token: ReflectiveState,
    AbsorptiveState.state_token: AbsorptiveState,
    }


def register_state(state_type):
    """Make `state_type` available to :func:`create_state` by its token.

    Usable as a class decorator. Returns `state_type` unchanged.
    """
    token = getattr(state_type, 'state_token', None)
    if not isinstance(token, str) or not token:
        name = getattr(state_type, '__name__', repr(state_type))
        raise InvalidStateError(state_type,
                                reason=f"{name} has no state_token")
    if token in state_types and state_types[token] is not state_type:
        logger.debug("state token %s rebound from %s to %s", token,
                     state_types[token].__name__, state_type.__name__)
    state_types[token] = state_type
    return state_type


def create_state(token: str):
    """Return a new state instance for `token`, e.g. 'reflect'. """
    try:
        state_type = state_types[token]
    except KeyError:
        raise UnknownStateError(token) from None
    return state_type()


def state_token_of(state) -> str:
    """Return the token of `state`, or its class name if it has none. """
    return getattr(state, 'state_token', type(state).__name__)
