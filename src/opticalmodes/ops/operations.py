#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 opticalmodes developers
""" Operations applied uniformly over a collection of elements

    An operation has a single method, ``apply(element)``, and touches only
    the element's public behavior, :meth:`handle_ray` and :meth:`render`.
    Elements know nothing about operation types; :func:`dispatch` walks a
    collection and hands each element to the operation.

    A plain function of one element may be used wherever an operation is
    expected.

.. Created on Mon Oct 19 12:20:09 2026

.. codeauthor: opticalmodes developers
"""
import logging

from typing import Protocol, runtime_checkable

from opticalmodes.elem.elementerror import (InvalidElementError,
                                            InvalidOperationError)

logger = logging.getLogger(__name__)


@runtime_checkable
class Operation(Protocol):
    """Interface for an action performed on each element of a collection. """

    def apply(self, element) -> None:
        ...


class RayProcessor:
    """Have each element handle an incoming ray. """

    def apply(self, element):
        element.handle_ray()


class Visualizer:
    """Have each element render itself. """

    def apply(self, element):
        element.render()


def as_callable(operation):
    """Return the function that applies `operation` to one element. """
    if isinstance(operation, type):
        raise InvalidOperationError(operation)
    if isinstance(operation, Operation):
        return operation.apply
    elif callable(operation):
        return operation
    raise InvalidOperationError(operation)


def dispatch(collection, operation) -> None:
    """Apply `operation` to every element of `collection` in order.

    Each element is visited exactly once. Nothing is skipped and an
    exception raised by the operation stops the traversal and propagates.
    An empty collection is a no-op.

    Args:
        collection: an OpticalSystem or any iterable of elements
        operation: an :class:`Operation` or a callable of one element
    """
    apply = as_callable(operation)
    if collection is None:
        raise InvalidElementError(collection, expected='element collection')
    try:
        elements = iter(collection)
    except TypeError:
        raise InvalidElementError(collection,
                                  expected='element collection') from None

    op_name = getattr(operation, '__name__', type(operation).__name__)
    logger.debug("dispatch %s: start", op_name)
    count = 0
    for element in elements:
        apply(element)
        count += 1
    logger.debug("dispatch %s: applied to %d elements", op_name, count)
