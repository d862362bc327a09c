#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 opticalmodes developers
""" Ordered collection of optical elements

.. Created on Mon Oct 19 11:45:21 2026

.. codeauthor: opticalmodes developers
"""
import logging
from typing import List

from anytree import Node, RenderTree  # type: ignore

from opticalmodes.elem.elementerror import InvalidElementError
from opticalmodes.elem.elements import OpticalElement
from opticalmodes.ops.operations import dispatch

logger = logging.getLogger(__name__)


class OpticalSystem:
    """Maintain an ordered sequence of optical elements

    Elements are shared with the caller, not copied. Insertion order is the
    traversal order and duplicates are allowed.

    Iteration walks a snapshot of the element references taken when the
    iteration starts. Elements added while a traversal is in progress are
    not visited by it; the next traversal sees them. No locking is done, so
    adding elements from another thread during a traversal is a race.

    Attributes:
        elements: list of :class:`~opticalmodes.elem.elements.OpticalElement`
    """

    def __init__(self, elements=None):
        self.elements: List[OpticalElement] = []
        if elements is not None:
            for e in elements:
                self.add_element(e)

    def __iter__(self):
        return iter(tuple(self.elements))

    def __len__(self):
        return len(self.elements)

    def __str__(self):
        names = ", ".join(e.name for e in self.elements)
        return f"{type(self).__name__}: [{names}]"

    def listobj_str(self):
        o_str = f"{type(self).__name__}: {len(self.elements)} elements\n"
        for i, e in enumerate(self.elements):
            o_str += f"{i}: {e}\n"
        return o_str

    def add_element(self, e: OpticalElement) -> None:
        if not isinstance(e, OpticalElement):
            raise InvalidElementError(e)
        self.elements.append(e)
        logger.debug("added %s at position %d", e.name, len(self.elements)-1)

    add = add_element

    def get_num_elements(self):
        return len(self.elements)

    def list_elements(self):
        for i, ele in enumerate(self.elements):
            print("%d: %s (%s)" % (i, ele.name, type(ele.state).__name__))

    def accept(self, operation) -> None:
        """Apply `operation` to every element, in order. """
        dispatch(self, operation)

    def tree(self) -> Node:
        """Return a tree with a node per element, each with a state leaf. """
        root_node = Node('root', id=self, tag='#group#root')
        for e in self:
            e.tree().parent = root_node
        return root_node

    def list_tree(self, *args, **kwargs):
        """ Print a graphical console representation of the tree.

        The optional arguments are passed through to the by_attr filter.
        Useful examples or arguments include:

            - osys.list_tree(lambda node: f"{node.name}: {node.tag}")
            - osys.list_tree(attrname='tag')

        """
        print(RenderTree(self.tree()).by_attr(*args, **kwargs))
