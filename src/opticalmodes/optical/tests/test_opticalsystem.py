#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the OpticalSystem element collection

.. Created on Mon Oct 19 15:04:32 2026

.. codeauthor: opticalmodes developers
"""

import pytest

from opticalmodes.elem.elementerror import InvalidElementError
from opticalmodes.elem.elements import OpticalElement
from opticalmodes.elem.states import (TransparentState, ReflectiveState,
                                      AbsorptiveState)
from opticalmodes.optical.opticalsystem import OpticalSystem
from opticalmodes.ops.operations import RayProcessor


@pytest.fixture
def elements():
    return [OpticalElement("Lens", TransparentState()),
            OpticalElement("Mirror", ReflectiveState()),
            OpticalElement("Absorber", AbsorptiveState())]


def test_insertion_order(elements):
    osys = OpticalSystem()
    for e in elements:
        osys.add_element(e)
    assert list(osys) == elements
    assert len(osys) == 3
    assert osys.get_num_elements() == 3


def test_elements_are_shared(elements, capsys):
    osys = OpticalSystem(elements)
    lens = elements[0]
    assert next(iter(osys)) is lens
    lens.set_state(AbsorptiveState())
    osys.accept(RayProcessor())
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Lens: absorbing the ray in the element."


def test_duplicates_allowed(elements):
    osys = OpticalSystem()
    osys.add(elements[0])
    osys.add(elements[0])
    assert [e.name for e in osys] == ["Lens", "Lens"]


def test_traversal_is_restartable(elements):
    osys = OpticalSystem(elements)
    assert [e.name for e in osys] == [e.name for e in osys]


def test_add_during_traversal_uses_snapshot(elements):
    osys = OpticalSystem(elements[:2])
    seen = []
    for e in osys:
        seen.append(e.name)
        if e.name == "Lens":
            osys.add_element(elements[2])
    assert seen == ["Lens", "Mirror"]
    assert [e.name for e in osys] == ["Lens", "Mirror", "Absorber"]


def test_add_invalid_element():
    osys = OpticalSystem()
    with pytest.raises(InvalidElementError):
        osys.add_element("Lens")
    with pytest.raises(TypeError):
        osys.add_element(None)
    assert len(osys) == 0


def test_listings(elements, capsys):
    osys = OpticalSystem(elements)
    assert str(osys) == "OpticalSystem: [Lens, Mirror, Absorber]"
    assert osys.listobj_str() == ("OpticalSystem: 3 elements\n"
                                  "0: Lens: TransparentState\n"
                                  "1: Mirror: ReflectiveState\n"
                                  "2: Absorber: AbsorptiveState\n")
    osys.list_elements()
    assert capsys.readouterr().out.splitlines() == [
        "0: Lens (TransparentState)",
        "1: Mirror (ReflectiveState)",
        "2: Absorber (AbsorptiveState)",
        ]


def test_tree(elements, capsys):
    osys = OpticalSystem(elements)
    root = osys.tree()
    assert root.id is osys
    assert [n.name for n in root.children] == ["Lens", "Mirror", "Absorber"]
    assert [n.tag for n in root.children] == ['#element#transmit',
                                              '#element#reflect',
                                              '#element#absorb']
    assert root.children[1].children[0].name == 'ReflectiveState'

    osys.list_tree()
    out = capsys.readouterr().out
    assert "Lens" in out
    assert "AbsorptiveState" in out
    assert out.splitlines()[0] == "root"


def test_tree_follows_state_change(elements):
    osys = OpticalSystem(elements)
    elements[0].set_state(ReflectiveState())
    assert osys.tree().children[0].tag == '#element#reflect'
