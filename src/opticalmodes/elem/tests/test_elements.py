#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for OpticalElement

.. Created on Mon Oct 19 14:30:47 2026

.. codeauthor: opticalmodes developers
"""

import pytest

from opticalmodes.elem.elementerror import (ElementError, InvalidNameError,
                                            InvalidStateError)
from opticalmodes.elem.elements import OpticalElement
from opticalmodes.elem.states import (TransparentState, ReflectiveState,
                                      AbsorptiveState)


class RecordingState:
    state_token = 'record'

    def __init__(self, log, label):
        self.log = log
        self.label = label

    def handle_ray(self, element):
        self.log.append((self.label, 'ray', element.name))

    def render(self, element):
        self.log.append((self.label, 'render', element.name))


def test_render_routes_to_initial_state():
    log = []
    e = OpticalElement("Lens", RecordingState(log, 'initial'))
    e.render()
    e.handle_ray()
    assert log == [('initial', 'render', 'Lens'), ('initial', 'ray', 'Lens')]


def test_latest_state_wins():
    log = []
    e = OpticalElement("Lens", RecordingState(log, 's0'))
    for label in ('s1', 's2', 's3'):
        e.set_state(RecordingState(log, label))
        e.handle_ray()
        e.render()
    assert log == [('s1', 'ray', 'Lens'), ('s1', 'render', 'Lens'),
                   ('s2', 'ray', 'Lens'), ('s2', 'render', 'Lens'),
                   ('s3', 'ray', 'Lens'), ('s3', 'render', 'Lens')]


def test_any_to_any_transition(capsys):
    e = OpticalElement("Filter", AbsorptiveState())
    for state in (TransparentState(), AbsorptiveState(), ReflectiveState(),
                  ReflectiveState(), TransparentState()):
        e.set_state(state)
        assert e.state is state


def test_idempotent_calls(capsys):
    e = OpticalElement("Mirror", ReflectiveState())
    for _ in range(3):
        e.handle_ray()
        e.render()
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Mirror: reflecting the ray off the element.",
                     "Mirror: displaying a mirror element."]*3


def test_state_property_setter(capsys):
    e = OpticalElement("Lens", TransparentState())
    e.state = AbsorptiveState()
    e.handle_ray()
    assert capsys.readouterr().out == \
        "Lens: absorbing the ray in the element.\n"


def test_name_is_read_only():
    e = OpticalElement("Lens", TransparentState())
    with pytest.raises(AttributeError):
        e.name = "Other"
    assert e.name == "Lens"


@pytest.mark.parametrize('name', ["", None, 42])
def test_invalid_name(name):
    with pytest.raises(InvalidNameError):
        OpticalElement(name, TransparentState())


def test_invalid_initial_state():
    with pytest.raises(InvalidStateError):
        OpticalElement("Lens", None)
    with pytest.raises(TypeError):
        OpticalElement("Lens", TransparentState)


def test_invalid_set_state_keeps_current():
    state = TransparentState()
    e = OpticalElement("Lens", state)
    with pytest.raises(ElementError):
        e.set_state("reflect")
    assert e.state is state


def test_element_is_not_a_state(capsys):
    lens = OpticalElement("Lens", TransparentState())
    mirror = OpticalElement("Mirror", ReflectiveState())
    with pytest.raises(InvalidStateError):
        lens.set_state(mirror)
    with pytest.raises(InvalidStateError):
        OpticalElement("Prism", mirror)
    lens.handle_ray()
    assert capsys.readouterr().out == \
        "Lens: passing the ray through the element.\n"


def test_listing():
    e = OpticalElement("Lens", TransparentState())
    assert str(e) == "Lens: TransparentState"
    assert repr(e) == "OpticalElement('Lens', TransparentState())"
    assert e.listobj_str() == \
        "element: Lens\nstate: TransparentState (transmit)\n"


def test_tree():
    e = OpticalElement("Lens", ReflectiveState())
    node = e.tree()
    assert node.name == "Lens"
    assert node.id is e
    assert node.tag == '#element#reflect'
    state_node, = node.children
    assert state_node.name == 'ReflectiveState'
    assert state_node.id is e.state
