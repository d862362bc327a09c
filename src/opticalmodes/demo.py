#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 opticalmodes developers
""" Demonstration driver for the element model

    Builds a lens, a mirror and an absorber, runs ray processing and
    visualization over them, then switches the lens to reflective mode.

.. Created on Mon Oct 19 13:20:50 2026

.. codeauthor: opticalmodes developers
"""
import logging

from opticalmodes import config
from opticalmodes.elem.elements import OpticalElement
from opticalmodes.elem.states import (TransparentState, ReflectiveState,
                                      AbsorptiveState)
from opticalmodes.optical.opticalsystem import OpticalSystem
from opticalmodes.ops.operations import RayProcessor, Visualizer
from opticalmodes.util.messages import emit_heading, sample_names

logger = logging.getLogger(__name__)


def create_sample_system():
    """Return (system, lens) for the three element sample. """
    lens_name, mirror_name, absorber_name = \
        sample_names[config.output_spec.language]
    lens = OpticalElement(lens_name, TransparentState())
    mirror = OpticalElement(mirror_name, ReflectiveState())
    absorber = OpticalElement(absorber_name, AbsorptiveState())

    opt_sys = OpticalSystem()
    opt_sys.add_element(lens)
    opt_sys.add_element(mirror)
    opt_sys.add_element(absorber)
    return opt_sys, lens


def main():
    logging.basicConfig(level=config.output_spec.log_level)
    stream = config.output_spec.output_stream()

    opt_sys, lens = create_sample_system()

    emit_heading('ray')
    opt_sys.accept(RayProcessor())

    print(file=stream)
    emit_heading('render')
    opt_sys.accept(Visualizer())

    print(file=stream)
    emit_heading('set_state')
    lens.set_state(ReflectiveState())
    lens.handle_ray()
    lens.render()

    logger.debug("demo finished")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
