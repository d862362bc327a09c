#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 opticalmodes developers
""" script file providing an environment for using opticalmodes

.. Created on Mon Oct 19 13:02:36 2026

.. codeauthor: opticalmodes developers
"""

# initialization
import logging

# opticalmodes
import opticalmodes
from opticalmodes import listobj
from opticalmodes.config import OutputSpec, output_spec

# element model
from opticalmodes.elem.elements import OpticalElement
from opticalmodes.elem.states import (ElementState, TransparentState,
                                      ReflectiveState, AbsorptiveState,
                                      create_state, register_state)
from opticalmodes.elem.elementerror import (ElementError, InvalidNameError,
                                            InvalidStateError,
                                            UnknownStateError,
                                            InvalidElementError,
                                            InvalidOperationError,
                                            ConfigError)

# collection and operations
from opticalmodes.optical.opticalsystem import OpticalSystem
from opticalmodes.ops.operations import (Operation, RayProcessor, Visualizer,
                                         dispatch)
