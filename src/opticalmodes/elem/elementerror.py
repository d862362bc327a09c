#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 opticalmodes developers
""" Exceptions raised when building or driving the element model

.. Created on Mon Oct 19 09:12:40 2026

.. codeauthor: opticalmodes developers
"""


class ElementError(Exception):
    """ Base exception for the element model """


class InvalidNameError(ElementError, ValueError):
    """ Exception raised when an element name is empty or not a string """
    def __init__(self, name=None):
        self.name = name
        super().__init__(f"element name must be a non-empty string, "
                         f"got {name!r}")


class InvalidStateError(ElementError, TypeError):
    """ Exception raised when an object is not an ElementState """
    def __init__(self, state=None, reason=None):
        self.state = state
        if reason is None:
            reason = (f"{type(state).__name__} does not implement "
                      f"handle_ray() and render()")
        super().__init__(reason)


class UnknownStateError(ElementError, KeyError):
    """ Exception raised when a state token has no matching state type """
    def __init__(self, token=None):
        self.token = token
        super().__init__(token)

    def __str__(self):
        return f"unknown state token {self.token!r}"


class InvalidElementError(ElementError, TypeError):
    """ Exception raised when an element or collection argument is unusable """
    def __init__(self, obj=None, expected='OpticalElement'):
        self.obj = obj
        super().__init__(f"expected {expected}, got {type(obj).__name__}")


class InvalidOperationError(ElementError, TypeError):
    """ Exception raised when an operation has neither apply() nor __call__ """
    def __init__(self, operation=None):
        self.operation = operation
        super().__init__(f"{type(operation).__name__} is not an Operation "
                         f"or a callable")


class ConfigError(ElementError, ValueError):
    """ Exception raised for an invalid output configuration value """
