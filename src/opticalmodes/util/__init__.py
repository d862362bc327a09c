""" package supplying support functions for the element model

    The :mod:`~opticalmodes.util` subpackage provides functions that don't
    have an obvious home elsewhere. These include:

        - message catalogs and status line output, :mod:`~.messages`
"""
