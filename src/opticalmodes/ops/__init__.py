""" Package providing operations over collections of optical elements

    The :mod:`~opticalmodes.ops` subpackage provides the
    :class:`~.operations.Operation` interface, the :class:`~.operations.RayProcessor`
    and :class:`~.operations.Visualizer` operations, and the
    :func:`~.operations.dispatch` function that applies an operation to every
    element of a collection.
"""
