# -*- coding: utf-8 -*-
""" The **opticalmodes** optical element behavior package

    Optical elements carry a behavior mode that can be swapped at any time,
    and operations are applied uniformly over an ordered collection of
    elements. It is organized in the following subpackages:

        - :mod:`~.elem`: OpticalElement and its behavior modes
          (ElementState), plus the package exceptions
        - :mod:`~.optical`: the OpticalSystem element collection
        - :mod:`~.ops`: Operation types and the dispatch function

    The :mod:`~.config` module holds the output settings, and
    :mod:`~.util.messages` the message catalogs used for status lines.
    :mod:`~.demo` is a small driver exercising the package.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    listobj() is designed to be used in scripting environments where detailed,
    textual output is supported. Classes may implement the `listobj_str`
    method that returns a string containing a formatted description of the
    object. Multi-line strings are allowed; each line should end with a
    newline character. Examples include :meth:`.OpticalElement.listobj_str`
    and :meth:`.OpticalSystem.listobj_str`.
    """
    try:
        print(obj.listobj_str(), end='')
    except AttributeError:
        print(repr(obj))
