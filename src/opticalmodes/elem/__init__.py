""" Package providing support for element based optical modeling

    The :mod:`~.elem` subpackage provides classes and functions
    for optical elements and their behavior modes. These include:

        - Element model, :mod:`~.elements`
        - Behavior modes (transparent, reflective, absorptive), :mod:`~.states`
        - Exceptions, :mod:`~.elementerror`
"""
