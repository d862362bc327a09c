""" Package containing the optical system container

    The :class:`~.opticalsystem.OpticalSystem` is the ordered collection of
    optical elements that operations are dispatched over.
"""
