#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 opticalmodes developers
""" Presentation settings for element status output

.. Created on Mon Oct 19 09:40:02 2026

.. codeauthor: opticalmodes developers
"""
import logging
import sys

from opticalmodes.elem.elementerror import ConfigError

LANGUAGES = ('en', 'ru')


class OutputSpec:
    """ Container for the settings used when emitting status messages

    Attributes:
        language (str): message catalog to use, 'en' or 'ru'
        stream: text stream receiving status lines, or None for sys.stdout
        log_level (int): level the demo driver configures logging with
    """

    def __init__(self, language='en', stream=None, log_level=logging.WARNING):
        self.language = language
        self.stream = stream
        self.log_level = log_level

    def listobj_str(self):
        o_str = f"{type(self).__name__}:\n"
        o_str += f"language: {self.language}\n"
        o_str += f"stream: {self.stream!r}\n"
        o_str += f"log_level: {logging.getLevelName(self.log_level)}\n"
        return o_str

    @property
    def language(self):
        """ the message catalog language code (str). """
        return self._language

    @language.setter
    def language(self, value):
        if value not in LANGUAGES:
            raise ConfigError(f"unsupported language {value!r}, "
                              f"expected one of {LANGUAGES}")
        self._language = value

    def output_stream(self):
        """ Return the stream to write to, resolving None to sys.stdout. """
        return self.stream if self.stream is not None else sys.stdout


output_spec = OutputSpec()
