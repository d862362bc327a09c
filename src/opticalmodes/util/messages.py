#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 opticalmodes developers
""" Message catalogs for element status lines

.. Created on Mon Oct 19 10:05:17 2026

.. codeauthor: opticalmodes developers
"""
from opticalmodes import config
from opticalmodes.elem.elementerror import ConfigError

# (state_token, action) -> line template; action is 'ray' or 'render'
catalogs = {
    'en': {
        ('transmit', 'ray'): "{name}: passing the ray through the element.",
        ('reflect', 'ray'): "{name}: reflecting the ray off the element.",
        ('absorb', 'ray'): "{name}: absorbing the ray in the element.",
        ('transmit', 'render'): "{name}: displaying a transparent element.",
        ('reflect', 'render'): "{name}: displaying a mirror element.",
        ('absorb', 'render'): "{name}: displaying an absorbing element.",
        },
    'ru': {
        ('transmit', 'ray'): "{name}: Пропускаю луч через элемент.",
        ('reflect', 'ray'): "{name}: Отражаю луч от элемента.",
        ('absorb', 'ray'): "{name}: Поглощаю луч элементом.",
        ('transmit', 'render'): "{name}: Отображаю прозрачный элемент.",
        ('reflect', 'render'): "{name}: Отображаю зеркальный элемент.",
        ('absorb', 'render'): "{name}: Отображаю поглощающий элемент.",
        },
    }

headings = {
    'en': {
        'ray': "Ray calculation:",
        'render': "System visualization:",
        'set_state': "Changing the element state:",
        },
    'ru': {
        'ray': "Расчет лучей:",
        'render': "Визуализация системы:",
        'set_state': "Изменение состояния элемента:",
        },
    }

sample_names = {
    'en': ("Lens", "Mirror", "Absorber"),
    'ru': ("Линза", "Зеркало", "Поглотитель"),
    }


def format_line(element, state_token, action, language=None):
    """ Return the status line for `element` without writing it. """
    lang = language if language is not None else config.output_spec.language
    template = catalogs[lang][(state_token, action)]
    return template.format(name=element.name)


def emit(element, state_token, action):
    """ Write one status line for `element` to the configured stream.

    Args:
        element: anything with a `name` attribute
        state_token: 'transmit', 'reflect', 'absorb' or a registered token
        action: 'ray' or 'render'
    """
    line = format_line(element, state_token, action)
    print(line, file=config.output_spec.output_stream())


def emit_heading(key):
    """ Write a localized heading line, e.g. for the demo driver. """
    lang = config.output_spec.language
    print(headings[lang][key], file=config.output_spec.output_stream())


def register_messages(state_token, ray_msgs, render_msgs):
    """ Add catalog entries for a new state token.

    Args:
        state_token: token of the new state type
        ray_msgs: dict of language code -> ray handling template
        render_msgs: dict of language code -> render template

    Languages not supplied fall back to the English template, so both
    dicts must contain an 'en' entry.
    """
    for msgs in (ray_msgs, render_msgs):
        if 'en' not in msgs:
            raise ConfigError(f"messages for {state_token!r} need an "
                              f"'en' template")
    for lang, catalog in catalogs.items():
        catalog[(state_token, 'ray')] = ray_msgs.get(lang, ray_msgs['en'])
        catalog[(state_token, 'render')] = render_msgs.get(lang,
                                                           render_msgs['en'])
