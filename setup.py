#!/usr/bin/env python

"""
    Shorthands
    ==========

    Shorthands expands CSS shorthand properties into longhands, and collapses
    them back.

"""

import sys

from setuptools import setup

if sys.version_info.major < 3:
    raise RuntimeError(
        'Shorthands does not support Python 2.x. Please use Python 3.')

setup()
