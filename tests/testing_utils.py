"""Helpers for tests."""

import functools
import sys

import pytest

from shorthands import HANDLERS, SHORTHANDS
from shorthands.logger import capture_logs
from shorthands.tokens import parse_value


def assert_no_logs(function):
    """Decorator that asserts that nothing is logged in a function."""
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        with capture_logs() as logs:
            try:
                function(*args, **kwargs)
            except Exception:  # pragma: no cover
                if logs:
                    print(f'{len(logs)} errors logged:', file=sys.stderr)
                    for message in logs:
                        print(message, file=sys.stderr)
                raise
            else:
                if logs:  # pragma: no cover
                    for message in logs:
                        print(message, file=sys.stderr)
                    raise AssertionError(f'{len(logs)} errors logged')
    return wrapper


def expand_to_dict(name, value):
    """Expand a shorthand and return the longhands with non-initial values."""
    longhands = HANDLERS[name].expand(value)
    assert longhands is not None, f'{name}: {value} is invalid'
    assert tuple(longhands) == SHORTHANDS[name].longhands
    defaults = SHORTHANDS[name].defaults
    return {
        longhand: longhand_value for longhand, longhand_value
        in longhands.items() if longhand_value != defaults[longhand]}


def assert_invalid(name, value, error):
    """Check that ``value`` is refused with the given ``error``."""
    with pytest.raises(error):
        HANDLERS[name].expand_tokens(parse_value(value))
    assert HANDLERS[name].expand(value) is None


def longhands_with(name, /, **values):
    """Return all the longhands of ``name``, initial unless given.

    Keyword arguments use underscores instead of hyphens, and don't include
    the shorthand name.

    """
    meta = SHORTHANDS[name]
    longhands = dict(meta.defaults)
    for key, value in values.items():
        longhand = f'{name}-{key.replace("_", "-")}'
        assert longhand in longhands, longhand
        longhands[longhand] = value
    return longhands
