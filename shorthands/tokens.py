"""CSS tokens parsers."""

import tinycss2
from tinycss2.color4 import parse_color

from .properties import MATH_FUNCTIONS
from .units import LENGTH_UNITS, TIME_UNITS


class InvalidValues(ValueError):  # noqa: N818
    """Invalid or unsupported values for a known CSS shorthand."""


class InvalidToken(InvalidValues):
    """Token matching no slot of the shorthand."""


class DuplicateSlot(InvalidValues):
    """Second value given for a single-valued slot."""


class TooManyValues(InvalidValues):
    """More values than a multi-valued slot accepts."""


class AmbiguousOrder(InvalidValues):
    """Values given in a place where they can't be attributed safely."""


class IncompleteLonghandSet(InvalidValues):
    """Longhand missing when collapsing into a shorthand."""


def parse_value(text):
    """Parse a property value into a tuple of tokens.

    Top-level whitespace and comments are removed. Function arguments are kept
    inside their function token and are never classified on their own.

    """
    tokens = tinycss2.parse_component_value_list(text, skip_comments=True)
    for token in tokens:
        if token.type == 'error':
            raise InvalidToken(f'{token.message} in {text!r}')
    return remove_whitespace(tokens)


def remove_whitespace(tokens):
    """Remove any top-level whitespace and comments in a token list."""
    return tuple(
        token for token in tokens
        if token.type not in ('whitespace', 'comment'))


def split_on_comma(tokens):
    """Split a list of tokens on commas, ie ``LiteralToken(',')``.

    Only "top-level" comma tokens are splitting points, not commas inside a
    function or blocks.

    """
    parts = []
    this_part = []
    for token in tokens:
        if token.type == 'literal' and token.value == ',':
            parts.append(tuple(this_part))
            this_part = []
        else:
            this_part.append(token)
    parts.append(tuple(this_part))
    return tuple(parts)


def get_keyword(token):
    """If ``token`` is a keyword, return its lowercase name.

    Otherwise return ``None``.

    """
    if token.type == 'ident':
        return token.lower_value


def get_single_keyword(tokens):
    """If ``values`` is a 1-element list of keywords, return its name.

    Otherwise return ``None``.

    """
    if len(tokens) == 1:
        token = tokens[0]
        if token.type == 'ident':
            return token.lower_value


def get_function_name(token):
    """If ``token`` is a function, return its lowercase name."""
    if token.type == 'function':
        return token.lower_name


def is_slash(token):
    return token.type == 'literal' and token.value == '/'


def is_math_function(token):
    return get_function_name(token) in MATH_FUNCTIONS


def is_number(token, negative=True):
    """Whether ``token`` is a <number>."""
    return token.type == 'number' and (negative or token.value >= 0)


def is_time(token):
    """Whether ``token`` is a <time> dimension."""
    return token.type == 'dimension' and token.lower_unit in TIME_UNITS


def is_length(token, negative=True, percentage=False):
    """Whether ``token`` is a <length>, or a <length-percentage>.

    Unitless zeros and math functions are accepted as lengths.

    """
    if is_math_function(token):
        return True
    if token.type == 'number':
        return token.value == 0
    if token.type == 'dimension':
        if token.lower_unit in LENGTH_UNITS:
            return negative or token.value >= 0
    elif percentage and token.type == 'percentage':
        return negative or token.value >= 0
    return False


def is_image(token, functions):
    """Whether ``token`` is an <image> built with one of ``functions``."""
    return token.type == 'url' or get_function_name(token) in functions


def is_color(token):
    """Whether ``token`` is a <color>."""
    if token.type in ('ident', 'hash', 'function'):
        return parse_color(token) is not None
    return False


def serialize_token(token):
    """Serialize a token, keeping the original representation."""
    return token.serialize()


def serialize_tokens(tokens):
    """Serialize tokens separated by spaces."""
    return ' '.join(serialize_token(token) for token in tokens)


def normalize_value(text):
    """Return ``text`` with normalized whitespace between its tokens."""
    return ', '.join(
        serialize_tokens(layer) for layer in split_on_comma(parse_value(text)))
