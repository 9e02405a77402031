"""Shorthand properties collapsers.

Collapsers build the shortest shorthand value setting a complete set of
longhands, keeping only the values that differ from the initial ones.

"""

import functools

from ..layers import align_layers, canonical_layer, split_layers
from ..properties import (
    BORDER_SIDE_DEFAULTS, CORNERS, GLOBAL_KEYWORDS, SHORTHANDS, SIDES,
    longhand_name)

from ..tokens import (  # isort:skip
    AmbiguousOrder, IncompleteLonghandSet, InvalidToken, InvalidValues,
    TooManyValues, get_single_keyword, is_number, normalize_value,
    parse_value, serialize_token)
from .classifiers import ANIMATION_KEYWORD_SLOTS

COLLAPSERS = {}


def collapser(property_name):
    """Decorator adding a function to the ``COLLAPSERS``."""
    def collapser_decorator(function):
        """Add ``function`` to the ``COLLAPSERS``."""
        assert property_name not in COLLAPSERS, property_name
        COLLAPSERS[property_name] = function
        return function
    return collapser_decorator


def generic_collapser(wrapped):
    """Decorator helping collapsers to handle missing and global values.

    Wrap a collapser so that it only gets complete sets of longhands, with
    values whose whitespace is normalized and without global keywords.

    """
    @functools.wraps(wrapped)
    def generic_collapser_wrapper(longhands, name):
        """Wrap the collapser."""
        meta = SHORTHANDS[name]
        missing = [
            longhand for longhand in meta.longhands if longhand not in longhands]
        if missing:
            raise IncompleteLonghandSet(
                f'missing {", ".join(missing)} to build {name}')

        values, keywords = {}, set()
        for longhand in meta.longhands:
            tokens = parse_value(longhands[longhand])
            if not tokens:
                raise InvalidToken(f'empty {longhand} value')
            keyword = get_single_keyword(tokens)
            keywords.add(keyword if keyword in GLOBAL_KEYWORDS else None)
            values[longhand] = normalize_value(longhands[longhand])

        if keywords == {None}:
            return wrapped(values, name)
        elif len(keywords) == 1:
            # Same global keyword for all the longhands.
            return keywords.pop()
        raise InvalidToken(f'global keywords mixed with other {name} values')
    return generic_collapser_wrapper


def _collapse_layer(record, defaults):
    """Return the list of values that have to be set for a layer."""
    values = {
        slot: defaults[slot] if value is None else value
        for slot, value in record._asdict().items()}
    changed = {
        slot for slot, value in values.items()
        if canonical_layer(slot, value) != canonical_layer(slot, defaults[slot])}

    parts, moved = [], set()
    for slot in record._fields:
        if slot in ('size', 'clip') or slot in moved:
            # Set with the position, with the origin, or before the name.
            continue
        elif slot == 'name':
            # A name that is also a keyword follows the value of its slot.
            if 'name' in changed:
                keyword = values['name'].lower()
                for keyword_slot, keywords in ANIMATION_KEYWORD_SLOTS:
                    if keyword in keywords:
                        parts.append(values[keyword_slot])
                        moved.add(keyword_slot)
                parts.append(values['name'])
        elif slot == 'position':
            if 'size' in changed:
                parts.append(f'{values["position"]} / {values["size"]}')
            elif 'position' in changed:
                parts.append(values['position'])
        elif slot == 'origin':
            # A single box keyword only sets the origin.
            if changed & {'origin', 'clip'}:
                parts.append(values['origin'])
            if 'clip' in changed:
                parts.append(values['clip'])
        elif slot == 'duration':
            # The first time is always the duration.
            if changed & {'duration', 'delay'}:
                parts.append(values['duration'])
        elif slot in changed:
            parts.append(values[slot])
    return parts


def _collapse_layers(longhands, name, final_slots=()):
    """Collapse the longhands of a comma-separated shorthand.

    ``final_slots`` are set by a single value given in the final layer.

    """
    meta = SHORTHANDS[name]
    records = align_layers(name, longhands, exclude=final_slots)
    if not records:
        raise InvalidToken(f'no layer in {name} longhands')

    final_values = {}
    for slot in final_slots:
        layers = split_layers(longhands[longhand_name(name, slot)])
        if len(layers) != 1:
            raise TooManyValues(f'got multiple {name}-{slot} layers')
        final_values[slot], = layers
    records = (*records[:-1], records[-1]._replace(**final_values))

    defaults = {
        slot: meta.defaults[longhand_name(name, slot)]
        for slot in records[0]._fields}
    layers = []
    for record in records:
        parts = _collapse_layer(record, defaults)
        if not parts:
            if name != 'background':
                raise AmbiguousOrder(f'{name} layer with only initial values')
            parts = ['none']
        layers.append(' '.join(parts))
    return ', '.join(layers)


@collapser('background')
@generic_collapser
def collapse_background(longhands, name):
    """Collapse the ``background-*`` longhands."""
    return _collapse_layers(longhands, name, final_slots=('color',))


@collapser('mask')
@collapser('animation')
@collapser('transition')
@generic_collapser
def collapse_layers(longhands, name):
    """Collapse the longhands of comma-separated shorthands."""
    return _collapse_layers(longhands, name)


def _flex_factor(value):
    tokens = parse_value(value)
    if len(tokens) != 1 or not is_number(tokens[0], negative=False):
        raise InvalidToken(f'invalid flex factor {value!r}')
    return tokens[0].value


@collapser('flex')
@generic_collapser
def collapse_flex(longhands, name):
    """Collapse the ``flex-*`` longhands."""
    grow, shrink, basis = (
        longhands['flex-grow'], longhands['flex-shrink'],
        longhands['flex-basis'])
    grow_factor, shrink_factor = _flex_factor(grow), _flex_factor(shrink)
    basis_tokens = parse_value(basis)
    if len(basis_tokens) != 1:
        raise InvalidToken(f'invalid flex basis {basis!r}')

    if get_single_keyword(basis_tokens) == 'auto':
        if (grow_factor, shrink_factor) == (0, 0):
            return 'none'
        elif (grow_factor, shrink_factor) == (1, 1):
            return 'auto'

    # Omitted basis is 0%, a unitless zero basis needs the two factors.
    implicit_basis = basis == '0%'
    unitless_basis = basis_tokens[0].type == 'number'
    if implicit_basis:
        return grow if shrink_factor == 1 else f'{grow} {shrink}'
    elif shrink_factor == 1 and not unitless_basis:
        return f'{grow} {basis}'
    return f'{grow} {shrink} {basis}'


def _collapse_border_side(width, style, color):
    values = (width, style, color)
    parts = [
        value for value, default in zip(values, BORDER_SIDE_DEFAULTS.values())
        if value != default]
    return ' '.join(parts) or 'none'


@collapser('border')
@generic_collapser
def collapse_border(longhands, name):
    """Collapse the longhands of the four ``border-*`` shorthands."""
    values = []
    for suffix in BORDER_SIDE_DEFAULTS:
        side_values = {longhands[f'border-{side}-{suffix}'] for side in SIDES}
        if len(side_values) != 1:
            raise InvalidValues(f'different border-*-{suffix} values')
        values.extend(side_values)
    return _collapse_border_side(*values)


@collapser('border-top')
@collapser('border-right')
@collapser('border-bottom')
@collapser('border-left')
@generic_collapser
def collapse_border_side(longhands, name):
    """Collapse the longhands of ``border-*`` shorthands."""
    return _collapse_border_side(*(
        longhands[f'{name}-{suffix}'] for suffix in BORDER_SIDE_DEFAULTS))


def _minimize_corners(radii):
    """Remove the values that can be deduced from the other ones."""
    top_left, top_right, bottom_right, bottom_left = radii
    if top_right == bottom_left:
        if top_left == bottom_right:
            if top_left == top_right:
                return radii[:1]
            return radii[:2]
        return radii[:3]
    return radii


@collapser('border-radius')
@generic_collapser
def collapse_border_radius(longhands, name):
    """Collapse the ``border-*-radius`` longhands."""
    horizontal, vertical = [], []
    for corner in CORNERS:
        tokens = parse_value(longhands[f'border-{corner}-radius'])
        if len(tokens) > 2:
            raise TooManyValues(f'got more than two border-{corner} radii')
        horizontal.append(serialize_token(tokens[0]))
        vertical.append(serialize_token(tokens[-1]))
    value = ' '.join(_minimize_corners(horizontal))
    if horizontal != vertical:
        value = f'{value} / {" ".join(_minimize_corners(vertical))}'
    return value
