"""Shorthand properties expanders."""

import functools

from ..properties import (
    BORDER_STYLES, BORDER_WIDTHS, CORNERS, FLEX_BASIS_KEYWORDS,
    GLOBAL_KEYWORDS, SHORTHANDS, SIDES, longhand_name)
from .classifiers import (
    classify_animation_layer, classify_background_layer, classify_mask_layer,
    classify_transition_layer)

from ..tokens import (  # isort:skip
    DuplicateSlot, InvalidToken, TooManyValues, get_keyword,
    get_single_keyword, is_color, is_length, is_number, is_slash,
    serialize_token, split_on_comma)

EXPANDERS = {}


def expander(property_name):
    """Decorator adding a function to the ``EXPANDERS``."""
    def expander_decorator(function):
        """Add ``function`` to the ``EXPANDERS``."""
        assert property_name not in EXPANDERS, property_name
        EXPANDERS[property_name] = function
        return function
    return expander_decorator


def generic_expander(wrapped):
    """Decorator helping expanders to handle global keywords.

    Wrap an expander so that it does not have to handle the ``inherit``,
    ``initial``, ``unset``, ``revert`` and ``revert-layer`` cases, and can
    just yield longhand names or name suffixes. Missing longhands get their
    initial value.

    The wrapper returns a dict including every longhand.

    """
    @functools.wraps(wrapped)
    def generic_expander_wrapper(tokens, name):
        """Wrap the expander."""
        meta = SHORTHANDS[name]
        if not tokens:
            raise InvalidToken(f'empty {name} value')

        keyword = get_single_keyword(tokens)
        if keyword in GLOBAL_KEYWORDS:
            return {longhand: keyword for longhand in meta.longhands}
        for token in tokens:
            if get_keyword(token) in GLOBAL_KEYWORDS:
                raise InvalidToken(
                    f'{token.value!r} must be the only value of {name}')

        results = {}
        for new_name, value in wrapped(tokens, name):
            if new_name.startswith('-'):
                # new_name is a suffix
                new_name = f'{name}{new_name}'
            assert new_name in meta.defaults, new_name
            if new_name in results:
                raise DuplicateSlot(
                    f'got multiple {new_name} values in a {name} shorthand')
            results[new_name] = value
        return {
            longhand: results.get(longhand, meta.defaults[longhand])
            for longhand in meta.longhands}
    return generic_expander_wrapper


def _expand_layers(tokens, name, classify, final_slots=()):
    """Expand the layers of a comma-separated shorthand.

    Yield the comma-separated list of values for each slot of the layers, or
    only the value of the final layer for ``final_slots``.

    """
    layers = split_on_comma(tokens)
    records = []
    for i, layer in enumerate(layers):
        if not layer:
            raise InvalidToken(f'empty layer in {name}')
        records.append(classify(layer, final_layer=(i == len(layers) - 1)))

    defaults = SHORTHANDS[name].defaults
    for slot in records[0]._fields:
        longhand = longhand_name(name, slot)
        values = [
            defaults[longhand] if value is None else value
            for value in (getattr(record, slot) for record in records)]
        if slot in final_slots:
            yield longhand, values[-1]
        else:
            yield longhand, ', '.join(values)


@expander('background')
@generic_expander
def expand_background(tokens, name):
    """Expand the ``background`` shorthand property.

    See https://drafts.csswg.org/css-backgrounds-3/#the-background

    """
    yield from _expand_layers(
        tokens, name, classify_background_layer, final_slots=('color',))


@expander('mask')
@generic_expander
def expand_mask(tokens, name):
    """Expand the ``mask`` shorthand property.

    See https://drafts.fxtf.org/css-masking/#the-mask

    """
    yield from _expand_layers(tokens, name, classify_mask_layer)


@expander('animation')
@generic_expander
def expand_animation(tokens, name):
    """Expand the ``animation`` shorthand property.

    See https://drafts.csswg.org/css-animations-1/#animation

    """
    yield from _expand_layers(tokens, name, classify_animation_layer)


@expander('transition')
@generic_expander
def expand_transition(tokens, name):
    """Expand the ``transition`` shorthand property.

    See https://drafts.csswg.org/css-transitions-1/#transition-shorthand-property

    """
    yield from _expand_layers(tokens, name, classify_transition_layer)


@expander('flex')
@generic_expander
def expand_flex(tokens, name):
    """Expand the ``flex`` property."""
    keyword = get_single_keyword(tokens)
    if keyword == 'none':
        yield '-grow', '0'
        yield '-shrink', '0'
        yield '-basis', 'auto'
        return
    elif keyword == 'auto':
        yield '-grow', '1'
        yield '-shrink', '1'
        yield '-basis', 'auto'
        return
    elif len(tokens) > 3:
        raise TooManyValues('got more than three flex values')

    grow, shrink, basis = '1', '1', '0%'
    grow_found, shrink_found, basis_found = False, False, False
    for token in tokens:
        # "A unitless zero that is not already preceded by two flex factors
        # must be interpreted as a flex factor."
        forced_flex_factor = (
            token.type == 'number' and token.value == 0 and
            not all((grow_found, shrink_found)))
        if not basis_found and not forced_flex_factor:
            if get_keyword(token) in FLEX_BASIS_KEYWORDS or (
                    is_length(token, negative=False, percentage=True)):
                basis = serialize_token(token)
                basis_found = True
                continue
        if not is_number(token, negative=False):
            raise InvalidToken(f'invalid flex value {token.serialize()!r}')
        if not grow_found:
            grow = serialize_token(token)
            grow_found = True
        elif not shrink_found:
            shrink = serialize_token(token)
            shrink_found = True
        else:
            raise TooManyValues('got more than two flex factors')
    yield '-grow', grow
    yield '-shrink', shrink
    yield '-basis', basis


def _expand_border_side(tokens):
    """Yield the suffixes and values of a ``border-*`` shorthand value."""
    for token in tokens:
        if is_color(token):
            suffix = '-color'
        elif get_keyword(token) in BORDER_WIDTHS or (
                token.type != 'percentage' and is_length(token, negative=False)):
            suffix = '-width'
        elif get_keyword(token) in BORDER_STYLES:
            suffix = '-style'
        else:
            raise InvalidToken(f'invalid border value {token.serialize()!r}')
        yield suffix, serialize_token(token)


@expander('border')
@generic_expander
def expand_border(tokens, name):
    """Expand the ``border`` shorthand property.

    See https://drafts.csswg.org/css-backgrounds-3/#the-border-shorthands

    """
    for suffix, value in _expand_border_side(tokens):
        for side in SIDES:
            yield f'border-{side}{suffix}', value


@expander('border-top')
@expander('border-right')
@expander('border-bottom')
@expander('border-left')
@generic_expander
def expand_border_side(tokens, name):
    """Expand the ``border-*`` shorthand properties.

    See https://drafts.csswg.org/css-backgrounds-3/#the-border-shorthands

    """
    yield from _expand_border_side(tokens)


def _four_corners(radii):
    """Set the values of the four corners, like the four box sides."""
    if len(radii) > 4:
        raise TooManyValues('got more than four radius values')
    elif not radii:
        raise InvalidToken('missing radius value')
    for radius in radii:
        if not is_length(radius, negative=False, percentage=True):
            raise InvalidToken(f'invalid radius {radius.serialize()!r}')
    radii = [serialize_token(radius) for radius in radii]
    if len(radii) == 1:
        radii *= 4
    elif len(radii) == 2:
        radii *= 2
    elif len(radii) == 3:
        radii.append(radii[1])
    return radii


@expander('border-radius')
@generic_expander
def expand_border_radius(tokens, name):
    """Expand the ``border-radius`` property.

    See https://drafts.csswg.org/css-backgrounds-3/#border-radius

    """
    slash_separated = [[]]
    for token in tokens:
        if is_slash(token):
            slash_separated.append([])
        else:
            slash_separated[-1].append(token)
    if len(slash_separated) > 2:
        raise InvalidToken('got more than one "/" in border-radius')
    horizontal = _four_corners(slash_separated[0])
    if len(slash_separated) == 2:
        vertical = _four_corners(slash_separated[1])
    else:
        vertical = horizontal
    for corner, h, v in zip(CORNERS, horizontal, vertical):
        yield f'border-{corner}-radius', h if h == v else f'{h} {v}'
