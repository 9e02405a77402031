"""Split multi-layer values and align longhand lists on layers."""

import collections

from .properties import (
    ANIMATION_DEFAULTS, BACKGROUND_DEFAULTS, MASK_DEFAULTS, TRANSITION_DEFAULTS,
    longhand_name)
from .tokens import InvalidToken, get_keyword, parse_value, serialize_token

# Slots of one layer, ``None`` meaning that the slot is not specified.
BackgroundLayer = collections.namedtuple(
    'BackgroundLayer', BACKGROUND_DEFAULTS,
    defaults=(None,) * len(BACKGROUND_DEFAULTS))
MaskLayer = collections.namedtuple(
    'MaskLayer', MASK_DEFAULTS, defaults=(None,) * len(MASK_DEFAULTS))
AnimationLayer = collections.namedtuple(
    'AnimationLayer', ANIMATION_DEFAULTS,
    defaults=(None,) * len(ANIMATION_DEFAULTS))
TransitionLayer = collections.namedtuple(
    'TransitionLayer', TRANSITION_DEFAULTS,
    defaults=(None,) * len(TRANSITION_DEFAULTS))

LAYER_RECORDS = {
    'background': BackgroundLayer,
    'mask': MaskLayer,
    'animation': AnimationLayer,
    'transition': TransitionLayer,
}

OPENING_BRACKETS = {'(': ')', '[': ']', '{': '}'}

# Percentages of the position keywords, on both axes.
POSITION_PERCENTAGES = {
    'left': '0%', 'top': '0%', 'center': '50%',
    'right': '100%', 'bottom': '100%'}


def split_layers(text):
    """Split ``text`` on commas that are not nested in functions or strings.

    Return a tuple of stripped segments, empty when ``text`` is blank. Raise
    :exc:`InvalidToken` when a segment is empty.

    """
    if not text.strip():
        return ()
    layers = []
    closing = []
    quote = None
    start = 0
    escaped = False
    for i, character in enumerate(text):
        if escaped:
            escaped = False
        elif character == '\\':
            escaped = True
        elif quote:
            if character == quote:
                quote = None
        elif character in ('"', "'"):
            quote = character
        elif character in OPENING_BRACKETS:
            closing.append(OPENING_BRACKETS[character])
        elif closing and character == closing[-1]:
            closing.pop()
        elif character == ',' and not closing:
            layers.append(text[start:i].strip())
            start = i + 1
    layers.append(text[start:].strip())
    if not all(layers):
        raise InvalidToken(f'empty layer in {text!r}')
    return tuple(layers)


def align_layers(shorthand, longhands, exclude=()):
    """Build layer records from a dict of longhand values.

    The number of layers is the longest list of the given longhands. Slots of
    shorter lists and missing longhands are left to ``None``, as are the
    ``exclude``-d slots.

    """
    record = LAYER_RECORDS[shorthand]
    lists = {}
    for slot in record._fields:
        name = longhand_name(shorthand, slot)
        if slot not in exclude and name in longhands:
            lists[slot] = split_layers(longhands[name])
    count = max((len(values) for values in lists.values()), default=0)
    return tuple(
        record(**{
            slot: values[i] for slot, values in lists.items()
            if i < len(values)})
        for i in range(count))


def _position_percentage(keyword, token):
    if keyword in POSITION_PERCENTAGES:
        return POSITION_PERCENTAGES[keyword]
    elif token.type in ('number', 'dimension') and token.value == 0:
        return '0%'
    return keyword or serialize_token(token)


def canonical_layer(slot, layer):
    """Return the canonical text of the ``layer`` value set to ``slot``.

    Equivalent positions, such as ``left top`` and ``0 0``, and equivalent
    sizes, such as ``auto`` and ``auto auto``, have the same canonical text.
    Other values are returned unchanged.

    """
    if slot not in ('position', 'size'):
        return layer
    tokens = parse_value(layer)
    keywords = [get_keyword(token) for token in tokens]

    if slot == 'size':
        if len(tokens) == 2 and keywords[1] == 'auto':
            tokens, keywords = tokens[:1], keywords[:1]
        return ' '.join(
            keyword or serialize_token(token)
            for keyword, token in zip(keywords, tokens))

    pairs = list(zip(keywords, tokens))
    if len(pairs) == 1:
        pairs.append(('center', None))
        if keywords[0] in ('top', 'bottom'):
            pairs.reverse()
    elif len(pairs) == 2 and (
            keywords[0] in ('top', 'bottom') or keywords[1] in ('left', 'right')):
        pairs.reverse()
    return ' '.join(
        _position_percentage(keyword, token) for keyword, token in pairs)
