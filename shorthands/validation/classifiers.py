"""Attribute the tokens of a shorthand layer to the slots of its longhands.

Each classifier reads the tokens of one layer once, from left to right. The
next state is chosen by looking at the current token only, and each state
consumes one or more tokens before the next token is routed.

"""

import collections
import enum

from ..layers import AnimationLayer, BackgroundLayer, MaskLayer, TransitionLayer
from ..tokens import (
    AmbiguousOrder, DuplicateSlot, InvalidToken, TooManyValues,
    get_function_name, get_keyword, is_color, is_image, is_length,
    is_math_function, is_slash, is_time, serialize_token, serialize_tokens)

from ..properties import (  # isort:skip
    ANIMATION_DIRECTIONS, ANIMATION_FILL_MODES, ANIMATION_PLAY_STATES,
    ATTACHMENT_KEYWORDS, BACKGROUND_BOXES, BACKGROUND_IMAGE_FUNCTIONS,
    GLOBAL_KEYWORDS, MASK_BOXES, MASK_COMPOSITES, MASK_IMAGE_FUNCTIONS,
    MASK_MODES, POSITION_KEYWORDS, REPEAT_KEYWORDS, SINGLE_REPEAT_KEYWORDS,
    SIZE_KEYWORDS, TIMING_FUNCTIONS, TIMING_KEYWORDS)

# Token types that can start a position, or a size after a slash.
NUMERIC_TYPES = ('dimension', 'percentage', 'number')

# Keywords of the animation slots, in the order they are tried. A keyword
# whose slot is already filled is an animation name.
ANIMATION_KEYWORD_SLOTS = (
    ('fill_mode', ANIMATION_FILL_MODES),
    ('direction', ANIMATION_DIRECTIONS),
    ('play_state', ANIMATION_PLAY_STATES),
    ('iteration_count', frozenset(('infinite',))),
)

#: Keywords and functions accepted by the image layers of a shorthand.
ImageLayerGrammar = collections.namedtuple('ImageLayerGrammar', [
    'record', 'image_functions', 'boxes', 'attachments', 'modes',
    'composites', 'no_clip', 'color'])

BACKGROUND_GRAMMAR = ImageLayerGrammar(
    record=BackgroundLayer, image_functions=BACKGROUND_IMAGE_FUNCTIONS,
    boxes=BACKGROUND_BOXES, attachments=ATTACHMENT_KEYWORDS,
    modes=frozenset(), composites=frozenset(), no_clip=False, color=True)
MASK_GRAMMAR = ImageLayerGrammar(
    record=MaskLayer, image_functions=MASK_IMAGE_FUNCTIONS, boxes=MASK_BOXES,
    attachments=frozenset(), modes=MASK_MODES, composites=MASK_COMPOSITES,
    no_clip=True, color=False)


class State(enum.Enum):
    """States of the layer classifiers."""
    SEEK_IMAGE = enum.auto()
    SEEK_POSITION_SIZE = enum.auto()
    SEEK_REPEAT = enum.auto()
    SEEK_ATTACHMENT = enum.auto()
    SEEK_ORIGIN_CLIP = enum.auto()
    SEEK_MODE_COMPOSITE = enum.auto()
    SEEK_COLOR = enum.auto()
    SEEK_TIMING_FUNCTION = enum.auto()
    SEEK_TIME = enum.auto()
    SEEK_KEYWORD = enum.auto()
    SEEK_NAME = enum.auto()
    INVALID = enum.auto()


class TokenCursor:
    """Tokens of a layer, with the index of the next token to read."""
    def __init__(self, tokens):
        self.tokens = tuple(tokens)
        self.index = 0

    @property
    def done(self):
        return self.index >= len(self.tokens)

    def peek(self):
        if not self.done:
            return self.tokens[self.index]

    def next(self):
        token = self.peek()
        self.index += 1
        return token


def _fill(slots, slot, value):
    if slot in slots:
        raise DuplicateSlot(f'got multiple {slot.replace("_", "-")} values')
    slots[slot] = value


def _is_numeric(token):
    return token.type in NUMERIC_TYPES or is_math_function(token)


def _route_image_layer(token, grammar):
    keyword = get_keyword(token)
    if keyword == 'none' or is_image(token, grammar.image_functions):
        return State.SEEK_IMAGE
    elif (is_slash(token) or keyword in POSITION_KEYWORDS or
            _is_numeric(token)):
        return State.SEEK_POSITION_SIZE
    elif keyword in REPEAT_KEYWORDS:
        return State.SEEK_REPEAT
    elif keyword in grammar.attachments:
        return State.SEEK_ATTACHMENT
    elif keyword in grammar.boxes or (grammar.no_clip and keyword == 'no-clip'):
        return State.SEEK_ORIGIN_CLIP
    elif keyword in grammar.modes or keyword in grammar.composites:
        return State.SEEK_MODE_COMPOSITE
    elif grammar.color and is_color(token):
        return State.SEEK_COLOR
    return State.INVALID


def _scan_position_size(cursor, slots):
    if 'position' in slots or 'size' in slots:
        raise DuplicateSlot('got multiple position values')

    position = []
    while not cursor.done:
        token = cursor.peek()
        if is_slash(token) or not (
                get_keyword(token) in POSITION_KEYWORDS or _is_numeric(token)):
            break
        if not (get_keyword(token) in POSITION_KEYWORDS or
                is_length(token, percentage=True)):
            raise InvalidToken(f'invalid position {token.serialize()!r}')
        position.append(cursor.next())
    if len(position) > 2:
        raise TooManyValues('got more than two position values')
    if position:
        slots['position'] = serialize_tokens(position)

    if cursor.done or not is_slash(cursor.peek()):
        return
    cursor.next()
    size = []
    while not cursor.done:
        token = cursor.peek()
        if not (get_keyword(token) in SIZE_KEYWORDS or _is_numeric(token)):
            break
        if not (get_keyword(token) in SIZE_KEYWORDS or
                is_length(token, negative=False, percentage=True)):
            raise InvalidToken(f'invalid size {token.serialize()!r}')
        size.append(cursor.next())
    if not size:
        raise InvalidToken('missing size after "/"')
    elif len(size) > 2:
        raise TooManyValues('got more than two size values')
    elif len(size) == 2 and any(
            get_keyword(token) in ('cover', 'contain') for token in size):
        raise InvalidToken('cover and contain sizes must be alone')
    slots['size'] = serialize_tokens(size)


def _scan_repeat(cursor, slots):
    repeat = [cursor.next()]
    if not cursor.done and get_keyword(cursor.peek()) in REPEAT_KEYWORDS:
        repeat.append(cursor.next())
    if len(repeat) == 2 and any(
            get_keyword(token) in SINGLE_REPEAT_KEYWORDS for token in repeat):
        raise InvalidToken('repeat-x and repeat-y must be alone')
    _fill(slots, 'repeat', serialize_tokens(repeat))


def _classify_image_layer(tokens, grammar, final_layer):
    cursor = TokenCursor(tokens)
    slots = {}
    while not cursor.done:
        token = cursor.peek()
        state = _route_image_layer(token, grammar)
        if state is State.SEEK_IMAGE:
            if 'color' in slots:
                raise AmbiguousOrder('color is not allowed before the image')
            _fill(slots, 'image', serialize_token(cursor.next()))
        elif state is State.SEEK_POSITION_SIZE:
            _scan_position_size(cursor, slots)
        elif state is State.SEEK_REPEAT:
            _scan_repeat(cursor, slots)
        elif state is State.SEEK_ATTACHMENT:
            _fill(slots, 'attachment', serialize_token(cursor.next()))
        elif state is State.SEEK_ORIGIN_CLIP:
            box = serialize_token(cursor.next())
            if get_keyword(token) == 'no-clip':
                _fill(slots, 'clip', box)
            elif 'origin' not in slots:
                slots['origin'] = box
            elif 'clip' not in slots:
                slots['clip'] = box
            else:
                raise TooManyValues('got more than two box values')
        elif state is State.SEEK_MODE_COMPOSITE:
            slot = 'mode' if get_keyword(token) in grammar.modes else 'composite'
            _fill(slots, slot, serialize_token(cursor.next()))
        elif state is State.SEEK_COLOR:
            if not final_layer:
                raise AmbiguousOrder('color is only allowed in the final layer')
            _fill(slots, 'color', serialize_token(cursor.next()))
        else:
            raise InvalidToken(f'unexpected {token.serialize()!r}')
    return grammar.record(**slots)


def classify_background_layer(tokens, final_layer=False):
    """Classify the tokens of a ``background`` layer.

    Only the ``final_layer`` can include a color.

    """
    return _classify_image_layer(tokens, BACKGROUND_GRAMMAR, final_layer)


def classify_mask_layer(tokens, final_layer=False):
    """Classify the tokens of a ``mask`` layer."""
    return _classify_image_layer(tokens, MASK_GRAMMAR, final_layer)


def _route_timed_layer(token, animation):
    keyword = get_keyword(token)
    function_name = get_function_name(token)
    if keyword in TIMING_KEYWORDS or function_name in TIMING_FUNCTIONS:
        return State.SEEK_TIMING_FUNCTION
    elif is_time(token) or function_name is not None:
        return State.SEEK_TIME
    elif keyword in GLOBAL_KEYWORDS:
        return State.INVALID
    elif animation and (token.type == 'number' or any(
            keyword in keywords for _, keywords in ANIMATION_KEYWORD_SLOTS)):
        return State.SEEK_KEYWORD
    elif keyword is not None or (animation and token.type == 'string'):
        return State.SEEK_NAME
    return State.INVALID


def _classify_timed_layer(tokens, animation):
    cursor = TokenCursor(tokens)
    slots = {}
    name_slot = 'name' if animation else 'property'
    while not cursor.done:
        token = cursor.peek()
        state = _route_timed_layer(token, animation)
        if state is State.SEEK_TIMING_FUNCTION:
            _fill(slots, 'timing_function', serialize_token(cursor.next()))
        elif state is State.SEEK_TIME:
            time = serialize_token(cursor.next())
            if 'duration' not in slots:
                if is_time(token) and token.value < 0:
                    raise InvalidToken(f'negative duration {time!r}')
                slots['duration'] = time
            elif 'delay' not in slots:
                slots['delay'] = time
            else:
                raise TooManyValues('got more than two time values')
        elif state is State.SEEK_KEYWORD:
            value = serialize_token(cursor.next())
            if token.type == 'number':
                if token.value < 0:
                    raise InvalidToken(f'negative iteration count {value!r}')
                _fill(slots, 'iteration_count', value)
                continue
            keyword = get_keyword(token)
            for slot, keywords in ANIMATION_KEYWORD_SLOTS:
                if keyword in keywords and slot not in slots:
                    slots[slot] = value
                    break
            else:
                _fill(slots, name_slot, value)
        elif state is State.SEEK_NAME:
            _fill(slots, name_slot, serialize_token(cursor.next()))
        else:
            raise InvalidToken(f'unexpected {token.serialize()!r}')
    record = AnimationLayer if animation else TransitionLayer
    return record(**slots)


def classify_animation_layer(tokens, final_layer=False):
    """Classify the tokens of an ``animation`` layer.

    Timing functions are recognized before times, and animation keywords
    before names: ``none`` is a fill mode first, then a name.

    """
    return _classify_timed_layer(tokens, animation=True)


def classify_transition_layer(tokens, final_layer=False):
    """Classify the tokens of a ``transition`` layer."""
    return _classify_timed_layer(tokens, animation=False)
