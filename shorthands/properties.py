"""Data about shorthand properties: longhands, initial values and keywords."""

import collections
from types import MappingProxyType

ShorthandMeta = collections.namedtuple(
    'ShorthandMeta', ['shorthand', 'longhands', 'defaults'])

# CSS-wide keywords, valid as the whole value of any property.
# https://drafts.csswg.org/css-cascade-5/#defaulting-keywords
GLOBAL_KEYWORDS = frozenset((
    'inherit', 'initial', 'unset', 'revert', 'revert-layer'))

# Initial values of the slots of each multi-layer shorthand, per layer, in
# the order used when collapsing longhands.
# https://drafts.csswg.org/css-backgrounds-3/#the-background
BACKGROUND_DEFAULTS = MappingProxyType({
    'image': 'none',
    'position': '0% 0%',
    'size': 'auto auto',
    'repeat': 'repeat',
    'attachment': 'scroll',
    'origin': 'padding-box',
    'clip': 'border-box',
    'color': 'transparent',
})

# https://drafts.fxtf.org/css-masking/#the-mask
MASK_DEFAULTS = MappingProxyType({
    'image': 'none',
    'position': '0% 0%',
    'size': 'auto',
    'repeat': 'repeat',
    'origin': 'border-box',
    'clip': 'border-box',
    'mode': 'match-source',
    'composite': 'add',
})

# https://drafts.csswg.org/css-animations-1/#animation
ANIMATION_DEFAULTS = MappingProxyType({
    'name': 'none',
    'duration': '0s',
    'timing_function': 'ease',
    'delay': '0s',
    'iteration_count': '1',
    'direction': 'normal',
    'fill_mode': 'none',
    'play_state': 'running',
})

# https://drafts.csswg.org/css-transitions-1/#transition-shorthand-property
TRANSITION_DEFAULTS = MappingProxyType({
    'property': 'all',
    'duration': '0s',
    'timing_function': 'ease',
    'delay': '0s',
})

# Initial values of the longhands of the single-layer shorthands.
FLEX_DEFAULTS = MappingProxyType({
    'flex-grow': '0',
    'flex-shrink': '1',
    'flex-basis': 'auto',
})
BORDER_SIDE_DEFAULTS = MappingProxyType({
    'width': 'medium',
    'style': 'none',
    'color': 'currentcolor',
})

SIDES = ('top', 'right', 'bottom', 'left')
CORNERS = ('top-left', 'top-right', 'bottom-right', 'bottom-left')


def longhand_name(shorthand, slot):
    return f'{shorthand}-{slot.replace("_", "-")}'


def _layered_meta(shorthand, slot_defaults):
    defaults = {
        longhand_name(shorthand, slot): value
        for slot, value in slot_defaults.items()}
    return ShorthandMeta(
        shorthand, tuple(defaults), MappingProxyType(defaults))


def _border_side_meta(shorthand, side):
    defaults = {
        f'border-{side}-{suffix}': value
        for suffix, value in BORDER_SIDE_DEFAULTS.items()}
    return ShorthandMeta(
        shorthand, tuple(defaults), MappingProxyType(defaults))


def _border_meta():
    # Same order as the border-width, border-style and border-color
    # shorthands: all the widths first.
    defaults = {
        f'border-{side}-{suffix}': value
        for suffix, value in BORDER_SIDE_DEFAULTS.items()
        for side in SIDES}
    return ShorthandMeta('border', tuple(defaults), MappingProxyType(defaults))


def _border_radius_meta():
    defaults = {f'border-{corner}-radius': '0' for corner in CORNERS}
    return ShorthandMeta(
        'border-radius', tuple(defaults), MappingProxyType(defaults))


# Descriptors of the supported shorthands, in dispatch order: "border" comes
# before the sides it overlaps with.
SHORTHANDS = MappingProxyType({
    'background': _layered_meta('background', BACKGROUND_DEFAULTS),
    'mask': _layered_meta('mask', MASK_DEFAULTS),
    'animation': _layered_meta('animation', ANIMATION_DEFAULTS),
    'transition': _layered_meta('transition', TRANSITION_DEFAULTS),
    'flex': ShorthandMeta(
        'flex', tuple(FLEX_DEFAULTS), FLEX_DEFAULTS),
    'border': _border_meta(),
    **{f'border-{side}': _border_side_meta(f'border-{side}', side)
       for side in SIDES},
    'border-radius': _border_radius_meta(),
})

# Initial value of every known longhand.
INITIAL_VALUES = MappingProxyType({
    name: value
    for meta in SHORTHANDS.values()
    for name, value in meta.defaults.items()})

# Keywords

POSITION_KEYWORDS = frozenset(('left', 'center', 'right', 'top', 'bottom'))
SIZE_KEYWORDS = frozenset(('auto', 'cover', 'contain'))
REPEAT_KEYWORDS = frozenset((
    'repeat', 'no-repeat', 'space', 'round', 'repeat-x', 'repeat-y'))
# repeat-x and repeat-y are single-value forms of two-value repeats.
SINGLE_REPEAT_KEYWORDS = frozenset(('repeat-x', 'repeat-y'))
ATTACHMENT_KEYWORDS = frozenset(('scroll', 'fixed', 'local'))
BACKGROUND_BOXES = frozenset(('border-box', 'padding-box', 'content-box'))
MASK_BOXES = BACKGROUND_BOXES | {'fill-box', 'stroke-box', 'view-box'}
MASK_MODES = frozenset(('alpha', 'luminance', 'match-source'))
MASK_COMPOSITES = frozenset(('add', 'subtract', 'intersect', 'exclude'))

GRADIENT_FUNCTIONS = frozenset((
    'linear-gradient', 'radial-gradient', 'conic-gradient',
    'repeating-linear-gradient', 'repeating-radial-gradient',
    'repeating-conic-gradient'))
BACKGROUND_IMAGE_FUNCTIONS = GRADIENT_FUNCTIONS | {
    'url', 'image', 'image-set', 'cross-fade', 'element'}
MASK_IMAGE_FUNCTIONS = BACKGROUND_IMAGE_FUNCTIONS | {'paint'}

# https://drafts.csswg.org/css-values-4/#math
MATH_FUNCTIONS = frozenset((
    'calc', 'min', 'max', 'clamp', 'round', 'mod', 'rem', 'abs', 'sign'))

# https://drafts.csswg.org/css-easing-2/#easing-functions
TIMING_KEYWORDS = frozenset((
    'ease', 'linear', 'ease-in', 'ease-out', 'ease-in-out', 'step-start',
    'step-end'))
TIMING_FUNCTIONS = frozenset(('cubic-bezier', 'steps', 'linear'))

ANIMATION_DIRECTIONS = frozenset((
    'normal', 'reverse', 'alternate', 'alternate-reverse'))
ANIMATION_FILL_MODES = frozenset(('none', 'forwards', 'backwards', 'both'))
ANIMATION_PLAY_STATES = frozenset(('running', 'paused'))

BORDER_WIDTHS = frozenset(('thin', 'medium', 'thick'))
BORDER_STYLES = frozenset((
    'none', 'hidden', 'dotted', 'dashed', 'solid', 'double', 'groove',
    'ridge', 'inset', 'outset'))

FLEX_BASIS_KEYWORDS = frozenset((
    'auto', 'content', 'max-content', 'min-content', 'fit-content'))
