"""Expand and collapse shorthand properties and declaration lists."""

from tinycss2 import parse_blocks_contents, serialize

from .. import DEFAULT_OPTIONS
from ..layers import canonical_layer
from ..logger import LOGGER
from ..properties import SHORTHANDS
from ..tokens import (
    AmbiguousOrder, InvalidValues, parse_value, serialize_tokens,
    split_on_comma)
from .collapsers import COLLAPSERS
from .expanders import EXPANDERS


def get_options(options):
    """Return ``options`` merged with the :data:`DEFAULT_OPTIONS` values."""
    for unknown in set(options) - set(DEFAULT_OPTIONS):
        LOGGER.warning('Unknown option: %s.', unknown)
    new_options = DEFAULT_OPTIONS.copy()
    new_options.update(options)
    return new_options


def _layers(value):
    return tuple(
        serialize_tokens(layer) for layer in split_on_comma(parse_value(value)))


class Shorthand:
    """Expander and collapser of a shorthand property.

    :param meta: The :class:`properties.ShorthandMeta` of the shorthand.
    :param expander: The function splitting a value into longhands.
    :param collapser: The function building a value from longhands.

    """
    def __init__(self, meta, expander, collapser):
        self.meta = meta
        self._expander = expander
        self._collapser = collapser

    def __repr__(self):
        return f'<{type(self).__name__} {self.name}>'

    @property
    def name(self):
        return self.meta.shorthand

    def expand_tokens(self, tokens):
        """Return the dict of longhands set by ``tokens``.

        Raise :exc:`InvalidValues` if ``tokens`` is not a valid value.

        """
        return self._expander(tokens, self.name)

    def expand(self, value):
        """Return the dict of longhands set by ``value``, or ``None``.

        The dict includes all the longhands, unset ones having their initial
        value. Multi-layer longhands are comma-separated lists.

        """
        try:
            return self.expand_tokens(parse_value(value))
        except InvalidValues as exception:
            LOGGER.debug(
                'Invalid %s value %r, %s.', self.name, value, exception)
            return None

    def verify(self, longhands, value):
        """Check that ``value`` sets the given ``longhands``.

        Lists of longhands shorter than the lists of the expanded value must
        be completed by initial values. Raise :exc:`AmbiguousOrder` if they
        are not.

        """
        expanded = self.expand_tokens(parse_value(value))
        for longhand in self.meta.longhands:
            slot = longhand[len(self.name) + 1:].replace('-', '_')
            expected = _layers(longhands[longhand])
            given = _layers(expanded[longhand])
            if len(expected) <= len(given):
                missing = len(given) - len(expected)
                expected += (self.meta.defaults[longhand],) * missing
                if all(
                        canonical_layer(slot, expected_layer) ==
                        canonical_layer(slot, given_layer)
                        for expected_layer, given_layer
                        in zip(expected, given)):
                    continue
            raise AmbiguousOrder(
                f'{value!r} sets {longhand} to {expanded[longhand]!r}')

    def collapse(self, longhands, verify=True):
        """Return the shorthand value setting ``longhands``, or ``None``.

        ``longhands`` is a dict including all the longhands of the shorthand.
        If ``verify`` is true, the collapsed value is expanded again and
        compared with ``longhands``.

        """
        try:
            value = self._collapser(longhands, self.name)
            if verify:
                self.verify(longhands, value)
        except InvalidValues as exception:
            LOGGER.debug(
                'Longhands not collapsed into %s, %s.', self.name, exception)
            return None
        return value


#: Handlers of the supported shorthands, "border" before its sides.
HANDLERS = {
    name: Shorthand(meta, EXPANDERS[name], COLLAPSERS[name])
    for name, meta in SHORTHANDS.items()}


def expand_declarations(css, **options):
    """Expand shorthand properties in a list of declarations.

    ``css`` is the content of a declaration block, as a string or as a list
    of tinycss2 nodes. Log a warning for every invalid shorthand declaration.

    Return an iterable of ``(name, value, important)`` tuples.

    """
    options = get_options(options)
    if isinstance(css, str):
        css = parse_blocks_contents(
            css, skip_comments=True, skip_whitespace=True)

    for declaration in css:
        if declaration.type == 'error':
            LOGGER.warning(
                'Error: %s at %d:%d.',
                declaration.message,
                declaration.source_line, declaration.source_column)

        if declaration.type != 'declaration':
            continue

        name = declaration.name
        if not name.startswith('--'):
            name = declaration.lower_name
        value = serialize(declaration.value).strip()
        important = declaration.important

        if name not in HANDLERS:
            yield name, value, important
            continue

        try:
            longhands = HANDLERS[name].expand_tokens(parse_value(value))
        except InvalidValues as exc:
            LOGGER.warning(
                'Ignored `%s:%s` at %d:%d, %s.',
                declaration.name, value,
                declaration.source_line, declaration.source_column,
                exc.args[0] if exc.args and exc.args[0] else 'invalid value')
            if options['keep_invalid']:
                yield name, value, important
            continue

        for long_name, long_value in longhands.items():
            yield long_name, long_value, important


def _overlaps(name, longhands):
    return name in HANDLERS and not set(HANDLERS[name].meta.longhands).isdisjoint(
        longhands)


def collapse_declarations(declarations, **options):
    """Collapse complete sets of longhands into shorthand properties.

    ``declarations`` is an iterable of ``(name, value, important)`` tuples.
    Only the last declaration of each longhand is used, and all the longhands
    of a shorthand must have the same importance. The shorthand replaces the
    first of its longhands.

    Return an iterable of ``(name, value, important)`` tuples.

    """
    options = get_options(options)
    declarations = list(declarations)
    latest = {name: i for i, (name, _, _) in enumerate(declarations)}
    consumed, replacements = set(), {}

    for name, handler in HANDLERS.items():
        longhands = handler.meta.longhands
        if not all(longhand in latest for longhand in longhands):
            continue
        indexes = [latest[longhand] for longhand in longhands]
        if consumed.intersection(indexes):
            continue
        first = min(indexes)
        if any(_overlaps(declaration_name, longhands) for declaration_name, _, _
               in declarations[first:]):
            # A shorthand setting some of the longhands is set between them.
            continue

        importances = {declarations[i][2] for i in indexes}
        if len(importances) != 1:
            LOGGER.debug(
                'Longhands not collapsed into %s, mixed importance.', name)
            continue
        important, = importances
        duplicates = [
            i for i, (declaration_name, _, _) in enumerate(declarations)
            if declaration_name in longhands and i not in indexes]
        if not important and any(declarations[i][2] for i in duplicates):
            LOGGER.debug(
                'Longhands not collapsed into %s, overridden importance.',
                name)
            continue

        value = handler.collapse(
            {longhand: declarations[latest[longhand]][1]
             for longhand in longhands},
            verify=options['verify_collapse'])
        if value is None:
            continue
        consumed.update(indexes, duplicates)
        replacements[first] = (name, value, important)

    for i, declaration in enumerate(declarations):
        if i in replacements:
            yield replacements[i]
        elif i not in consumed:
            yield tuple(declaration)
