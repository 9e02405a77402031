"""Expand CSS shorthand properties into longhands, and collapse them back.

The public API is what is accessible from this "root" packages without
importing sub-modules.

"""

VERSION = __version__ = '1.0.0'

#: Default values for the options of the declaration helpers.
#:
#: :param bool keep_invalid:
#:     Whether invalid shorthand declarations are kept as-is by
#:     :func:`expand_declarations`. They are dropped otherwise, as CSS
#:     parsers do.
#: :param bool verify_collapse:
#:     Whether collapsed values are expanded again and checked against the
#:     original longhands, refusing values that are lossy or ambiguous.
DEFAULT_OPTIONS = {
    'keep_invalid': True,
    'verify_collapse': True,
}

__all__ = [
    'DEFAULT_OPTIONS', 'HANDLERS', 'SHORTHANDS', 'VERSION', 'InvalidValues',
    'Shorthand', '__version__', 'collapse', 'collapse_declarations', 'expand',
    'expand_declarations']


# Import after setting the options, as they are used in other modules
from .logger import LOGGER  # noqa: I001, E402
from .properties import SHORTHANDS  # noqa: E402
from .tokens import InvalidValues  # noqa: E402
from .validation import (  # noqa: E402
    HANDLERS, Shorthand, collapse_declarations, expand_declarations,
    get_options)


def expand(name, value):
    """Expand the ``value`` of the ``name`` shorthand property.

    :param str name: The name of the shorthand property, such as
        ``'background'``.
    :param str value: The value of the property.
    :returns:
        A dict with the value of every longhand set by the shorthand, or
        :obj:`None` if the value is invalid.

    """
    handler = HANDLERS.get(name.lower())
    if handler is None:
        LOGGER.warning('Unknown shorthand property: %s.', name)
        return None
    return handler.expand(value)


def collapse(name, longhands, **options):
    """Build the value of the ``name`` shorthand from its ``longhands``.

    :param str name: The name of the shorthand property.
    :param dict longhands:
        A dict including the values of all the longhands of the shorthand.
    :param options:
        The ``options`` parameter includes by default the
        :data:`DEFAULT_OPTIONS` values.
    :returns:
        The shortest value setting the longhands, or :obj:`None` if the
        longhands can't be collapsed and have to be kept.

    """
    handler = HANDLERS.get(name.lower())
    if handler is None:
        LOGGER.warning('Unknown shorthand property: %s.', name)
        return None
    options = get_options(options)
    return handler.collapse(longhands, verify=options['verify_collapse'])
