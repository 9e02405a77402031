"""Sets of units recognized in shorthand values."""

# https://drafts.csswg.org/css-values-4/#absolute-lengths
ABSOLUTE_UNITS = {'px', 'pt', 'pc', 'in', 'cm', 'mm', 'q'}

# https://drafts.csswg.org/css-values-4/#font-relative-lengths
FONT_UNITS = {'em', 'ex', 'cap', 'ch', 'ic', 'lh'}
FONT_UNITS |= {f'r{unit}' for unit in FONT_UNITS}

# https://drafts.csswg.org/css-values-4/#viewport-relative-lengths
VIEWPORT_UNITS = {'vw', 'vh', 'vi', 'vb', 'vmin', 'vmax'}
VIEWPORT_UNITS |= {
    f'{prefix}{unit}' for prefix in ('s', 'l', 'd') for unit in VIEWPORT_UNITS}

# https://drafts.csswg.org/css-contain-3/#container-lengths
CONTAINER_UNITS = {'cqw', 'cqh', 'cqi', 'cqb', 'cqmin', 'cqmax'}

LENGTH_UNITS = ABSOLUTE_UNITS | FONT_UNITS | VIEWPORT_UNITS | CONTAINER_UNITS

# https://drafts.csswg.org/css-values-4/#time
TIME_UNITS = {'s', 'ms'}
