"""
    cssvalues.shorthands
    --------------------

    Expanders for shorthand properties: box edges (margin, padding,
    border-width...), border, background, list-style and font.

    Every expander takes the value as a string and returns a new dict of
    longhand property names to value strings. Tokens that can not be
    classified are dropped, only a debug message is logged.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

from .colors import is_color_value
from .logger import LOGGER
from .parsing import strip_double_spaces_and_trim
from .units import is_metric_value, is_numeric_value, is_relative_value


EDGES = ('top', 'right', 'bottom', 'left')

BORDER_WIDTHS = frozenset(['thin', 'medium', 'thick'])
BORDER_STYLES = frozenset([
    'none', 'hidden', 'dotted', 'dashed', 'solid', 'double', 'groove',
    'ridge', 'inset', 'outset'])

BACKGROUND_REPEATS = frozenset(['repeat', 'no-repeat', 'repeat-x', 'repeat-y'])
BACKGROUND_ATTACHMENTS = frozenset(['fixed', 'scroll'])
BACKGROUND_POSITIONS = frozenset(['left', 'center', 'bottom', 'top', 'right'])

LIST_STYLE_TYPES = frozenset([
    'disc', 'square', 'circle', 'lower-roman', 'upper-roman', 'lower-greek',
    'upper-greek', 'lower-alpha', 'upper-alpha', 'lower-latin',
    'upper-latin'])
LIST_STYLE_POSITIONS = frozenset(['inside', 'outside'])

# Font modifier states, in the order they are tried on each token.
STYLE, VARIANT, WEIGHT, SIZE = 'style', 'variant', 'weight', 'size'
FONT_MODIFIERS = {
    STYLE: ('font-style', frozenset(['italic', 'oblique'])),
    VARIANT: ('font-variant', frozenset(['small-caps'])),
    WEIGHT: ('font-weight', frozenset(['bold'])),
}
NEXT_MODIFIER = {STYLE: VARIANT, VARIANT: WEIGHT, WEIGHT: STYLE}
MAX_MODIFIER_ROUNDS = 3


#: Maps shorthand property names to expander functions.
EXPANDERS = {}


class MalformedFontShorthand(ValueError):
    """A ``font`` shorthand that does not have enough tokens.

    .. attribute:: value

        The offending shorthand value.

    .. attribute:: reason

        What is missing (a string).

    """
    def __init__(self, value, reason):
        self.value = value
        self.reason = reason
        self.message = 'Malformed font shorthand {0!r}: {1}'.format(
            value, reason)
        super().__init__(self.message)


def expander(property_name):
    """Decorator adding a function to :data:`EXPANDERS`."""
    def decorator(function):
        assert property_name not in EXPANDERS, property_name
        EXPANDERS[property_name] = function
        return function
    return decorator


def expand_shorthand(name, value):
    """Expand the shorthand property ``name`` with the raw ``value``.

    The value is normalized with
    :func:`~cssvalues.parsing.strip_double_spaces_and_trim` first.

    :returns:
        A dict of longhand properties, empty for unknown shorthands.
    :raises:
        :class:`MalformedFontShorthand` for a ``font`` value that is too
        short.

    """
    function = EXPANDERS.get(name.lower())
    if function is None:
        LOGGER.debug('Ignored unknown shorthand property %r', name)
        return {}
    return function(strip_double_spaces_and_trim(value))


def parse_box_values(box, pre='', post=''):
    """Expand 1 to 4 space-separated values to the four box edges.

    Keys are ``pre`` + edge + ``post``, eg. ``parse_box_values('1px 2px',
    'margin-')`` gives ``margin-top``, ``margin-bottom`` set to ``1px`` and
    ``margin-right``, ``margin-left`` set to ``2px``.

    Double spaces are not supported: use
    :func:`~cssvalues.parsing.strip_double_spaces_and_trim` first.

    :returns: a dict with four keys, or an empty dict for any other number
        of values.

    """
    values = box.split(' ')
    if len(values) == 1:
        top = right = bottom = left = values[0]
    elif len(values) == 2:
        top, right = values
        bottom, left = top, right
    elif len(values) == 3:
        top, right, bottom = values
        left = right
    elif len(values) == 4:
        top, right, bottom, left = values
    else:
        return {}
    return {
        pre + edge + post: value
        for edge, value in zip(EDGES, (top, right, bottom, left))}


def _register_box_expanders():
    for name in ('margin', 'padding'):
        expander(name)(_box_expander(name + '-', ''))
    for kind in ('width', 'style', 'color'):
        expander('border-' + kind)(_box_expander('border-', '-' + kind))


def _box_expander(pre, post):
    def expand_box(value):
        return parse_box_values(value, pre, post)
    return expand_box


def _is_border_width(value):
    return (value in BORDER_WIDTHS or is_numeric_value(value) or
            is_metric_value(value))


@expander('border')
def parse_border(border):
    """Expand a ``border`` shorthand to width, style and color of the four
    edges.

    A single value is never taken as a color: it is a width if it looks
    like one, a style otherwise.

    """
    values = border.split()
    result = {}
    if len(values) == 1:
        value, = values
        kind = '-width' if _is_border_width(value) else '-style'
        result.update(parse_box_values(value, 'border-', kind))
        return result
    for value in values:
        if _is_border_width(value):
            result.update(parse_box_values(value, 'border-', '-width'))
        elif value in BORDER_STYLES:
            result.update(parse_box_values(value, 'border-', '-style'))
        elif is_color_value(value):
            result.update(parse_box_values(value, 'border-', '-color'))
        else:
            LOGGER.debug('Ignored border value %r in %r', value, border)
    return result


def _border_edge_expander(edge):
    prefix = 'border-{0}-'.format(edge)

    def expand_border_edge(value):
        return {
            key: longhand for key, longhand in parse_border(value).items()
            if key.startswith(prefix)}
    return expand_border_edge


def _register_border_edge_expanders():
    for edge in EDGES:
        expander('border-' + edge)(_border_edge_expander(edge))


@expander('background')
def process_background(background):
    """Split a ``background`` shorthand into ``background-color``,
    ``background-image``, ``background-repeat``, ``background-attachment``
    and ``background-position``.

    Position values are joined with a space, each new one in front of the
    previous ones: ``'left top'`` gives ``'top left'``.

    """
    rules = {}
    for value in background.split():
        if 'url(' in value:
            rules['background-image'] = value
        elif value.lower() in BACKGROUND_REPEATS:
            rules['background-repeat'] = value
        elif value.lower() in BACKGROUND_ATTACHMENTS:
            rules['background-attachment'] = value
        elif (value in BACKGROUND_POSITIONS or is_numeric_value(value) or
                is_metric_value(value) or is_relative_value(value)):
            previous = rules.get('background-position')
            if previous is not None:
                value = value + ' ' + previous
            rules['background-position'] = value
        elif is_color_value(value):
            rules['background-color'] = value
        else:
            LOGGER.debug(
                'Ignored background value %r in %r', value, background)
    return rules


@expander('list-style')
def process_list_style(list_style):
    """Split a ``list-style`` shorthand into ``list-style-type``,
    ``list-style-position`` and ``list-style-image``.

    """
    rules = {}
    for value in list_style.split():
        if value.lower() in LIST_STYLE_TYPES:
            rules['list-style-type'] = value
        elif value.lower() in LIST_STYLE_POSITIONS:
            rules['list-style-position'] = value
        elif 'url(' in value:
            rules['list-style-image'] = value
        else:
            LOGGER.debug(
                'Ignored list-style value %r in %r', value, list_style)
    return rules


def _next_font_token(rest, font):
    parts = rest.split(None, 1)
    if len(parts) < 2:
        raise MalformedFontShorthand(
            font, 'expected a font size followed by a font family')
    return parts


@expander('font')
def process_font(font):
    """Split a ``font`` shorthand into ``font-style``, ``font-variant``,
    ``font-weight``, ``font-size``, ``line-height`` and ``font-family``.

    Modifiers come first, tried as style, variant then weight for at most
    three rounds. The next token must then be a size, optionally followed
    by ``/line-height``, and everything after it is the family.
    If that token is not a size, only the modifiers are returned.

    :raises:
        :class:`MalformedFontShorthand` when the value ends before a size
        and a family could be read.

    """
    token, rest = _next_font_token(font, font)
    rules = {}
    state = STYLE
    rounds = 0
    while state != SIZE:
        name, keywords = FONT_MODIFIERS[state]
        if token.lower() in keywords:
            rules[name] = token
            token, rest = _next_font_token(rest, font)
        if state == WEIGHT:
            rounds += 1
            if rounds == MAX_MODIFIER_ROUNDS:
                state = SIZE
                continue
        state = NEXT_MODIFIER[state]

    if is_metric_value(token) or is_numeric_value(token):
        if '/' in token:
            token, line_height = token.split('/')[:2]
            rules['line-height'] = line_height
        rules['font-size'] = token
        rules['font-family'] = rest.replace('"', '').replace('\'', '')
    else:
        LOGGER.debug('No font size found in %r', font)
    return rules


_register_box_expanders()
_register_border_edge_expanders()
