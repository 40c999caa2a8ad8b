"""
    cssvalues.units
    ---------------

    Classification of CSS length values and their conversion to points.

    Lengths are plain strings such as ``'12px'``, ``'1.5em'`` or ``'10'``.
    Nothing here raises on bad input: a length that can not be read converts
    to ``0``, and callers are expected to treat ``0`` as "absent".

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import collections
import re


#: Font size used when nothing else is known, in pt.
DEFAULT_FONT_SIZE_PT = 12

#: 1px at 96dpi, in pt.
PX_TO_PT = 0.75

PT_PER_INCH = 72.

METRIC_UNITS = ('px', 'in', 'cm', 'mm', 'pc', 'pt')
RELATIVE_UNITS = ('%', 'em', 'ex')

NUMERIC_RE = re.compile(r'-?[0-9]+\.[0-9]*|-?[0-9]+|-?\.[0-9]+')

NUMBER_CHARS = frozenset('+-0123456789.')


class LengthValue(collections.namedtuple('LengthValue', 'kind value')):
    """A length string tagged with its kind.

    .. attribute:: kind

        One of ``'metric'``, ``'relative'`` or ``'numeric'``.

    .. attribute:: value

        The original string.

    """

    def to_pt(self, base_value=DEFAULT_FONT_SIZE_PT):
        return parse_value_to_pt(self.value, base_value)


def is_metric_value(value):
    """Tell whether ``value`` contains an absolute unit: px, in, cm, mm, pc
    or pt.

    This is a substring test, not a suffix test: ``'inset'`` contains ``in``
    and counts as metric.

    """
    return any(unit in value for unit in METRIC_UNITS)


def is_relative_value(value):
    """Tell whether ``value`` contains ``%``, ``em`` or ``ex``."""
    return any(unit in value for unit in RELATIVE_UNITS)


def is_numeric_value(value):
    """Tell whether the whole of ``value`` is a number, eg. ``123``,
    ``1.23``, ``.123`` or ``-4``.

    """
    return NUMERIC_RE.fullmatch(value) is not None


def classify_length(value):
    """Return a :class:`LengthValue` for ``value``, or ``None`` if it is
    neither metric, relative nor numeric.

    Numbers are checked first so that a bare ``'10'`` is numeric.

    """
    if is_numeric_value(value):
        return LengthValue('numeric', value)
    elif is_metric_value(value):
        return LengthValue('metric', value)
    elif is_relative_value(value):
        return LengthValue('relative', value)


def determine_position_between_value_and_unit(string):
    """Return the index where the unit of ``string`` starts.

    The numeric part is made of ``+``, ``-``, digits and ``.``:
    ``'16px'`` gives 2, ``'0.5em'`` gives 3 and ``'-8.5mm'`` gives 4.
    Returns 0 for ``None`` or when ``string`` does not start with a number.

    """
    if string is None:
        return 0
    position = 0
    for char in string:
        if char not in NUMBER_CHARS:
            break
        position += 1
    return position


def _split_number(length):
    """Return ``(number, unit)`` or ``None``."""
    position = determine_position_between_value_and_unit(length)
    if position == 0:
        return None
    try:
        number = float(length[:position])
    except ValueError:
        # eg. '1.2.3px' or '+-1'
        return None
    return number, length[position:]


def parse_px_in_cm_mm_pc_to_pt(length):
    """Convert an absolute length to pt.

    Units are px, in, cm, mm, pc or pt. A length without a known unit,
    including a bare number, is taken as pixels.

    :returns: a float, ``0`` if ``length`` does not start with a number.

    """
    split = _split_number(length)
    if split is None:
        return 0.
    number, unit = split
    if unit.startswith('in'):
        return number * PT_PER_INCH
    elif unit.startswith('cm'):
        return number / 2.54 * PT_PER_INCH
    elif unit.startswith('mm'):
        return number / 25.4 * PT_PER_INCH
    elif unit.startswith('pc'):
        return number * 12
    elif unit.startswith('pt'):
        return number
    else:
        return number * PX_TO_PT


def parse_relative_value(length, base_value):
    """Convert a ``%``, ``em`` or ``ex`` length against ``base_value``.

    An ex is taken as half an em. Other units leave the number as is.

    """
    split = _split_number(length)
    if split is None:
        return 0.
    number, unit = split
    if unit.startswith('%'):
        return base_value * number / 100
    elif unit.startswith('em'):
        return base_value * number
    elif 'ex' in unit:
        return base_value * number / 2
    return number


def parse_value_to_pt(value, base_value):
    """Convert any length to pt, using ``base_value`` for relative units.

    :returns: a float, ``0`` for anything that is not a length.

    """
    if is_metric_value(value) or is_numeric_value(value):
        return parse_px_in_cm_mm_pc_to_pt(value)
    elif is_relative_value(value):
        return parse_relative_value(value, base_value)
    return 0.
