"""
    cssvalues.boxes
    ---------------

    Helpers giving the vertical and horizontal space taken by an element:
    margins, collapsed margins and clamped heights, all in pt.

    Elements are :class:`~cssvalues.structures.Tag` objects or anything
    with the same ``get_css()`` and ``get_previous_sibling()`` methods.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

from .structures import NoSiblingError
from .units import (
    DEFAULT_FONT_SIZE_PT, classify_length,
    determine_position_between_value_and_unit, is_metric_value,
    is_numeric_value, is_relative_value, parse_px_in_cm_mm_pc_to_pt,
    parse_relative_value, parse_value_to_pt)


ROOT_TAGS = ('defaultRoot', 'body', 'div')


def get_font_size(tag):
    """Return the font size of ``tag`` in pt.

    Relative sizes are resolved against :data:`DEFAULT_FONT_SIZE_PT`,
    which is also the result when the tag has no ``font-size`` or one that
    does not start with a number. An explicit ``0`` stays ``0``.

    """
    value = tag.get_css().get('font-size')
    if (value is not None and classify_length(value) is not None and
            determine_position_between_value_and_unit(value)):
        return parse_value_to_pt(value, DEFAULT_FONT_SIZE_PT)
    return float(DEFAULT_FONT_SIZE_PT)


def check_metric_style(css, style):
    """Return the value of the ``style`` property in pt, or 0.

    :param css:
        Either a dict of properties, or a tag. For a dict, numeric values
        are taken as pixels; for a tag only values with a unit are read.
    :param style:
        The property name, eg. ``'margin-left'``.

    """
    if hasattr(css, 'get_css'):
        value = css.get_css().get(style)
        if value is not None and is_metric_value(value):
            return parse_px_in_cm_mm_pc_to_pt(value)
        return 0.
    value = css.get(style)
    if value is not None and (is_metric_value(value) or
                              is_numeric_value(value)):
        return parse_px_in_cm_mm_pc_to_pt(value)
    return 0.


def get_left_and_right_margin(tag):
    """Return the sum of the left and right margins of ``tag`` in pt."""
    return (check_metric_style(tag, 'margin-right') +
            check_metric_style(tag, 'margin-left'))


def validate_text_height(css, text_height):
    """Clamp ``text_height`` to the ``min-height`` and ``max-height``
    properties in ``css``, if any.

    """
    min_height = css.get('min-height')
    max_height = css.get('max-height')
    if (min_height is not None and
            text_height < parse_px_in_cm_mm_pc_to_pt(min_height)):
        return parse_px_in_cm_mm_pc_to_pt(min_height)
    elif (max_height is not None and
            text_height > parse_px_in_cm_mm_pc_to_pt(max_height)):
        return parse_px_in_cm_mm_pc_to_pt(max_height)
    return text_height


def calculate_margin_top(tag, value, largest_font, font_size=get_font_size):
    """Return the space before ``tag`` once its top margin collapsed with
    the bottom margin of its previous sibling.

    The previous ``margin-bottom`` is subtracted from the top margin,
    and the result is never negative. Without a previous sibling the top
    margin is returned unchanged.

    :param value: the ``margin-top`` value of ``tag``.
    :param largest_font: the base for a relative ``value``, in pt.
    :param font_size:
        A function giving the font size of a tag in pt, used as base for
        a relative ``margin-bottom`` of the sibling.

    """
    margin_top = parse_value_to_pt(value, largest_font)
    try:
        previous = tag.get_previous_sibling()
    except NoSiblingError:
        return margin_top
    margin_bottom = previous.get_css().get('margin-bottom')
    if margin_bottom is None:
        return margin_top
    if is_relative_value(margin_bottom):
        previous_margin = parse_relative_value(
            margin_bottom, font_size(previous))
    else:
        previous_margin = parse_px_in_cm_mm_pc_to_pt(margin_bottom)
    return max(0., margin_top - previous_margin)
