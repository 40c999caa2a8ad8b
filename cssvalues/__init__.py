"""
    cssvalues
    ---------

    Shorthand properties and lengths for CSS, expanded and converted
    to points.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

from .version import VERSION
__version__ = VERSION

from .boxes import (
    ROOT_TAGS, calculate_margin_top, check_metric_style, get_font_size,
    get_left_and_right_margin, validate_text_height)
from .colors import is_color_value, parse_color_string
from .parsing import extract_url, strip_double_spaces_and_trim
from .shorthands import (
    EXPANDERS, MalformedFontShorthand, expand_shorthand, parse_border,
    parse_box_values, process_background, process_font, process_list_style)
from .structures import NoSiblingError, Tag
from .units import (
    DEFAULT_FONT_SIZE_PT, LengthValue, classify_length,
    determine_position_between_value_and_unit, is_metric_value,
    is_numeric_value, is_relative_value, parse_px_in_cm_mm_pc_to_pt,
    parse_relative_value, parse_value_to_pt)
