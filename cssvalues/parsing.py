"""
    cssvalues.parsing
    -----------------

    Utilities for cleaning up raw property value strings.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import re


DOUBLE_SPACES_RE = re.compile(' {2,}')


def strip_double_spaces_and_trim(string):
    """Collapse runs of spaces to a single space and strip both ends.

    Shorthand values must go through this before
    :func:`~cssvalues.shorthands.parse_box_values`, which splits on single
    spaces.

    """
    return DOUBLE_SPACES_RE.sub(' ', string).strip()


def extract_url(url):
    """Parse ``url("file.jpg")`` to ``file.jpg``.

    :returns:
        The quoted text inside ``url(...)``. ``url`` itself when it is not
        wrapped in ``url(...)`` or when the inner text is not quoted.

    """
    if not url.startswith('url'):
        # Already a bare URL
        return url
    inner = url[3:].strip().replace('(', '').replace(')', '').strip()
    for quote in ('\'', '"'):
        if (len(inner) >= 2 and inner.startswith(quote) and
                inner.endswith(quote)):
            return inner[1:-1]
    return url
