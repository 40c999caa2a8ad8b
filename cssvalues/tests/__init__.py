"""
    Test suite for cssvalues
    ------------------------

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""


EDGES = ('top', 'right', 'bottom', 'left')


def assert_edges(result, pre, post, expected):
    """Check the four edge keys of ``result``.

    ``expected`` is a value for each of top, right, bottom and left.

    """
    assert [result.get(pre + edge + post) for edge in EDGES] == list(expected)
