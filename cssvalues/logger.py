"""
    cssvalues.logger
    ----------------

    The package logger. Nothing is printed unless the application
    configures logging.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import logging


LOGGER = logging.getLogger('cssvalues')
LOGGER.addHandler(logging.NullHandler())
