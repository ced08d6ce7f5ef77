"""
A simple color logger.
"""

import sys
from py.io import ansi_print


def isatty():
    return getattr(sys.stderr, 'isatty', lambda: False)()


class AnsiLogger(object):

    def __init__(self, name):
        self.name = name

    def trace(self, text):
        text = "[%s:trace] %s" % (self.name, text)
        if isatty():
            col = (34,)
        else:
            col = ()
        ansi_print(text, col)
